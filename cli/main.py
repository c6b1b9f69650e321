"""
CLI for the define interaction server.

Commands:
  register               PUT the /define command surface to Discord.
  lookup TERM [--page N] Render one page exactly as the bot would (JSON).
  autocomplete PREFIX    Show the suggestions the bot would offer.

Connections:
- connectors/discord.py for registration.
- connectors/merriam_webster.py + retrieval/cache.py + service/response_builder.py
  for lookups; no Discord key is needed for those.

Usage:
  python -m cli.main lookup run --page 1
"""

from __future__ import annotations
import argparse
import json
import sys

from app.config import load_settings


def _cache(settings):
    from connectors import make_dictionary_client
    from retrieval.cache import LookupCache
    return LookupCache(make_dictionary_client(settings))


def cmd_register(args: argparse.Namespace) -> int:
    from connectors.discord import register_commands
    ok = register_commands(load_settings())
    print("Command set!" if ok else "Command registration failed")
    return 0 if ok else 1


def cmd_lookup(args: argparse.Namespace) -> int:
    from service.response_builder import ResponseBuilder
    cache = _cache(load_settings())
    data = ResponseBuilder(cache).build(args.term, args.page, args.hide)
    print(json.dumps(data, indent=2, ensure_ascii=False))
    size = cache.stats()
    print(f"cache: {size['terms']} terms, {size['prefixes']} prefixes", file=sys.stderr)
    return 0


def cmd_autocomplete(args: argparse.Namespace) -> int:
    cache = _cache(load_settings())
    words = cache.autocomplete(args.prefix) if args.prefix else cache.popular_terms()
    for w in words:
        print(w)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="define-cli",
        description="Operational CLI for the define interaction server"
    )
    sub = p.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("register", help="Register the /define command with Discord")
    sp.set_defaults(func=cmd_register)

    sp = sub.add_parser("lookup", help="Render a lookup page as message JSON")
    sp.add_argument("term")
    sp.add_argument("--page", type=int, default=0)
    sp.add_argument("--hide", action="store_true", default=None,
                    help="Render as an ephemeral initial response (default: page-turn, no flags)")
    sp.set_defaults(func=cmd_lookup)

    sp = sub.add_parser("autocomplete", help="List suggestions for a prefix (popular terms if empty)")
    sp.add_argument("prefix", nargs="?", default="")
    sp.set_defaults(func=cmd_autocomplete)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
