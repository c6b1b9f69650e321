"""
Logging setup.

- Rotating file handlers for runtime and errors
- Request ID aware formatter
"""

from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import g, has_request_context

from app.config import Settings

_CONFIGURED = False


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # Middleware stores request_id on flask.g
        if not hasattr(record, "request_id"):
            record.request_id = g.get("request_id", "-") if has_request_context() else "-"
        return True


def _mk_handler(path: Path, level: int) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
    handler.setLevel(level)
    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s %(request_id)s - %(message)s"
    )
    handler.setFormatter(fmt)
    handler.addFilter(RequestIdFilter())
    return handler


def configure_logging(settings: Settings) -> None:
    global _CONFIGURED
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))

    # create_app() may run more than once per process (tests, CLI)
    if _CONFIGURED:
        return
    _CONFIGURED = True

    # Console (dev)
    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s %(request_id)s - %(message)s"))
    console.addFilter(RequestIdFilter())
    root.addHandler(console)

    if not settings.LOG_DIR:
        return

    # Files
    logs_dir = Path(settings.LOG_DIR)
    runtime = _mk_handler(logs_dir / "define.log", logging.INFO)
    errors = _mk_handler(logs_dir / "errors.log", logging.ERROR)

    for name in ("Interactions", "Router", "LookupCache", "MWConnector", "DiscordConnector"):
        logging.getLogger(name).addHandler(runtime)
    root.addHandler(errors)
