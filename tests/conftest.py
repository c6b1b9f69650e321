"""
Global test fixtures for the define interaction server.

Creates an isolated Flask app with a throwaway Ed25519 key pair and a fake
Merriam-Webster source, so tests never hit the network and every request can
be signed exactly like Discord signs it.
"""

from __future__ import annotations
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest
from nacl.signing import SigningKey

# ---------------------------------------------------------------------------
# Import target app
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app import create_app  # type: ignore
from retrieval.cache import LookupCache  # type: ignore
from service.response_builder import ResponseBuilder  # type: ignore

# ---------------------------------------------------------------------------
# Sample upstream data
# ---------------------------------------------------------------------------


def mw_entry(hw: str, fl: str | None = "verb", shortdef: List[str] | None = None, **extra: Any) -> Dict[str, Any]:
    item: Dict[str, Any] = {"hwi": {"hw": hw}, "shortdef": shortdef if shortdef is not None else [f"sense of {hw}"]}
    if fl:
        item["fl"] = fl
    item.update(extra)
    return item


RUN_ENTRIES = [
    mw_entry("run", "verb", ["to go faster than a walk", "to flee"]),
    mw_entry("run", "noun", ["an act or the activity of running"]),
    mw_entry("run*ner", "noun", ["one that runs"]),
    mw_entry("ran", None, [], cxs=[{"cxl": "past tense of", "cxtis": [{"cxt": "run"}]}]),
]

AUTOCOMPLETE_DOCS = [
    {"word": "run", "ref": "owl-combined"},
    {"word": "run-on", "ref": "owl-combined"},
    {"word": "Runnymede", "ref": "geographical"},
    {"word": "runner", "ref": "owl-combined"},
]

POPULAR = [f"word{i}" for i in range(30)]


class FakeDictionaryClient:
    """Stands in for connectors.merriam_webster.DictionaryClient."""

    def __init__(self, lookups: Dict[str, Any] | None = None) -> None:
        self.lookups: Dict[str, Any] = lookups if lookups is not None else {"run": RUN_ENTRIES}
        self.docs: List[Dict[str, Any]] = list(AUTOCOMPLETE_DOCS)
        self.popular: List[str] = list(POPULAR)
        self.calls: List[tuple] = []
        self.fail_with: Exception | None = None

    def _hit(self, *call: Any) -> None:
        self.calls.append(call)
        if self.fail_with is not None:
            raise self.fail_with

    def lookup(self, term: str) -> Any:
        self._hit("lookup", term)
        return self.lookups.get(term, ["rune", "ruin"])

    def autocomplete(self, prefix: str) -> List[Dict[str, Any]]:
        self._hit("autocomplete", prefix)
        return self.docs

    def popular_terms(self) -> List[str]:
        self._hit("popular")
        return self.popular

    def count(self, kind: str) -> int:
        return sum(1 for c in self.calls if c[0] == kind)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def signing_key() -> SigningKey:
    return SigningKey.generate()


@pytest.fixture(scope="session")
def public_key_hex(signing_key: SigningKey) -> str:
    return signing_key.verify_key.encode().hex()


@pytest.fixture()
def fake_client() -> FakeDictionaryClient:
    return FakeDictionaryClient()


@pytest.fixture()
def cache(fake_client) -> LookupCache:
    return LookupCache(fake_client)


@pytest.fixture()
def builder(cache) -> ResponseBuilder:
    return ResponseBuilder(cache)


@pytest.fixture()
def app(public_key_hex: str, fake_client):
    """Flask app fixture (testing mode ON, no registration, console logs only)."""
    flask_app = create_app(
        {
            "DISCORD_PUBLIC_KEY": public_key_hex,
            "REGISTER_COMMANDS": False,
            "LOG_DIR": "",
        },
        client=fake_client,
    )
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture()
def sign(signing_key: SigningKey):
    """Returns headers Discord would send for a given raw body."""
    def _sign(body: bytes, timestamp: str = "1700000000") -> Dict[str, str]:
        sig = signing_key.sign(timestamp.encode("utf-8") + body).signature.hex()
        return {
            "Content-Type": "application/json",
            "X-Signature-Ed25519": sig,
            "X-Signature-Timestamp": timestamp,
        }
    return _sign


@pytest.fixture()
def post_interaction(client, sign):
    """POST a signed interaction; returns the Flask response."""
    def _post(payload: Dict[str, Any]):
        body = json.dumps(payload).encode("utf-8")
        return client.post("/interactions", data=body, headers=sign(body))
    return _post
