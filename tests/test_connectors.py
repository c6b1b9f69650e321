"""
Connector tests: Merriam-Webster client and Discord command registration.
requests is monkeypatched; nothing leaves the process.
"""

from __future__ import annotations
import pytest
import requests

from app.config import load_settings
from connectors import discord
from connectors.merriam_webster import DictionaryClient, UpstreamError
from service.commands import commands_payload


class StubResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class StubSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.exc:
            raise self.exc
        return self.response


def _client(session):
    return DictionaryClient(
        api_key="k",
        lookup_url="https://mw.test/json/",
        popular_url="https://mw.test/popular",
        autocomplete_url="https://mw.test/ac",
        timeout=3,
        session=session,
    )


# ---------- Merriam-Webster ----------

def test_lookup_url_and_key():
    s = StubSession(StubResponse(payload=[{"hwi": {"hw": "ice cream"}}]))
    data = _client(s).lookup("ice cream")
    assert data == [{"hwi": {"hw": "ice cream"}}]
    assert s.calls == [{"url": "https://mw.test/json/ice%20cream", "params": {"key": "k"}, "timeout": 3}]


def test_network_error_wrapped():
    s = StubSession(exc=requests.ConnectionError("nope"))
    with pytest.raises(UpstreamError):
        _client(s).lookup("run")


def test_non_2xx_raises():
    with pytest.raises(UpstreamError):
        _client(StubSession(StubResponse(status_code=503))).lookup("run")


def test_malformed_json_raises():
    with pytest.raises(UpstreamError):
        _client(StubSession(StubResponse(payload=ValueError("bad")))).lookup("run")


def test_autocomplete_docs():
    s = StubSession(StubResponse(payload={"docs": [{"word": "run", "ref": "owl-combined"}]}))
    assert _client(s).autocomplete("ru") == [{"word": "run", "ref": "owl-combined"}]
    assert s.calls[0]["params"] == {"search": "ru"}


def test_autocomplete_shape_checked():
    with pytest.raises(UpstreamError):
        _client(StubSession(StubResponse(payload={"nope": 1}))).autocomplete("ru")


def test_popular_terms():
    s = StubSession(StubResponse(payload={"data": {"words": ["a", "b", 3]}}))
    assert _client(s).popular_terms() == ["a", "b"]


def test_popular_terms_shape_checked():
    with pytest.raises(UpstreamError):
        _client(StubSession(StubResponse(payload={"data": []}))).popular_terms()


# ---------- Discord registration ----------

def _settings(**kw):
    base = {"DISCORD_APP_ID": "123", "DISCORD_BOT_TOKEN": "tok", "DISCORD_API_URL": "https://discord.test/api"}
    base.update(kw)
    return load_settings(base)


def test_register_commands_puts_payload(monkeypatch):
    calls = []

    def fake_put(url, headers=None, json=None, timeout=None):
        calls.append({"url": url, "headers": headers, "json": json})
        return StubResponse(200)

    monkeypatch.setattr(discord.requests, "put", fake_put)
    assert discord.register_commands(_settings()) is True
    assert calls[0]["url"] == "https://discord.test/api/applications/123/commands"
    assert calls[0]["headers"]["Authorization"] == "Bot tok"
    assert calls[0]["json"] == commands_payload()


def test_register_commands_error_status(monkeypatch):
    monkeypatch.setattr(discord.requests, "put", lambda *a, **k: StubResponse(401, text="401: Unauthorized"))
    assert discord.register_commands(_settings()) is False


def test_register_commands_network_error(monkeypatch):
    def boom(*a, **k):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(discord.requests, "put", boom)
    assert discord.register_commands(_settings()) is False


def test_register_commands_skipped_without_credentials(monkeypatch):
    monkeypatch.setattr(discord.requests, "put", lambda *a, **k: pytest.fail("should not be called"))
    assert discord.register_commands(_settings(DISCORD_BOT_TOKEN="")) is False


def test_command_surface_shape():
    (define,) = commands_payload()
    assert define["name"] == "define"
    assert [o["name"] for o in define["options"]] == ["term", "hide"]
    term, hide = define["options"]
    assert term["type"] == 3 and term["required"] and term["autocomplete"]
    assert hide["type"] == 5 and not hide["required"]
    assert define["integration_types"] == [0, 1]
    assert define["contexts"] == [0, 2]
