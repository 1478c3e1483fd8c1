from __future__ import annotations

import pytest
import requests

import sources.profile_source as ps
from sources.profile_source import ProfileSourceFetcher, SourceFetchError


class _Resp:
    def __init__(self, status_code=200, payload=None, json_error=None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._json_error:
            raise self._json_error
        return self._payload


def test_fetch_returns_body_verbatim(monkeypatch):
    seen = {}

    def _get(url, timeout=None):
        seen["url"] = url
        seen["timeout"] = timeout
        return _Resp(payload={"profiles": [{"github": "https://github.com/a"}], "extra": 1})

    monkeypatch.setattr(ps.requests, "get", _get)
    body = ProfileSourceFetcher("https://example.test/p.json", timeout=5).fetch()
    assert body == {"profiles": [{"github": "https://github.com/a"}], "extra": 1}
    assert seen == {"url": "https://example.test/p.json", "timeout": 5}


def test_fetch_non_2xx_raises(monkeypatch):
    monkeypatch.setattr(ps.requests, "get", lambda url, timeout=None: _Resp(status_code=503))
    with pytest.raises(SourceFetchError, match="Failed to fetch data from the external URL."):
        ProfileSourceFetcher("https://example.test/p.json").fetch()


def test_fetch_transport_error_raises(monkeypatch):
    def _get(url, timeout=None):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(ps.requests, "get", _get)
    with pytest.raises(SourceFetchError):
        ProfileSourceFetcher("https://example.test/p.json").fetch()


def test_fetch_non_json_body_raises(monkeypatch):
    monkeypatch.setattr(ps.requests, "get", lambda url, timeout=None: _Resp(json_error=ValueError("no json")))
    with pytest.raises(SourceFetchError):
        ProfileSourceFetcher("https://example.test/p.json").fetch()


def test_from_settings_requires_url(monkeypatch):
    monkeypatch.delenv("PROFILES_URL", raising=False)
    monkeypatch.delenv("URL", raising=False)
    with pytest.raises(RuntimeError):
        ProfileSourceFetcher.from_settings()

    monkeypatch.setenv("PROFILES_URL", "https://example.test/p.json")
    from config.settings import get_settings
    get_settings.cache_clear()
    fetcher = ProfileSourceFetcher.from_settings()
    assert fetcher.url == "https://example.test/p.json"
