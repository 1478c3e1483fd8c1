from __future__ import annotations

import pytest

from config.settings import get_settings, require_runtime_settings


def test_defaults(monkeypatch):
    for var in ("PORT", "DB_PATH", "DATABASE_URL", "PROFILES_URL", "URL", "ALLOWED_ORIGINS"):
        monkeypatch.delenv(var, raising=False)
    s = get_settings()
    assert s.port == 3005
    assert s.db_path is None and s.profiles_url is None
    assert s.allowed_origins == ["*"]
    assert s.github_base_url == "https://github.com"


def test_legacy_aliases(monkeypatch):
    monkeypatch.delenv("DB_PATH", raising=False)
    monkeypatch.delenv("PROFILES_URL", raising=False)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///data.db")
    monkeypatch.setenv("URL", "https://example.test/p.json")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.test, https://b.test")
    s = get_settings()
    assert s.db_path == "sqlite:///data.db"
    assert s.profiles_url == "https://example.test/p.json"
    assert s.allowed_origins == ["https://a.test", "https://b.test"]
    assert require_runtime_settings(s) is s


def test_missing_required_settings_raise(monkeypatch):
    for var in ("DB_PATH", "DATABASE_URL", "PROFILES_URL", "URL"):
        monkeypatch.delenv(var, raising=False)
    with pytest.raises(RuntimeError) as exc:
        require_runtime_settings(get_settings())
    assert "DB_PATH" in str(exc.value) and "PROFILES_URL" in str(exc.value)


def test_app_main_exits_without_config(monkeypatch):
    for var in ("DB_PATH", "DATABASE_URL", "PROFILES_URL", "URL"):
        monkeypatch.delenv(var, raising=False)
    import app
    with pytest.raises(SystemExit) as exc:
        app.main()
    assert exc.value.code == 1
