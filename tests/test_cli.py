from __future__ import annotations

import json
import sys
from typing import List

import pytest

from db.connection import get_connection
from db.repos.records_repo import RecordsRepo


def _run_cli_with_args(args_list: List[str]) -> None:
    """Run cli.py main() with provided argv in-process (no subprocess)."""
    argv_backup = sys.argv[:]
    try:
        sys.argv = ["cli.py"] + args_list
        # Import fresh to ensure clean parser each time
        if "cli" in sys.modules:
            del sys.modules["cli"]
        import cli  # type: ignore
        try:
            cli.main()  # type: ignore[attr-defined]
        except SystemExit as e:
            code = int(getattr(e, "code", 0) or 0)
            if code not in (0, None):
                raise
    finally:
        sys.argv = argv_backup


class _StubFetcher:
    def __init__(self, url, timeout=None):
        self.url = url

    def fetch(self):
        return {"profiles": [
            {"github": "https://github.com/octocat", "location": "Gryffindor"},
            {"github": "https://github.com/ghost"},
        ]}


class _StubScraper:
    def __init__(self, settings=None):
        pass

    def fetch_profile(self, username):
        if username != "octocat":
            raise RuntimeError("not found")
        return {"name": "The Octocat", "repos": 8, "pinned": [{"url": "https://github.com/octocat/Hello-World"}]}


def test_cli_scrape_writes_db_and_lists(tmp_path, monkeypatch, capsys):
    import github_scraper
    import sources.profile_source
    monkeypatch.setattr(sources.profile_source, "ProfileSourceFetcher", _StubFetcher)
    monkeypatch.setattr(github_scraper, "GitHubProfileScraper", _StubScraper)

    db_path = tmp_path / "cli.db"
    _run_cli_with_args(["--db", str(db_path), "bootstrap"])
    _run_cli_with_args(["--db", str(db_path), "scrape", "--url", "https://example.test/p.json"])

    out = capsys.readouterr().out
    payload = json.loads(out[out.index("{"):])
    assert payload["data"][0]["detail"] == "Hello-World"
    assert payload["data"][1] == {"error": "Failed to fetch data for user: ghost"}

    conn = get_connection(str(db_path))
    try:
        rows = RecordsRepo(conn).list_all()
        assert [(r.resident, r.house) for r in rows] == [("The Octocat", "Gryffindor")]
    finally:
        conn.close()

    _run_cli_with_args(["--db", str(db_path), "list-saved", "--limit", "5"])
    listed = json.loads(capsys.readouterr().out)
    assert [r["resident"] for r in listed] == ["The Octocat"]


def test_cli_serve_exits_when_config_missing(tmp_path, monkeypatch):
    monkeypatch.delenv("PROFILES_URL", raising=False)
    monkeypatch.delenv("URL", raising=False)
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["--db", str(tmp_path / "x.db"), "serve"])
    assert exc.value.code == 1
