import argparse
import json
import logging
import sys
from dataclasses import replace

from config.settings import get_settings, require_runtime_settings
from db import schema
from db.connection import get_connection
from db.repos.records_repo import RecordsRepo
from github_scraper import GitHubProfileScraper
from pipelines.scrape_profiles import run_scrape_batch
from sources.profile_source import ProfileSourceFetcher, SourceFetchError
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


def cmd_bootstrap(args):
    conn = get_connection(args.db)
    try:
        schema.bootstrap(conn)
    finally:
        conn.close()
    print("Schema ready")


def cmd_scrape(args):
    settings = get_settings()
    url = args.url or settings.profiles_url
    if not url:
        print("No profile source URL: set PROFILES_URL or pass --url", file=sys.stderr)
        sys.exit(1)
    conn = get_connection(args.db)
    try:
        schema.bootstrap(conn)
        source = ProfileSourceFetcher(url, timeout=settings.http_timeout_seconds)
        try:
            result = run_scrape_batch(
                source,
                RecordsRepo(conn),
                GitHubProfileScraper(settings),
                concurrency=args.concurrency or settings.scrape_concurrency,
            )
        except SourceFetchError as e:
            print(str(e), file=sys.stderr)
            sys.exit(1)
    finally:
        conn.close()
    print(json.dumps(result, indent=2, ensure_ascii=False))


def cmd_list_saved(args):
    conn = get_connection(args.db)
    try:
        schema.bootstrap(conn)
        records = RecordsRepo(conn).list_all(limit=args.limit)
    finally:
        conn.close()
    out = [r.model_dump(mode="json") for r in records]
    print(json.dumps(out, indent=2, ensure_ascii=False))


def cmd_serve(args):
    from app import serve

    settings = replace(get_settings(), db_path=args.db)
    if args.port:
        settings = replace(settings, port=args.port)
    try:
        require_runtime_settings(settings)
    except RuntimeError as e:
        logger.error(f"Error: {e}", extra={"step": "startup", "status": "error"})
        sys.exit(1)
    serve(settings)


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="GitHub House Scraper CLI")
    parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from DB_PATH)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create tables and indexes")
    p_boot.set_defaults(func=cmd_bootstrap)

    p_scr = sub.add_parser("scrape", help="Fetch the profile list, scrape each profile and store the results")
    p_scr.add_argument("--url", default=None, help="Profile source URL (default from PROFILES_URL)")
    p_scr.add_argument("--concurrency", type=int, default=None, help="Parallel profile lookups (default from SCRAPE_CONCURRENCY)")
    p_scr.set_defaults(func=cmd_scrape)

    p_ls = sub.add_parser("list-saved", help="Print stored records, newest first")
    p_ls.add_argument("--limit", type=int, default=None)
    p_ls.set_defaults(func=cmd_list_saved)

    p_srv = sub.add_parser("serve", help="Run the HTTP API")
    p_srv.add_argument("--port", type=int, default=None, help="Listen port (default from PORT, 3005)")
    p_srv.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    if args.func is not cmd_serve and not args.db:
        parser.error("--db is required when DB_PATH is not set")
    args.func(args)


if __name__ == "__main__":
    main()
