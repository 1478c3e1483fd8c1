"""
GitHub House Scraper - FastAPI application.

Fetches a list of GitHub profile links from an external source, scrapes public
statistics for each profile and stores the results in SQLite.
"""
from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from config.settings import Settings, get_settings, require_runtime_settings
from db import schema
from db.connection import get_connection
from db.repos.records_repo import RecordsRepo
from github_scraper import GitHubProfileScraper
from pipelines.scrape_profiles import run_scrape_batch
from ports.lookup import ProfileLookupPort
from ports.repos import RecordsRepoPort
from ports.source import ProfileSourcePort
from sources.profile_source import ProfileSourceFetcher, SourceFetchError
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repo: Optional[RecordsRepoPort] = None,
    lookup: Optional[ProfileLookupPort] = None,
    source: Optional[ProfileSourcePort] = None,
) -> FastAPI:
    """Build the application. Collaborators not passed in are created at startup."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        conn = None
        try:
            if repo is None:
                conn = get_connection(settings.db_path)
                schema.bootstrap(conn)
                logger.info("Database connected", extra={"step": "startup", "status": "ok"})
                app.state.repo = RecordsRepo(conn)
            else:
                app.state.repo = repo
            app.state.lookup = lookup if lookup is not None else GitHubProfileScraper(settings)
            app.state.source = source if source is not None else ProfileSourceFetcher.from_settings(settings)
            yield
        finally:
            if conn is not None:
                conn.close()
                logger.info("Database connection closed", extra={"step": "shutdown", "status": "ok"})

    app = FastAPI(title="GitHub House Scraper API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse)
    def home() -> str:
        return "Welcome to the GitHub Scraper API!"

    @app.get("/check", response_class=PlainTextResponse)
    def check() -> str:
        return "Server is running."

    @app.get("/scrape_multiple_github")
    def scrape_multiple_github(request: Request):
        state = request.app.state
        try:
            return run_scrape_batch(
                state.source,
                state.repo,
                state.lookup,
                concurrency=settings.scrape_concurrency,
            )
        except SourceFetchError as e:
            return JSONResponse(status_code=400, content={"error": str(e)})
        except Exception as e:
            logger.exception(
                "Error scraping GitHub profiles",
                extra={"step": "batch", "status": "error", "error": str(e)},
            )
            return JSONResponse(status_code=500, content={"error": str(e)})

    @app.get("/get_saved_data")
    def get_saved_data(request: Request):
        try:
            records = request.app.state.repo.list_all()
        except Exception as e:
            logger.error(
                "Error fetching data from the database",
                extra={"step": "list", "status": "error", "error": str(e)},
            )
            return JSONResponse(status_code=500, content={"success": False, "error": "Failed to fetch data"})
        return {"success": True, "data": [r.model_dump(mode="json") for r in records]}

    return app


def serve(settings: Settings) -> None:
    import uvicorn

    logger.info(f"Server is running on http://localhost:{settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


def main() -> None:
    settings = get_settings()
    init_logging(settings.log_level)
    try:
        require_runtime_settings(settings)
    except RuntimeError as e:
        logger.error(f"Error: {e}", extra={"step": "startup", "status": "error"})
        sys.exit(1)
    serve(settings)


if __name__ == "__main__":
    main()
