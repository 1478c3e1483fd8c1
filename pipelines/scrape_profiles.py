from __future__ import annotations

import logging
from typing import Any, Dict

from pipelines.runner import Pipeline, RunContext
from pipelines.steps import LoadProfiles, ScrapeAndPersistProfiles
from ports.lookup import ProfileLookupPort
from ports.repos import RecordsRepoPort
from ports.source import ProfileSourcePort


logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Data scraped and saved to the database"


def run_scrape_batch(
    source: ProfileSourcePort,
    repo: RecordsRepoPort,
    lookup: ProfileLookupPort,
    concurrency: int = 4,
) -> Dict[str, Any]:
    """Fetch the profile list, scrape each profile and store the results.

    Raises SourceFetchError (or InvalidSourcePayload) when the list cannot be
    loaded; per-profile failures are reported inside ``data``.
    """
    ctx = RunContext()
    pipeline = Pipeline([
        LoadProfiles(source),
        ScrapeAndPersistProfiles(repo, lookup, concurrency=concurrency),
    ])
    ctx = pipeline.run(ctx)
    logger.info(
        f"Batch complete: saved={ctx.meta.get('records_saved', 0)} failed={ctx.meta.get('items_failed', 0)}",
        extra={"step": "batch", "status": "ok", "run_id": ctx.run_id},
    )
    return {"message": SUCCESS_MESSAGE, "data": ctx.results}
