from __future__ import annotations

import concurrent.futures as _fut
import logging
from typing import Any, Dict, List, Optional, Tuple

from models.github_record import DEFAULT_HOUSE
from models.lookup_result import LookupResult
from models.profile_descriptor import ProfileDescriptor
from pipelines.runner import RunContext
from ports.lookup import ProfileLookupPort
from ports.repos import RecordsRepoPort
from services.enrichment_service import enrich_profile
from services.github_utils import extract_username


logger = logging.getLogger(__name__)


class ScrapeAndPersistProfiles:
    """Scrape every loaded profile and store the successful ones.

    Lookups run in parallel; persistence runs sequentially in input order.
    Per-item failures become ``{"error": ...}`` entries in ``ctx.results``;
    profiles without a link are left out entirely.
    """

    def __init__(self, repo: RecordsRepoPort, lookup: ProfileLookupPort, concurrency: int = 4) -> None:
        self.repo = repo
        self.lookup = lookup
        self.concurrency = max(1, int(concurrency or 1))

    def _plan(self, ctx: RunContext) -> List[Tuple[ProfileDescriptor, Optional[str], Optional[Dict[str, Any]]]]:
        """Resolve usernames; returns (descriptor, username, error_entry) per kept profile."""
        planned = []
        for descriptor in ctx.profiles:
            link = (descriptor.github or "").strip()
            if not link:
                logger.info(
                    "Skipping profile without GitHub link",
                    extra={"step": "scrape", "status": "skipped", "run_id": ctx.run_id},
                )
                continue
            username = extract_username(link)
            if not username:
                logger.warning(
                    f"Invalid GitHub URL: {link}",
                    extra={"step": "scrape", "status": "invalid", "run_id": ctx.run_id},
                )
                planned.append((descriptor, None, {"error": f"Invalid GitHub URL: {link}"}))
                continue
            planned.append((descriptor, username, None))
        return planned

    def run(self, ctx: RunContext) -> RunContext:
        planned = self._plan(ctx)

        lookups: Dict[int, LookupResult] = {}
        with _fut.ThreadPoolExecutor(max_workers=self.concurrency) as ex:
            futures = {
                idx: ex.submit(enrich_profile, username, self.lookup)
                for idx, (_d, username, _e) in enumerate(planned)
                if username
            }
            for idx, fut in futures.items():
                lookups[idx] = fut.result()

        results: List[Dict[str, Any]] = []
        saved = 0
        failed = 0
        for idx, (descriptor, username, error_entry) in enumerate(planned):
            if error_entry is not None:
                results.append(error_entry)
                failed += 1
                continue

            outcome = lookups[idx]
            if not outcome.is_ok:
                results.append({"error": outcome.error})
                failed += 1
                continue

            data = outcome.data.model_copy(update={"house": descriptor.location or DEFAULT_HOUSE})
            try:
                record = self.repo.save(data)
            except Exception as e:
                logger.error(
                    "Failed to persist scraped profile",
                    extra={"step": "persist", "status": "error", "username": username, "error": str(e), "run_id": ctx.run_id},
                )
                results.append({"error": f"Failed to save data for user: {username}"})
                failed += 1
                continue

            logger.info(
                f"Saved record id={record.id}",
                extra={"step": "persist", "status": "ok", "username": username, "run_id": ctx.run_id},
            )
            results.append(record.model_dump(mode="json"))
            saved += 1

        ctx.results = results
        ctx.meta["records_saved"] = saved
        ctx.meta["items_failed"] = failed
        return ctx
