from __future__ import annotations

import logging

from pydantic import ValidationError

from models.profile_descriptor import ProfileDescriptor
from pipelines.runner import RunContext
from ports.source import ProfileSourcePort
from sources.profile_source import InvalidSourcePayload


logger = logging.getLogger(__name__)


def _to_descriptor(entry) -> ProfileDescriptor:
    # Entries that are not objects, or have non-text fields, carry no usable link
    if not isinstance(entry, dict):
        return ProfileDescriptor()
    try:
        return ProfileDescriptor.model_validate(entry)
    except ValidationError as e:
        logger.warning(
            "Unusable profile entry",
            extra={"step": "load_profiles", "status": "skipped", "error": str(e)},
        )
        return ProfileDescriptor()


class LoadProfiles:
    """Fetch the profile list once; any failure aborts the whole run."""

    def __init__(self, source: ProfileSourcePort) -> None:
        self.source = source

    def run(self, ctx: RunContext) -> RunContext:
        payload = self.source.fetch()
        profiles = payload.get("profiles") if isinstance(payload, dict) else None
        if not isinstance(profiles, list):
            logger.error(
                "Profile source returned no profile list",
                extra={"step": "load_profiles", "status": "invalid", "run_id": ctx.run_id},
            )
            raise InvalidSourcePayload("Invalid or missing data from URL.")

        ctx.profiles = [_to_descriptor(p) for p in profiles]
        ctx.meta["profiles_total"] = len(ctx.profiles)
        logger.info(
            f"Loaded {len(ctx.profiles)} profiles",
            extra={"step": "load_profiles", "status": "ok", "run_id": ctx.run_id},
        )
        return ctx
