from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from models.github_record import DEFAULT_DETAIL, UNNAMED_RESIDENT, GithubProfileData
from models.lookup_result import LookupResult
from ports.lookup import ProfileLookupPort
from services.github_utils import pinned_repo_name
from utils.number_parsing import _parse_int_shorthand


logger = logging.getLogger(__name__)


def _first_pinned(pinned: Optional[List[Dict[str, Any]]]) -> Optional[str]:
    if not pinned:
        return None
    first = pinned[0]
    return pinned_repo_name(first.get("url") if isinstance(first, dict) else None)


def map_profile(raw: Dict[str, Any]) -> GithubProfileData:
    """Map a raw lookup payload onto the stored record fields, applying defaults."""
    return GithubProfileData(
        resident=raw.get("name") or UNNAMED_RESIDENT,
        revenue=_parse_int_shorthand(raw.get("repos")) or 0,
        detail=_first_pinned(raw.get("pinned")) or DEFAULT_DETAIL,
    )


def enrich_profile(username: str, lookup: ProfileLookupPort) -> LookupResult:
    """Look up one GitHub user and wrap the outcome; never raises."""
    try:
        raw = lookup.fetch_profile(username)
    except Exception as e:
        logger.warning(
            "Profile lookup failed",
            extra={"step": "enrich", "status": "error", "username": username, "error": str(e)},
        )
        return LookupResult.fail(f"Failed to fetch data for user: {username}")
    if not isinstance(raw, dict):
        logger.warning(
            "Profile lookup returned no data",
            extra={"step": "enrich", "status": "error", "username": username},
        )
        return LookupResult.fail(f"Failed to fetch data for user: {username}")
    try:
        return LookupResult.ok(map_profile(raw))
    except (ValidationError, LookupError, TypeError, AttributeError) as e:
        logger.warning(
            "Profile lookup returned malformed data",
            extra={"step": "enrich", "status": "error", "username": username, "error": str(e)},
        )
        return LookupResult.fail(f"Failed to fetch data for user: {username}")
