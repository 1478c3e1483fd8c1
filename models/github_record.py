from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


DEFAULT_RESIDENT = "Unknown"
UNNAMED_RESIDENT = "Not available"
DEFAULT_DETAIL = "No pinned repo"
DEFAULT_HOUSE = "Unknown House"


class GithubProfileData(BaseModel):
    """Scraped statistics for one user, before persistence."""

    resident: str = DEFAULT_RESIDENT
    revenue: int = 0  # total public repositories
    detail: str = DEFAULT_DETAIL  # first pinned repository
    house: str = DEFAULT_HOUSE

    model_config = ConfigDict(extra="ignore")


class GithubRecord(GithubProfileData):
    """App/DB record shape: a persisted, immutable scrape result."""

    id: int
    timestamp: datetime

    model_config = ConfigDict(extra="ignore", frozen=True)
