from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from models.github_record import GithubProfileData


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a profile lookup: either data or an error message, never both."""

    data: Optional[GithubProfileData] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: GithubProfileData) -> "LookupResult":
        return cls(data=data)

    @classmethod
    def fail(cls, error: str) -> "LookupResult":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.data is not None
