from __future__ import annotations

from typing import List, Optional, Protocol

from models.github_record import GithubProfileData, GithubRecord


class RecordsRepoPort(Protocol):
    def save(self, data: GithubProfileData) -> GithubRecord:
        ...

    def list_all(self, limit: Optional[int] = None) -> List[GithubRecord]:
        ...
