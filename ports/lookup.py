from __future__ import annotations

from typing import Any, Dict, Protocol


class ProfileLookupPort(Protocol):
    def fetch_profile(self, username: str) -> Dict[str, Any]:
        """Return ``{"name", "repos", "pinned": [{"url"}]}`` or raise on failure."""
        ...
