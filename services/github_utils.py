from __future__ import annotations

import re
from typing import Optional


_GITHUB_PROFILE_RE = re.compile(r"^(https?://)?github\.com/([A-Za-z0-9_-]+)")


def extract_username(github_url: Optional[str]) -> Optional[str]:
    """Return the user segment of a github.com profile link, or None.

    Matches ``github.com/<user>`` with an optional http(s) scheme at the start
    of the string. Case is preserved; anything after the first segment is ignored.
    """
    if not github_url or not isinstance(github_url, str):
        return None
    match = _GITHUB_PROFILE_RE.match(github_url)
    return match.group(2) if match else None


def pinned_repo_name(url: Optional[str]) -> Optional[str]:
    """Trailing path segment of a pinned repository URL."""
    if not url:
        return None
    name = str(url).rstrip("/").split("/")[-1]
    return name or None
