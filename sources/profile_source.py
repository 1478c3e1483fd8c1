from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from config.settings import Settings, get_settings


logger = logging.getLogger(__name__)


class SourceFetchError(Exception):
    """The profile list could not be retrieved from the source URL."""


class InvalidSourcePayload(SourceFetchError):
    """The source answered, but without a usable profile list."""


class ProfileSourceFetcher:
    """Fetches the list of profile descriptors from one fixed URL. No retries."""

    def __init__(self, url: str, timeout: Optional[float] = None):
        self.url = url
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ProfileSourceFetcher":
        settings = settings or get_settings()
        if not settings.profiles_url:
            raise RuntimeError("PROFILES_URL must be set to fetch profiles")
        return cls(settings.profiles_url, timeout=settings.http_timeout_seconds)

    def fetch(self) -> Dict[str, Any]:
        """Return the decoded JSON body verbatim."""
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(
                "Profile source fetch failed",
                extra={"step": "load_profiles", "status": "error", "error": str(e)},
            )
            raise SourceFetchError("Failed to fetch data from the external URL.") from e
