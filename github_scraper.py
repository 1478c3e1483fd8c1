"""
GitHub profile page scraper: public name, repository count and pinned repositories.
"""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from config.settings import Settings, get_settings
from utils.number_parsing import _parse_int_shorthand


class ProfileLookupError(Exception):
    """Raised when a GitHub profile page cannot be fetched."""

    def __init__(self, username: str, reason: str):
        super().__init__(f"Error fetching data for user {username}: {reason}")
        self.username = username
        self.reason = reason


class GitHubProfileScraper:
    """Scrapes the public GitHub profile page of a user."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.base_url = self.settings.github_base_url

    def profile_url(self, username: str) -> str:
        return f"{self.base_url}/{username}"

    def fetch_profile(self, username: str) -> Dict[str, Any]:
        """Fetch and parse one profile page. Raises ProfileLookupError on failure."""
        url = self.profile_url(username)
        logging.info(f"Fetching GitHub profile {url}")
        try:
            response = requests.get(
                url,
                timeout=self.settings.http_timeout_seconds,
                headers={"Accept": "text/html"},
            )
        except requests.exceptions.RequestException as e:
            raise ProfileLookupError(username, str(e)) from e

        if response.status_code == 404:
            raise ProfileLookupError(username, "profile not found")
        if response.status_code != 200:
            raise ProfileLookupError(username, f"status {response.status_code}")

        return self.parse_profile(response.text)

    def parse_profile(self, html: str) -> Dict[str, Any]:
        """Extract name, repository count and pinned repositories from profile HTML."""
        soup = BeautifulSoup(html, "html.parser")
        return {
            "name": self._parse_name(soup),
            "repos": self._parse_repo_count(soup),
            "pinned": self._parse_pinned(soup),
        }

    @staticmethod
    def _parse_name(soup: BeautifulSoup) -> Optional[str]:
        tag = soup.select_one("span.p-name") or soup.select_one("[itemprop='name']")
        if not tag:
            return None
        name = tag.get_text(" ", strip=True)
        return name or None

    @staticmethod
    def _parse_repo_count(soup: BeautifulSoup) -> Optional[int]:
        for link in soup.select("a[href*='tab=repositories']"):
            counter = link.select_one("span.Counter")
            if not counter:
                continue
            # title carries the exact number ("1,234"), the text may be abbreviated ("1.2k")
            value = counter.get("title") or counter.get_text(strip=True)
            parsed = _parse_int_shorthand(value)
            if parsed is not None:
                return parsed
        return None

    def _parse_pinned(self, soup: BeautifulSoup) -> List[Dict[str, str]]:
        pinned = []
        for item in soup.select(".pinned-item-list-item"):
            link = item.select_one("a[href]")
            if not link:
                continue
            pinned.append({"url": urljoin(f"{self.base_url}/", link["href"])})
        return pinned
