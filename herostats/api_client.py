from __future__ import annotations

import logging
import re
import time
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

LOGGER = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the match-list page cannot be retrieved."""


class PlayerNotFoundError(FetchError):
    """Raised when the player id has no profile page."""


class ScraperBlockedError(FetchError):
    """Raised when Cloudflare or a 403 blocks the request."""


class InvalidPlayerIdError(ValueError):
    """Raised before any request when the player id is blank."""


class DotabuffClient:
    BASE_URL = "https://www.dotabuff.com/players/{player_id}/matches"
    HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
        "DNT": "1",
        "Upgrade-Insecure-Requests": "1",
    }
    BLOCKED_TITLES = ("attention required", "just a moment")

    def __init__(self, timeout_seconds: int = 20, retry_sleep_seconds: float = 10.0):
        self.timeout_seconds = timeout_seconds
        self.retry_sleep_seconds = retry_sleep_seconds

    @staticmethod
    def normalize_player_id(player_id: str | None) -> str:
        cleaned = (player_id or "").strip()
        if not cleaned:
            raise InvalidPlayerIdError("Please enter a valid player ID")
        return cleaned

    def matches_url(self, player_id: str) -> str:
        cleaned = self.normalize_player_id(player_id)
        return self.BASE_URL.format(player_id=quote(cleaned, safe=""))

    @classmethod
    def _page_title(cls, html: str) -> str:
        match = re.search(r"<title[^>]*>(.*?)</title>", html, re.I | re.S)
        return match.group(1).strip().lower() if match else ""

    def _get_html(self, url: str, retry_429: bool = True) -> str:
        req = Request(url, headers=self.HEADERS, method="GET")
        try:
            with urlopen(req, timeout=self.timeout_seconds) as resp:
                body = resp.read()
        except HTTPError as exc:
            if exc.code == 429 and retry_429:
                LOGGER.warning("Rate limited on %s; retrying in %.0fs", url, self.retry_sleep_seconds)
                time.sleep(self.retry_sleep_seconds)
                return self._get_html(url, retry_429=False)
            if exc.code == 404:
                raise PlayerNotFoundError(f"Player page not found at {url}") from exc
            if exc.code == 403:
                raise ScraperBlockedError(f"Request to {url} was blocked (HTTP 403)") from exc
            raise FetchError(f"Unable to fetch player data (HTTP {exc.code})") from exc
        except URLError as exc:
            raise FetchError(f"Unable to fetch player data: {exc.reason}") from exc

        try:
            html = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FetchError("Unable to fetch player data: response is not UTF-8") from exc

        title = self._page_title(html)
        if any(marker in title for marker in self.BLOCKED_TITLES):
            raise ScraperBlockedError("Cloudflare blocked this request")
        return html

    def fetch_matches_page(self, player_id: str) -> str:
        """Return the raw markup of a player's match-list page."""
        url = self.matches_url(player_id)
        LOGGER.info("Fetching %s", url)
        html = self._get_html(url)
        LOGGER.debug("Fetched %d characters from %s", len(html), url)
        return html
