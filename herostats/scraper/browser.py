# herostats/scraper/browser.py
"""
Headless-browser retrieval for match pages that refuse plain HTTP clients.

Playwright is only imported when a page is actually fetched.
"""

from __future__ import annotations

import logging

from ..api_client import DotabuffClient, PlayerNotFoundError, ScraperBlockedError

LOGGER = logging.getLogger(__name__)


class BrowserPageFetcher:
    """Fetch match-list markup through headless Chromium."""

    USER_AGENT = DotabuffClient.HEADERS["User-Agent"]
    VIEWPORT = {"width": 1280, "height": 720}

    def __init__(self, headless: bool = True, wait_ms: int = 3000, slow_mo: int = 0):
        self.headless = headless
        self.wait_ms = wait_ms
        self.slow_mo = slow_mo
        self._playwright = None
        self.browser = None
        self.context = None
        self.page = None

    def fetch_matches_page(self, player_id: str) -> str:
        url = DotabuffClient().matches_url(player_id)
        self._launch_browser()
        try:
            self._navigate(url)
            return self.page.content()
        finally:
            self._close_browser()

    def context_options(self) -> dict:
        """Browser context settings that match the plain HTTP client's fingerprint."""
        return {
            "user_agent": self.USER_AGENT,
            "viewport": dict(self.VIEWPORT),
            "locale": "en-US",
            "extra_http_headers": {"Accept-Language": DotabuffClient.HEADERS["Accept-Language"]},
        }

    def _launch_browser(self) -> None:
        if self.page is not None:
            return

        try:
            from playwright.sync_api import sync_playwright
        except ImportError as exc:
            raise ImportError(
                "Playwright is needed for browser retrieval: pip install playwright && playwright install chromium"
            ) from exc

        LOGGER.debug("Starting Chromium (headless=%s, slow_mo=%d)", self.headless, self.slow_mo)
        self._playwright = sync_playwright().start()
        chromium = self._playwright.chromium
        self.browser = chromium.launch(headless=self.headless, slow_mo=self.slow_mo)
        self.context = self.browser.new_context(**self.context_options())
        self.page = self.context.new_page()

    def _navigate(self, url: str) -> None:
        """Load the page, waiting out one Cloudflare interstitial."""
        LOGGER.info("Loading %s in browser", url)
        self.page.goto(url, wait_until="domcontentloaded")
        self.page.wait_for_timeout(self.wait_ms)
        title = self.page.title().lower()

        if any(marker in title for marker in DotabuffClient.BLOCKED_TITLES):
            self.page.wait_for_timeout(10000)
            self.page.reload(wait_until="domcontentloaded")
            self.page.wait_for_timeout(self.wait_ms)
            title = self.page.title().lower()
            if any(marker in title for marker in DotabuffClient.BLOCKED_TITLES):
                raise ScraperBlockedError("Cloudflare blocked this request")

        if "not found" in title or "404" in title:
            raise PlayerNotFoundError(f"Player page not found at {url}")

    def _close_browser(self) -> None:
        for resource in (self.context, self.browser):
            if resource is None:
                continue
            try:
                resource.close()
            except Exception as exc:
                LOGGER.debug("Ignoring browser close failure: %s", exc)
        if self._playwright:
            try:
                self._playwright.stop()
            except Exception as exc:
                LOGGER.debug("Ignoring playwright stop failure: %s", exc)

        self._playwright = None
        self.browser = None
        self.context = None
        self.page = None
