# herostats/service.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Protocol

from .aggregator import window_label
from .api_client import DotabuffClient
from .models import ExtractionStats, HeroStat
from .pipeline import build_hero_stats

LOGGER = logging.getLogger(__name__)


class PageFetcher(Protocol):
    def fetch_matches_page(self, player_id: str) -> str: ...


@dataclass
class PlayerHeroReport:
    player_id: str
    hero_stats: List[HeroStat]
    window_label: str
    extraction: ExtractionStats = field(default_factory=ExtractionStats)

    @property
    def is_empty(self) -> bool:
        return not self.hero_stats

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "window": self.window_label,
            "heroes": [stat.to_dict() for stat in self.hero_stats],
            "extraction": self.extraction.to_dict(),
        }


class HeroStatsService:
    """Fetch a player's match page and reduce it to top-hero statistics."""

    def __init__(
        self,
        fetcher: Optional[PageFetcher] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.fetcher = fetcher or DotabuffClient()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def report_from_markup(self, player_id: str, markup: str | bytes) -> PlayerHeroReport:
        now = self.clock()
        extraction = ExtractionStats()
        hero_stats = build_hero_stats(markup, now, extraction)
        if extraction.timestamp_fallbacks:
            LOGGER.warning(
                "%d matches for %s had unparseable timestamps and were dated now",
                extraction.timestamp_fallbacks, player_id,
            )
        return PlayerHeroReport(
            player_id=player_id,
            hero_stats=hero_stats,
            window_label=window_label(now),
            extraction=extraction,
        )

    def fetch_player_stats(self, player_id: str) -> PlayerHeroReport:
        """
        Raises:
            InvalidPlayerIdError: If the player id is blank
            FetchError: If the page cannot be retrieved
            MarkupParseError: If the page cannot be parsed
        """
        cleaned = DotabuffClient.normalize_player_id(player_id)
        LOGGER.info("Starting fetch for player ID: %s", cleaned)
        markup = self.fetcher.fetch_matches_page(cleaned)
        report = self.report_from_markup(cleaned, markup)
        for stat in report.hero_stats:
            LOGGER.debug("%s: %d matches, %.1f%% WR", stat.hero_name, stat.matches_played, stat.win_rate)
        return report
