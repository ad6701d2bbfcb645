# herostats/aggregator.py

from datetime import datetime
from typing import Dict, List, Sequence

from .models import HeroStat, MatchRecord
from .scraper.core import as_utc, window_start
from .thresholds import TOP_HERO_COUNT


def _short_date(value: datetime) -> str:
    return f"{value.month}/{value.day}/{value:%y}"


def window_label(now: datetime) -> str:
    """Short date range for the trailing window, e.g. '1/8/25 - 1/15/25'."""
    return f"{_short_date(window_start(now))} - {_short_date(as_utc(now))}"


def aggregate(records: Sequence[MatchRecord], now: datetime, limit: int = TOP_HERO_COUNT) -> List[HeroStat]:
    """
    Group records by hero and rank heroes by matches played.

    Heroes with equal match counts keep the order in which they first
    appear in ``records``.
    """
    if not records:
        return []

    groups: Dict[str, List[MatchRecord]] = {}
    for record in records:
        groups.setdefault(record.hero_name, []).append(record)

    label = window_label(now)
    stats = []
    for hero_name, matches in groups.items():
        wins = sum(1 for match in matches if match.is_win)
        stats.append(HeroStat(
            hero_name=hero_name,
            matches_played=len(matches),
            wins=wins,
            win_rate=100 * wins / len(matches),
            window_label=label,
        ))

    # sorted() is stable, dict preserves first-seen order
    stats = sorted(stats, key=lambda stat: stat.matches_played, reverse=True)
    return stats[:limit]
