# herostats/scraper/core.py

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Union

from ..models import ExtractionStats, MatchRecord
from ..thresholds import WINDOW_DAYS
from .element import PageElement, parse_document
from .hero import identify_hero
from .outcome import classify_outcome
from .rows import locate_rows

LOGGER = logging.getLogger(__name__)

TIME_SELECTOR = "time"


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def window_start(now: datetime, days: int = WINDOW_DAYS) -> datetime:
    return as_utc(now) - timedelta(days=days)


def read_timestamp(row: PageElement) -> Optional[str]:
    """Return the datetime attribute of the row's first time element, if any."""
    elements = row.select(TIME_SELECTOR)
    if not elements:
        return None
    value = elements[0].attr("datetime").strip()
    return value or None


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return as_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
    except (ValueError, OverflowError):
        # OverflowError: offsets that push year 1 or 9999 past the datetime range
        return None


def extract_match(
    row: PageElement,
    now: datetime,
    stats: Optional[ExtractionStats] = None,
) -> Optional[MatchRecord]:
    """
    Build a match record from one candidate row.

    Rows without a hero, a result indicator or a time element are dropped
    silently; they are usually headers, ads or pagination. A datetime value
    that does not parse is replaced by ``now`` so the match is still counted.
    """
    stats = stats if stats is not None else ExtractionStats()

    hero_name = identify_hero(row)
    if hero_name is None:
        stats.missing_hero += 1
        LOGGER.debug("Row dropped: no hero image")
        return None

    raw_timestamp = read_timestamp(row)
    if raw_timestamp is None:
        stats.missing_timestamp += 1
        LOGGER.debug("Row dropped: %s has no datetime", hero_name)
        return None

    outcome = classify_outcome(row, stats)
    if outcome is None:
        stats.missing_outcome += 1
        LOGGER.debug("Row dropped: %s has no result indicator", hero_name)
        return None

    occurred_at = parse_timestamp(raw_timestamp)
    if occurred_at is None:
        stats.timestamp_fallbacks += 1
        LOGGER.warning("Unparseable datetime %r for %s; using current time", raw_timestamp, hero_name)
        occurred_at = as_utc(now)

    stats.records_extracted += 1
    return MatchRecord(hero_name=hero_name, outcome=outcome, occurred_at=occurred_at)


def extract_matches(
    markup: Union[str, bytes],
    now: datetime,
    stats: Optional[ExtractionStats] = None,
) -> List[MatchRecord]:
    """
    Parse a match-list page and return the records inside the trailing window.

    Raises:
        MarkupParseError: If the markup cannot be parsed at all
    """
    stats = stats if stats is not None else ExtractionStats()
    document = parse_document(markup)
    rows = locate_rows(document, stats)
    cutoff = window_start(now)

    matches: List[MatchRecord] = []
    for index, row in enumerate(rows):
        stats.rows_seen += 1
        record = extract_match(row, now, stats)
        if record is None:
            continue
        if record.occurred_at < cutoff:
            stats.outside_window += 1
            LOGGER.debug("Row %d (%s) is older than %s, skipping", index, record.hero_name, cutoff.date())
            continue
        matches.append(record)

    LOGGER.info(
        "Extracted %d matches in window from %d candidate rows", len(matches), stats.rows_seen
    )
    return matches
