# herostats/pipeline.py

from datetime import datetime, timezone
from typing import List, Optional, Union

from .aggregator import aggregate
from .models import ExtractionStats, HeroStat
from .scraper.core import extract_matches


def build_hero_stats(
    markup: Union[str, bytes],
    now: Optional[datetime] = None,
    stats: Optional[ExtractionStats] = None,
) -> List[HeroStat]:
    """
    Turn match-list page markup into the top heroes of the trailing week.

    Args:
        markup: Already-fetched page markup
        now: Reference time for the window (defaults to the current UTC time)
        stats: Optional counters filled in while rows are processed

    Returns:
        Up to five HeroStat entries ordered by matches played; empty when no
        match in the window could be extracted

    Raises:
        MarkupParseError: If the markup cannot be parsed
    """
    now = now or datetime.now(timezone.utc)
    records = extract_matches(markup, now, stats)
    return aggregate(records, now)
