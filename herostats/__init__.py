# herostats/__init__.py
"""
Top-played hero statistics extracted from a player's match-list page.
"""

from .models import ExtractionStats, HeroStat, MatchRecord, MatchResult
from .pipeline import build_hero_stats

__all__ = [
    'ExtractionStats',
    'HeroStat',
    'MatchRecord',
    'MatchResult',
    'build_hero_stats',
]
