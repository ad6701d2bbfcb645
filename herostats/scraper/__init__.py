# herostats/scraper/__init__.py
"""
Match-list page extraction.

Heuristic cascades that locate match rows and read hero, result and time
from markup whose structure is not under our control.
"""

from .element import PageElement, SoupElement, MarkupParseError, parse_document
from .rows import locate_rows
from .hero import identify_hero
from .outcome import classify_outcome
from .core import extract_match, extract_matches
from .browser import BrowserPageFetcher

__all__ = [
    'PageElement',
    'SoupElement',
    'MarkupParseError',
    'parse_document',
    'locate_rows',
    'identify_hero',
    'classify_outcome',
    'extract_match',
    'extract_matches',
    'BrowserPageFetcher',
]
