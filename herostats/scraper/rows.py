# herostats/scraper/rows.py

import logging
from typing import List, Optional

from ..models import ExtractionStats
from .cascade import first_non_empty
from .element import PageElement

LOGGER = logging.getLogger(__name__)

# Most specific first. Results of different selectors are never merged.
ROW_SELECTORS = (
    ".matches-tab table tbody tr",
    "tbody tr",
    ".match-row",
    ".matches-tab table tr",
    "table tr",
)


def locate_rows(document: PageElement, stats: Optional[ExtractionStats] = None) -> List[PageElement]:
    """
    Return candidate match rows from the first selector that finds any.

    An empty list means the page has no recognizable rows; it is not an error.
    """
    selector, rows = first_non_empty(document, ROW_SELECTORS)
    if not rows:
        LOGGER.info("No candidate match rows found with any row selector")
        return []

    LOGGER.debug("Row selector %r matched %d candidate rows", selector, len(rows))
    if stats is not None:
        stats.selector = selector
    return rows
