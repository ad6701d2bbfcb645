# herostats/scraper/outcome.py

import logging
from typing import Optional

from ..models import ExtractionStats, MatchResult
from ..thresholds import LOSS_KEYWORDS, RESULT_KEYWORDS, WIN_KEYWORDS
from .cascade import first_accepted
from .element import PageElement

LOGGER = logging.getLogger(__name__)

# Elements must carry a result keyword in their text or class to be accepted.
RESULT_SELECTORS = (
    ".match-result",
    ".cell-result",
    ".match-cell--result",
    "td:nth-child(2)",
    "td:nth-child(3)",
    ".won",
    ".lost",
    "td[class*='won']",
    "td[class*='lost']",
    "td",
)

# Colour hints, accepted without any keyword.
COLOR_SELECTORS = (
    "td[style*='green']",
    "td[style*='red']",
    ".text-success",
    ".text-danger",
    ".text-green",
    ".text-red",
)


def _contains_any(value: str, keywords) -> bool:
    return any(keyword in value for keyword in keywords)


def has_result_keyword(element: PageElement) -> bool:
    text = element.text().lower()
    classes = element.attr("class").lower()
    return _contains_any(text, RESULT_KEYWORDS) or _contains_any(classes, RESULT_KEYWORDS)


def find_result_element(row: PageElement) -> Optional[PageElement]:
    accepted = first_accepted(row, RESULT_SELECTORS, has_result_keyword)
    if accepted is None:
        accepted = first_accepted(row, COLOR_SELECTORS)
    if accepted is None:
        return None
    selector, element = accepted
    LOGGER.debug("Result element accepted via %r", selector)
    return element


def classify_element(element: PageElement, stats: Optional[ExtractionStats] = None) -> MatchResult:
    """
    Read a win or loss off an accepted result element.

    Text is checked before class, win keywords before loss keywords. An
    element with no keyword at all (a colour-only hint) is counted as a loss.
    """
    text = element.text().lower()
    classes = element.attr("class").lower()

    if _contains_any(text, WIN_KEYWORDS):
        return MatchResult.WIN
    if _contains_any(text, LOSS_KEYWORDS):
        return MatchResult.LOSS
    if _contains_any(classes, WIN_KEYWORDS):
        return MatchResult.WIN
    if _contains_any(classes, LOSS_KEYWORDS):
        return MatchResult.LOSS

    # Colour-only hits land here.
    LOGGER.warning(
        "Could not determine win/loss from text %r or class %r; defaulting to loss", text, classes
    )
    if stats is not None:
        stats.default_losses += 1
    return MatchResult.LOSS


def classify_outcome(row: PageElement, stats: Optional[ExtractionStats] = None) -> Optional[MatchResult]:
    """Return WIN or LOSS for a row, or None when no result indicator exists."""
    element = find_result_element(row)
    if element is None:
        return None
    return classify_element(element, stats)
