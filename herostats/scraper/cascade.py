# herostats/scraper/cascade.py
"""
Ordered fallback chains.

A cascade is a sequence of strategies tried in priority order; each returns a
candidate or None, and the first non-None candidate wins. Later strategies
never run once an earlier one has produced something.
"""

from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from .element import PageElement

Strategy = Callable[..., Optional[Any]]


def first_result(
    strategies: Iterable[Tuple[str, Strategy]], *args: Any
) -> Optional[Tuple[str, Any]]:
    """Run named strategies in order; return ``(name, result)`` for the first non-None result."""
    for name, strategy in strategies:
        result = strategy(*args)
        if result is not None:
            return name, result
    return None


def first_accepted(
    root: PageElement,
    selectors: Sequence[str],
    accept: Callable[[PageElement], bool] = lambda _el: True,
) -> Optional[Tuple[str, PageElement]]:
    """
    Scan selectors in order and return the first element that ``accept`` allows.

    Matched elements of one selector are checked in document order before the
    next selector is tried. Returns ``(selector, element)`` or None.
    """
    for selector in selectors:
        for element in root.select(selector):
            if accept(element):
                return selector, element
    return None


def first_non_empty(root: PageElement, selectors: Sequence[str]) -> Tuple[str, List[PageElement]]:
    """Return the first selector with at least one match, and its matches."""
    for selector in selectors:
        found = root.select(selector)
        if found:
            return selector, found
    return "", []
