# herostats/scraper/element.py
"""
Minimal tree-element interface the extraction heuristics are written against.

Every heuristic only needs three capabilities from a DOM node: read an
attribute, read its visible text, and select descendants with a CSS
selector. BeautifulSoup backs the interface here; any other HTML library can
be plugged in by implementing ``PageElement``.
"""

from __future__ import annotations

from typing import List, Protocol, Union

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup


class MarkupParseError(Exception):
    """Raised when page markup cannot be turned into a document tree."""


class PageElement(Protocol):
    def attr(self, name: str) -> str: ...

    def text(self) -> str: ...

    def select(self, selector: str) -> List["PageElement"]: ...


class SoupElement:
    """``PageElement`` backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def attr(self, name: str) -> str:
        value = self._tag.get(name)
        if value is None:
            return ""
        # bs4 returns multi-valued attributes (class, rel) as lists
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)

    def text(self) -> str:
        return self._tag.get_text(" ", strip=True)

    def select(self, selector: str) -> List["SoupElement"]:
        return [SoupElement(tag) for tag in self._tag.select(selector)]

    def __repr__(self) -> str:
        return f"SoupElement(<{self._tag.name}>)"


def parse_document(markup: Union[str, bytes], parser: str = "html.parser") -> SoupElement:
    """
    Parse page markup into the root ``PageElement``.

    Args:
        markup: Page markup as text, or raw UTF-8 bytes
        parser: BeautifulSoup tree builder name

    Returns:
        Root element of the parsed document

    Raises:
        MarkupParseError: If the markup is missing, not UTF-8, or rejected by the parser
    """
    if markup is None:
        raise MarkupParseError("No markup supplied")

    if isinstance(markup, (bytes, bytearray)):
        try:
            markup = bytes(markup).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MarkupParseError(f"Markup is not valid UTF-8: {exc}") from exc

    if not isinstance(markup, str):
        raise MarkupParseError(f"Unsupported markup type: {type(markup).__name__}")

    try:
        soup = BeautifulSoup(markup, parser)
    except ParserRejectedMarkup as exc:
        raise MarkupParseError(f"Parser rejected markup: {exc}") from exc

    return SoupElement(soup)
