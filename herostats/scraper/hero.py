# herostats/scraper/hero.py

import logging
import re
from typing import Optional
from urllib.parse import urlsplit

from ..thresholds import (
    ABILITY_NAME_FRAGMENTS,
    HERO_IMAGE_SUFFIXES,
    HERO_PATH_MARKERS,
    IMAGE_EXTENSIONS,
)
from .cascade import first_accepted, first_result
from .element import PageElement

LOGGER = logging.getLogger(__name__)

# Priority order: the first accepted image across the whole list wins.
HERO_IMAGE_SELECTORS = (
    ".cell-xlarge img",
    ".r-tab-hero img",
    "td:first-child img",
    ".match-cell--hero img",
    ".cell-hero img",
    "td img[src*='heroes']",
    "img[src*='/heroes/']",
)

CLEANUP_PATTERNS = (
    re.compile(r" - .*"),
    re.compile(r"\(.*\)"),
    re.compile(r"Ability: "),
    re.compile(r"Spell: "),
)


def is_hero_image(element: PageElement) -> bool:
    src = element.attr("src")
    return any(marker in src for marker in HERO_PATH_MARKERS)


def is_ability_name(name: Optional[str]) -> bool:
    """True when the name contains a known ability or spell fragment."""
    if name is None:
        return True
    lowered = name.lower()
    return any(fragment in lowered for fragment in ABILITY_NAME_FRAGMENTS)


def _strip_image_suffixes(stem: str) -> str:
    stripped = True
    while stripped:
        stripped = False
        for suffix in HERO_IMAGE_SUFFIXES:
            if stem.lower().endswith(suffix):
                stem = stem[: -len(suffix)]
                stripped = True
    return stem


def hero_name_from_path(src: str) -> Optional[str]:
    """
    Derive a display name from an image path.

    "/assets/heroes/juggernaut_full.png" -> "Juggernaut"
    "/heroes/anti-mage_icon.png" -> "Anti Mage"
    """
    path = urlsplit(src or "").path
    for segment in path.split("/"):
        if not segment.lower().endswith(IMAGE_EXTENSIONS):
            continue
        stem = _strip_image_suffixes(segment[: segment.rfind(".")])
        words = re.sub(r"[_\-]+", " ", stem).split()
        name = " ".join(word.capitalize() for word in words)
        if len(name) > 2:
            return name
    return None


def clean_hero_name(name: str) -> str:
    for pattern in CLEANUP_PATTERNS:
        name = pattern.sub("", name)
    return name.strip()


def _usable(name: str) -> Optional[str]:
    name = (name or "").strip()
    if not name or is_ability_name(name):
        return None
    return name


def _name_from_alt(image: PageElement) -> Optional[str]:
    return _usable(image.attr("alt"))


def _name_from_title(image: PageElement) -> Optional[str]:
    return _usable(image.attr("title"))


def _name_from_src(image: PageElement) -> Optional[str]:
    return hero_name_from_path(image.attr("src"))


NAME_STRATEGIES = (
    ("alt", _name_from_alt),
    ("title", _name_from_title),
    ("path", _name_from_src),
)


def find_hero_image(row: PageElement) -> Optional[PageElement]:
    accepted = first_accepted(row, HERO_IMAGE_SELECTORS, is_hero_image)
    if accepted is None:
        return None
    selector, image = accepted
    LOGGER.debug("Hero image accepted via %r: %s", selector, image.attr("src"))
    return image


def identify_hero(row: PageElement) -> Optional[str]:
    """
    Resolve the hero name for a match row.

    The accepted hero image is read through alt text, then title, then the
    image path itself; alt and title values that look like ability names are
    skipped. Returns None when no hero image or no usable name is found.
    """
    image = find_hero_image(row)
    if image is None:
        return None

    resolved = first_result(NAME_STRATEGIES, image)
    if resolved is None:
        LOGGER.debug("Hero image %s produced no usable name", image.attr("src"))
        return None

    tier, raw_name = resolved
    name = clean_hero_name(raw_name)
    LOGGER.debug("Hero name %r resolved from %s", name, tier)
    return name or None
