# tests/helpers.py

from datetime import datetime, timedelta, timezone
from html import escape
from typing import Iterable, Optional

NOW = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def days_ago(days: float, now: datetime = NOW) -> str:
    """ISO timestamp ``days`` before ``now``."""
    return (now - timedelta(days=days)).isoformat()


def _attrs(**values: Optional[str]) -> str:
    parts = []
    for name, value in values.items():
        if value is None:
            continue
        parts.append(f'{name}="{escape(value, quote=True)}"')
    return " ".join(parts)


def match_row(
    hero_src: Optional[str] = "/assets/heroes/juggernaut_full.png",
    alt: Optional[str] = "",
    title: Optional[str] = "",
    result: str = "Victory",
    result_class: Optional[str] = None,
    when: Optional[str] = None,
    include_time: bool = True,
) -> str:
    """Build one match-list table row in the shape of the live page."""
    hero_cell = "<td></td>"
    if hero_src is not None:
        hero_cell = f"<td class=\"cell-icon\"><img {_attrs(src=hero_src, alt=alt, title=title)}></td>"

    result_cell = f"<td {_attrs(**{'class': result_class})}>{escape(result)}</td>"

    time_cell = "<td></td>"
    if include_time:
        stamp = when if when is not None else days_ago(2)
        time_cell = f"<td><time datetime=\"{escape(stamp, quote=True)}\">recently</time></td>"

    return f"<tr>{hero_cell}{result_cell}{time_cell}</tr>"


def hero_row(name: str, result: str = "Victory", when: Optional[str] = None) -> str:
    slug = name.lower().replace(" ", "_")
    return match_row(hero_src=f"/assets/heroes/{slug}_full.png", alt=name, result=result, when=when)


def match_page(rows: Iterable[str]) -> str:
    body = "".join(rows)
    return (
        "<html><head><title>Matches - Dotabuff</title></head><body>"
        "<div class=\"matches-tab\"><table>"
        "<thead><tr><th>Hero</th><th>Result</th><th>Date</th></tr></thead>"
        f"<tbody>{body}</tbody>"
        "</table></div></body></html>"
    )
