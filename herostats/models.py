# herostats/models.py

from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict


class MatchResult(Enum):
    WIN = "win"
    LOSS = "loss"


@dataclass(frozen=True)
class MatchRecord:
    """One match row that yielded a hero, an outcome and a timestamp."""
    hero_name: str
    outcome: MatchResult
    occurred_at: datetime

    @property
    def is_win(self) -> bool:
        return self.outcome is MatchResult.WIN


@dataclass(frozen=True)
class HeroStat:
    """Aggregated matches for one hero inside the trailing window."""
    hero_name: str
    matches_played: int
    wins: int
    win_rate: float
    window_label: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hero": self.hero_name,
            "matches": self.matches_played,
            "wins": self.wins,
            "win_rate": self.win_rate,
        }


@dataclass
class ExtractionStats:
    """
    Counters filled in while a page is processed.

    Pass an instance into the pipeline to observe how many rows were
    discarded and how often the timestamp fallback kicked in.
    """
    rows_seen: int = 0
    records_extracted: int = 0
    missing_hero: int = 0
    missing_outcome: int = 0
    missing_timestamp: int = 0
    timestamp_fallbacks: int = 0
    default_losses: int = 0
    outside_window: int = 0
    selector: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
