# herostats/ui.py

from typing import Any

from .service import PlayerHeroReport
from .thresholds import WINDOW_DAYS


class TerminalUI:
    """Simple terminal-based UI."""

    @staticmethod
    def format_win_rate(value: float) -> str:
        return f"{value:.1f}%"

    def render_report(self, report: PlayerHeroReport) -> None:
        """Display the top heroes table for one player."""
        print("\n" + "="*50)
        print(f"TOP HEROES - Player {report.player_id}")
        print(f"Window: {report.window_label}")
        print("="*50)

        if report.is_empty:
            print(f"No matches found in the last {WINDOW_DAYS} days.")
            print("="*50)
            return

        print(f"{'#':<4}{'Hero':<24}{'Matches':<10}{'Win %':<10}")
        print("-"*50)
        for rank, stat in enumerate(report.hero_stats, start=1):
            print(
                f"{rank:<4}{stat.hero_name:<24}{stat.matches_played:<10}"
                f"{self.format_win_rate(stat.win_rate):<10}"
            )
        print("="*50)

    def render_extraction(self, report: PlayerHeroReport) -> None:
        stats = report.extraction
        print(f"Rows scanned: {stats.rows_seen} (selector: {stats.selector or 'none'})")
        print(f"Matches extracted: {stats.records_extracted}, outside window: {stats.outside_window}")
        print(
            f"Dropped - no hero: {stats.missing_hero}, no result: {stats.missing_outcome}, "
            f"no time: {stats.missing_timestamp}"
        )
        if stats.timestamp_fallbacks:
            print(f"Warning: {stats.timestamp_fallbacks} match(es) had unreadable dates and were dated now")
        if stats.default_losses:
            print(f"Warning: {stats.default_losses} result(s) had no win/loss text and were counted as losses")

    def render_error(self, exc: Any) -> None:
        print(f"Error: {exc}")
