# tests/test_pipeline.py

import pytest

from herostats import ExtractionStats, build_hero_stats
from herostats.scraper.element import MarkupParseError
from tests.helpers import NOW, days_ago, hero_row, match_page, match_row


class TestScenarios:

    def test_single_victory_from_image_path(self):
        html = match_page([match_row(hero_src="/heroes/juggernaut_full.png", alt="", title="",
                                     result="Victory", when=days_ago(2))])

        stats = build_hero_stats(html, NOW)

        assert len(stats) == 1
        assert stats[0].hero_name == "Juggernaut"
        assert stats[0].matches_played == 1
        assert stats[0].win_rate == 100.0

    def test_single_defeat(self):
        html = match_page([match_row(hero_src="/heroes/juggernaut_full.png", result="Defeat",
                                     when=days_ago(2))])

        stats = build_hero_stats(html, NOW)

        assert stats[0].win_rate == 0.0

    def test_old_match_excluded(self):
        html = match_page([match_row(when=days_ago(10))])
        assert build_hero_stats(html, NOW) == []

    def test_row_without_hero_image_excluded(self):
        html = match_page([
            match_row(hero_src="/assets/items/tango.png", alt="Tango"),
            hero_row("Axe"),
        ])

        stats = build_hero_stats(html, NOW)

        assert [s.hero_name for s in stats] == ["Axe"]

    def test_top_five_with_ties(self):
        singles = ["Zeus", "Axe", "Mirana", "Lion", "Tiny", "Slark", "Sniper"]
        rows = [hero_row(name) for name in singles[:3]]
        rows += [hero_row("Pudge"), hero_row("Pudge", result="Defeat")]
        rows += [hero_row(name) for name in singles[3:]]
        rows += [hero_row("Pudge")]

        stats = build_hero_stats(match_page(rows), NOW)

        assert len(stats) == 5
        assert stats[0].hero_name == "Pudge"
        assert stats[0].matches_played == 3
        assert [s.hero_name for s in stats[1:]] == ["Zeus", "Axe", "Mirana", "Lion"]
        assert build_hero_stats(match_page(rows), NOW) == stats


class TestProperties:

    @pytest.fixture
    def page(self):
        rows = []
        for i, name in enumerate(["Axe", "Lina", "Axe", "Lion", "Lina", "Axe", "Tiny", "Zeus", "Slark"]):
            rows.append(hero_row(name, result="Victory" if i % 2 else "Defeat", when=days_ago(i)))
        return match_page(rows)

    def test_sorted_and_bounded(self, page):
        stats = build_hero_stats(page, NOW)
        counts = [s.matches_played for s in stats]

        assert len(stats) <= 5
        assert counts == sorted(counts, reverse=True)
        assert all(0.0 <= s.win_rate <= 100.0 for s in stats)
        assert all(s.win_rate == 100 * s.wins / s.matches_played for s in stats)

    def test_only_window_matches_counted(self, page):
        # rows 8 days back and older fall outside the window
        counters = ExtractionStats()
        stats = build_hero_stats(page, NOW, counters)

        assert sum(s.matches_played for s in stats) <= 8
        assert counters.outside_window == 1
        assert "Slark" not in [s.hero_name for s in stats]

    def test_idempotent(self, page):
        assert build_hero_stats(page, NOW) == build_hero_stats(page, NOW)

    def test_empty_page(self):
        assert build_hero_stats("<html><body>No matches</body></html>", NOW) == []

    def test_parse_failure_propagates(self):
        with pytest.raises(MarkupParseError):
            build_hero_stats(b"\xff\xfe\xfa", NOW)
