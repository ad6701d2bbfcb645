# tests/test_ui.py

from herostats.models import ExtractionStats, HeroStat
from herostats.service import PlayerHeroReport
from herostats.ui import TerminalUI


def _report(stats):
    return PlayerHeroReport(
        player_id="44764606",
        hero_stats=stats,
        window_label="1/8/25 - 1/15/25",
        extraction=ExtractionStats(rows_seen=4, records_extracted=3, timestamp_fallbacks=1),
    )


def test_render_report(capsys):
    stats = [
        HeroStat("Axe", 3, 2, 100 * 2 / 3, "1/8/25 - 1/15/25"),
        HeroStat("Juggernaut", 1, 1, 100.0, "1/8/25 - 1/15/25"),
    ]

    TerminalUI().render_report(_report(stats))
    out = capsys.readouterr().out

    assert "1/8/25 - 1/15/25" in out
    assert "Axe" in out and "66.7%" in out
    assert out.index("Axe") < out.index("Juggernaut")
    assert "100.0%" in out


def test_render_empty_report(capsys):
    TerminalUI().render_report(_report([]))
    assert "No matches found in the last 7 days." in capsys.readouterr().out


def test_render_extraction_warns_on_fallbacks(capsys):
    TerminalUI().render_extraction(_report([]))
    assert "unreadable dates" in capsys.readouterr().out


def test_format_win_rate():
    assert TerminalUI.format_win_rate(50) == "50.0%"
