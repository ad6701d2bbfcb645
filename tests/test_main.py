# tests/test_main.py

from datetime import datetime, timedelta, timezone

import main as cli
from tests.helpers import hero_row, match_page


def _recent(days: int) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=days)).isoformat()


def test_saved_page(tmp_path, capsys):
    page = tmp_path / "44764606.html"
    page.write_text(
        match_page([hero_row("Axe", when=_recent(1)), hero_row("Lina", result="Defeat", when=_recent(2))]),
        encoding="utf-8",
    )

    assert cli.main(["--html", str(page), "--details"]) == 0
    out = capsys.readouterr().out

    assert "Player 44764606" in out
    assert "Axe" in out and "100.0%" in out
    assert "Lina" in out and "0.0%" in out
    assert "Rows scanned: 2" in out


def test_missing_saved_page(tmp_path, capsys):
    assert cli.main(["--html", str(tmp_path / "nope.html")]) == 1
    assert "File not found" in capsys.readouterr().out


def test_blank_player_id(capsys):
    assert cli.main([]) == 1
    assert "valid player ID" in capsys.readouterr().out


def test_undecodable_saved_page(tmp_path, capsys):
    page = tmp_path / "bad.html"
    page.write_bytes(b"\xff\xfe\xfa")

    assert cli.main(["--html", str(page)]) == 1
    assert "Error:" in capsys.readouterr().out
