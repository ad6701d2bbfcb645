# main.py

import argparse
import logging
from pathlib import Path

from herostats.api_client import DotabuffClient, FetchError, InvalidPlayerIdError
from herostats.scraper import BrowserPageFetcher, MarkupParseError
from herostats.service import HeroStatsService
from herostats.ui import TerminalUI


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Top heroes played in the last 7 days")
    parser.add_argument("player_id", nargs="?", default="", help="Dotabuff player ID (e.g. 44764606)")
    parser.add_argument("--html", help="Read a saved match-list page instead of fetching")
    parser.add_argument("--browser", action="store_true", help="Fetch with headless Chromium (Playwright)")
    parser.add_argument("--timeout", type=int, default=20, help="HTTP timeout in seconds")
    parser.add_argument("--details", action="store_true", help="Show extraction counters")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    ui = TerminalUI()
    fetcher = BrowserPageFetcher() if args.browser else DotabuffClient(timeout_seconds=args.timeout)
    service = HeroStatsService(fetcher)

    try:
        if args.html:
            path = Path(args.html)
            if not path.exists():
                print(f"File not found: {args.html}")
                return 1
            report = service.report_from_markup(args.player_id or path.stem, path.read_bytes())
        else:
            report = service.fetch_player_stats(args.player_id)
    except (InvalidPlayerIdError, FetchError, MarkupParseError) as exc:
        ui.render_error(exc)
        return 1

    ui.render_report(report)
    if args.details:
        ui.render_extraction(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
