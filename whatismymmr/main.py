"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from whatismymmr.config import settings
from whatismymmr.core.logging import bootstrap_logging, shutdown_logging
from whatismymmr.domain import Region
from whatismymmr.presentation.cli import DistributionCommand, SummonerCommand


def build_parser() -> argparse.ArgumentParser:
    regions = ", ".join(r.value for r in Region.all_regions())
    parser = argparse.ArgumentParser(
        prog="whatismymmr",
        description="Look up League of Legends MMR estimates on whatismymmr.com",
    )
    parser.add_argument("--log-level", default=None, help=f"log level (default: {settings.LOG_LEVEL})")
    parser.add_argument("--log-dir", type=Path, default=None, help="write JSON-lines logs to this directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="also log to the console")

    sub = parser.add_subparsers(dest="command", required=True)

    p_summoner = sub.add_parser("summoner", help="MMR estimates of one summoner")
    p_summoner.add_argument("name", help="summoner name (sent as-is, pre-encode reserved characters)")
    p_summoner.add_argument("--region", "-r", default=None, help=f"one of {regions} (default: {settings.DEFAULT_REGION})")
    p_summoner.add_argument("--json", action="store_true", help="print the raw payload as JSON")

    p_dist = sub.add_parser("distribution", help="global MMR distribution of a region")
    p_dist.add_argument("--region", "-r", default=None, help=f"one of {regions} (default: {settings.DEFAULT_REGION})")
    p_dist.add_argument("--json", action="store_true", help="print the raw payload as JSON")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings.validate()
    bootstrap_logging(
        level=args.log_level or settings.LOG_LEVEL,
        console=True if args.verbose else None,
        log_dir=args.log_dir or settings.LOG_DIR,
    )
    try:
        if args.command == "summoner":
            return asyncio.run(SummonerCommand(json_out=args.json).run(args.name, args.region))
        return asyncio.run(DistributionCommand(json_out=args.json).run(args.region))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
