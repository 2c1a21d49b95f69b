"""Print an insights report for one user as JSON.

Usage:
    aura-insights dashboard --user demo-user
    aura-insights mood-trends --user demo-user --days 14
    aura-insights focus-stats --user demo-user --period month
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from aura_insights.config.settings import LOG_LEVEL, MOOD_TREND_DAYS, STATS_PERIOD_DAYS
from aura_insights.service import InsightsService
from aura_insights.store.redis_store import RedisRecordStore

REPORTS = (
    "dashboard",
    "weekly-summary",
    "productivity-patterns",
    "mood-trends",
    "focus-stats",
    "journal-stats",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aura-insights", description=__doc__.splitlines()[0])
    parser.add_argument("report", choices=REPORTS)
    parser.add_argument("--user", required=True, help="user id")
    parser.add_argument("--days", type=int, default=MOOD_TREND_DAYS,
                        help="mood-trends lookback in days")
    parser.add_argument("--period", choices=sorted(STATS_PERIOD_DAYS), default="week",
                        help="focus-stats period")
    return parser


async def run_report(service: InsightsService, args: argparse.Namespace) -> dict:
    if args.report == "dashboard":
        report = await service.dashboard(args.user)
    elif args.report == "weekly-summary":
        report = await service.weekly_summary(args.user)
    elif args.report == "productivity-patterns":
        report = await service.productivity_patterns(args.user)
    elif args.report == "mood-trends":
        report = await service.mood_trends(args.user, days=args.days)
    elif args.report == "focus-stats":
        report = await service.focus_stats(args.user, period=args.period)
    else:
        report = await service.journal_stats(args.user)
    return report.model_dump(exclude_none=True)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s  %(levelname)-7s  %(name)-22s  %(message)s",
        datefmt="%H:%M:%S",
    )

    service = InsightsService(RedisRecordStore())
    payload = asyncio.run(run_report(service, args))
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
