"""Fetch the dataset from the API and print the dashboard charts as JSON.

Usage:
  python backend/scripts/dashboard_report.py --region Asia --topic oil
  python backend/scripts/dashboard_report.py --api-url http://localhost:5000 --options
"""
import sys, pathlib
# ensure backend/ is importable
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

import argparse
import asyncio
import json
import math
from functools import partial

from models.record_models import FACETS
from services.dashboard import Dashboard
from services.data_client import fetch_all_records
from utils import config
from utils.logging_config import configure_logging


def _fmt(value: float) -> str:
    # One decimal like the summary cards; an empty selection shows NaN
    return "NaN" if math.isnan(value) else f"{value:.1f}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--api-url", default=config.DATA_API_URL)
    parser.add_argument("--delay", type=float, default=None, help="Seconds to show charts as loading")
    parser.add_argument("--options", action="store_true", help="Print facet option lists and exit")
    parser.add_argument("--points", action="store_true", help="Include scatter points in the output")
    for facet in FACETS:
        parser.add_argument(f"--{facet}", default="")
    return parser


async def run(args: argparse.Namespace) -> int:
    dashboard = Dashboard(
        fetch_records=partial(fetch_all_records, args.api_url),
        chart_delay=args.delay,
    )
    await dashboard.load()

    if dashboard.error:
        print(dashboard.error, file=sys.stderr)
        return 1

    if args.options:
        print(json.dumps(dashboard.options.model_dump(), indent=2))
        return 0

    for facet in FACETS:
        dashboard.set_filter(facet, getattr(args, facet))
    await dashboard.refresh_charts()

    snapshot = dashboard.snapshot()
    derived = snapshot.derived
    summary = derived.summary

    print(f"Total Records:      {summary.total_records:,}")
    print(f"Average Intensity:  {_fmt(summary.avg_intensity)}")
    print(f"Average Relevance:  {_fmt(summary.avg_relevance)}")
    print(f"Average Likelihood: {_fmt(summary.avg_likelihood)}")
    chips = ", ".join(f"{k}: {v}" for k, v in snapshot.active_filters.items())
    print("Active Filters:", chips or "No active filters")

    exclude = None if args.points else {"scatter_points", "summary"}
    print(json.dumps(derived.model_dump(exclude=exclude), indent=2, default=str))
    return 0


def main() -> int:
    configure_logging()
    args = build_parser().parse_args()
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
