"""Script to rank districts from a CSV export of monthly MGNREGA performance rows."""
import argparse
import json
import sys
from pathlib import Path
import pandas as pd

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mgnrega.core.config import ENVIRONMENT, LOG_LEVEL, SENTRY_DSN
from mgnrega.core.leaderboard import build_leaderboard, by_category, percentile_of, rank_of, top_n
from mgnrega.core.models import DistrictNotFound
from mgnrega.core.normalization import normalize_district_name
from mgnrega.core.security import sanitize_district_name
from mgnrega.core.translation import get_category_label, get_district_name
from mgnrega.utils.error_tracking import setup_error_tracking
from mgnrega.utils.logging import log_error, setup_logging


def load_rows(csv_path: Path):
    """Read raw rows, drop rows without a district and canonicalize district names."""
    df = pd.read_csv(csv_path)
    district_columns = [c for c in ("district_name", "districtName", "district") if c in df.columns]
    if district_columns:
        df = df.dropna(subset=district_columns, how="all")
    rows = df.to_dict(orient="records")
    for row in rows:
        for column in district_columns:
            if isinstance(row[column], str):
                row[column] = normalize_district_name(row[column]) or row[column]
    return rows


def print_entries(entries, language: str):
    for entry in entries:
        name = get_district_name(entry.district_name, language)
        label = get_category_label(entry.category, language)
        print(f"{entry.rank:>3}. {name:<30} {entry.score:>6.2f}  {label}")


def main():
    parser = argparse.ArgumentParser(description="Build district performance leaderboard")
    parser.add_argument("csv_path", type=Path, help="CSV with one row per district per month")
    parser.add_argument("--top", type=int, help="Show only the first N districts")
    parser.add_argument("--category", help="Show only districts in this category")
    parser.add_argument("--district", help="Show rank and percentile of one district")
    parser.add_argument("--language", choices=["en", "mr"], default="en", help="Display language")
    parser.add_argument("--json", action="store_true", help="Print entries as JSON")

    args = parser.parse_args()

    setup_logging(LOG_LEVEL)
    setup_error_tracking(SENTRY_DSN, ENVIRONMENT)

    try:
        leaderboard = build_leaderboard(load_rows(args.csv_path))
    except (OSError, pd.errors.ParserError) as e:
        log_error(e, {"csv_path": str(args.csv_path)})
        sys.exit(1)

    if args.district:
        district = sanitize_district_name(args.district)
        if district is None:
            parser.error(f"Invalid district name: {args.district!r}")
        district = normalize_district_name(district) or district
        found = rank_of(leaderboard, district)
        if isinstance(found, DistrictNotFound):
            hint = f" Did you mean: {', '.join(found.suggestions)}?" if found.suggestions else ""
            print(f"No ranking available for {args.district}.{hint}")
            sys.exit(1)
        print_entries([found], args.language)
        print(f"Percentile: {percentile_of(leaderboard, district)}")
        return

    entries = leaderboard
    if args.category:
        entries = by_category(entries, args.category)
    if args.top is not None:
        entries = top_n(entries, args.top)

    if args.json:
        print(json.dumps([entry.to_dict() for entry in entries], ensure_ascii=False, indent=2))
    else:
        print_entries(entries, args.language)


if __name__ == "__main__":
    main()
