"""
District leaderboard: scoring, categorization and ranking.

Score formula (0-100):
    score = (person_days / max_person_days * 0.6
             + expenditure / max_expenditure * 0.4) * 100

Both maxima are taken over the districts being ranked and floored at 1,
so a dataset of all zeros scores every district 0 instead of dividing by
zero. Categories use fixed thresholds: 80 Excellent, 60 Good,
40 Average, below that Needs Improvement.

Every query in this module works on the output of build_leaderboard so
that a district's score is only ever computed in one place.
"""
import math
from typing import Iterable, List, Sequence, Union

from mgnrega.core.aggregation import Row, aggregate_by_district
from mgnrega.core.fuzzy import fuzzy_match
from mgnrega.core.models import Category, DistrictNotFound, DistrictPerformanceRecord, LeaderboardEntry
from mgnrega.utils.logging import log_structured
from mgnrega.utils.timing import time_function

PERSON_DAYS_WEIGHT = 0.6
EXPENDITURE_WEIGHT = 0.4

# Evaluated high to low, first match wins
CATEGORY_THRESHOLDS = (
    (80.0, Category.EXCELLENT),
    (60.0, Category.GOOD),
    (40.0, Category.AVERAGE),
)

SUGGESTION_LIMIT = 3
SUGGESTION_THRESHOLD = 0.6


def round2(value: float) -> float:
    """Round half up to two decimals."""
    return math.floor(value * 100 + 0.5) / 100


def compute_score(
    record: DistrictPerformanceRecord,
    max_person_days: float,
    max_expenditure: float
) -> float:
    """
    Weighted, normalized score of one aggregated district.

    Args:
        record: Aggregated district metrics
        max_person_days: Largest person-days among ranked districts (>= 1)
        max_expenditure: Largest expenditure among ranked districts (>= 1)

    Returns:
        Score in [0, 100], rounded to two decimals
    """
    person_days_ratio = record.total_person_days / max_person_days
    expenditure_ratio = record.total_expenditure / max_expenditure
    raw = (person_days_ratio * PERSON_DAYS_WEIGHT + expenditure_ratio * EXPENDITURE_WEIGHT) * 100
    return round2(raw)


def categorize(score: float) -> Category:
    """Map a score to its performance category."""
    for threshold, category in CATEGORY_THRESHOLDS:
        if score >= threshold:
            return category
    return Category.NEEDS_IMPROVEMENT


@time_function
def build_leaderboard(rows: Iterable[Row]) -> List[LeaderboardEntry]:
    """
    Rank districts from raw performance rows of one reporting period.

    Args:
        rows: DistrictPerformanceRecord instances or raw mappings; several
            rows per district are aggregated first

    Returns:
        Entries sorted by score descending with ranks 1..N. Districts with
        equal scores keep their first-appearance order. Empty input gives
        an empty list.
    """
    districts = aggregate_by_district(rows)
    if not districts:
        log_structured("info", "Leaderboard built", districts=0)
        return []

    max_person_days = max(max(d.total_person_days for d in districts), 1.0)
    max_expenditure = max(max(d.total_expenditure for d in districts), 1.0)

    scored = [
        (compute_score(district, max_person_days, max_expenditure), district)
        for district in districts
    ]
    # sorted() is stable, equal scores keep grouping order
    scored = sorted(scored, key=lambda item: item[0], reverse=True)

    leaderboard = [
        LeaderboardEntry(
            rank=position,
            district_name=district.district_name,
            score=score,
            category=categorize(score),
            metrics=district,
        )
        for position, (score, district) in enumerate(scored, start=1)
    ]

    log_structured(
        "info",
        "Leaderboard built",
        districts=len(leaderboard),
        top_district=leaderboard[0].district_name,
        top_score=leaderboard[0].score,
    )
    return leaderboard


def suggest_districts(leaderboard: Sequence[LeaderboardEntry], district_name: str) -> List[str]:
    """Closest district names on the leaderboard, best first."""
    names = [entry.district_name for entry in leaderboard]
    matches = fuzzy_match(district_name, names, threshold=SUGGESTION_THRESHOLD, limit=SUGGESTION_LIMIT)
    return [name for name, _, _ in matches]


def rank_of(
    leaderboard: Sequence[LeaderboardEntry],
    district_name: str
) -> Union[LeaderboardEntry, DistrictNotFound]:
    """
    Look up a district by its exact name, ignoring case and surrounding spaces.

    Returns:
        The matching entry, or DistrictNotFound carrying name suggestions
    """
    wanted = (district_name or "").strip().lower()
    if wanted:
        for entry in leaderboard:
            if entry.district_name.lower() == wanted:
                return entry

    # Suggestions tolerate stray inner whitespace
    cleaned = " ".join((district_name or "").split())
    return DistrictNotFound(
        district_name=district_name,
        suggestions=suggest_districts(leaderboard, cleaned) if cleaned else [],
    )


def top_n(leaderboard: Sequence[LeaderboardEntry], n: int) -> List[LeaderboardEntry]:
    """First n entries; n is clamped to [0, len(leaderboard)]."""
    n = max(0, min(int(n), len(leaderboard)))
    return list(leaderboard[:n])


def by_category(
    leaderboard: Sequence[LeaderboardEntry],
    category: Union[str, Category]
) -> List[LeaderboardEntry]:
    """Entries in the given category (label or name, any case), in rank order."""
    wanted = Category.parse(category)
    if wanted is None:
        return []
    return [entry for entry in leaderboard if entry.category is wanted]


def percentile_of(
    leaderboard: Sequence[LeaderboardEntry],
    district_name: str
) -> Union[float, DistrictNotFound]:
    """
    Share of districts ranked at or below this one, as a percentage.

    The top district is at 100.0, the last one at 100 / N.
    """
    found = rank_of(leaderboard, district_name)
    if isinstance(found, DistrictNotFound):
        return found
    total = len(leaderboard)
    return round((total - found.rank + 1) / total * 100, 1)
