"""Tests for leaderboard scoring and ranking."""
import pytest

from mgnrega.core.leaderboard import (
    build_leaderboard,
    by_category,
    categorize,
    compute_score,
    percentile_of,
    rank_of,
    round2,
    top_n,
)
from mgnrega.core.models import Category, DistrictNotFound, DistrictPerformanceRecord, LeaderboardEntry


def _record(name, person_days, expenditure):
    return DistrictPerformanceRecord(
        district_name=name, total_person_days=person_days, total_expenditure=expenditure
    )


@pytest.fixture
def leaderboard(monthly_rows):
    return build_leaderboard(monthly_rows)


def test_person_days_versus_expenditure_scenario(scenario_rows):
    """Test person days versus expenditure scenario."""
    board = build_leaderboard(scenario_rows)

    assert [(e.rank, e.district_name) for e in board] == [(1, "B"), (2, "A")]
    assert board[0].score == pytest.approx(70.00)
    assert board[1].score == pytest.approx(60.00)
    assert board[0].category is Category.GOOD
    assert board[1].category is Category.GOOD


def test_empty_input_gives_empty_leaderboard():
    """Test empty input gives empty leaderboard."""
    assert build_leaderboard([]) == []


def test_ranks_are_contiguous(leaderboard):
    """Test ranks are contiguous."""
    assert len(leaderboard) == 3
    assert [e.rank for e in leaderboard] == [1, 2, 3]
    assert all(isinstance(e, LeaderboardEntry) for e in leaderboard)


def test_scores_within_bounds_and_leader_scores_100(leaderboard):
    """Test scores within bounds and leader scores 100."""
    assert all(0 <= e.score <= 100 for e in leaderboard)
    leader = leaderboard[0]
    assert leader.district_name == "PUNE"
    assert leader.score == 100.0
    assert leader.category is Category.EXCELLENT


def test_aggregated_metrics_are_attached(leaderboard):
    """Test aggregated metrics are attached."""
    pune = leaderboard[0]
    assert pune.metrics.total_person_days == 100000
    assert pune.metrics.households_worked == 1500


def test_category_thresholds():
    """Test category thresholds."""
    assert categorize(100) is Category.EXCELLENT
    assert categorize(80) is Category.EXCELLENT
    assert categorize(79.99) is Category.GOOD
    assert categorize(60) is Category.GOOD
    assert categorize(40) is Category.AVERAGE
    assert categorize(39.99) is Category.NEEDS_IMPROVEMENT
    assert categorize(0) is Category.NEEDS_IMPROVEMENT


def test_all_zero_metrics_score_zero():
    """Test all zero metrics score zero."""
    board = build_leaderboard([_record("X", 0, 0), _record("Y", 0, 0)])
    assert [e.score for e in board] == [0.0, 0.0]
    assert [e.district_name for e in board] == ["X", "Y"]
    assert all(e.category is Category.NEEDS_IMPROVEMENT for e in board)


def test_ties_keep_input_order():
    """Test ties keep input order."""
    rows = [_record("LOW", 10, 10), _record("FIRST", 50, 50), _record("SECOND", 50, 50), _record("TOP", 100, 100)]
    board = build_leaderboard(rows)

    assert [e.district_name for e in board] == ["TOP", "FIRST", "SECOND", "LOW"]
    assert board[1].score == board[2].score
    assert [e.rank for e in board] == [1, 2, 3, 4]


def test_compute_score_and_rounding():
    """Test compute score and rounding."""
    assert compute_score(_record("X", 1, 1), 3, 3) == pytest.approx(33.33)
    assert compute_score(_record("X", 2, 2), 3, 3) == pytest.approx(66.67)
    assert round2(12.3456) == pytest.approx(12.35)
    assert round2(0.125) == pytest.approx(0.13)
    assert round2(0.0) == 0.0


def test_top_n(leaderboard):
    """Test top_n clamping."""
    assert top_n(leaderboard, 2) == leaderboard[:2]
    assert top_n(leaderboard, 10) == leaderboard
    assert top_n(leaderboard, 0) == []
    assert top_n(leaderboard, -3) == []


def test_top_3_matches_full_order(scenario_rows):
    """Test top_n(3) matches the full order."""
    board = build_leaderboard(scenario_rows)
    assert top_n(board, 3) == board


def test_rank_of_is_case_insensitive(leaderboard):
    """Test rank_of is case insensitive."""
    entry = rank_of(leaderboard, "nashik")
    assert isinstance(entry, LeaderboardEntry)
    assert entry.district_name == "NASHIK"
    assert entry.rank == 2


def test_rank_of_unknown_district(leaderboard):
    """Test rank_of unknown district."""
    result = rank_of(leaderboard, "Unknown District")
    assert isinstance(result, DistrictNotFound)
    assert result.district_name == "Unknown District"


def test_rank_of_suggests_close_names(leaderboard):
    """Test rank_of suggests close names."""
    result = rank_of(leaderboard, "Nasik")
    assert isinstance(result, DistrictNotFound)
    assert result.suggestions[0] == "NASHIK"


def test_rank_of_on_empty_leaderboard():
    """Test rank_of on empty leaderboard."""
    assert isinstance(rank_of([], "PUNE"), DistrictNotFound)
    assert rank_of([], "").suggestions == []


def test_by_category(leaderboard):
    """Test by_category filtering."""
    categories = {e.district_name: e.category for e in leaderboard}
    excellent = by_category(leaderboard, "excellent")

    assert [e.district_name for e in excellent] == [n for n, c in categories.items() if c is Category.EXCELLENT]
    assert by_category(leaderboard, Category.EXCELLENT) == excellent
    assert by_category(leaderboard, "NEEDS IMPROVEMENT") == by_category(leaderboard, "needs_improvement")
    assert by_category(leaderboard, "legendary") == []


def test_percentile(leaderboard):
    """Test percentile_of."""
    assert percentile_of(leaderboard, "PUNE") == 100.0
    assert percentile_of(leaderboard, "thane") == pytest.approx(33.3)
    assert isinstance(percentile_of(leaderboard, "Nowhere"), DistrictNotFound)


def test_entry_serialization(scenario_rows):
    """Test entry serialization."""
    data = build_leaderboard(scenario_rows)[0].to_dict()
    assert data["rank"] == 1
    assert data["districtName"] == "B"
    assert data["category"] == "Good"
    assert data["metrics"]["totalExpenditure"] == 100000000


def test_rank_of_tolerates_extra_whitespace(leaderboard):
    """Test rank_of tolerates extra whitespace."""
    assert rank_of(leaderboard, "  Pune ").district_name == "PUNE"


@pytest.mark.parametrize("name", [
    "MUMBAI (SUBURBAN)",
    "DADRA & NAGAR HAVELI",
    "NORTH  GOA",
    "X" * 101,
])
def test_rank_of_finds_entry_by_its_own_name(name):
    """Test rank_of finds entry by its own name."""
    board = build_leaderboard([_record("PUNE", 5, 5), _record(name, 1, 1)])

    entry = rank_of(board, name)
    assert isinstance(entry, LeaderboardEntry)
    assert entry.district_name == name
    assert entry.rank == 2
    assert rank_of(board, name.lower()) == entry
    assert percentile_of(board, name) == 50.0


def test_rank_of_does_not_collapse_inner_whitespace():
    """Test rank_of does not collapse inner whitespace."""
    board = build_leaderboard([_record("NORTH GOA", 1, 1)])
    result = rank_of(board, "NORTH  GOA")
    assert isinstance(result, DistrictNotFound)
    assert result.suggestions == ["NORTH GOA"]
