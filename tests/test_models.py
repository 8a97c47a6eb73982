"""Tests for data models."""
import pytest
from mgnrega.core.models import Category, Coordinate, DistrictNotFound, DistrictPerformanceRecord


def test_coordinate_to_dict():
    """Test coordinate to dict."""
    assert Coordinate(18.52, 73.85).to_dict() == {"latitude": 18.52, "longitude": 73.85}


@pytest.mark.parametrize("value, expected", [
    ("Excellent", Category.EXCELLENT),
    ("good", Category.GOOD),
    ("AVERAGE", Category.AVERAGE),
    ("Needs Improvement", Category.NEEDS_IMPROVEMENT),
    ("needs_improvement", Category.NEEDS_IMPROVEMENT),
    ("NeedsImprovement", Category.NEEDS_IMPROVEMENT),
    (Category.GOOD, Category.GOOD),
    ("Outstanding", None),
    ("", None),
])
def test_category_parse(value, expected):
    """Test category parse."""
    assert Category.parse(value) is expected


def test_record_from_camel_case():
    """Test record from camel case."""
    record = DistrictPerformanceRecord.from_mapping({
        "districtName": "PUNE",
        "totalPersonDays": 1200,
        "totalExpenditure": "350000.50",
        "worksCompleted": 3,
        "worksInProgress": 1,
    })
    assert record.total_person_days == 1200
    assert record.total_expenditure == pytest.approx(350000.5)
    assert record.completion_rate == 75


def test_record_to_dict():
    """Test record to dict."""
    data = DistrictPerformanceRecord(district_name="PUNE", works_completed=1, works_in_progress=2).to_dict()
    assert data["districtName"] == "PUNE"
    assert data["completionRate"] == 33
    assert set(data) >= {"totalPersonDays", "totalExpenditure", "householdsWorked", "avgWageRate"}


def test_district_not_found_to_dict():
    """Test district not found to dict."""
    assert DistrictNotFound("Nasik", ["NASHIK"]).to_dict() == {"district_name": "Nasik", "suggestions": ["NASHIK"]}


def test_record_with_blank_district_cell():
    """Test record with blank district cell."""
    record = DistrictPerformanceRecord.from_mapping({"district_name": float("nan"), "total_persondays_generated": 10})
    assert record.district_name == ""
    assert record.total_person_days == 10
