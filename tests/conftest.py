"""Pytest configuration and fixtures."""
import pytest
from mgnrega.core.models import AdministrativeFields, DistrictPerformanceRecord
from mgnrega.geocoders.base import ReverseGeocoder


class FakeGeocoder(ReverseGeocoder):
    """Provider returning a canned payload (or raising) instead of calling HTTP."""

    def __init__(self, name, outcome=None, api_key="test-key"):
        super().__init__(api_key=api_key, timeout=1.0)
        self.name = name
        self.outcome = outcome
        self.calls = 0

    def build_params(self, coordinate):
        return {"lat": coordinate.latitude, "lon": coordinate.longitude}

    def extract_administrative_fields(self, payload, region):
        return payload

    def _get(self, url, params):
        self.calls += 1
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


@pytest.fixture
def make_fields():
    """Factory for provider extraction results."""
    def _make(state="Maharashtra", district="PUNE", city="Pune", **kwargs):
        return AdministrativeFields(state=state, district=district, city=city, **kwargs)
    return _make


@pytest.fixture
def monthly_rows():
    """Two months of raw rows for three districts, as the CSV export names them."""
    return [
        {"district_name": "PUNE", "total_persondays_generated": 40000, "total_expenditure": 2000000,
         "total_households_worked": 1200, "total_completed_works": 10, "total_ongoing_works": 5,
         "average_wage_per_day": 250, "average_days_per_household": 30},
        {"district_name": "NASHIK", "total_persondays_generated": 30000, "total_expenditure": 1500000,
         "total_households_worked": 900, "total_completed_works": 4, "total_ongoing_works": 8,
         "average_wage_per_day": 0, "average_days_per_household": 20},
        {"district_name": "PUNE", "total_persondays_generated": 60000, "total_expenditure": 3000000,
         "total_households_worked": 1500, "total_completed_works": 20, "total_ongoing_works": 5,
         "average_wage_per_day": 270, "average_days_per_household": 35},
        {"district_name": "THANE", "total_persondays_generated": 5000, "total_expenditure": 100000,
         "total_households_worked": 300, "total_completed_works": 0, "total_ongoing_works": 0,
         "average_wage_per_day": 240, "average_days_per_household": 10},
        {"district_name": "NASHIK", "total_persondays_generated": 20000, "total_expenditure": 1000000,
         "total_households_worked": 800, "total_completed_works": 6, "total_ongoing_works": 2,
         "average_wage_per_day": 0, "average_days_per_household": 15},
    ]


@pytest.fixture
def scenario_rows():
    """District A leads on person-days, B on expenditure."""
    return [
        DistrictPerformanceRecord(district_name="A", total_person_days=100000, total_expenditure=0),
        DistrictPerformanceRecord(district_name="B", total_person_days=50000, total_expenditure=100000000),
    ]
