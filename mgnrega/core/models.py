"""Data models for district resolution and leaderboard results."""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, List, Dict, Any, Mapping, Union


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 latitude/longitude pair."""
    latitude: float
    longitude: float

    def to_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class AdministrativeFields:
    """Fields a provider adapter extracts from one raw reverse-geocode response."""
    state: Optional[str]
    district: Optional[str]
    city: Optional[str] = None
    country: str = "India"
    formatted_address: str = ""
    accuracy: Union[str, float] = "APPROXIMATE"


@dataclass(frozen=True)
class GeocodeResult:
    """Result of a successful reverse-geocoding call."""
    state: Optional[str]
    district: Optional[str]
    city: Optional[str]
    country: str
    formatted_address: str
    coordinates: Coordinate
    accuracy: Union[str, float]
    provider_name: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "state": self.state,
            "district": self.district,
            "city": self.city,
            "country": self.country,
            "formattedAddress": self.formatted_address,
            "coordinates": self.coordinates.to_dict(),
            "accuracySignal": self.accuracy,
            "providerName": self.provider_name,
        }


@dataclass(frozen=True)
class ProviderAttempt:
    """One step of the provider fallback chain."""
    provider: str
    status: str  # "skipped", "failed" or "succeeded"
    reason: Optional[str] = None
    elapsed_seconds: float = 0.0


# Column aliases accepted by DistrictPerformanceRecord.from_mapping, in lookup order.
# The last alias of each group is the column name used by the government CSV export.
FIELD_ALIASES = {
    "district_name": ("district_name", "districtName", "district"),
    "total_person_days": ("total_person_days", "totalPersonDays", "total_persondays_generated"),
    "total_expenditure": ("total_expenditure", "totalExpenditure"),
    "employment_provided": ("employment_provided", "employmentProvided", "average_days_per_household"),
    "households_worked": ("households_worked", "householdsWorked", "total_households_worked"),
    "works_completed": ("works_completed", "worksCompleted", "total_completed_works"),
    "works_in_progress": ("works_in_progress", "worksInProgress", "total_ongoing_works"),
    "avg_wage_rate": ("avg_wage_rate", "avgWageRate", "average_wage_per_day"),
}


def _to_number(value: Any) -> float:
    """Missing, blank or non-numeric values count as zero."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.replace(",", "").strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    # NaN from pandas
    if number != number:
        return 0.0
    return number


@dataclass
class DistrictPerformanceRecord:
    """Performance metrics for one district, either one raw row or an aggregate."""
    district_name: str
    total_person_days: float = 0.0
    total_expenditure: float = 0.0
    employment_provided: float = 0.0
    households_worked: float = 0.0
    works_completed: float = 0.0
    works_in_progress: float = 0.0
    avg_wage_rate: float = 0.0

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "DistrictPerformanceRecord":
        """Build a record from a dict using snake_case, camelCase or CSV column names."""
        values = {}
        for name, aliases in FIELD_ALIASES.items():
            raw = next((row[alias] for alias in aliases if alias in row), None)
            if name == "district_name":
                # Blank CSV cells arrive from pandas as NaN
                blank = raw is None or (isinstance(raw, float) and raw != raw)
                values[name] = "" if blank else str(raw).strip()
            else:
                values[name] = _to_number(raw)
        return cls(**values)

    @property
    def completion_rate(self) -> int:
        """Completed works as a whole percentage of all started works."""
        total = self.works_completed + self.works_in_progress
        if total <= 0:
            return 0
        return int(round(self.works_completed / total * 100))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "districtName": self.district_name,
            "totalPersonDays": self.total_person_days,
            "totalExpenditure": self.total_expenditure,
            "employmentProvided": self.employment_provided,
            "householdsWorked": self.households_worked,
            "worksCompleted": self.works_completed,
            "worksInProgress": self.works_in_progress,
            "completionRate": self.completion_rate,
            "avgWageRate": self.avg_wage_rate,
        }


class Category(str, Enum):
    """Performance band of a district on the leaderboard."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    NEEDS_IMPROVEMENT = "Needs Improvement"

    @classmethod
    def parse(cls, value: Union[str, "Category"]) -> Optional["Category"]:
        """Case-insensitive lookup by label or member name ("needs improvement", "NEEDS_IMPROVEMENT")."""
        if isinstance(value, cls):
            return value
        key = "".join(ch for ch in str(value).lower() if ch.isalnum())
        for member in cls:
            if key in (member.value.lower().replace(" ", ""), member.name.lower().replace("_", "")):
                return member
        return None


@dataclass(frozen=True)
class LeaderboardEntry:
    """One ranked district."""
    rank: int
    district_name: str
    score: float
    category: Category
    metrics: DistrictPerformanceRecord

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "districtName": self.district_name,
            "score": self.score,
            "category": self.category.value,
            "metrics": self.metrics.to_dict(),
        }


@dataclass(frozen=True)
class DistrictNotFound:
    """Lookup outcome for a district that has no leaderboard entry."""
    district_name: str
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
