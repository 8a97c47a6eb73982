"""
Per-district aggregation of raw performance rows.

Raw data arrives as one row per district per month. Before scoring, rows
of the same district are folded into one record:

- person-days, expenditure, employment and works counts are summed
- households worked is a cumulative figure, so the maximum is taken
- wage rate is averaged over rows that report one (zero means no data)
"""
from typing import Any, Iterable, List, Mapping, Union

import numpy as np
import pandas as pd

from mgnrega.core.models import DistrictPerformanceRecord

Row = Union[DistrictPerformanceRecord, Mapping[str, Any]]

SUM_COLUMNS = [
    "total_person_days",
    "total_expenditure",
    "employment_provided",
    "works_completed",
    "works_in_progress",
]
MAX_COLUMNS = ["households_worked"]
MEAN_NONZERO_COLUMNS = ["avg_wage_rate"]


def coerce_record(row: Row) -> DistrictPerformanceRecord:
    """Accept either a record or a mapping of raw column values."""
    if isinstance(row, DistrictPerformanceRecord):
        return row
    return DistrictPerformanceRecord.from_mapping(row)


def records_to_frame(rows: Iterable[Row]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per input record.

    Args:
        rows: Records or raw mappings

    Returns:
        DataFrame with the DistrictPerformanceRecord columns, in input order
    """
    records = [coerce_record(row) for row in rows]
    columns = ["district_name"] + SUM_COLUMNS + MAX_COLUMNS + MEAN_NONZERO_COLUMNS
    return pd.DataFrame(
        [{column: getattr(record, column) for column in columns} for record in records],
        columns=columns,
    )


def aggregate_by_district(rows: Iterable[Row]) -> List[DistrictPerformanceRecord]:
    """
    Fold raw rows into one record per district.

    Districts are grouped by exact name and returned in order of first
    appearance, which later serves as the tie-break order when ranking.

    Args:
        rows: Records or raw mappings, district names already canonical;
            rows without a district name are dropped

    Returns:
        One aggregated DistrictPerformanceRecord per district
    """
    df = records_to_frame(rows)
    df = df[df["district_name"].str.strip() != ""].copy()
    if df.empty:
        return []

    # Zero wage rate means the month reported nothing
    df[MEAN_NONZERO_COLUMNS] = df[MEAN_NONZERO_COLUMNS].replace(0, np.nan)

    grouped = df.groupby("district_name", sort=False)
    aggregated = pd.concat(
        [
            grouped[SUM_COLUMNS].sum(),
            grouped[MAX_COLUMNS].max(),
            grouped[MEAN_NONZERO_COLUMNS].mean().fillna(0.0),
        ],
        axis=1,
    )

    return [
        DistrictPerformanceRecord(
            district_name=district,
            **{column: float(values[column]) for column in aggregated.columns}
        )
        for district, values in aggregated.iterrows()
    ]
