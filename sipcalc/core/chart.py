from __future__ import annotations

from typing import Dict, List, Sequence

from sipcalc.schemas.scenario import YearRecord


def to_chart_data(records: Sequence[YearRecord]) -> List[Dict[str, float]]:
    """Flatten a schedule into the points the growth / breakdown charts plot."""
    return [
        {
            "year": record.year,
            "invested": record.cumulativeCashFlow,
            "returns": record.totalGainOrInterest,
            "value": record.valueAtYearEnd,
            "inflationAdjusted": record.inflationAdjustedValue,
        }
        for record in records
    ]
