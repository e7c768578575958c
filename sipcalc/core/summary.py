"""Reduce a year schedule into the headline figures shown on summary cards."""

from __future__ import annotations

from typing import Sequence

from sipcalc.schemas.scenario import ScenarioKind, SummaryResult, YearRecord


class EmptySequence(ValueError):
    pass


def summarize(
    records: Sequence[YearRecord],
    kind: ScenarioKind,
) -> SummaryResult:
    """
    The kind is required: the records alone do not say whether they grew
    or were drawn down.

    Growth kinds report gain as final value minus money put in.
    SWP reports the interest earned over the whole horizon, including
    the years before the corpus ran out.
    """
    if not records:
        raise EmptySequence("cannot summarize an empty schedule")

    total_interest = 0.0
    last = records[0]
    for record in records:
        total_interest += record.totalGainOrInterest
        last = record

    if kind == ScenarioKind.SWP:
        total_gain = total_interest
    else:
        total_gain = last.valueAtYearEnd - last.cumulativeCashFlow

    return SummaryResult(
        totalCashFlow=last.cumulativeCashFlow,
        totalGain=total_gain,
        finalValue=last.valueAtYearEnd,
        inflationAdjustedFinalValue=last.inflationAdjustedValue,
    )
