from __future__ import annotations

from sipcalc.core.schedule import build_schedule, cash_flow_plan, depletion_year
from sipcalc.core.summary import summarize
from sipcalc.schemas.scenario import (
    Projection,
    ScenarioKind,
    ScenarioParams,
    SummaryResult,
)


def opening_summary(params: ScenarioParams) -> SummaryResult:
    """Summary for a zero-year horizon: nothing has grown or been withdrawn."""
    plan = cash_flow_plan(params)
    return SummaryResult(
        totalCashFlow=plan.opening_cash_flow,
        totalGain=0.0,
        finalValue=plan.opening_balance,
        inflationAdjustedFinalValue=plan.opening_balance,
    )


def project(params: ScenarioParams) -> Projection:
    """Build the schedule and its summary in one call."""
    kind = ScenarioKind(params.kind)
    records = build_schedule(params)

    if records:
        summary = summarize(records, kind)
    else:
        summary = opening_summary(params)

    depleted_in = None
    if kind == ScenarioKind.SWP:
        depleted_in = depletion_year(records, params.initialCorpus)

    return Projection(
        kind=kind,
        region=params.region,
        records=records,
        summary=summary,
        depletedInYear=depleted_in,
    )


__all__ = ["opening_summary", "project"]
