from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from sipcalc.schemas.scenario import (
    ContributionTiming,
    LumpsumParams,
    SIPParams,
    ScenarioParams,
    SWPParams,
    YearRecord,
)

MONTHS_PER_YEAR = 12


class InvalidParameter(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass(frozen=True)
class CashFlowPlan:
    """How one scenario kind feeds the shared monthly loop.

    opening_balance is the money in the account before month 1 and
    opening_cash_flow is the part of it booked as a year-1 contribution.
    """

    opening_balance: float
    opening_cash_flow: float
    monthly_amount: float
    withdraw: bool = False
    contribute_first: bool = False
    # (field name, raw input) pairs checked by validate_params
    amounts: Tuple[Tuple[str, object], ...] = ()


def cash_flow_plan(params: ScenarioParams) -> CashFlowPlan:
    """The single place a scenario variant is mapped onto the monthly loop."""
    if isinstance(params, SIPParams):
        return CashFlowPlan(
            opening_balance=0.0,
            opening_cash_flow=0.0,
            monthly_amount=params.monthlyContribution,
            contribute_first=params.contributionTiming == ContributionTiming.START,
            amounts=(("monthlyContribution", params.monthlyContribution),),
        )
    if isinstance(params, LumpsumParams):
        return CashFlowPlan(
            opening_balance=params.principal,
            opening_cash_flow=params.principal,
            monthly_amount=0.0,
            amounts=(("principal", params.principal),),
        )
    if isinstance(params, SWPParams):
        return CashFlowPlan(
            opening_balance=params.initialCorpus,
            opening_cash_flow=0.0,
            monthly_amount=params.monthlyWithdrawal,
            withdraw=True,
            amounts=(
                ("initialCorpus", params.initialCorpus),
                ("monthlyWithdrawal", params.monthlyWithdrawal),
            ),
        )
    raise InvalidParameter([f"unsupported scenario type {type(params).__name__}"])


def validate_params(params: ScenarioParams) -> CashFlowPlan:
    """Reject negative or non-finite inputs before any computation.

    Pydantic already enforces these bounds on construction; this covers
    models built with model_construct() or mutated afterwards. Returns the
    checked cash-flow plan.
    """
    plan = cash_flow_plan(params)
    checks = [
        ("expectedReturn", params.expectedReturn),
        ("tenureYears", params.tenureYears),
        *plan.amounts,
    ]
    if params.inflationRate is not None:
        checks.append(("inflationRate", params.inflationRate))

    errors: List[str] = []
    for name, value in checks:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{name} must be a number")
        elif not math.isfinite(value):
            errors.append(f"{name} must be finite")
        elif value < 0:
            errors.append(f"{name} must be non-negative")

    tenure = params.tenureYears
    if isinstance(tenure, float) and math.isfinite(tenure) and not tenure.is_integer():
        errors.append("tenureYears must be a whole number of years")

    if errors:
        raise InvalidParameter(errors)
    return plan


def inflation_adjusted(value: float, inflation_rate: Optional[float], years: int) -> float:
    """Discount a nominal value to today's money; identity when inflation is off."""
    if not inflation_rate:
        return value
    return value / (1 + inflation_rate / 100) ** years


def build_schedule(params: ScenarioParams) -> List[YearRecord]:
    """
    Year-by-year schedule for a SIP, lumpsum or SWP scenario.

    Order of operations (per month, rate = expectedReturn / 12 / 100):
      - SIP, start timing: add contribution, then compound.
      - SIP, end timing: compound, then add contribution.
      - Lumpsum: compound only.
      - SWP: compound, then withdraw. A withdrawal larger than the corpus
        pays out what is left and clamps the corpus at zero; later months
        earn nothing and withdraw nothing.

    One record is emitted at the close of every 12-month block.
    """
    plan = validate_params(params)
    monthly_rate = params.expectedReturn / MONTHS_PER_YEAR / 100
    inflation = params.inflationRate

    balance = float(plan.opening_balance)
    cumulative = float(plan.opening_cash_flow)
    period_flow = cumulative
    period_interest = 0.0
    depleted = False

    records: List[YearRecord] = []
    for month in range(1, int(params.tenureYears) * MONTHS_PER_YEAR + 1):
        paid = 0.0
        if plan.withdraw:
            if not depleted:
                interest = balance * monthly_rate
                balance += interest
                period_interest += interest

                paid = min(plan.monthly_amount, balance)
                balance -= paid
                if plan.monthly_amount > 0 and balance <= 0:
                    balance = 0.0
                    depleted = True
        else:
            if plan.contribute_first:
                balance += plan.monthly_amount
            balance += balance * monthly_rate
            if not plan.contribute_first:
                balance += plan.monthly_amount
            paid = plan.monthly_amount

        cumulative += paid
        period_flow += paid

        if month % MONTHS_PER_YEAR:
            continue

        year = month // MONTHS_PER_YEAR
        if plan.withdraw:
            gain = period_interest
        else:
            gain = balance - cumulative
        monthly_amount = plan.monthly_amount
        if depleted and period_flow == 0:
            monthly_amount = 0.0

        records.append(
            YearRecord(
                year=year,
                monthlyAmount=monthly_amount,
                periodCashFlow=period_flow,
                cumulativeCashFlow=cumulative,
                valueAtYearEnd=balance,
                totalGainOrInterest=gain,
                inflationAdjustedValue=inflation_adjusted(balance, inflation, year),
            )
        )
        period_flow = 0.0
        period_interest = 0.0

    return records


def depletion_year(records: Sequence[YearRecord], initial_corpus: float) -> Optional[int]:
    """First year a withdrawal schedule closes with an empty corpus.

    A schedule that never held any money has nothing to run out of.
    """
    if initial_corpus <= 0:
        return None
    for record in records:
        if record.valueAtYearEnd <= 0:
            return record.year
    return None


__all__ = [
    "MONTHS_PER_YEAR",
    "InvalidParameter",
    "CashFlowPlan",
    "validate_params",
    "cash_flow_plan",
    "inflation_adjusted",
    "build_schedule",
    "depletion_year",
]
