"""Data contracts for SIP, lumpsum and SWP projections."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Region(str, Enum):
    INR = "INR"
    USD = "USD"


class ScenarioKind(str, Enum):
    SIP = "sip"
    LUMPSUM = "lumpsum"
    SWP = "swp"


class ContributionTiming(str, Enum):
    START = "start"
    END = "end"


class _ScenarioBase(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    expectedReturn: float = Field(ge=0, description="Annual nominal return in percent (12 for 12%).")
    tenureYears: int = Field(ge=0, description="Number of years to project.")
    region: Region = Region.INR
    inflationRate: Optional[float] = Field(
        default=None,
        ge=0,
        description="Annual inflation in percent. None or 0 disables the adjustment.",
    )


class SIPParams(_ScenarioBase):
    """Recurring monthly contribution."""

    kind: Literal["sip"] = "sip"
    monthlyContribution: float = Field(ge=0)
    contributionTiming: ContributionTiming = ContributionTiming.START


class LumpsumParams(_ScenarioBase):
    """One-time investment made at the start of year 1."""

    kind: Literal["lumpsum"] = "lumpsum"
    principal: float = Field(ge=0)


class SWPParams(_ScenarioBase):
    """Recurring monthly withdrawal against an initial corpus."""

    kind: Literal["swp"] = "swp"
    initialCorpus: float = Field(ge=0)
    monthlyWithdrawal: float = Field(ge=0)


ScenarioParams = Annotated[
    Union[SIPParams, LumpsumParams, SWPParams],
    Field(discriminator="kind"),
]

scenario_adapter: TypeAdapter = TypeAdapter(ScenarioParams)


class YearRecord(BaseModel):
    """Single row of a projection schedule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=1)
    monthlyAmount: float
    periodCashFlow: float
    cumulativeCashFlow: float
    valueAtYearEnd: float = Field(ge=0)
    totalGainOrInterest: float
    # always populated; equals valueAtYearEnd when there is no inflation
    inflationAdjustedValue: float


class SummaryResult(BaseModel):
    """Headline figures derived from a schedule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    totalCashFlow: float
    totalGain: float
    finalValue: float
    inflationAdjustedFinalValue: float


class Projection(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ScenarioKind
    region: Region
    records: List[YearRecord]
    summary: SummaryResult
    depletedInYear: Optional[int] = None


class ExportRequest(BaseModel):
    """Inputs for the CSV / TSV export endpoints."""

    model_config = ConfigDict(extra="forbid")

    scenario: ScenarioParams
    showMonthlyAmount: bool = False
    showInflation: bool = False


__all__ = [
    "Region",
    "ScenarioKind",
    "ContributionTiming",
    "SIPParams",
    "LumpsumParams",
    "SWPParams",
    "ScenarioParams",
    "scenario_adapter",
    "YearRecord",
    "SummaryResult",
    "Projection",
    "ExportRequest",
]
