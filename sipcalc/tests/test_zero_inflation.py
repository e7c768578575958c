from __future__ import annotations

from math import isclose

import pytest

from sipcalc.core.schedule import build_schedule, inflation_adjusted
from sipcalc.schemas.scenario import LumpsumParams, SIPParams, SWPParams

SCENARIOS = [
    SIPParams(monthlyContribution=10000, expectedReturn=12, tenureYears=10),
    LumpsumParams(principal=100000, expectedReturn=10, tenureYears=5),
    SWPParams(initialCorpus=1000000, monthlyWithdrawal=10000, expectedReturn=8, tenureYears=20),
]


@pytest.mark.parametrize("inflation", [None, 0, 0.0])
@pytest.mark.parametrize("params", SCENARIOS, ids=lambda p: p.kind)
def test_zero_inflation_keeps_nominal_value(params, inflation):
    """
    Without inflation the adjusted value is the nominal value, exactly.
    """
    rows = build_schedule(params.model_copy(update={"inflationRate": inflation}))

    assert rows
    for row in rows:
        assert row.inflationAdjustedValue == row.valueAtYearEnd


@pytest.mark.parametrize("params", SCENARIOS[:2], ids=lambda p: p.kind)
def test_positive_inflation_discounts_every_year(params):
    rows = build_schedule(params.model_copy(update={"inflationRate": 6.0}))

    for row in rows:
        assert row.inflationAdjustedValue < row.valueAtYearEnd
        assert isclose(
            row.inflationAdjustedValue,
            row.valueAtYearEnd / 1.06 ** row.year,
            rel_tol=1e-12,
        )


def test_inflation_adjusted_helper_identity():
    assert inflation_adjusted(1234.5, None, 7) == 1234.5
    assert inflation_adjusted(1234.5, 0.0, 7) == 1234.5
    assert isclose(inflation_adjusted(1100.0, 10.0, 1), 1000.0)
