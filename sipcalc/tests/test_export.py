from __future__ import annotations

from datetime import date

from sipcalc.core.chart import to_chart_data
from sipcalc.core.export import export_filename, export_headers, export_rows, to_csv, to_tsv
from sipcalc.core.schedule import build_schedule
from sipcalc.schemas.scenario import (
    LumpsumParams,
    Region,
    ScenarioKind,
    SIPParams,
    SWPParams,
)


def flat_lumpsum():
    return build_schedule(LumpsumParams(principal=1000, expectedReturn=0, tenureYears=2))


def test_csv_quotes_cells_but_not_header():
    content = to_csv(flat_lumpsum(), ScenarioKind.LUMPSUM, Region.INR)

    assert content.split("\n") == [
        "Year,Annual Investment,Cumulative Investment,Value at Year-End,Total Returns",
        '"1","₹1,000","₹1,000","₹1,000","₹0"',
        '"2","₹0","₹1,000","₹1,000","₹0"',
        '"Total","-","₹1,000","₹1,000","₹0"',
    ]


def test_tsv_matches_csv_table():
    content = to_tsv(flat_lumpsum(), ScenarioKind.LUMPSUM, Region.USD)

    lines = content.split("\n")
    assert lines[0] == "Year\tAnnual Investment\tCumulative Investment\tValue at Year-End\tTotal Returns"
    assert lines[1] == "1\t$1,000\t$1,000\t$1,000\t$0"
    assert lines[-1] == "Total\t-\t$1,000\t$1,000\t$0"


def test_optional_columns():
    rows = build_schedule(
        SIPParams(monthlyContribution=1000, expectedReturn=12, tenureYears=3, inflationRate=5)
    )

    table = export_rows(rows, ScenarioKind.SIP, Region.INR, show_monthly_amount=True, show_inflation=True)

    assert table[0] == [
        "Year",
        "Monthly SIP",
        "Annual Investment",
        "Cumulative Investment",
        "Value at Year-End",
        "Total Returns",
        "Inflation Adjusted Value",
    ]
    assert table[1][1] == "₹1,000"
    assert table[-1][:3] == ["Total", "-", "-"]
    assert len(table) == 1 + 3 + 1
    assert all(len(row) == 7 for row in table)


def test_withdrawal_total_row_sums_interest():
    rows = build_schedule(
        SWPParams(initialCorpus=100000, monthlyWithdrawal=1000, expectedReturn=6, tenureYears=3, inflationRate=4)
    )

    table = export_rows(rows, ScenarioKind.SWP, Region.USD, show_inflation=True)

    assert table[0] == export_headers(ScenarioKind.SWP, show_inflation=True)
    assert table[0][-1] == "Corpus (Today's Value)"
    total_interest = sum(row.totalGainOrInterest for row in rows)
    assert table[-1][4] == f"${round(total_interest):,}"
    assert table[-1][2] == f"${round(rows[-1].cumulativeCashFlow):,}"


def test_empty_schedule_exports_header_only():
    content = to_csv([], ScenarioKind.SIP, Region.INR)

    assert content == "Year,Annual Investment,Cumulative Investment,Value at Year-End,Total Returns"


def test_export_filename():
    today = date(2026, 10, 18)

    assert export_filename(ScenarioKind.SIP, today) == "sip-breakdown-2026-10-18.csv"
    assert export_filename(ScenarioKind.LUMPSUM, today, "xls") == "sip-breakdown-2026-10-18.xls"
    assert export_filename("swp", today, "tsv") == "swp-breakdown-2026-10-18.tsv"


def test_chart_points_follow_records():
    rows = build_schedule(SIPParams(monthlyContribution=500, expectedReturn=10, tenureYears=4))

    points = to_chart_data(rows)

    assert [point["year"] for point in points] == [1, 2, 3, 4]
    assert points[-1]["invested"] == 24000
    assert points[-1]["value"] == rows[-1].valueAtYearEnd
    assert points[-1]["returns"] == rows[-1].totalGainOrInterest
