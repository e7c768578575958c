"""Spreadsheet-friendly renderings of a year schedule.

Both formats share one table: a header row, one row per year and a
trailing ``Total`` row. Every value cell is a currency string for the
scenario's region.
"""

from __future__ import annotations

import csv
import io
from datetime import date
from typing import List, Optional, Sequence

from sipcalc.core.currency import format_currency
from sipcalc.core.summary import summarize
from sipcalc.schemas.scenario import Region, ScenarioKind, YearRecord

GROWTH_COLUMNS = (
    "Annual Investment",
    "Cumulative Investment",
    "Value at Year-End",
    "Total Returns",
)
WITHDRAWAL_COLUMNS = (
    "Annual Withdrawal",
    "Cumulative Withdrawal",
    "Corpus at Year-End",
    "Interest Earned",
)


def export_headers(
    kind: ScenarioKind,
    show_monthly_amount: bool = False,
    show_inflation: bool = False,
) -> List[str]:
    withdrawal = ScenarioKind(kind) == ScenarioKind.SWP
    headers = ["Year"]
    if show_monthly_amount:
        headers.append("Monthly Withdrawal" if withdrawal else "Monthly SIP")
    headers.extend(WITHDRAWAL_COLUMNS if withdrawal else GROWTH_COLUMNS)
    if show_inflation:
        headers.append("Corpus (Today's Value)" if withdrawal else "Inflation Adjusted Value")
    return headers


def export_rows(
    records: Sequence[YearRecord],
    kind: ScenarioKind,
    region: Region,
    show_monthly_amount: bool = False,
    show_inflation: bool = False,
) -> List[List[str]]:
    """Header, one row per year and a Total row (omitted for an empty schedule)."""

    def money(value: float) -> str:
        return format_currency(value, region)

    rows = [export_headers(kind, show_monthly_amount, show_inflation)]
    for record in records:
        row = [str(record.year)]
        if show_monthly_amount:
            row.append(money(record.monthlyAmount))
        row.extend(
            [
                money(record.periodCashFlow),
                money(record.cumulativeCashFlow),
                money(record.valueAtYearEnd),
                money(record.totalGainOrInterest),
            ]
        )
        if show_inflation:
            row.append(money(record.inflationAdjustedValue))
        rows.append(row)

    if records:
        summary = summarize(records, ScenarioKind(kind))
        total = ["Total"]
        if show_monthly_amount:
            total.append("-")
        total.extend(
            [
                "-",
                money(summary.totalCashFlow),
                money(summary.finalValue),
                money(summary.totalGain),
            ]
        )
        if show_inflation:
            total.append(money(summary.inflationAdjustedFinalValue))
        rows.append(total)

    return rows


def to_csv(
    records: Sequence[YearRecord],
    kind: ScenarioKind,
    region: Region,
    show_monthly_amount: bool = False,
    show_inflation: bool = False,
) -> str:
    """Comma separated table; data cells are always quoted, the header is not."""
    header, *body = export_rows(records, kind, region, show_monthly_amount, show_inflation)
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="\n").writerow(header)
    csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n").writerows(body)
    return buffer.getvalue().rstrip("\n")


def to_tsv(
    records: Sequence[YearRecord],
    kind: ScenarioKind,
    region: Region,
    show_monthly_amount: bool = False,
    show_inflation: bool = False,
) -> str:
    """Tab separated table for pasting into a spreadsheet."""
    rows = export_rows(records, kind, region, show_monthly_amount, show_inflation)
    return "\n".join(
        "\t".join(cell.replace("\t", " ") for cell in row) for row in rows
    )


def export_filename(
    kind: ScenarioKind,
    on_date: Optional[date] = None,
    extension: str = "csv",
) -> str:
    # lumpsum shares the SIP breakdown table
    prefix = "swp" if ScenarioKind(kind) == ScenarioKind.SWP else "sip"
    on_date = on_date or date.today()
    return f"{prefix}-breakdown-{on_date.isoformat()}.{extension}"


__all__ = [
    "export_headers",
    "export_rows",
    "to_csv",
    "to_tsv",
    "export_filename",
]
