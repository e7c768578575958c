"""Whole-unit currency strings for the supported regions."""

from decimal import ROUND_HALF_UP, Decimal

from sipcalc.schemas.scenario import Region

CURRENCY_SYMBOLS = {
    Region.INR: "₹",
    Region.USD: "$",
}


def currency_symbol(region: Region) -> str:
    return CURRENCY_SYMBOLS[Region(region)]


def indian_grouping(digits: str) -> str:
    """12345678 -> 1,23,45,678 (thousands, then lakhs and crores)."""
    if len(digits) <= 3:
        return digits
    head, last_three = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + last_three


def format_currency(value: float, region: Region) -> str:
    region = Region(region)
    whole = Decimal(str(abs(value))).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    digits = str(int(whole))
    if region == Region.INR:
        grouped = indian_grouping(digits)
    else:
        grouped = f"{int(whole):,}"
    sign = "-" if value < 0 and whole else ""
    return f"{sign}{currency_symbol(region)}{grouped}"
