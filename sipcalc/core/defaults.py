"""Per-region starting values and slider bounds for the calculator forms."""

from sipcalc.core.currency import currency_symbol
from sipcalc.schemas.meta import InputRange, RegionDefaults
from sipcalc.schemas.scenario import Region

DEFAULT_VALUES = {
    "monthlyInvestment": {Region.INR: 10000, Region.USD: 500},
    "lumpsumAmount": {Region.INR: 100000, Region.USD: 10000},
    "monthlyWithdrawal": {Region.INR: 10000, Region.USD: 1000},
    "initialCorpus": {Region.INR: 1000000, Region.USD: 200000},
    "inflationRate": {Region.INR: 6, Region.USD: 3},
    "expectedReturn": 12,
    "tenure": 10,
}

INPUT_RANGES = {
    "monthlyInvestment": {
        Region.INR: InputRange(min=500, max=1000000, step=500),
        Region.USD: InputRange(min=10, max=50000, step=10),
    },
    "lumpsumAmount": {
        Region.INR: InputRange(min=1000, max=100000000, step=1000),
        Region.USD: InputRange(min=100, max=5000000, step=100),
    },
    "monthlyWithdrawal": {
        Region.INR: InputRange(min=500, max=1000000, step=500),
        Region.USD: InputRange(min=10, max=50000, step=10),
    },
    "initialCorpus": {
        Region.INR: InputRange(min=10000, max=100000000, step=10000),
        Region.USD: InputRange(min=1000, max=10000000, step=1000),
    },
    "expectedReturn": InputRange(min=1, max=30, step=0.5),
    "tenure": InputRange(min=1, max=40, step=1),
    "inflationRate": InputRange(min=0, max=15, step=0.5),
}


def _for_region(table: dict, region: Region) -> dict:
    return {
        name: entry[region] if isinstance(entry, dict) else entry
        for name, entry in table.items()
    }


def defaults_for(region: Region) -> RegionDefaults:
    region = Region(region)
    return RegionDefaults(
        region=region,
        currencySymbol=currency_symbol(region),
        values=_for_region(DEFAULT_VALUES, region),
        ranges=_for_region(INPUT_RANGES, region),
    )
