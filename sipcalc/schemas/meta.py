"""Pydantic schemas for the health-check and defaults endpoints."""

from typing import Dict

from pydantic import BaseModel

from sipcalc.schemas.scenario import Region


class PingResponse(BaseModel):
    message: str


class InputRange(BaseModel):
    min: float
    max: float
    step: float


class RegionDefaults(BaseModel):
    """Slider defaults and bounds offered to the frontend for one region."""

    region: Region
    currencySymbol: str
    values: Dict[str, float]
    ranges: Dict[str, InputRange]
