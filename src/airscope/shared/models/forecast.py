"""Forecast projection models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ForecastFactors(BaseModel):
    """Qualitative drivers behind one projected hour."""

    model_config = ConfigDict(frozen=True)

    traffic: Literal["high", "low"]
    meteorology: Literal["favorable", "unfavorable"]
    seasonal: Literal["winter_effect", "normal"]
    weekend: bool


class ForecastPoint(BaseModel):
    """One hour of a synthetic projection."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    index: int = Field(..., ge=0, le=500)
    confidence: float = Field(..., ge=0, le=100)
    factors: ForecastFactors
