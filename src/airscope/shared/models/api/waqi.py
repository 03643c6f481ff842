"""World Air Quality Index API payload models.

These models describe the provider's JSON at the boundary. They are lenient
(unknown fields ignored) because the provider adds fields freely; strict
checks that decide success or failure live in the decoding step.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class _WAQIModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class WAQIValue(_WAQIModel):
    """A single ``{"v": ...}`` measurement."""

    v: Union[float, str, None] = None


class WAQICity(_WAQIModel):
    name: str = ""
    geo: list[float] = Field(default_factory=list)
    url: str | None = None


class WAQITime(_WAQIModel):
    s: str | None = None
    tz: str | None = None
    v: int | None = None


class WAQIFeedData(_WAQIModel):
    """The ``data`` object of a feed response."""

    # Offline stations report "-" instead of a number
    aqi: Union[int, float, str]
    dominentpol: str | None = None
    city: WAQICity = Field(default_factory=WAQICity)
    iaqi: dict[str, WAQIValue] = Field(default_factory=dict)
    time: WAQITime | None = None


class WAQIFeedResponse(_WAQIModel):
    """Envelope of ``/feed/...`` responses.

    On failure the provider keeps ``status`` as "error" and puts a message
    string in ``data``.
    """

    status: str
    data: Union[WAQIFeedData, str, None] = None


class WAQIStation(_WAQIModel):
    name: str
    geo: list[float] = Field(default_factory=list)


class WAQISearchItem(_WAQIModel):
    station: WAQIStation


class WAQISearchResponse(_WAQIModel):
    """Envelope of ``/search/`` responses."""

    status: str
    data: Union[list[WAQISearchItem], str, None] = None
