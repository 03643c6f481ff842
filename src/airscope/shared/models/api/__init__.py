"""Upstream API payload models."""

from .datagov import DataGovRecord, DataGovResponse
from .waqi import (
    WAQICity,
    WAQIFeedData,
    WAQIFeedResponse,
    WAQISearchItem,
    WAQISearchResponse,
    WAQIStation,
    WAQITime,
    WAQIValue,
)

__all__ = [
    "DataGovRecord",
    "DataGovResponse",
    "WAQICity",
    "WAQIFeedData",
    "WAQIFeedResponse",
    "WAQISearchItem",
    "WAQISearchResponse",
    "WAQIStation",
    "WAQITime",
    "WAQIValue",
]
