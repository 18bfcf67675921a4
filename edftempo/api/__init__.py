"""Tempo day colour feed client package."""

from .client import (
    DayColorFetcher,
    TempoCalendarClient,
    build_query,
    check_day_sequence,
    parse_api_date,
)

__all__ = [
    "DayColorFetcher",
    "TempoCalendarClient",
    "build_query",
    "check_day_sequence",
    "parse_api_date",
]
