"""EDF Tempo price data service."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Mapping
from decimal import Decimal

import aiohttp

from .api.client import DayColorFetcher, TempoCalendarClient, check_day_sequence
from .config import TempoOptions, validate_price_table
from .models import SEGMENT_TEMPLATES, PricedInterval
from .schedule import (
    build_segments,
    clip_segments,
    normalize_range,
    resolve_time_zone,
    validate_templates,
)

_LOGGER = logging.getLogger(__name__)


class EDFTempoService:
    """Turn the Tempo day colours into priced intervals for a time range."""

    def __init__(self, fetcher: DayColorFetcher, options: TempoOptions) -> None:
        """Initialize the service, failing fast on bad configuration."""
        validate_templates(SEGMENT_TEMPLATES)
        self._fetcher = fetcher
        self._tz = resolve_time_zone(options.time_zone)
        self._prices: Mapping[int, Decimal] = options.price_table()
        validate_price_table(self._prices)
        self._clamp = options.clamp_to_window

    @classmethod
    def from_options(
        cls, session: aiohttp.ClientSession, options: TempoOptions
    ) -> EDFTempoService:
        """Create a service reading the feed configured in options."""
        return cls(TempoCalendarClient(session, options.base_url), options)

    async def async_get_price_data(
        self,
        start: datetime.datetime,
        end: datetime.datetime,
    ) -> list[PricedInterval]:
        """Return the priced intervals overlapping [start, end)."""
        local_range = normalize_range(start, end, self._tz)
        _LOGGER.debug("Range: %s -> %s", local_range.start, local_range.end)
        if local_range.end <= local_range.start:
            return []

        first_day, last_day = local_range.fetch_dates()
        days = await self._fetcher.async_get_day_colors(first_day, last_day)
        check_day_sequence(days, first_day, last_day)
        _LOGGER.debug("Got %d tempo days (%s -> %s)", len(days), first_day, last_day)

        segments = build_segments(days)
        intervals = clip_segments(
            segments,
            local_range.start,
            local_range.end,
            self._prices,
            self._tz,
            clamp=self._clamp,
        )
        _LOGGER.debug(
            "Kept %d of %d segments for %s -> %s",
            len(intervals),
            len(segments),
            start,
            end,
        )
        return intervals
