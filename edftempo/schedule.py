"""Tempo price schedule generation.

The tariff day is defined in local civil time, so a request is first moved to
the tariff zone, every local day is expanded into fixed clock-time segments,
and the segments are finally converted back to UTC and clipped to the request.

The night segment of a day (midnight to the change hour) is still billed with
the colour of the day before, which is why a day can only be priced together
with its predecessor.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import ConfigurationError, DataError
from .models import (
    PEAK_CLASS_COUNT,
    SEGMENT_TEMPLATES,
    DayColor,
    DayWindow,
    PricedInterval,
    Segment,
    SegmentTemplate,
    price_key,
)

_LOGGER = logging.getLogger(__name__)

_ONE_DAY = datetime.timedelta(days=1)


# ── Range normalizer ─────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class LocalRange:
    """Requested range expressed in the tariff zone."""

    start: datetime.datetime
    end: datetime.datetime

    def fetch_dates(self) -> tuple[datetime.date, datetime.date]:
        """Return the inclusive date range to fetch, leading day included.

        The last day is the one holding the last instant before end, so a
        range ending at midnight does not pull in the following day.
        """
        last_instant = self.end - datetime.timedelta(microseconds=1)
        return self.start.date() - _ONE_DAY, last_instant.date()


def resolve_time_zone(zone_id: str) -> ZoneInfo:
    """Resolve an IANA zone identifier."""
    if not zone_id:
        raise ConfigurationError("No time zone configured")
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError) as err:
        raise ConfigurationError(f"Unknown time zone {zone_id!r}") from err


def _as_aware(value: datetime.datetime) -> datetime.datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value


def normalize_range(
    start: datetime.datetime,
    end: datetime.datetime,
    tz: ZoneInfo,
) -> LocalRange:
    """Convert both ends of a request to the tariff zone.

    Naive datetimes are taken as UTC. An empty or inverted range is kept as
    is and simply produces no interval.
    """
    return LocalRange(
        start=_as_aware(start).astimezone(tz),
        end=_as_aware(end).astimezone(tz),
    )


# ── Segment builder ──────────────────────────────────────────────────


def validate_templates(templates: Sequence[SegmentTemplate]) -> None:
    """Check that the templates tile a whole day without gap or overlap."""
    cursor = datetime.timedelta(0)
    for template in templates:
        if template.start != cursor or template.end <= template.start:
            raise ConfigurationError(
                f"Segment {template.start}-{template.end} does not follow {cursor}"
            )
        cursor = template.end
    if cursor != _ONE_DAY:
        raise ConfigurationError(f"Segments stop at {cursor}, not at midnight")


def iter_day_windows(days: Sequence[DayColor]) -> Iterator[DayWindow]:
    """Pair every day but the first with the day before it."""
    if len(days) < 2:
        raise DataError(
            f"At least a leading day and one day are required, got {len(days)}"
        )
    for previous, current in zip(days, days[1:]):
        if current.day - previous.day != _ONE_DAY:
            raise DataError(
                f"{previous.day} is not the day before {current.day}"
            )
        yield DayWindow(previous=previous, current=current)


def build_segments(
    days: Sequence[DayColor],
    templates: Sequence[SegmentTemplate] = SEGMENT_TEMPLATES,
) -> list[Segment]:
    """Expand each day after the leading one into priced-key segments."""
    return [
        Segment(
            day=window.current.day,
            start=template.start,
            end=template.end,
            price_key=price_key(
                window.color_for(template.day_offset),
                template.peak,
                PEAK_CLASS_COUNT,
            ),
        )
        for window in iter_day_windows(days)
        for template in templates
    ]


# ── Schedule clipper ─────────────────────────────────────────────────


def _local_instant(
    day: datetime.date, offset: datetime.timedelta, tz: ZoneInfo
) -> datetime.datetime:
    # Aware datetime arithmetic is wall-clock, so 24h lands on next midnight
    # even on DST change days.
    midnight = datetime.datetime.combine(day, datetime.time(), tzinfo=tz)
    return (midnight + offset).astimezone(datetime.timezone.utc)


def clip_segments(
    segments: Iterable[Segment],
    start: datetime.datetime,
    end: datetime.datetime,
    prices: Mapping[int, Decimal],
    tz: ZoneInfo,
    clamp: bool = False,
) -> list[PricedInterval]:
    """Price the segments overlapping [start, end) and convert them to UTC.

    Segment bounds are kept whole unless clamp is set, in which case they are
    trimmed to the requested window.
    """
    start = _as_aware(start)
    end = _as_aware(end)
    intervals: list[PricedInterval] = []
    for segment in segments:
        valid_from = _local_instant(segment.day, segment.start, tz)
        valid_to = _local_instant(segment.day, segment.end, tz)
        if valid_from >= end or valid_to <= start:
            continue
        try:
            value = prices[segment.price_key]
        except KeyError as err:
            raise ConfigurationError(
                f"No price for key {segment.price_key} ({segment.day})"
            ) from err
        if clamp:
            valid_from = max(valid_from, start.astimezone(datetime.timezone.utc))
            valid_to = min(valid_to, end.astimezone(datetime.timezone.utc))
        intervals.append(
            PricedInterval(valid_from=valid_from, valid_to=valid_to, value=value)
        )
    return intervals
