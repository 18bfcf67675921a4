"""Data models for the EDF Tempo price schedule."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum

from .const import HOUR_OF_CHANGE, OFF_PEAK_START


class TempoColor(IntEnum):
    """Colour codes published for each tempo day."""

    BLUE = 0
    WHITE = 1
    RED = 2


class PeakClass(IntEnum):
    """Off-peak (HC) and peak (HP) hours."""

    OFF_PEAK = 0
    PEAK = 1


class DayOffset(IntEnum):
    """Which day of the lookback window gives a segment its colour."""

    PREVIOUS = -1
    CURRENT = 0


PEAK_CLASS_COUNT = len(PeakClass)


def price_key(code: int, peak: int, peak_classes: int = PEAK_CLASS_COUNT) -> int:
    """Combine a colour code and a peak class into a price table key."""
    return code * peak_classes + peak


@dataclass(frozen=True, slots=True)
class DayColor:
    """Colour code of a single local calendar day."""

    day: datetime.date
    code: int
    period: str | None = None


@dataclass(frozen=True, slots=True)
class DayWindow:
    """A day together with the day right before it."""

    previous: DayColor
    current: DayColor

    def color_for(self, offset: DayOffset) -> int:
        """Return the colour code the given day offset points at."""
        if offset == DayOffset.PREVIOUS:
            return self.previous.code
        return self.current.code


@dataclass(frozen=True, slots=True)
class SegmentTemplate:
    """Clock-time slice of a local day; offsets are measured from midnight."""

    start: datetime.timedelta
    end: datetime.timedelta
    day_offset: DayOffset
    peak: PeakClass


@dataclass(frozen=True, slots=True)
class Segment:
    """A template applied to a given day, with its price key resolved."""

    day: datetime.date
    start: datetime.timedelta
    end: datetime.timedelta
    price_key: int


@dataclass(frozen=True, slots=True)
class PricedInterval:
    """Half-open [valid_from, valid_to) interval with its price."""

    valid_from: datetime.datetime
    valid_to: datetime.datetime
    value: Decimal


# The night before the change hour still belongs to the previous tempo day.
SEGMENT_TEMPLATES: tuple[SegmentTemplate, ...] = (
    SegmentTemplate(
        start=datetime.timedelta(0),
        end=datetime.timedelta(hours=HOUR_OF_CHANGE),
        day_offset=DayOffset.PREVIOUS,
        peak=PeakClass.OFF_PEAK,
    ),
    SegmentTemplate(
        start=datetime.timedelta(hours=HOUR_OF_CHANGE),
        end=datetime.timedelta(hours=OFF_PEAK_START),
        day_offset=DayOffset.CURRENT,
        peak=PeakClass.PEAK,
    ),
    SegmentTemplate(
        start=datetime.timedelta(hours=OFF_PEAK_START),
        end=datetime.timedelta(days=1),
        day_offset=DayOffset.CURRENT,
        peak=PeakClass.OFF_PEAK,
    ),
)
