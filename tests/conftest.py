"""Fixtures for EDF Tempo tests."""
from __future__ import annotations

import datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from edftempo.config import TempoOptions
from edftempo.const import FRANCE_TZ
from edftempo.models import DayColor, TempoColor


def make_days(
    first: datetime.date, codes: list[int]
) -> list[DayColor]:
    """Create consecutive DayColor entries starting at first."""
    return [
        DayColor(day=first + datetime.timedelta(days=i), code=code, period="2023-2024")
        for i, code in enumerate(codes)
    ]


def paris(year: int, month: int, day: int, hour: int = 0) -> datetime.datetime:
    """Build a Europe/Paris aware datetime."""
    return datetime.datetime(year, month, day, hour, tzinfo=FRANCE_TZ)


def utc(year: int, month: int, day: int, hour: int = 0) -> datetime.datetime:
    """Build a UTC aware datetime."""
    return datetime.datetime(year, month, day, hour, tzinfo=datetime.timezone.utc)


def make_fetcher(days: list[DayColor]) -> AsyncMock:
    """Create a fetcher mock returning days."""
    fetcher = AsyncMock()
    fetcher.async_get_day_colors = AsyncMock(return_value=days)
    return fetcher


@pytest.fixture
def options() -> TempoOptions:
    """Options with the 2024 Tempo prices."""
    return TempoOptions(
        blue_hc=Decimal("0.1296"),
        blue_hp=Decimal("0.1609"),
        white_hc=Decimal("0.1486"),
        white_hp=Decimal("0.1894"),
        red_hc=Decimal("0.1568"),
        red_hp=Decimal("0.7562"),
    )


@pytest.fixture
def prices(options: TempoOptions) -> dict[int, Decimal]:
    """Integer keyed price table built from the options."""
    return options.price_table()


@pytest.fixture
def january_days() -> list[DayColor]:
    """Leading day plus a week of mixed colours in January 2024."""
    return make_days(
        datetime.date(2024, 1, 14),
        [
            TempoColor.BLUE,
            TempoColor.RED,
            TempoColor.WHITE,
            TempoColor.WHITE,
            TempoColor.BLUE,
            TempoColor.RED,
            TempoColor.BLUE,
            TempoColor.BLUE,
        ],
    )
