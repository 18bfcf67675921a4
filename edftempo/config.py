"""Configuration surface: feed URL, tariff zone and price table."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from .const import (
    CONF_BASE_URL,
    CONF_BLUE_HC,
    CONF_BLUE_HP,
    CONF_CLAMP_TO_WINDOW,
    CONF_RED_HC,
    CONF_RED_HP,
    CONF_TIME_ZONE,
    CONF_WHITE_HC,
    CONF_WHITE_HP,
    DEFAULT_BASE_URL,
    DEFAULT_TIME_ZONE,
)
from .exceptions import ConfigurationError
from .models import PeakClass, TempoColor, price_key

_LOGGER = logging.getLogger(__name__)

_PRICE_KEYS: dict[tuple[TempoColor, PeakClass], str] = {
    (TempoColor.BLUE, PeakClass.OFF_PEAK): CONF_BLUE_HC,
    (TempoColor.BLUE, PeakClass.PEAK): CONF_BLUE_HP,
    (TempoColor.WHITE, PeakClass.OFF_PEAK): CONF_WHITE_HC,
    (TempoColor.WHITE, PeakClass.PEAK): CONF_WHITE_HP,
    (TempoColor.RED, PeakClass.OFF_PEAK): CONF_RED_HC,
    (TempoColor.RED, PeakClass.PEAK): CONF_RED_HP,
}


def _to_decimal(name: str, value: Any) -> Decimal:
    if value is None:
        raise ConfigurationError(f"Missing price for {name}")
    try:
        # str() keeps 0.1 from turning into 0.1000000000000000055...
        return Decimal(str(value))
    except InvalidOperation as err:
        raise ConfigurationError(f"Invalid price for {name}: {value!r}") from err


@dataclass(frozen=True, slots=True)
class TempoOptions:
    """Settings for EDFTempoService."""

    blue_hc: Decimal
    blue_hp: Decimal
    white_hc: Decimal
    white_hp: Decimal
    red_hc: Decimal
    red_hp: Decimal
    base_url: str = DEFAULT_BASE_URL
    time_zone: str = DEFAULT_TIME_ZONE
    clamp_to_window: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TempoOptions:
        """Build options from a flat mapping of CONF_* keys."""
        prices = {
            conf_key: _to_decimal(conf_key, data.get(conf_key))
            for conf_key in _PRICE_KEYS.values()
        }
        return cls(
            **prices,
            base_url=str(data.get(CONF_BASE_URL) or DEFAULT_BASE_URL),
            time_zone=str(data.get(CONF_TIME_ZONE) or DEFAULT_TIME_ZONE),
            clamp_to_window=bool(data.get(CONF_CLAMP_TO_WINDOW, False)),
        )

    def price_table(self) -> dict[int, Decimal]:
        """Return the prices keyed by price key."""
        return {
            price_key(color, peak): getattr(self, conf_key)
            for (color, peak), conf_key in _PRICE_KEYS.items()
        }


def validate_price_table(
    prices: Mapping[int, Decimal],
    colors: Iterable[int] = TempoColor,
) -> None:
    """Raise ConfigurationError unless every colour/peak combination has a price."""
    missing = [
        price_key(color, peak)
        for color in colors
        for peak in PeakClass
        if price_key(color, peak) not in prices
    ]
    if missing:
        raise ConfigurationError(f"Price table is missing keys {missing}")
    _LOGGER.debug("Price table validated with %d entries", len(prices))
