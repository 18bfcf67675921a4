"""Tests for the configuration surface."""

from __future__ import annotations

from decimal import Decimal

import pytest

from edftempo.config import TempoOptions, validate_price_table
from edftempo.const import (
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
from edftempo.exceptions import ConfigurationError


def _price_data() -> dict:
    return {
        CONF_BLUE_HC: 0.1296,
        CONF_BLUE_HP: "0.1609",
        CONF_WHITE_HC: 0.1486,
        CONF_WHITE_HP: 0.1894,
        CONF_RED_HC: 0.1568,
        CONF_RED_HP: Decimal("0.7562"),
    }


class TestFromMapping:
    """Tests for TempoOptions.from_mapping."""

    def test_defaults(self):
        options = TempoOptions.from_mapping(_price_data())
        assert options.base_url == DEFAULT_BASE_URL
        assert options.time_zone == DEFAULT_TIME_ZONE
        assert options.clamp_to_window is False

    def test_prices_are_exact_decimals(self):
        options = TempoOptions.from_mapping(_price_data())
        assert options.blue_hc == Decimal("0.1296")
        assert options.blue_hp == Decimal("0.1609")
        assert options.red_hp == Decimal("0.7562")

    def test_overrides(self):
        data = _price_data() | {
            CONF_BASE_URL: "https://example.test/days",
            CONF_TIME_ZONE: "Europe/Brussels",
            CONF_CLAMP_TO_WINDOW: True,
        }
        options = TempoOptions.from_mapping(data)
        assert options.base_url == "https://example.test/days"
        assert options.time_zone == "Europe/Brussels"
        assert options.clamp_to_window is True

    def test_missing_price(self):
        data = _price_data()
        del data[CONF_RED_HP]
        with pytest.raises(ConfigurationError, match="red_hp"):
            TempoOptions.from_mapping(data)

    def test_invalid_price(self):
        data = _price_data() | {CONF_WHITE_HC: "cheap"}
        with pytest.raises(ConfigurationError, match="white_hc"):
            TempoOptions.from_mapping(data)


class TestPriceTable:
    """Tests for TempoOptions.price_table."""

    def test_keys(self, options):
        table = options.price_table()
        assert table == {
            0: options.blue_hc,
            1: options.blue_hp,
            2: options.white_hc,
            3: options.white_hp,
            4: options.red_hc,
            5: options.red_hp,
        }


class TestValidatePriceTable:
    """Tests for validate_price_table."""

    def test_complete(self, prices):
        validate_price_table(prices)

    def test_missing_key(self):
        table = {0: Decimal("0.10"), 1: Decimal("0.12"), 2: Decimal("0.20"), 3: Decimal("0.25")}
        with pytest.raises(ConfigurationError, match=r"\[4, 5\]"):
            validate_price_table(table)

    def test_custom_colors(self):
        table = {0: Decimal("0.10"), 1: Decimal("0.12")}
        validate_price_table(table, colors=[0])
