"""Async client for the Tempo day colour feed."""

from __future__ import annotations

import datetime
import logging
from typing import Any, Protocol

import aiohttp

from ..const import (
    API_DATE_FORMAT,
    API_DEFAULT_TIMEOUT,
    API_KEY_CODE,
    API_KEY_DATE,
    API_KEY_PERIOD,
    API_QUERY_DATE,
    USER_AGENT,
)
from ..exceptions import (
    DataError,
    FetchError,
    TempoClientError,
    TempoConnectionError,
    TempoResponseError,
    TempoServerError,
)
from ..models import DayColor

_LOGGER = logging.getLogger(__name__)


class DayColorFetcher(Protocol):
    """Anything able to return one colour code per day of a date range."""

    async def async_get_day_colors(
        self,
        start: datetime.date,
        end: datetime.date,
    ) -> list[DayColor]:
        """Return the colours of every day from start to end, inclusive."""


class TempoCalendarClient:
    """Async client for the api-couleur-tempo day colour feed."""

    def __init__(self, session: aiohttp.ClientSession, base_url: str) -> None:
        """Initialize the client."""
        self._session = session
        self._base_url = base_url

    async def async_get_day_colors(
        self,
        start: datetime.date,
        end: datetime.date,
    ) -> list[DayColor]:
        """Fetch, parse and check the colours of every day from start to end."""
        payload = await self._async_fetch(start, end)
        days = _parse_response(payload)
        for day in days:
            _LOGGER.debug("Tempo day %s: colour code %d", day.day, day.code)
        check_day_sequence(days, start, end)
        return days

    async def _async_fetch(
        self,
        start: datetime.date,
        end: datetime.date,
    ) -> Any:
        """Perform the actual HTTP request."""
        params = build_query(start, end)
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        _LOGGER.debug(
            "Calling %s for %d days (%s -> %s)",
            self._base_url,
            len(params),
            start,
            end,
        )
        try:
            async with self._session.get(
                self._base_url,
                params=params,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=API_DEFAULT_TIMEOUT),
            ) as resp:
                self._check_response_status(resp)
                return await resp.json(content_type=None)
        except aiohttp.ContentTypeError as err:
            raise TempoResponseError(f"Unexpected response body: {err}") from err
        except ValueError as err:
            raise TempoResponseError(f"Invalid JSON response: {err}") from err
        except aiohttp.ClientError as err:
            raise TempoConnectionError(f"Connection error: {err}") from err
        except TimeoutError as err:
            raise TempoConnectionError(f"Request timeout: {err}") from err

    @staticmethod
    def _check_response_status(resp: aiohttp.ClientResponse) -> None:
        """Map HTTP status codes to typed exceptions."""
        status = resp.status
        if status == 200:
            return
        reason = resp.reason or "Unknown"
        if 400 <= status < 500:
            raise TempoClientError(status, reason)
        if status >= 500:
            raise TempoServerError(status, reason)
        raise FetchError(f"Unexpected HTTP {status}: {reason}")


def build_query(start: datetime.date, end: datetime.date) -> list[tuple[str, str]]:
    """Build one repeated date parameter per day from start to end, inclusive."""
    query: list[tuple[str, str]] = []
    day = start
    while day <= end:
        query.append((API_QUERY_DATE, day.strftime(API_DATE_FORMAT)))
        day += datetime.timedelta(days=1)
    return query


def parse_api_date(date: str) -> datetime.date:
    """Parse a YYYY-MM-DD date from the feed."""
    return datetime.datetime.strptime(date, API_DATE_FORMAT).date()


def _parse_response(payload: Any) -> list[DayColor]:
    """Parse the JSON array returned by the feed into DayColor objects."""
    if not isinstance(payload, list):
        raise TempoResponseError(
            f"Expected a JSON array, got {type(payload).__name__}"
        )
    days: list[DayColor] = []
    for entry in payload:
        try:
            code = entry[API_KEY_CODE]
            if isinstance(code, bool) or not isinstance(code, int):
                raise TypeError(f"colour code {code!r} is not an integer")
            days.append(
                DayColor(
                    day=parse_api_date(entry[API_KEY_DATE]),
                    code=code,
                    period=entry.get(API_KEY_PERIOD),
                )
            )
        except (KeyError, TypeError, ValueError, AttributeError) as err:
            raise TempoResponseError(
                f"Invalid day entry {entry!r}: {err!r}"
            ) from err
    return days


def check_day_sequence(
    days: list[DayColor],
    start: datetime.date,
    end: datetime.date,
) -> None:
    """Check that days cover start..end, one entry per date, without gaps."""
    if len(days) < 2:
        raise DataError(f"Expected at least 2 days, got {len(days)}")
    if days[0].day != start:
        raise DataError(
            f"Sequence starts on {days[0].day}, expected leading day {start}"
        )
    for previous, current in zip(days, days[1:]):
        if current.day == previous.day:
            raise DataError(f"Duplicate entry for {current.day}")
        if current.day != previous.day + datetime.timedelta(days=1):
            raise DataError(
                f"Non-contiguous days: {previous.day} followed by {current.day}"
            )
    if days[-1].day != end:
        raise DataError(f"Sequence ends on {days[-1].day}, expected {end}")
