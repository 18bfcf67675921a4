"""EDF Tempo price schedule."""

from .config import TempoOptions, validate_price_table
from .exceptions import (
    ConfigurationError,
    DataError,
    FetchError,
    TempoClientError,
    TempoConnectionError,
    TempoError,
    TempoResponseError,
    TempoServerError,
)
from .models import (
    SEGMENT_TEMPLATES,
    DayColor,
    PeakClass,
    PricedInterval,
    TempoColor,
)
from .service import EDFTempoService

__all__ = [
    "ConfigurationError",
    "DataError",
    "DayColor",
    "EDFTempoService",
    "FetchError",
    "PeakClass",
    "PricedInterval",
    "SEGMENT_TEMPLATES",
    "TempoClientError",
    "TempoColor",
    "TempoConnectionError",
    "TempoError",
    "TempoOptions",
    "TempoResponseError",
    "TempoServerError",
    "validate_price_table",
]
