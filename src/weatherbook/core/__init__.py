"""Functional core - record store and classification with no UI dependencies."""

from .records import (
    TimeOfDay,
    ValidationError,
    WeatherRecord,
    current_date,
    current_time_period,
    parse_time_of_day,
    validate_and_build,
    validate_query,
)
from .suitability import KNOWN_PHENOMENA, Suitability, judge_suitability
from .store import DEFAULT_CAPACITY, InsertResult, RecordStore, StoreClosedError
from .formatting import render_matches, render_record

__all__ = [
    # Records
    "TimeOfDay",
    "ValidationError",
    "WeatherRecord",
    "current_date",
    "current_time_period",
    "parse_time_of_day",
    "validate_and_build",
    "validate_query",
    # Suitability
    "KNOWN_PHENOMENA",
    "Suitability",
    "judge_suitability",
    # Store
    "DEFAULT_CAPACITY",
    "InsertResult",
    "RecordStore",
    "StoreClosedError",
    # Formatting
    "render_matches",
    "render_record",
]
