"""Shared workflow layer between CLI and Telegram.

Each workflow runs the core calls behind one form action (add, query,
clear, status) and turns the tagged result into the text a front end shows.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from .core.formatting import render_matches, render_record
from .core.records import (
    ValidationError,
    WeatherRecord,
    current_date,
    current_time_period,
    validate_and_build,
    validate_query,
)
from .core.store import InsertResult
from .ports import RecordRepository

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    ValidationError.EMPTY_FIELD: "Please fill in all the fields.",
    ValidationError.INVALID_TEMPERATURE: "Invalid temperature! Must be between -273°C and 100°C.",
    ValidationError.INVALID_HUMIDITY: "Invalid humidity! Must be between 0% and 100%.",
    ValidationError.INVALID_TIME_OF_DAY: "Time must be either 'morning' or 'afternoon'.",
}


@dataclass
class FormFields:
    """Raw text of the five input fields, as a form front end holds them."""

    temperature: str = ""
    humidity: str = ""
    phenomenon: str = ""
    date: str = ""
    time: str = ""

    @classmethod
    def cleared(cls, now: datetime | None = None) -> "FormFields":
        """Empty form with date and time pre-filled from the clock."""
        return cls(date=current_date(now), time=current_time_period(now).value)


@dataclass
class AddOutcome:
    """Result of the add action."""

    ok: bool
    message: str
    record: WeatherRecord | None = None
    error: ValidationError | InsertResult | None = None


@dataclass
class QueryOutcome:
    """Result of the query action."""

    ok: bool
    message: str
    records: list[WeatherRecord] = field(default_factory=list)
    error: ValidationError | None = None


def error_message(error: ValidationError) -> str:
    return f"Error: {ERROR_MESSAGES[error]}"


def full_message(store: RecordRepository) -> str:
    return (
        "Error: Weather book is full!\n"
        f"Maximum capacity: {store.capacity} records\n"
        f"Current records: {store.size}"
    )


def status_message(store: RecordRepository) -> str:
    return f"{store.size}/{store.capacity} records stored"


def add_record(store: RecordRepository, fields: FormFields) -> AddOutcome:
    """Validate the form and insert the resulting record."""
    result = validate_and_build(
        fields.temperature, fields.humidity, fields.phenomenon, fields.date, fields.time
    )
    if isinstance(result, ValidationError):
        logger.info(f"Rejected record: {result.value}")
        return AddOutcome(ok=False, message=error_message(result), error=result)

    if store.insert(result) is InsertResult.FULL:
        return AddOutcome(ok=False, message=full_message(store), record=result, error=InsertResult.FULL)

    return AddOutcome(
        ok=True,
        message=f"Weather record added successfully!\n\n{render_record(result)}",
        record=result,
    )


def query_records(store: RecordRepository, date: str, time: str) -> QueryOutcome:
    """Look up records for a date and time of day and render them."""
    key = validate_query(date, time)
    if isinstance(key, ValidationError):
        logger.info(f"Rejected query: {key.value}")
        return QueryOutcome(
            ok=False,
            message="Error: Please enter valid date and time (morning/afternoon).",
            error=key,
        )

    query_date, time_of_day = key
    records = store.query(query_date, time_of_day)
    return QueryOutcome(
        ok=True,
        message=render_matches(query_date, time_of_day, records),
        records=records,
    )
