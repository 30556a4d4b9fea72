"""Weather record domain model and field validation - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

MIN_TEMPERATURE = -273
MAX_TEMPERATURE = 100
MIN_HUMIDITY = 0
MAX_HUMIDITY = 100

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class TimeOfDay(Enum):
    """Coarse observation period, used as a stored field and a query key."""

    MORNING = "morning"
    AFTERNOON = "afternoon"


class ValidationError(Enum):
    """Why raw form input could not become a record."""

    EMPTY_FIELD = "empty_field"
    INVALID_TEMPERATURE = "invalid_temperature"
    INVALID_HUMIDITY = "invalid_humidity"
    INVALID_TIME_OF_DAY = "invalid_time_of_day"


@dataclass(frozen=True)
class WeatherRecord:
    """A single weather observation."""

    temperature: int
    humidity: int
    phenomenon: str
    date: str
    time_of_day: TimeOfDay


def parse_time_of_day(raw: str | TimeOfDay | None) -> TimeOfDay | None:
    """Normalize a time-of-day string (case-insensitive, trimmed)."""
    if isinstance(raw, TimeOfDay):
        return raw
    if raw is None:
        return None
    try:
        return TimeOfDay(raw.strip().lower())
    except ValueError:
        return None


def _parse_int(raw: str, low: int, high: int) -> int | None:
    """Parse a plain integer literal within [low, high]."""
    if not _INTEGER_RE.fullmatch(raw):
        return None
    try:
        value = int(raw)
    except ValueError:
        # digit count beyond the interpreter's int conversion limit
        return None
    if value < low or value > high:
        return None
    return value


def validate_and_build(
    temperature_raw: str | None,
    humidity_raw: str | None,
    phenomenon_raw: str | None,
    date_raw: str | None,
    time_raw: str | None,
) -> WeatherRecord | ValidationError:
    """
    Turn raw form fields into a WeatherRecord.

    Checks run in a fixed order and the first failure wins:
    empty field, temperature, humidity, time of day.
    Pure function - no I/O.
    """
    fields = [
        (raw or "").strip()
        for raw in (temperature_raw, humidity_raw, phenomenon_raw, date_raw, time_raw)
    ]
    if not all(fields):
        return ValidationError.EMPTY_FIELD

    temperature_str, humidity_str, phenomenon, date_str, time_str = fields

    temperature = _parse_int(temperature_str, MIN_TEMPERATURE, MAX_TEMPERATURE)
    if temperature is None:
        return ValidationError.INVALID_TEMPERATURE

    humidity = _parse_int(humidity_str, MIN_HUMIDITY, MAX_HUMIDITY)
    if humidity is None:
        return ValidationError.INVALID_HUMIDITY

    time_of_day = parse_time_of_day(time_str)
    if time_of_day is None:
        return ValidationError.INVALID_TIME_OF_DAY

    return WeatherRecord(
        temperature=temperature,
        humidity=humidity,
        phenomenon=phenomenon,
        date=date_str,
        time_of_day=time_of_day,
    )


def validate_query(
    date_raw: str | None, time_raw: str | None
) -> tuple[str, TimeOfDay] | ValidationError:
    """Validate the (date, time-of-day) pair used as a lookup key."""
    date_str = (date_raw or "").strip()
    time_str = (time_raw or "").strip()
    if not date_str or not time_str:
        return ValidationError.EMPTY_FIELD

    time_of_day = parse_time_of_day(time_str)
    if time_of_day is None:
        return ValidationError.INVALID_TIME_OF_DAY
    return date_str, time_of_day


def current_date(now: datetime | None = None) -> str:
    """Today's date as YYYY-MM-DD."""
    now = now or datetime.now()
    return now.strftime("%Y-%m-%d")


def current_time_period(now: datetime | None = None) -> TimeOfDay:
    """Morning before noon, afternoon otherwise."""
    now = now or datetime.now()
    return TimeOfDay.MORNING if now.hour < 12 else TimeOfDay.AFTERNOON
