"""Plain-text rendering of weather records."""

from .records import TimeOfDay, WeatherRecord
from .suitability import judge_suitability


def render_record(record: WeatherRecord) -> str:
    """Multi-line rendering of a record followed by its travel suitability."""
    suitability = judge_suitability(record)
    return "\n".join(
        [
            f"Temperature: {record.temperature}°C",
            f"Humidity: {record.humidity}%",
            f"Phenomenon: {record.phenomenon}",
            f"Date: {record.date}",
            f"Time: {record.time_of_day.value}",
            f"Travel suitability: {suitability.label} ({suitability.detail})",
        ]
    )


def render_matches(date: str, time_of_day: TimeOfDay, records: list[WeatherRecord]) -> str:
    """Numbered listing of query results, or a not-found notice."""
    if not records:
        return f"No records found for:\nDate: {date}\nTime: {time_of_day.value}"

    blocks = [f"Found {len(records)} record(s) for {date} ({time_of_day.value}):"]
    for i, record in enumerate(records, start=1):
        blocks.append(f"Record #{i}:\n{render_record(record)}")
    return "\n\n".join(blocks)
