"""Record repository interface."""

from typing import Protocol

from weatherbook.core.records import TimeOfDay, WeatherRecord
from weatherbook.core.store import InsertResult


class RecordRepository(Protocol):
    """Interface front ends use to store and look up weather records."""

    @property
    def capacity(self) -> int:
        """Maximum number of records."""
        ...

    @property
    def size(self) -> int:
        """Number of records currently held."""
        ...

    def insert(self, record: WeatherRecord) -> InsertResult:
        """Append a record, or report that the repository is full."""
        ...

    def query(self, date: str, time_of_day: TimeOfDay | str) -> list[WeatherRecord]:
        """Fetch records matching a date and time of day."""
        ...

    def close(self) -> None:
        """Release all records."""
        ...
