"""Bounded in-memory weather record store."""

import logging
import threading
from enum import Enum

from .records import TimeOfDay, WeatherRecord, parse_time_of_day

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10


class InsertResult(Enum):
    """Outcome of RecordStore.insert."""

    INSERTED = "inserted"
    FULL = "full"


class StoreClosedError(RuntimeError):
    """Raised when a closed store is used."""


class RecordStore:
    """
    Append-only, fixed-capacity collection of weather records.

    Implements RecordRepository protocol. Insertion order is preserved,
    duplicates are kept, and records are never updated or removed.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._records: list[WeatherRecord] = []
        self._lock = threading.Lock()
        self._closed = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._records)

    def __len__(self) -> int:
        return self.size

    def insert(self, record: WeatherRecord) -> InsertResult:
        """Append a record unless the store is at capacity."""
        with self._lock:
            self._check_open()
            if len(self._records) >= self._capacity:
                logger.warning(f"Store full ({self._capacity} records), rejecting insert")
                return InsertResult.FULL
            self._records.append(record)
            logger.debug(
                f"Inserted record for {record.date} ({record.time_of_day.value}), "
                f"size now {len(self._records)}/{self._capacity}"
            )
            return InsertResult.INSERTED

    def query(self, date: str, time_of_day: TimeOfDay | str) -> list[WeatherRecord]:
        """
        Records whose date equals `date` exactly and whose time of day matches.

        Returns a new list in insertion order; empty when nothing matches.
        """
        period = parse_time_of_day(time_of_day)
        if period is None:
            raise ValueError(f"time_of_day must be 'morning' or 'afternoon', got {time_of_day!r}")

        with self._lock:
            self._check_open()
            matches = [r for r in self._records if r.date == date and r.time_of_day == period]
        logger.debug(f"Query {date} ({period.value}) matched {len(matches)} record(s)")
        return matches

    def close(self) -> None:
        """Release all records. The store cannot be used afterwards."""
        with self._lock:
            if self._closed:
                return
            logger.info(f"Closing store, releasing {len(self._records)} record(s)")
            self._records.clear()
            self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "RecordStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise StoreClosedError("record store is closed")
