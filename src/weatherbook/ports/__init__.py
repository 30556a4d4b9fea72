"""Ports - interfaces/protocols for external dependencies."""

from .record_repo import RecordRepository

__all__ = [
    "RecordRepository",
]
