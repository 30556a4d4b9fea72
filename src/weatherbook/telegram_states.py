"""Conversation states for Telegram bot."""

from enum import IntEnum, auto


class AddStates(IntEnum):
    """States for the add-record conversation."""

    TEMPERATURE = auto()
    HUMIDITY = auto()
    PHENOMENON = auto()
    DATE = auto()
    TIME = auto()


class QueryStates(IntEnum):
    """States for the query conversation."""

    DATE = auto()
    TIME = auto()
