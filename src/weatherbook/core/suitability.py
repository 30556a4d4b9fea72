"""Travel suitability classification - pure rules, no I/O."""

from enum import Enum

from .records import WeatherRecord

LOW_TEMPERATURE = -10
HIGH_TEMPERATURE = 35
LOW_HUMIDITY = 30
HIGH_HUMIDITY = 80


class Suitability(Enum):
    """Travel suitability label derived from a record."""

    SUITABLE = "Suitable"
    ACCEPTABLE = "Acceptable"
    NOT_IDEAL = "Not ideal"
    NOT_ADVISABLE = "Not advisable"
    DANGEROUS = "Dangerous"
    NOT_SUITABLE = "Not suitable"
    NOT_COMFORTABLE = "Not comfortable"
    UNKNOWN = "Unknown"

    @property
    def detail(self) -> str:
        """Short explanation shown next to the label."""
        return _DETAILS[self]

    @property
    def label(self) -> str:
        return self.value


_DETAILS = {
    Suitability.SUITABLE: "ideal for travel",
    Suitability.ACCEPTABLE: "acceptable conditions",
    Suitability.NOT_IDEAL: "bring rain gear",
    Suitability.NOT_ADVISABLE: "slippery conditions",
    Suitability.DANGEROUS: "avoid travel",
    Suitability.NOT_SUITABLE: "extreme temperature",
    Suitability.NOT_COMFORTABLE: "humidity issues",
    Suitability.UNKNOWN: "unknown conditions",
}

_PHENOMENA = {
    "sunny": Suitability.SUITABLE,
    "cloudy": Suitability.ACCEPTABLE,
    "rainy": Suitability.NOT_IDEAL,
    "snowy": Suitability.NOT_ADVISABLE,
    "stormy": Suitability.DANGEROUS,
}

KNOWN_PHENOMENA = tuple(_PHENOMENA)


def judge_suitability(record: WeatherRecord) -> Suitability:
    """
    Classify a record for travel.

    Extreme temperature wins over humidity, and humidity wins over the
    phenomenon. Bounds are exclusive: -10, 35, 30 and 80 are still fine.
    """
    if record.temperature < LOW_TEMPERATURE or record.temperature > HIGH_TEMPERATURE:
        return Suitability.NOT_SUITABLE
    if record.humidity < LOW_HUMIDITY or record.humidity > HIGH_HUMIDITY:
        return Suitability.NOT_COMFORTABLE
    return _PHENOMENA.get(record.phenomenon.lower(), Suitability.UNKNOWN)
