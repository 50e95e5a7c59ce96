"""Plain forecast records produced by the extractors."""

from dataclasses import dataclass
from enum import Enum

HUMIDITY_LABEL = "UR%"  # relative humidity, percent
PERCEIVED_LABEL = "TP°"  # perceived temperature
MISSING = "--"


class RainType(str, Enum):
    NONE = "none"
    RAIN = "rain"
    SNOW = "snow"


@dataclass(frozen=True)
class DailyForecastItem:
    """One day's summary from the city page.

    ``link`` points at the hourly detail page and is empty when the page
    was parsed through the legacy table layout.
    """
    day: str
    date: str
    icon_ref: str
    weather_code: int
    min_temp: str
    max_temp: str
    description: str
    link: str = ""


@dataclass(frozen=True)
class HourlyForecastItem:
    """One hour slot from a day's detail page.

    ``time`` is kept exactly as the site writes it ("14:00" or a bare "3").
    ``humidity_label`` tells what ``humidity_value`` holds, humidity
    percent or perceived temperature.
    """
    time: str
    icon_ref: str
    weather_code: int
    temp: str
    rain: str
    rain_type: RainType
    wind: str
    snow_level: str = MISSING
    air_quality: str = MISSING
    visibility: str = MISSING
    humidity_value: str = MISSING
    humidity_label: str = HUMIDITY_LABEL


def error_item(cause):
    """Builds the single daily item shown when extraction failed entirely.

    Args:
        cause (str or None): Failure message to surface to the user.

    Returns:
        DailyForecastItem: The error sentinel.
    """
    return DailyForecastItem(
        day="Error",
        date="Download failed",
        icon_ref="",
        weather_code=0,
        min_temp=MISSING,
        max_temp=MISSING,
        description=cause or "Unknown error",
        link="",
    )


def is_error_result(items):
    """True when ``items`` is the one-element error sentinel list."""
    return len(items) == 1 and items[0].day == "Error" and not items[0].link
