from __future__ import annotations

import math
import numbers

from .config import (
    DAYS_PREFIX_FORMAT,
    HOURS_MINUTES_FORMAT,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    SECONDS_PER_MINUTE,
)
from .errors import InvalidDurationError
from .models import DurationParts


def _check_duration(duration_seconds: float) -> None:
    # bool es subclase de int, pero no es una duración
    if isinstance(duration_seconds, bool) or not isinstance(duration_seconds, numbers.Real):
        raise InvalidDurationError(duration_seconds, "not a number")
    if not math.isfinite(duration_seconds):
        raise InvalidDurationError(duration_seconds, "not finite")
    if duration_seconds < 0:
        raise InvalidDurationError(duration_seconds, "negative")


def decompose_duration(duration_seconds: float) -> DurationParts:
    """
    Split seconds into whole days, hours (0-23) and minutes (0-59).
    Anything below one minute is truncated.
    """
    _check_duration(duration_seconds)
    millis = duration_seconds * MS_PER_SECOND
    if math.isfinite(millis):
        minutes = int(math.floor(millis / MS_PER_MINUTE))
    else:
        # ms desborda a inf por encima de ~1.8e305 s
        minutes = int(math.floor(duration_seconds / SECONDS_PER_MINUTE))

    days = minutes // MINUTES_PER_DAY
    minutes -= days * MINUTES_PER_DAY

    hours = minutes // MINUTES_PER_HOUR
    minutes -= hours * MINUTES_PER_HOUR

    return DurationParts(days=days, hours=hours, minutes=minutes)


def format_duration_as_timestamp(duration_seconds: float) -> str:
    """
    Format as 'Hh Mm', or 'Dd Hh Mm' when there is at least one full day.
    No zero padding, e.g. 90000 -> '1d 1h 0m'.
    """
    parts = decompose_duration(duration_seconds)
    text = HOURS_MINUTES_FORMAT.format(hours=parts.hours, minutes=parts.minutes)
    if parts.has_days():
        text = DAYS_PREFIX_FORMAT.format(days=parts.days) + text
    return text
