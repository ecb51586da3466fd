from __future__ import annotations

from typing import Any, Optional


class InvalidDurationError(ValueError):
    """Raised when a duration cannot be formatted (negative, NaN, inf or not a number)."""

    def __init__(self, value: Any, reason: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Invalid duration {value!r}: {reason}")
        self.value = value
        self.reason = reason


class InvalidDurationsFileError(InvalidDurationError):
    """Raised when a durations file does not hold a JSON array of numbers."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(path, reason, f"Invalid durations file {path!r}: {reason}")
        self.path = path
