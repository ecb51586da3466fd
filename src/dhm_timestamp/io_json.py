from __future__ import annotations

import json
import numbers
from typing import Any, List

from .errors import InvalidDurationError, InvalidDurationsFileError


def load_durations(path: str) -> List[float]:
    """
    Load durations (seconds) from a JSON file: either a bare array
    or an object with a "durations" array.
    """
    with open(path, "r", encoding="utf-8") as f:
        data: Any = json.load(f)

    if isinstance(data, dict):
        data = data.get("durations")
    if not isinstance(data, list):
        raise InvalidDurationsFileError(path, "expected a JSON array or an object with a 'durations' array")

    durations: List[float] = []
    for item in data:
        if isinstance(item, bool) or not isinstance(item, numbers.Real):
            raise InvalidDurationError(item, f"not a number (in {path})")
        durations.append(item)

    return durations
