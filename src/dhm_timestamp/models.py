from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DurationParts:
    days: int
    hours: int      # 0-23
    minutes: int    # 0-59, sin segundos

    def has_days(self) -> bool:
        return self.days > 0
