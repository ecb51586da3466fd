from __future__ import annotations

# Unidades fijas (sin calendario: 1 d = 24 h, 1 h = 60 m)
MS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

MS_PER_MINUTE = MS_PER_SECOND * SECONDS_PER_MINUTE
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY

# Plantillas de salida
HOURS_MINUTES_FORMAT = "{hours}h {minutes}m"
DAYS_PREFIX_FORMAT = "{days}d "
