from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from typing import List, Optional, Sequence

from .errors import InvalidDurationError
from .formatting import decompose_duration, format_duration_as_timestamp
from .io_json import load_durations

logger = logging.getLogger(__name__)


def _format_all(values: List[float], as_json: bool) -> str:
    if not as_json:
        return "\n".join(format_duration_as_timestamp(v) for v in values)

    rows = []
    for v in values:
        row = {"seconds": v}
        row.update(asdict(decompose_duration(v)))
        row["formatted"] = format_duration_as_timestamp(v)
        rows.append(row)
    return json.dumps(rows, ensure_ascii=False, indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="dhm-timestamp",
        description="Format durations in seconds as 'Dd Hh Mm' (days only when >= 1 day; seconds truncated).",
    )
    ap.add_argument("seconds", nargs="*", type=float, help="Durations in seconds.")
    ap.add_argument("--input", help="Path to a JSON file with durations (array or {\"durations\": [...]}).")
    ap.add_argument("--json", action="store_true", help="Print days/hours/minutes breakdown as JSON.")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    values: List[float] = list(args.seconds)
    try:
        if args.input:
            loaded = load_durations(args.input)
            logger.debug("Loaded %d durations from %s", len(loaded), args.input)
            values.extend(loaded)

        if not values:
            ap.error("provide at least one duration (positional seconds or --input)")

        output = _format_all(values, args.json)
    except (InvalidDurationError, OSError, json.JSONDecodeError) as e:
        logger.error("%s", e)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
