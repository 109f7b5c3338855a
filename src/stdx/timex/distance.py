# stdx/timex/distance.py
"""
distance.py.

Does: Rails-style approximate time distances ("about 2 hours", "over 3 years")
      plus leap-year and interval helpers.
Returns: Human-readable phrases built from the data/time_words.json table.
Used by: Status pages, logs and the demo CLI.
"""

from __future__ import annotations

import calendar
import math
import os
from datetime import datetime
from pathlib import Path
from typing import Any

from stdx.utils.load_config import STDX_ENV_VAR, ConfigTypeError, load_config
from stdx.utils.log import debug

__all__ = [
    "MINUTES_IN_YEAR",
    "MINUTES_IN_QUARTER_YEAR",
    "MINUTES_IN_THREE_QUARTERS_YEAR",
    "WORDS_FILE",
    "distance_of_time_in_words",
    "time_ago_in_words",
    "is_leap_year",
    "within",
]

# ── Tunables ─────────────────────────────────────────────────────────────────
MINUTES_IN_YEAR = 525600
MINUTES_IN_QUARTER_YEAR = 131400
MINUTES_IN_THREE_QUARTERS_YEAR = 394200
MINUTES_IN_DAY = 1440
MINUTES_IN_MONTH = 43200

WORDS_FILE = "time_words"
# bundled tables; only $STDX_DATA_DIR overrides them, never the generic $DATA_DIR
PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
WORD_KEYS = frozenset(
    {
        "less_than_x_seconds",
        "half_a_minute",
        "less_than_x_minutes",
        "x_minutes",
        "about_x_hours",
        "about_x_days",
        "about_x_months",
        "x_months",
        "about_x_years",
        "over_x_years",
        "almost_x_years",
    }
)


# ── Wording ──────────────────────────────────────────────────────────────────
def _words() -> dict[str, Any]:
    base_dir = None if os.environ.get(STDX_ENV_VAR) else PACKAGE_DATA_DIR
    words = load_config(WORDS_FILE, mode="validated_dict", base_dir=base_dir)
    missing = WORD_KEYS - words.keys()
    if missing:
        raise ConfigTypeError(f"{WORDS_FILE}.json is missing keys: {', '.join(sorted(missing))}")
    return words


def _phrase(key: str, count: int | None = None) -> str:
    """Render `key`; dict entries pick "one" for a count of 1, else "other"."""
    entry = _words()[key]
    if isinstance(entry, dict):
        entry = entry["one" if count == 1 else "other"]
    return entry.format(count=count)


# ── Helpers ──────────────────────────────────────────────────────────────────
def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def within(t: datetime, start: datetime, end: datetime) -> bool:
    """True if `t` falls strictly between `start` and `end`."""
    return start < t < end


def _leap_days_between(from_time: datetime, to_time: datetime) -> int:
    """Count Feb 29ths the span may cross, the way Rails offsets year distances."""
    from_year = from_time.year + (1 if from_time.month >= 3 else 0)
    to_year = to_time.year - (1 if to_time.month < 3 else 0)
    if from_year > to_year:
        return 0
    return sum(1 for year in range(from_year, to_year + 1) if is_leap_year(year))


def _seconds_phrase(seconds: int) -> str:
    if seconds <= 4:
        return _phrase("less_than_x_seconds", 5)
    if seconds <= 9:
        return _phrase("less_than_x_seconds", 10)
    if seconds <= 19:
        return _phrase("less_than_x_seconds", 20)
    if seconds <= 39:
        return _phrase("half_a_minute")
    if seconds <= 59:
        return _phrase("less_than_x_minutes", 1)
    return _phrase("x_minutes", 1)


# ── Public API ───────────────────────────────────────────────────────────────
def distance_of_time_in_words(
    from_time: datetime,
    to_time: datetime,
    include_seconds: bool = False,
) -> str:
    """
    Does: Describe the approximate distance between two datetimes; argument
          order does not matter. Distances up to a minute are broken down
          further when `include_seconds` is set.
    Returns: A phrase such as "less than a minute", "3 minutes",
             "about 2 hours", "about a day", "4 months", "over 2 years".
    Raises: TypeError when mixing naive and aware datetimes.
    """
    if from_time > to_time:
        from_time, to_time = to_time, from_time

    seconds = math.floor(to_time.timestamp()) - math.floor(from_time.timestamp())
    minutes = seconds // 60

    if minutes <= 1:
        if include_seconds:
            return _seconds_phrase(seconds)
        return _phrase("less_than_x_minutes", 1) if minutes == 0 else _phrase("x_minutes", 1)
    if minutes <= 45:
        return _phrase("x_minutes", minutes)
    if minutes <= 90:
        return _phrase("about_x_hours", 1)
    if minutes <= MINUTES_IN_DAY:
        return _phrase("about_x_hours", minutes // 60)
    if minutes <= 2520:
        return _phrase("about_x_days", 1)
    if minutes <= MINUTES_IN_MONTH:
        return _phrase("about_x_days", minutes // MINUTES_IN_DAY)
    if minutes <= 2 * MINUTES_IN_MONTH:
        return _phrase("about_x_months", minutes // MINUTES_IN_MONTH)
    if minutes <= MINUTES_IN_YEAR:
        return _phrase("x_months", minutes // MINUTES_IN_MONTH)

    leap_days = _leap_days_between(from_time, to_time)
    years, remainder = divmod(minutes - leap_days * MINUTES_IN_DAY, MINUTES_IN_YEAR)
    debug(f"{minutes} minutes, {leap_days} leap days -> {years}y + {remainder}m", "timex")

    if remainder < MINUTES_IN_QUARTER_YEAR:
        return _phrase("about_x_years", years)
    if remainder < MINUTES_IN_THREE_QUARTERS_YEAR:
        return _phrase("over_x_years", years)
    return _phrase("almost_x_years", years + 1)


def time_ago_in_words(
    from_time: datetime,
    include_seconds: bool = False,
    *,
    now: datetime | None = None,
) -> str:
    """Like distance_of_time_in_words, with the other end fixed to now (in from_time's zone)."""
    if now is None:
        now = datetime.now(from_time.tzinfo)
    return distance_of_time_in_words(from_time, now, include_seconds)
