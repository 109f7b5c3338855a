# stdx/timex/__init__.py
"""
timex.
=====

Does: Human-readable time distances and calendar helpers.
Exports: distance_of_time_in_words, time_ago_in_words, is_leap_year, within
Used by: Status output and the demo CLI.
"""

from __future__ import annotations

from .distance import (
    MINUTES_IN_QUARTER_YEAR,
    MINUTES_IN_THREE_QUARTERS_YEAR,
    MINUTES_IN_YEAR,
    distance_of_time_in_words,
    is_leap_year,
    time_ago_in_words,
    within,
)

__all__ = [
    "MINUTES_IN_YEAR",
    "MINUTES_IN_QUARTER_YEAR",
    "MINUTES_IN_THREE_QUARTERS_YEAR",
    "distance_of_time_in_words",
    "time_ago_in_words",
    "is_leap_year",
    "within",
]
