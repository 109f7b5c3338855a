# stdx/stringx/split/split_core.py

"""
split_core.py.

Does: Ruby-style String#split over four pattern kinds (whitespace runs,
      literal text, single characters, regular expressions) with the
      `limit` rules for capping fields and trailing-empty suppression.
Returns: list[str] of fields; [] for blank input or unsupported patterns.
Used by: Header parsing in stdx.net and the demo CLI.
"""
from __future__ import annotations

import logging
import re

from stdx.stringx.edit import format_strings
from stdx.stringx.types import SplitPattern
from stdx.utils.log import debug, enabled

__all__ = ["split"]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

TOPIC = "split"


# ─────────────────────────────────────────────────────────────────────────────
# Small helpers
# ─────────────────────────────────────────────────────────────────────────────


def _maxsplit(limit: int | None) -> int:
    """Translate a Ruby limit into str.split's maxsplit (-1 = unbounded)."""
    if limit is not None and limit > 0:
        return limit - 1
    return -1


def _strip_trailing_empty(fields: list[str]) -> list[str]:
    while fields and fields[-1] == "":
        fields.pop()
    return fields


# ─────────────────────────────────────────────────────────────────────────────
# Per-mode splitters
# ─────────────────────────────────────────────────────────────────────────────


def _split_awk(s: str, limit: int | None) -> list[str]:
    """
    Does: Split on whitespace runs, ignoring leading/trailing whitespace.
          Separators are whatever str.split() treats as whitespace, which
          includes the \\x1c-\\x1f information separators.
    Returns: Non-empty fields; a capped remainder loses its trailing whitespace.
    """
    fields = s.split(None, _maxsplit(limit))
    if fields:
        fields[-1] = fields[-1].rstrip()
    return fields


def _split_chars(s: str, limit: int | None) -> list[str]:
    """
    Does: One field per character; the last field absorbs the rest once
          `limit` fields exist.
    """
    if limit is not None and 0 < limit < len(s):
        return list(s[: limit - 1]) + [s[limit - 1 :]]
    return list(s)


def _split_literal(s: str, sep: str, limit: int | None) -> list[str]:
    return s.split(sep, _maxsplit(limit))


def _split_regexp(s: str, regex: re.Pattern[str], limit: int | None) -> list[str]:
    """
    Does: Split at each match of `regex`. An empty match at the scan position
          first steps over one character, then cuts that character off as its
          own field, so empty-matching patterns yield single characters.
    Returns: Fields, then the groups of the final splitting match ("" for
             groups that did not participate), then the trailing remainder.
    """
    length = len(s)
    fields: list[str] = []
    beg = 0  # start of the pending field
    start = 0  # scan position
    last_null = False
    last_groups: tuple[str, ...] = ()
    count = 1

    while start <= length:
        m = regex.search(s, start)
        if m is None:
            break
        if m.start() == m.end() == start:
            if not last_null:
                start += 1
                last_null = True
                continue
            fields.append(s[beg : beg + 1])
            beg = start
        else:
            fields.append(s[beg : m.start()])
            beg = start = m.end()
        last_null = False
        last_groups = m.groups("")
        count += 1
        if limit is not None and 0 < limit <= count:
            break

    # Only the final splitting match contributes its captures.
    fields.extend(last_groups)

    if (limit is not None and limit != 0) or length > beg:
        fields.append(s[beg:])
    return fields


# ─────────────────────────────────────────────────────────────────────────────
# Public entry point
# ─────────────────────────────────────────────────────────────────────────────


def split(s: str, pattern: object = None, limit: int | None = None) -> list[str]:
    """
    Does: Divide `s` into fields based on `pattern`.

    - None or " ": whitespace mode; leading/trailing whitespace and runs of
      whitespace are ignored.
    - "": one field per character.
    - any other str: split on each non-overlapping occurrence.
    - compiled regex: split where it matches; zero-length matches split into
      characters; groups of the final match are returned as well.

    `limit` None or 0 drops trailing empty fields; a positive limit returns
    at most that many fields (captured groups not counted) and 1 returns
    `[s]`; a negative limit keeps trailing empty fields.

    Returns: [] when `s` is empty or only whitespace, and for pattern values
             of any other type.
    Used by: q_values/get_byte_ranges and anyone needing Ruby split rules.

    Examples:
        split(" now's  the time ")               -> ["now's", "the", "time"]
        split("1,2,,3,4,,", ",")                 -> ["1", "2", "", "3", "4"]
        split("1,2,,3,4,,", ",", 4)              -> ["1", "2", "", "3,4,,"]
        split("1,2,,3,4,,", ",", -4)             -> ["1", "2", "", "3", "4", "", ""]
        split("hello", re.compile(""), 3)        -> ["h", "e", "llo"]
        split("1:2:3", re.compile("(:)()()"), 2) -> ["1", ":", "", "", "2:3"]
    """
    if not isinstance(s, str) or not s.strip():
        return []
    if limit == 1:
        return [s]

    pat = SplitPattern.resolve(pattern)

    if pat.kind == "awk":
        fields = _split_awk(s, limit)
    elif pat.kind == "chars":
        fields = _split_chars(s, limit)
    elif pat.kind == "string" and pat.literal is not None:
        fields = _split_literal(s, pat.literal, limit)
    elif pat.kind == "regexp" and pat.regex is not None:
        fields = _split_regexp(s, pat.regex, limit)
    else:
        log.debug("split: unsupported pattern type %s", type(pattern).__name__)
        return []

    if not limit:
        _strip_trailing_empty(fields)

    if enabled(TOPIC):
        debug(f"{pat.kind} split of {s!r} (limit={limit}) -> {format_strings(fields)}", TOPIC)
    return fields
