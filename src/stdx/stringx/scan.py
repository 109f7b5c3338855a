# stdx/stringx/scan.py
"""
scan.py.

Does: Ruby String#scan and String#partition over literal or regex patterns.
Returns: Lists of matches (or of group lists) and (before, match, after) triples.
Used by: Callers porting Ruby matching code.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from stdx.stringx.types import PatternLike

__all__ = ["scan", "partition"]


def _as_regex(pattern: object) -> re.Pattern[str] | None:
    if isinstance(pattern, str):
        return re.compile(re.escape(pattern))
    if isinstance(pattern, re.Pattern) and isinstance(pattern.pattern, str):
        return pattern
    return None


def scan(
    s: str,
    pattern: PatternLike,
    block: Callable[[Any], object] | None = None,
) -> list[str] | list[list[str]] | None:
    """
    Does: Collect every non-overlapping match of `pattern` in `s`. Without
          groups each result is the matched text; with groups each result
          is the list of group values ("" for groups that did not take part).
          `block`, when given, is called with each result in order.
    Returns: The results list, or None for an unsupported pattern.

        scan("cruel world", re.compile(r"\\w+"))       -> ["cruel", "world"]
        scan("cruel world", re.compile("(..)(..)"))   -> [["cr", "ue"], ["l ", "wo"]]
    """
    regex = _as_regex(pattern)
    if regex is None:
        return None

    results: list[Any]
    if regex.groups == 0:
        results = [m.group(0) for m in regex.finditer(s)]
    else:
        results = [list(m.groups("")) for m in regex.finditer(s)]

    if block is not None:
        for result in results:
            block(result)
    return results


def partition(s: str, pattern: PatternLike) -> tuple[str, str, str] | None:
    """
    Does: Split `s` around the first occurrence of `pattern`.
    Returns: (before, match, after); (s, "", "") when nothing matches;
             None for a None or unsupported pattern.

        partition("hello", "l")               -> ("he", "l", "lo")
        partition("hello", re.compile(".l"))  -> ("h", "el", "lo")
    """
    if isinstance(pattern, str):
        if pattern == "":
            return ("", "", s)
        return s.partition(pattern)
    regex = _as_regex(pattern)
    if regex is None:
        return None
    m = regex.search(s)
    if m is None:
        return (s, "", "")
    return (s[: m.start()], m.group(0), s[m.end() :])
