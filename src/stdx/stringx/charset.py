# stdx/stringx/charset.py
"""
charset.py.

Does: Parse Ruby character-set specs ("a-z", "^aeiou", "\\^x") and apply
      them the way String#count, #delete, #squeeze and #tr do.
Returns: Counts and rewritten strings.
Used by: Ruby-style text cleanup in callers of stdx.stringx.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import NamedTuple

__all__ = [
    "InvalidCharSetError",
    "CharSpec",
    "parse_spec",
    "count",
    "delete",
    "squeeze",
    "tr",
]

log = logging.getLogger(__name__)


class InvalidCharSetError(ValueError):
    """Raise when a spec holds a descending range such as "z-a"."""


class CharSpec(NamedTuple):
    """Expanded characters, in spec order, and whether the set is negated."""

    chars: tuple[str, ...]
    negated: bool


# ── Parsing ──────────────────────────────────────────────────────────────────


def _tokenize(spec: str) -> list[tuple[str, bool]]:
    """Split into (char, escaped) pairs; a backslash makes the next char literal."""
    tokens: list[tuple[str, bool]] = []
    i = 0
    while i < len(spec):
        c = spec[i]
        if c == "\\" and i + 1 < len(spec):
            tokens.append((spec[i + 1], True))
            i += 2
        else:
            tokens.append((c, False))
            i += 1
    return tokens


@lru_cache(maxsize=256)
def parse_spec(spec: str, allow_negation: bool = True) -> CharSpec:
    """
    Does: Expand `spec` into its characters. "c1-c2" is an inclusive range,
          a leading "^" negates (only when the spec is longer than "^"),
          "\\" escapes the next char; a "-" at either end is literal.
    Returns: CharSpec(chars, negated).
    Raises: InvalidCharSetError on a descending range.
    """
    negated = False
    body = spec
    if allow_negation and len(spec) > 1 and spec[0] == "^":
        negated = True
        body = spec[1:]

    tokens = _tokenize(body)
    chars: list[str] = []
    j = 0
    while j < len(tokens):
        lo = tokens[j][0]
        if j + 2 < len(tokens) and tokens[j + 1] == ("-", False):
            hi = tokens[j + 2][0]
            if hi < lo:
                raise InvalidCharSetError(
                    f'invalid range "{lo}-{hi}" in string transliteration'
                )
            chars.extend(chr(code) for code in range(ord(lo), ord(hi) + 1))
            j += 3
        else:
            chars.append(lo)
            j += 1
    return CharSpec(tuple(chars), negated)


def _member(specs: tuple[str, ...]) -> Callable[[str], bool]:
    """Build a predicate for the intersection of all `specs`."""
    sets = []
    for spec in specs:
        parsed = parse_spec(spec)
        sets.append((frozenset(parsed.chars), parsed.negated))

    def member(ch: str) -> bool:
        return all((ch in chars) != negated for chars, negated in sets)

    return member


# ── Operations ───────────────────────────────────────────────────────────────


def count(s: str, *specs: str) -> int:
    """
    Does: Count chars of `s` in the intersection of `specs`.
    Returns: 0 when no spec is given.

        count("hello world", "lo")         -> 5
        count("hello world", "lo", "o")    -> 2
        count("hello world", "hello", "^l") -> 4
    """
    if not specs:
        return 0
    member = _member(specs)
    return sum(1 for ch in s if member(ch))


def delete(s: str, *specs: str) -> str:
    """
    Does: Remove chars of `s` in the intersection of `specs`.

        delete("hello", "l", "lo")      -> "heo"
        delete("hello", "aeiou", "^e")  -> "hell"
    """
    if not specs:
        return s
    member = _member(specs)
    return "".join(ch for ch in s if not member(ch))


def squeeze(s: str, *specs: str) -> str:
    """
    Does: Collapse runs of the same char to one, for chars in the
          intersection of `specs`. Empty specs are ignored; with none left
          every run collapses.

        squeeze("yellow moon")               -> "yelow mon"
        squeeze("putters shoot balls", "m-z") -> "puters shot balls"
    """
    specs = tuple(spec for spec in specs if spec)
    member = _member(specs) if specs else (lambda ch: True)
    out: list[str] = []
    prev = None
    for ch in s:
        if ch == prev and member(ch):
            continue
        out.append(ch)
        prev = ch
    return "".join(out)


def tr(s: str, from_str: str, to_str: str) -> str:
    """
    Does: Translate chars of `from_str` to the matching chars of `to_str`,
          padding `to_str` with its last char. A negated `from_str` maps
          every other char to the last char of `to_str`; an empty `to_str`
          deletes instead.

        tr("hello", "el", "ip")      -> "hippo"
        tr("hello", "aeiou", "AA*")  -> "hAll*"
        tr("hello", "^aeiou", "*")   -> "*e**o"
    """
    if not to_str:
        return delete(s, from_str)

    src = parse_spec(from_str)
    dst = parse_spec(to_str, allow_negation=False).chars

    if src.negated:
        keep = frozenset(src.chars)
        fill = dst[-1]
        return "".join(ch if ch in keep else fill for ch in s)

    table: dict[int, str] = {}
    for i, c in enumerate(src.chars):
        table[ord(c)] = dst[i] if i < len(dst) else dst[-1]
    log.debug("tr table for %r -> %r has %d entries", from_str, to_str, len(table))
    return s.translate(table)
