# stdx/stringx/encoding.py
"""
encoding.py.

Does: UTF-8 hygiene helpers: scrub invalid byte runs and map between
      character indexes and UTF-8 byte offsets.
Used by: Callers holding raw bytes or byte offsets from other tools.
"""

from __future__ import annotations

import re
from collections.abc import Callable

__all__ = ["REPLACEMENT_CHAR", "scrub", "byte_offsets", "char_index_at_byte"]

REPLACEMENT_CHAR = "\ufffd"

# surrogateescape maps each undecodable byte to U+DC80..U+DCFF
_INVALID_RUN = re.compile("[\udc80-\udcff\ufffd]+")


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def scrub(
    data: bytes | bytearray | str,
    repl: str | Callable[[bytes], str] = REPLACEMENT_CHAR,
) -> str:
    """
    Does: Decode `data` as UTF-8 and replace each maximal run of invalid
          bytes (U+FFFD characters count as invalid too) with `repl`, or
          with `repl(run_bytes)` when `repl` is callable.
    Returns: Clean text.
    Raises: TypeError if `repl` is neither a str nor a callable.

        scrub(b"ab\\xff\\xcecd")       -> "ab\\ufffdcd"
        scrub(b"ab\\xff\\xcecd", "")   -> "abcd"
    """
    if isinstance(data, (bytes, bytearray)):
        text = bytes(data).decode("utf-8", "surrogateescape")
    else:
        text = data

    if callable(repl):
        return _INVALID_RUN.sub(lambda m: repl(_encode(m.group(0))), text)
    if not isinstance(repl, str):
        raise TypeError(f"scrub replacement must be str or callable, got {type(repl).__name__}")
    return _INVALID_RUN.sub(lambda m: repl, text)


def byte_offsets(s: str) -> dict[int, int] | None:
    """
    Does: Map each character index of `s` to the UTF-8 byte offset where it starts.
    Returns: {char_index: byte_offset}, or None for an empty string.
    """
    if not s:
        return None
    offsets: dict[int, int] = {}
    pos = 0
    for i, ch in enumerate(s):
        offsets[i] = pos
        pos += len(_encode(ch))
    return offsets


def char_index_at_byte(s: str, byte_index: int) -> int:
    """Does: Index of the char starting at `byte_index`, or -1 if that is not a char boundary."""
    for idx, pos in (byte_offsets(s) or {}).items():
        if pos == byte_index:
            return idx
    return -1
