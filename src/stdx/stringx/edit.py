# stdx/stringx/edit.py
# ──────────────────────────────────────────────────────────────
# Small Ruby String methods: padding, chomping, inserting, deleting
# ──────────────────────────────────────────────────────────────
"""
edit.

Does: Provide Ruby-flavoured single-string helpers (casecmp, center, chomp,
      chr, insert, char insertion/deletion, iteration) plus a quoted list
      renderer used in trace output.
Returns: New strings; inputs are never mutated.
Used by: Callers porting Ruby string code; split tracing (format_strings).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

__all__ = [
    "casecmp",
    "center",
    "chomp",
    "chr",
    "insert",
    "insert_char",
    "insert_chars",
    "delete_char",
    "delete_matching_chars",
    "each_char",
    "is_ascii",
    "format_strings",
]


# ──────────────────────────────────────────────────────────────
# 1) Comparison
# ──────────────────────────────────────────────────────────────


def casecmp(a: str, b: str) -> int:
    """
    Does: Compare `a` and `b` ignoring case (Unicode case folding).
    Returns: -1 if `a` sorts first, 0 if equal, 1 if `b` sorts first.

        casecmp("foo", "FOO")   -> 0
        casecmp("foo", "food")  -> -1
        casecmp("foo", "fod")   -> 1
    """
    fa, fb = a.casefold(), b.casefold()
    return (fa > fb) - (fa < fb)


def is_ascii(s: str) -> bool:
    return s.isascii()


# ──────────────────────────────────────────────────────────────
# 2) Padding & trimming
# ──────────────────────────────────────────────────────────────


def _fill(pad: str, n: int) -> str:
    return (pad * (n // len(pad) + 1))[:n]


def center(s: str, width: int, pad: str = " ") -> str:
    """
    Does: Center `s` in `width`, cycling `pad` from its first char on each
          side; the right side gets the extra char when the split is odd.
    Returns: `s` itself when it is already at least `width` long.

        center("hello", 20, "123") -> "1231231hello12312312"
    """
    if not pad:
        raise ValueError("zero width padding")
    total = width - len(s)
    if total <= 0:
        return s
    left = total // 2
    return _fill(pad, left) + s + _fill(pad, total - left)


def chomp(s: str, separator: str | None = None) -> str:
    """
    Does: Remove a trailing record separator.
          None (or "\\n"): one trailing "\\r\\n", "\\n" or "\\r".
          "": every trailing "\\n" / "\\r\\n" (a lone "\\r" stops it).
          other: that suffix, once, if present.
    """
    if separator is None or separator == "\n":
        if s.endswith("\r\n"):
            return s[:-2]
        if s.endswith(("\n", "\r")):
            return s[:-1]
        return s
    if separator == "":
        while s.endswith("\n"):
            s = s[:-2] if s.endswith("\r\n") else s[:-1]
        return s
    return s[: -len(separator)] if s.endswith(separator) else s


def chr(s: str) -> str:  # noqa: A001 - mirrors Ruby's String#chr
    """Does: Return the first character of `s`, or "" for an empty string."""
    return s[:1]


# ──────────────────────────────────────────────────────────────
# 3) Insertion & deletion
# ──────────────────────────────────────────────────────────────


def insert(s: str, index: int, other: str) -> str:
    """
    Does: Insert `other` before the char at `index`. Negative indexes count
          back from the end and insert after that char (-1 appends).
    Returns: `s + other` when `index` is past the end; `s` unchanged when a
             negative index reaches before the start.

        insert("foo", 1, "bar")   -> "fbaroo"
        insert("foo", -2, "bar")  -> "fobaro"
    """
    n = len(s)
    if index < 0:
        index += n + 1
        if index < 0:
            return s
    if index >= n:
        return s + other
    return s[:index] + other + s[index:]


def insert_chars(s: str, pos: int, *chars: str) -> str:
    """
    Does: Insert every char of `chars` at `pos` (clamped to len(s);
          negative counts from the end, -1 appends).
    """
    if not chars:
        return s
    n = len(s)
    if pos < 0:
        pos = max(n + pos + 1, 0)
    pos = min(pos, n)
    return s[:pos] + "".join(chars) + s[pos:]


def insert_char(s: str, char: str, pos: int) -> str:
    """
    Does: Single-char variant of insert_chars.

        insert_char("helloworld", " ", 5)   -> "hello world"
        insert_char("helloworld", "!", 10)  -> "helloworld!"
    """
    return insert_chars(s, pos, char)


def delete_char(s: str, index: int) -> str:
    """Does: Drop the char at `index`; out-of-range indexes leave `s` as is."""
    if 0 <= index < len(s):
        return s[:index] + s[index + 1 :]
    return s


def delete_matching_chars(s: str, char: str) -> str:
    return s.replace(char, "")


# ──────────────────────────────────────────────────────────────
# 4) Iteration & rendering
# ──────────────────────────────────────────────────────────────


def each_char(s: str, block: Callable[[str], object] | None = None) -> Iterator[str] | None:
    """
    Does: Call `block` with each character of `s`.
    Returns: An iterator over the characters when no block is given, else None.
    """
    if block is None:
        return iter(s)
    for ch in s:
        block(ch)
    return None


def format_strings(items: Iterable[str]) -> str:
    """Does: Render strings as ["a", "b"] for logs and assertion messages."""
    return "[" + ", ".join(f'"{item}"' for item in items) + "]"
