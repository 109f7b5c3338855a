# stdx/net/types.py
"""
types.py.

Does: Value types returned by the HTTP header helpers.
"""

from __future__ import annotations

from typing import NamedTuple

__all__ = ["QValue", "ByteRange"]


class QValue(NamedTuple):
    """One element of a quality-value header such as Accept."""

    value: str
    quality: float = 1.0

    def __str__(self) -> str:
        return f"Value: '{self.value}'; Quality: {self.quality:f}"


class ByteRange(NamedTuple):
    """Inclusive byte offsets from a Range header."""

    first: int
    last: int

    @property
    def length(self) -> int:
        return self.last - self.first + 1


__docformat__ = "google"
