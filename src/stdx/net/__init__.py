# stdx/net/__init__.py
"""
net.
===

Does: Rack::Utils-style HTTP helpers (escaping, Q-values, dates, byte ranges).
Exports: escape, escape_path, unescape, unescape_path, q_values, sort_q_values,
         q_values_from_headers, http_date, get_byte_ranges,
         byte_ranges_from_headers, QValue, ByteRange
Used by: Web handlers and the demo CLI.
"""

from __future__ import annotations

from .http_utils import (
    byte_ranges_from_headers,
    escape,
    escape_path,
    get_byte_ranges,
    http_date,
    q_values,
    q_values_from_headers,
    sort_q_values,
    unescape,
    unescape_path,
)
from .types import ByteRange, QValue

__all__ = [
    # escaping
    "escape",
    "escape_path",
    "unescape",
    "unescape_path",
    # quality values
    "QValue",
    "q_values",
    "q_values_from_headers",
    "sort_q_values",
    # dates
    "http_date",
    # byte ranges
    "ByteRange",
    "get_byte_ranges",
    "byte_ranges_from_headers",
]
