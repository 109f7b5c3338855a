"""
http_utils.py.
=============

Does: Rack::Utils-style helpers for HTTP services: URI escaping, quality-value
      header parsing, IMF-fixdate formatting and Range header parsing.
Returns: Plain strings, QValue lists and ByteRange lists (None when a header
         is missing or syntactically invalid).
Used by: Web handlers that need Rack semantics without Rack.
"""

from __future__ import annotations

# ── Imports & Typing ─────────────────────────────────────────────────────────
import logging
import re
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from email.utils import format_datetime
from urllib.parse import quote, quote_plus, unquote, unquote_plus

from requests.structures import CaseInsensitiveDict

from stdx.net.types import ByteRange, QValue
from stdx.stringx import split
from stdx.utils.log import debug

# ── Logger ───────────────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

TOPIC = "http"

# ── Patterns ─────────────────────────────────────────────────────────────────
_LIST_SEP = re.compile(r"\s*,\s*")
_PARAM_SEP = re.compile(r"\s*;\s*")
_QUALITY = re.compile(r"\Aq=([\d.]+)")
_BYTES_UNIT = re.compile(r"bytes=([^;]+)")
_RANGE_SEP = re.compile(r",\s*")
_RANGE_SPEC = re.compile(r"(\d*)-(\d*)")
# a "%" not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Sub-delimiters that stay literal inside a path segment
_PATH_SAFE = "$&+:=@"

__all__ = [
    "escape",
    "escape_path",
    "unescape",
    "unescape_path",
    "q_values",
    "q_values_from_headers",
    "sort_q_values",
    "http_date",
    "get_byte_ranges",
    "byte_ranges_from_headers",
]


# ── Escaping ─────────────────────────────────────────────────────────────────
def escape(s: str) -> str:
    """URI escapes (CGI style, space to +)."""
    return quote_plus(s)


def escape_path(s: str) -> str:
    """Like escape, but with %20 for spaces; "/" is escaped too."""
    return quote(s, safe=_PATH_SAFE)


def unescape(s: str) -> str:
    """Unescape a form/query component ("+" is a space). Returns `s` if it does not decode."""
    if _BAD_ESCAPE.search(s):
        return s
    try:
        return unquote_plus(s, errors="strict")
    except UnicodeDecodeError:
        return s


def unescape_path(s: str) -> str:
    """Unescape a path component ("+" stays). Returns `s` if it does not decode."""
    if _BAD_ESCAPE.search(s):
        return s
    try:
        return unquote(s, errors="strict")
    except UnicodeDecodeError:
        return s


# ── Quality values ───────────────────────────────────────────────────────────
def q_values(header: str) -> list[QValue]:
    """
    Does: Parse a quality-value header (Accept, Accept-Encoding, ...).
          Elements without a q parameter get 1.0; an unparsable q gets 0.0.
    Returns: QValues in header order; [] for an empty header.

        q_values("text/html, application/xml;q=0.9")
        -> [QValue("text/html", 1.0), QValue("application/xml", 0.9)]
    """
    if not header:
        return []

    values: list[QValue] = []
    for part in split(header, _LIST_SEP):
        value_params = split(part, _PARAM_SEP)
        if not value_params:
            continue
        value = value_params[0]
        params = value_params[1] if len(value_params) > 1 else ""

        md = _QUALITY.match(params)
        if md is None:
            quality = 1.0
        else:
            try:
                quality = float(md.group(1))
            except ValueError:
                logger.debug("unparsable quality %r for %r", md.group(1), value)
                quality = 0.0
        values.append(QValue(value, quality))

    debug(f"q_values({header!r}) -> {len(values)} values", TOPIC)
    return values


def sort_q_values(values: Iterable[QValue], *, descending: bool = True) -> list[QValue]:
    """Stable sort by quality; equal qualities keep header order."""
    return sorted(values, key=lambda qv: qv.quality, reverse=descending)


def q_values_from_headers(headers: Mapping[str, str], name: str = "Accept") -> list[QValue]:
    """q_values for header `name`, looked up case-insensitively."""
    return q_values(CaseInsensitiveDict(headers).get(name, ""))


# ── Dates ────────────────────────────────────────────────────────────────────
def http_date(dt: datetime) -> str:
    """
    Does: Format `dt` for HTTP headers, e.g. "Sun, 06 Nov 1994 08:49:37 GMT".
          Naive datetimes are taken as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)


# ── Byte ranges ──────────────────────────────────────────────────────────────
def get_byte_ranges(range_header: str, size: int) -> list[ByteRange] | None:
    """
    Does: Parse a "Range:" header value against a resource of `size` bytes
          (RFC 2616 14.35). Suffix ranges ("-500") count from the end, open
          ranges ("500-") run to the end, and ends past the resource are
          truncated.
    Returns: None if the header is missing or syntactically invalid
             (including backwards ranges); [] if no range is satisfiable or
             the resource is empty.
    """
    if not range_header:
        return None
    if size <= 0:
        return []

    m = _BYTES_UNIT.search(range_header)
    if m is None:
        return None

    ranges: list[ByteRange] = []
    for range_spec in split(m.group(1), _RANGE_SEP):
        rs = _RANGE_SPEC.search(range_spec)
        if rs is None:
            return None
        x0, x1 = rs.group(1), rs.group(2)

        if x0 == "":
            if x1 == "":
                return None
            # suffix-byte-range-spec, represents trailing suffix of file
            r0 = max(size - int(x1), 0)
            r1 = size - 1
        else:
            r0 = int(x0)
            if x1 == "":
                r1 = size - 1
            else:
                r1 = int(x1)
                if r1 < r0:
                    # backwards range is syntactically invalid
                    return None
                if r0 >= size:
                    continue
                r1 = min(r1, size - 1)

        if r0 <= r1:
            ranges.append(ByteRange(r0, r1))

    debug(f"get_byte_ranges({range_header!r}, {size}) -> {ranges}", TOPIC)
    return ranges


def byte_ranges_from_headers(headers: Mapping[str, str], size: int) -> list[ByteRange] | None:
    """get_byte_ranges for the request's Range header, looked up case-insensitively."""
    return get_byte_ranges(CaseInsensitiveDict(headers).get("Range", ""), size)
