# stdx/stringx/__init__.py
"""
stringx.
=======

Does: Ruby-flavoured string helpers centred on `split`.
Exports: split, count/delete/squeeze/tr, casecmp/center/chomp/chr,
         insert helpers, each_char, scan/partition, scrub, byte offset helpers.
Used by: stdx.net header parsing and any code porting Ruby string logic.
"""

from __future__ import annotations

from .charset import (
    CharSpec,
    InvalidCharSetError,
    count,
    delete,
    parse_spec,
    squeeze,
    tr,
)
from .edit import (
    casecmp,
    center,
    chomp,
    chr,
    delete_char,
    delete_matching_chars,
    each_char,
    format_strings,
    insert,
    insert_char,
    insert_chars,
    is_ascii,
)
from .encoding import (
    REPLACEMENT_CHAR,
    byte_offsets,
    char_index_at_byte,
    scrub,
)
from .scan import (
    partition,
    scan,
)
from .split import split
from .types import PatternLike, SplitKind, SplitPattern

__all__ = [
    # split
    "split",
    "SplitPattern",
    "SplitKind",
    "PatternLike",
    # character sets
    "CharSpec",
    "InvalidCharSetError",
    "parse_spec",
    "count",
    "delete",
    "squeeze",
    "tr",
    # editing
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
    # matching
    "scan",
    "partition",
    # encoding
    "REPLACEMENT_CHAR",
    "scrub",
    "byte_offsets",
    "char_index_at_byte",
]
