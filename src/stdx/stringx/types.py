# src/stdx/stringx/types.py
"""
types.py.

Does: Define the tagged pattern variant used by `split` and the loose
      pattern alias accepted by the scanning helpers.
"""

from __future__ import annotations

import re
from typing import Literal, NamedTuple, Union

__all__ = ["SplitKind", "PatternLike", "SplitPattern"]

SplitKind = Literal["awk", "string", "chars", "regexp", "unknown"]

PatternLike = Union[str, re.Pattern, None]


class SplitPattern(NamedTuple):
    """
    Does: Carry the resolved split mode plus its payload.
          kind="string" holds `literal`, kind="regexp" holds `regex`.
    """

    kind: SplitKind
    literal: str | None = None
    regex: re.Pattern[str] | None = None

    @classmethod
    def resolve(cls, pattern: object) -> SplitPattern:
        """
        Does: Classify `pattern` once, at call entry.
        Returns: awk for None or " ", chars for "", string for other text,
                 regexp for a compiled str pattern, unknown otherwise.
        """
        if pattern is None:
            return cls("awk")
        if isinstance(pattern, str):
            if pattern == "":
                return cls("chars")
            if pattern == " ":
                return cls("awk")
            return cls("string", literal=pattern)
        if isinstance(pattern, re.Pattern) and isinstance(pattern.pattern, str):
            return cls("regexp", regex=pattern)
        return cls("unknown")


__docformat__ = "google"
