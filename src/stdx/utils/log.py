"""
log.py.

Does: Topic-gated stderr tracing for the stdx helpers. Topics are listed in
      STDX_DEBUG_TOPICS (comma-separated, or 'all'); nothing prints when it is unset.
Returns: Timestamped "[ts] [topic][LEVEL] msg" lines. Used by split, net and timex.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["ENV_VAR", "debug", "enabled", "reload_topics", "active_topics"]

ENV_VAR = "STDX_DEBUG_TOPICS"
ALL = "all"


def _key(topic: str) -> str:
    return topic.strip().lower()


def _read_env() -> frozenset[str]:
    return frozenset(_key(part) for part in os.environ.get(ENV_VAR, "").split(",") if part.strip())


_topics = _read_env()


def reload_topics() -> None:
    """Does: Re-read STDX_DEBUG_TOPICS (tests and long-lived processes)."""
    global _topics
    _topics = _read_env()


def active_topics() -> frozenset[str]:
    return _topics


def enabled(topic: str) -> bool:
    """Does: True when `topic` or 'all' is switched on."""
    return ALL in _topics or _key(topic) in _topics


def debug(
    msg: str,
    topic: str = "stdx",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Write `msg` tagged with `topic` and `level` when the topic is enabled.
    Lines go to `stream`, stderr by default.
    """
    if not enabled(topic):
        return
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{stamp}] [{_key(topic)}][{level.upper()}] {msg}", file=stream or sys.stderr)
