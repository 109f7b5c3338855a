# stdx/stringx/split/__init__.py
"""
split
=====

Does: Expose the Ruby-style field splitter.
Exports: split
Used by: stdx.net header parsing and the demo CLI.
"""

from .split_core import split

__all__ = ["split"]
