# src/stdx/utils/load_config.py

"""Read JSON tables from the stdx <data/> directory, with an mtime-aware cache.

Modes:
- "raw"             -> the parsed JSON value, untouched
- "validated_dict"  -> a dict[str, Any], optionally passed through a validator

Lookup order for the directory: `base_dir` argument, then $STDX_DATA_DIR,
then the generic $DATA_DIR, then the first `data/` found walking up from this package.
Used by the time-distance wording table and by tests that swap tables in.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal, NamedTuple

# --- optional json5 support for commented tables -----------------------------
try:
    import json5 as _json5
except ImportError:  # pragma: no cover - json5 is an optional extra
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
Validator = Callable[[dict[str, Any]], dict[str, Any]]

__all__ = [
    "Mode",
    "Validator",
    "ENV_VARS",
    "STDX_ENV_VAR",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

STDX_ENV_VAR = "STDX_DATA_DIR"
ENV_VARS = (STDX_ENV_VAR, "DATA_DIR")
_MODES = ("raw", "validated_dict")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No data directory could be located."""


class ConfigFileNotFound(FileNotFoundError):
    """The table is missing, unreadable, or outside the data directory."""


class ConfigParseError(ValueError):
    """The file is not valid JSON, or its validator rejected it."""


class ConfigTypeError(TypeError):
    """The JSON parsed but has the wrong shape for the requested mode."""


# ── Cache ────────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


class _CacheKey(NamedTuple):
    path: Path
    mtime: float
    mode: str
    encoding: str
    allow_comments: bool


_lock = threading.RLock()
_cache: dict[_CacheKey, Any] = {}


def clear_config_cache() -> None:
    """Forget every cached table; the next load re-reads from disk."""
    with _lock:
        dropped = len(_cache)
        _cache.clear()
    log.debug("config cache cleared (%d entries)", dropped)


# ── Locating files ───────────────────────────────────────────────────────────
def _env_data_dir() -> Path | None:
    for var in ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(value).expanduser().resolve()
    return None


def _default_data_dir(start: Path | None = None) -> Path:
    """First existing `data/` beside `start` or any of its parents."""
    origin = (start or Path(__file__)).resolve()
    tried = []
    for folder in (origin, *origin.parents):
        candidate = folder / "data"
        if candidate.is_dir():
            return candidate
        tried.append(str(candidate))
    raise DataDirNotFound("no 'data' directory found; tried:\n  " + "\n  ".join(tried))


def _resolve_file(data_dir: Path, file: str | os.PathLike[str]) -> Path:
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"
    path = (data_dir / name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"{name!r} resolves outside the data dir {data_dir}")
    if not path.is_file():
        raise ConfigFileNotFound(f"config file not found: {path}")
    return path


# ── Reading & shaping ────────────────────────────────────────────────────────
def _parse(path: Path, encoding: str, allow_comments: bool) -> Any:
    if allow_comments and _json5 is None:
        raise ConfigParseError(f"{path.name}: allow_comments needs the json5 package")
    parser = _json5 if allow_comments else json
    try:
        with path.open("r", encoding=encoding) as fh:
            return parser.load(fh)
    except OSError as e:
        raise ConfigFileNotFound(f"cannot read {path}: {e}") from e
    except ValueError as e:
        raise ConfigParseError(f"{path.name}: invalid JSON: {e}") from e


def _shape(data: Any, mode: str, path: Path, validator: Validator | None) -> Any:
    if mode == "raw":
        return data
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: mode {mode!r} needs a JSON object, got {type(data).__name__}")
    if validator is None:
        return data
    try:
        return validator(data)
    except Exception as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e


# ── Public API ───────────────────────────────────────────────────────────────
def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
    allow_comments: bool = False,
) -> Any:
    """
    Does: Load <data>/<file>.json and shape it according to `mode`.
          Results without a validator are cached until the file's mtime changes.
    Returns: The parsed value (mode "raw") or a dict (mode "validated_dict").
    Raises: DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError;
            ValueError for an unknown mode.
    """
    if mode not in _MODES:
        raise ValueError(f"Unknown mode {mode!r}; expected one of {', '.join(_MODES)}")

    data_dir = (base_dir or _env_data_dir() or _default_data_dir()).resolve()
    path = _resolve_file(data_dir, file)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"cannot stat {path}: {e}") from e
    key = _CacheKey(path, mtime, mode, encoding, allow_comments)

    if validator is None:
        with _lock:
            if key in _cache:
                log.debug("config cache hit: %s (%s)", path.name, mode)
                return _cache[key]

    result = _shape(_parse(path, encoding, allow_comments), mode, path, validator)

    if validator is None:
        with _lock:
            _cache[key] = result
        log.debug("config cached: %s (%s)", path.name, mode)
    return result


class temp_data_dir:
    """Point $STDX_DATA_DIR at `path` for the duration of a with-block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._path = os.fspath(path)
        self._saved: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._saved = os.environ.get(STDX_ENV_VAR)
        os.environ[STDX_ENV_VAR] = self._path
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._saved is None:
            os.environ.pop(STDX_ENV_VAR, None)
        else:
            os.environ[STDX_ENV_VAR] = self._saved
        clear_config_cache()
