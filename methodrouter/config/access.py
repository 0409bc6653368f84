"""Process-wide settings cache.

RouterSettings draws on two sources: the JSON settings file and the
``METHODROUTER_*`` environment. A cached entry is tied to a fingerprint of
both, so editing the file or changing one of those variables makes the next
``get_settings`` call reload instead of returning stale values.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import NamedTuple

from loguru import logger

from methodrouter.config.loader import get_config_path, load_settings
from methodrouter.config.schema import RouterSettings

ENV_PREFIX = RouterSettings.model_config.get("env_prefix", "")


class SettingsSource(NamedTuple):
    """What a cached RouterSettings was built from."""

    file_stamp: tuple[int, int] | None  # (mtime_ns, size); None when the file is absent
    env: tuple[tuple[str, str], ...]


_lock = threading.RLock()
_cache: dict[Path, tuple[SettingsSource, RouterSettings]] = {}


def _resolve(config_path: Path | None) -> Path:
    return Path(config_path or get_config_path()).expanduser().resolve()


def _env_overrides() -> tuple[tuple[str, str], ...]:
    prefix = ENV_PREFIX.upper()
    return tuple(sorted((k, v) for k, v in os.environ.items() if k.upper().startswith(prefix)))


def current_source(path: Path) -> SettingsSource:
    try:
        st = path.stat()
    except FileNotFoundError:
        stamp = None
    else:
        stamp = (st.st_mtime_ns, st.st_size)
    return SettingsSource(file_stamp=stamp, env=_env_overrides())


def get_settings(*, config_path: Path | None = None, force_reload: bool = False) -> RouterSettings:
    """Return settings for ``config_path``, reloading when the file or environment changed."""
    path = _resolve(config_path)
    source = current_source(path)
    with _lock:
        cached = _cache.get(path)
        if force_reload or cached is None or cached[0] != source:
            if cached is not None and not force_reload:
                logger.debug("Settings source changed for {}; reloading", path)
            cached = (source, load_settings(path))
            _cache[path] = cached
        return cached[1]


def clear_settings_cache(*, config_path: Path | None = None) -> None:
    """Drop the entry for ``config_path``, or every entry when no path is given."""
    with _lock:
        if config_path is None:
            _cache.clear()
        else:
            _cache.pop(_resolve(config_path), None)
