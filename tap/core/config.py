"""
FILE: tap/core/config.py
PURPOSE: Config store (active task-store path) and environment settings
EXPORTS:
  - config_path() -> Path
  - debug_enabled() -> bool
  - ConfigStore(path)
    - task_file() -> str
    - set_task_file(name) -> None
    - store_path() -> Path
DEPENDENCIES:
  - os, pathlib (stdlib)
  - tap.core.exceptions (ConfigError)
NOTES:
  - Config file is plain text: a single line holding the task-store path
  - Default location ~/.config/tap/tap.conf, override with TAP_CONFIG
  - Directory is created recursively, the file on first access
  - Spaces, tabs and newlines are trimmed on both read and write
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .constants import (
    CONFIG_DIRNAME,
    CONFIG_FILENAME,
    DEFAULT_STORE_FILENAME,
    ENV_PREFIX,
)
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

_TRIM = " \t\n"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def config_dir() -> Path:
    return Path.home() / CONFIG_DIRNAME


def config_path() -> Path:
    """Location of the config store (TAP_CONFIG or ~/.config/tap/tap.conf)."""
    return _env_path(_k("CONFIG"), config_dir() / CONFIG_FILENAME)


def debug_enabled() -> bool:
    return _env_bool(_k("DEBUG"), False)


class ConfigStore:
    """Plain-text file holding the path of the active task store."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else config_path()
        self._ensure()

    def _ensure(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
        except OSError as e:
            raise ConfigError(str(self.path), e.strerror or str(e)) from e

    def task_file(self) -> str:
        """Configured task-store path, trimmed; empty when unset."""
        try:
            return self.path.read_text(encoding="utf-8").strip(_TRIM)
        except OSError as e:
            raise ConfigError(str(self.path), e.strerror or str(e)) from e

    def set_task_file(self, name: str) -> None:
        """Replace the configured task-store path."""
        value = name.strip(_TRIM)
        try:
            self.path.write_text(value, encoding="utf-8")
        except OSError as e:
            raise ConfigError(str(self.path), e.strerror or str(e)) from e
        logger.debug("task file set to %s in %s", value, self.path)

    def store_path(self) -> Path:
        """Configured task-store path, falling back to the default store."""
        name = self.task_file()
        if not name:
            return self.path.parent / DEFAULT_STORE_FILENAME
        return Path(name).expanduser()
