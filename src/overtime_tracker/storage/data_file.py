from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from ..core.constants import APP_NAME, DATA_FILE_NAME
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass
class DataFileConfig:
    data_dir: Optional[str] = None
    file_name: str = DATA_FILE_NAME


class DataFile:
    """Locates the single JSON file that holds all overtime entries.

    Without an explicit ``data_dir`` the platform's per-application data
    directory is used (``~/.config/overtime`` on Linux, ``%APPDATA%`` on
    Windows, ``~/Library/Application Support`` on macOS).
    """

    def __init__(self, config: DataFileConfig):
        self._config = config

    @property
    def directory(self) -> Path:
        if self._config.data_dir:
            return Path(self._config.data_dir).expanduser()
        return Path(click.get_app_dir(APP_NAME))

    def path(self) -> Path:
        directory = self.directory
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to create data directory {directory}: {exc}") from exc
        path = directory / self._config.file_name
        logger.debug("Using data file %s", path)
        return path
