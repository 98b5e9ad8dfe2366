from __future__ import annotations

import importlib
import logging
from typing import Optional

import click
from dotenv import find_dotenv, load_dotenv

from . import __version__
from .config import get_settings_module
from .container import build_container
from .core.constants import APP_NAME, DATA_FILE_NAME
from .overtime.controller import register as register_overtime


def resolve_log_level(settings) -> int:
    if getattr(settings, "DEBUG", False):
        return logging.DEBUG
    level = logging.getLevelName(str(getattr(settings, "LOG_LEVEL", "WARNING")).upper())
    # Unknown names come back as "Level <name>" strings.
    return level if isinstance(level, int) else logging.WARNING


def create_cli(*, data_dir: Optional[str] = None) -> click.Group:
    load_dotenv(find_dotenv(usecwd=True), override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(level=resolve_log_level(settings), format="[overtime] %(levelname)s %(name)s: %(message)s")

    container = build_container(
        data_dir=data_dir or getattr(settings, "DATA_DIR", None),
        file_name=getattr(settings, "DATA_FILE_NAME", DATA_FILE_NAME),
    )
    logging.getLogger(__name__).debug("settings=%s data_dir=%s", settings_module, container.data_file.directory)

    @click.group(context_settings={"help_option_names": ["-h", "--help"]})
    @click.version_option(__version__, prog_name=APP_NAME)
    def cli() -> None:
        """Track personal overtime per calendar date."""

    register_overtime(cli, container)

    return cli


def main() -> None:
    create_cli()()


if __name__ == "__main__":
    main()
