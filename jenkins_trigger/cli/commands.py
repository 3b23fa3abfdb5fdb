# -*- coding: utf-8 -*-
import sys
from pathlib import Path

import click
from rich.console import Console

from jenkins_trigger.exceptions.config import ConfigError

DEFAULT_CONFIG_FILE_NAME = "config.toml"

error_console = Console(stderr=True)


def default_config_path() -> Path:
    return Path(sys.argv[0]).resolve().parent / DEFAULT_CONFIG_FILE_NAME


@click.command()
@click.argument(
    "config_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
def cli_start(config_path: Path | None) -> None:
    """
    Triggers every job listed in the job list file, waits for all of them to
    finish and prints their results.

    CONFIG_PATH: Path to the configuration file. Defaults to config.toml next
    to the executable.
    """
    from jenkins_trigger.run import run

    try:
        run(config_path or default_config_path())
    except ConfigError as e:
        error_console.print(str(e), markup=False, highlight=False, soft_wrap=True)
        sys.exit(1)
