from pathlib import Path

import tomli
from pydantic import ValidationError

from jenkins_trigger.config.settings import Config
from jenkins_trigger.exceptions.config import ConfigError


def load_config(config_path: Path) -> Config:
    try:
        with open(config_path, "rb") as f:
            file_config = tomli.load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read the config file {str(config_path)!r}: {e}")
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse the config file {str(config_path)!r}: {e}")

    try:
        config = Config.model_validate(file_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {str(config_path)!r}: {e}")

    config._base_path = config_path.resolve().parent
    return config


def read_job_list(config: Config) -> str:
    path = config.job_list_path
    try:
        return path.read_text("utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read {str(path)!r}: {e}")
