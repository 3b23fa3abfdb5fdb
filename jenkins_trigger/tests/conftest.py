from pathlib import Path
from typing import Any, Callable, Generator

import pytest

from jenkins_trigger.config.settings import Config
from jenkins_trigger.log.sensitive import SensitiveLogFilter

DEFAULT_URL = "http://jenkins.example.com"
STAGING_URL = "http://staging.jenkins.example.com"


@pytest.fixture(autouse=True)
def isolate_sensitive_patterns() -> Generator[None, None, None]:
    original_patterns = SensitiveLogFilter.compiled_patterns.copy()
    yield
    SensitiveLogFilter.compiled_patterns = original_patterns


@pytest.fixture
def raw_config() -> dict[str, Any]:
    return {
        "jenkins": {
            "build": "build",
            "poll_build_result_interval_second": 10,
            "poll_build_result_counts": 60,
            "instances": [
                {
                    "name": "default",
                    "url": DEFAULT_URL,
                    "user": "user",
                    "password": "default-secret-token",
                },
                {
                    "name": "staging",
                    "url": STAGING_URL,
                    "user": "user",
                    "password": "staging-secret-token",
                },
            ],
        },
        "file": {"path": "jobs.txt"},
    }


@pytest.fixture
def make_config(raw_config: dict[str, Any]) -> Callable[..., Config]:
    def _make_config(**jenkins_overrides: Any) -> Config:
        return Config.model_validate(
            {
                **raw_config,
                "jenkins": {**raw_config["jenkins"], **jenkins_overrides},
            }
        )

    return _make_config


@pytest.fixture
def config(make_config: Callable[..., Config]) -> Config:
    return make_config()


@pytest.fixture
def config_file(tmp_path: Path) -> Callable[..., Path]:
    def _write(config_text: str, job_list: str = "") -> Path:
        (tmp_path / "jobs.txt").write_text(job_list)
        path = tmp_path / "config.toml"
        path.write_text(config_text)
        return path

    return _write
