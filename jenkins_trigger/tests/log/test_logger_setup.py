import sys
from typing import Generator

import pytest
from loguru import logger

from jenkins_trigger.log.logger_setup import setup_logger
from jenkins_trigger.log.sensitive import SensitiveLogFilter, sensitive_log_filter


@pytest.fixture(autouse=True)
def restore_logger() -> Generator[None, None, None]:
    original_patterns = SensitiveLogFilter.compiled_patterns.copy()
    yield
    logger.remove()
    logger.add(sys.stderr)
    SensitiveLogFilter.compiled_patterns = original_patterns


def test_logs_never_reach_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logger("INFO")

    logger.info("Triggered 3 jobs")
    logger.complete()

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Triggered 3 jobs" in captured.err


def test_level_filters_lower_messages(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logger("WARNING")

    logger.info("default/build-a: None -> triggered")
    logger.warning("slow jenkins instance")
    logger.complete()

    captured = capsys.readouterr()
    assert "triggered" not in captured.err
    assert "slow jenkins instance" in captured.err


def test_registered_passwords_are_masked(capsys: pytest.CaptureFixture[str]) -> None:
    sensitive_log_filter.hide_sensitive_strings("default-secret-token")
    setup_logger("DEBUG")

    logger.debug("posting with default-secret-token")
    logger.complete()

    captured = capsys.readouterr()
    assert "default-secret-token" not in captured.err
    assert "defaul[REDACTED]" in captured.err
