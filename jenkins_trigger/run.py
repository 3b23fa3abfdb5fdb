import asyncio
from pathlib import Path

from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from jenkins_trigger.config.settings import ApplicationSettings, Config
from jenkins_trigger.config.utils.load_config import load_config, read_job_list
from jenkins_trigger.core.models import JobOutcome
from jenkins_trigger.core.orchestrator import Orchestrator
from jenkins_trigger.core.registry import InstanceRegistry
from jenkins_trigger.core.renderer import ProgressRenderer
from jenkins_trigger.core.resolver import resolve_jobs
from jenkins_trigger.exceptions.config import ConfigError
from jenkins_trigger.log.logger_setup import setup_logger
from jenkins_trigger.log.sensitive import sensitive_log_filter


async def execute(config: Config, console: Console | None = None) -> list[JobOutcome]:
    # every job is resolved before the first request goes out
    jobs = resolve_jobs(read_job_list(config), config)

    async with InstanceRegistry.from_config(config) as registry:
        orchestrator = Orchestrator(jobs, registry, ProgressRenderer(jobs, console))
        return await orchestrator.run()


def run(config_path: Path, console: Console | None = None) -> list[JobOutcome]:
    try:
        application_settings = ApplicationSettings()
    except ValidationError as e:
        raise ConfigError(f"Invalid application settings: {e}")
    setup_logger(application_settings.log_level)

    config = load_config(config_path)
    sensitive_log_filter.hide_sensitive_strings(*config.get_sensitive_fields_data())

    outcomes = asyncio.run(execute(config, console))
    succeeded = sum(1 for outcome in outcomes if outcome.succeeded)
    logger.info(
        f"Finished {len(outcomes)} jobs: {succeeded} succeeded, "
        f"{len(outcomes) - succeeded} did not"
    )
    return outcomes
