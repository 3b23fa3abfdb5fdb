from typing import Any

from loguru import logger

from jenkins_trigger.config.settings import (
    BuildDefaults,
    Config,
    JenkinsInstanceConfig,
)
from jenkins_trigger.core.models import JobSpec
from jenkins_trigger.exceptions.config import ConfigError

REQUIRED_FIELDS = (
    "build",
    "poll_build_result_interval_second",
    "poll_build_result_counts",
)


def _resolve_field(field: str, *layers: BuildDefaults | None) -> Any:
    for layer in layers:
        if layer is None:
            continue
        value = getattr(layer, field)
        if value is not None:
            return value
    return None


def resolve_job(config: Config, job_name: str, instance_name: str) -> JobSpec:
    instance: JenkinsInstanceConfig | None = config.jenkins.get_instance(instance_name)
    if instance is None:
        raise ConfigError(f"No {instance_name} related jenkins configuration")

    layers = (instance.jobs.get(job_name), instance, config.jenkins)
    values = {field: _resolve_field(field, *layers) for field in REQUIRED_FIELDS}

    missing = [field for field, value in values.items() if value is None]
    if missing:
        raise ConfigError(
            f"Missing job, instance or global `{'`, `'.join(missing)}` "
            f"configuration for {instance_name}/{job_name}"
        )

    parameters = _resolve_field("parameters", *layers)
    return JobSpec(
        name=job_name,
        instance_name=instance.name,
        parameters=dict(parameters) if parameters is not None else None,
        **values,
    )


def _parse_instance_marker(line: str) -> str | None:
    if line.startswith("[") and line.endswith("]"):
        return line[1:-1].strip()
    return None


def resolve_jobs(job_list: str, config: Config) -> list[JobSpec]:
    """
    Expands the job list text into resolved jobs, in the order they appear.

    A `[name]` line switches the instance for the following lines, blank lines
    are skipped and every other line is a job name. Jobs listed before any
    marker belong to the first configured instance.
    """
    instance_name = config.jenkins.instances[0].name
    jobs: list[JobSpec] = []
    for line in job_list.splitlines():
        trimmed_line = line.strip()
        if not trimmed_line:
            continue
        if (marker := _parse_instance_marker(trimmed_line)) is not None:
            instance_name = marker
            continue
        jobs.append(resolve_job(config, trimmed_line, instance_name))

    logger.debug(f"Resolved {len(jobs)} jobs: {[job.identity for job in jobs]}")
    return jobs
