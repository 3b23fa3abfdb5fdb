import asyncio
from typing import Sequence

from loguru import logger

from jenkins_trigger.clients.jenkins.types import (
    JenkinsBuildResult,
    JenkinsQueueItem,
    api_json_url,
)
from jenkins_trigger.core.models import CompletionEvent, JobOutcome, JobSpec, JobState
from jenkins_trigger.core.registry import InstanceRegistry
from jenkins_trigger.core.renderer import ProgressRenderer
from jenkins_trigger.exceptions.base import JenkinsTriggerError


class JobRun:
    """Drives a single job from the trigger to its terminal result."""

    def __init__(self, index: int, job: JobSpec, registry: InstanceRegistry) -> None:
        self.index = index
        self.job = job
        self.registry = registry
        self.state: JobState | None = None

    def _transition(self, state: JobState) -> None:
        logger.debug(f"{self.job.identity}: {self.state} -> {state}")
        self.state = state

    async def _drive(self) -> str:
        client = self.registry.get_client(self.job.instance_name)

        location = await client.trigger(self.job)
        self._transition(JobState.TRIGGERED)

        queue_item = await client.poll_until_field(
            api_json_url(location),
            JenkinsQueueItem,
            self.job.locate_poll_interval_second,
            self.job.locate_poll_counts,
        )
        build_url = api_json_url(queue_item.executable.url)
        self._transition(JobState.LOCATED)

        await client.poll_until_field(
            build_url,
            JenkinsBuildResult,
            self.job.locate_poll_interval_second,
            self.job.locate_poll_counts,
        )
        self._transition(JobState.EXECUTING)

        return await client.poll_for_result(build_url, self.job)

    async def run(self) -> CompletionEvent:
        try:
            outcome = JobOutcome(result=await self._drive())
        except JenkinsTriggerError as e:
            logger.info(f"{self.job.identity} failed: {e}")
            outcome = JobOutcome(error=e)
        except Exception as e:
            logger.exception(f"Unexpected error while running {self.job.identity}")
            outcome = JobOutcome(error=e)

        self._transition(JobState.DONE)
        return CompletionEvent(self.index, self.job.identity, outcome)


class Orchestrator:
    def __init__(
        self,
        jobs: Sequence[JobSpec],
        registry: InstanceRegistry,
        renderer: ProgressRenderer | None = None,
    ) -> None:
        self.jobs = list(jobs)
        self.registry = registry
        self.renderer = renderer or ProgressRenderer(self.jobs)

    async def _run_job(
        self, job_run: JobRun, completions: "asyncio.Queue[CompletionEvent]"
    ) -> None:
        await completions.put(await job_run.run())

    async def run(self) -> list[JobOutcome]:
        """
        Launches every job at once and renders each completion as it arrives.
        Returns the outcomes in the original job order.
        """
        completions: asyncio.Queue[CompletionEvent] = asyncio.Queue()
        tasks = [
            asyncio.create_task(
                self._run_job(JobRun(index, job, self.registry), completions),
                name=job.identity,
            )
            for index, job in enumerate(self.jobs)
        ]
        logger.info(f"Triggered {len(tasks)} jobs")

        self.renderer.draw()
        outcomes: list[JobOutcome | None] = [None] * len(self.jobs)
        for _ in range(len(tasks)):
            event = await completions.get()
            logger.info(f"{event.identity} -> {event.outcome}")
            outcomes[event.index] = event.outcome
            self.renderer.update(event.index, str(event.outcome))

        await asyncio.gather(*tasks)
        return [outcome for outcome in outcomes if outcome is not None]
