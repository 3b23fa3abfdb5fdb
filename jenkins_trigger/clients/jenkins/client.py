import asyncio
from typing import Type, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel

from jenkins_trigger.clients.jenkins.types import JenkinsBuildResult
from jenkins_trigger.config.settings import JenkinsInstanceConfig
from jenkins_trigger.core.models import (
    LOCATE_POLL_INTERVAL_SECONDS,
    LOCATE_POLL_MAX_ATTEMPTS,
    JobSpec,
)
from jenkins_trigger.exceptions.clients import (
    NetworkError,
    PollTimeoutError,
    ProtocolError,
)
from jenkins_trigger.utils.async_http import create_http_client

PageT = TypeVar("PageT", bound=BaseModel)


class JenkinsClient:
    def __init__(
        self,
        instance_name: str,
        jenkins_base_url: str,
        client: httpx.AsyncClient,
    ) -> None:
        self.instance_name = instance_name
        self.jenkins_base_url = jenkins_base_url.rstrip("/")
        self.client = client

    @classmethod
    def create_from_instance_configuration(
        cls, instance: JenkinsInstanceConfig
    ) -> "JenkinsClient":
        return cls(
            instance.name,
            instance.url,
            create_http_client(instance.user, instance.password),
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _get(self, url: str) -> httpx.Response:
        logger.debug(f"Making GET request to {url}")
        try:
            return await self.client.get(url)
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to get {url}: {e}") from e

    async def trigger(self, job: JobSpec) -> str:
        """
        Queues a build of the job and returns the queued item url taken from
        the `Location` header of the response.
        """
        url = f"{self.jenkins_base_url}/job/{job.name}/{job.build}"
        logger.debug(f"Making POST request to {url} with parameters {job.parameters}")

        try:
            response = await self.client.post(url, data=job.parameters or None)
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to post to {url}: {e}") from e

        location = response.headers.get("Location")
        if not location:
            raise ProtocolError(
                f"Failed to get Location in header that respond from posting to {url} "
                f"(status {response.status_code})"
            )
        return location

    async def poll_until_field(
        self,
        url: str,
        model: Type[PageT],
        interval: float = LOCATE_POLL_INTERVAL_SECONDS,
        max_attempts: int = LOCATE_POLL_MAX_ATTEMPTS,
    ) -> PageT:
        """
        Polls `url` until its body decodes as `model`.

        A response that does not decode yet is retried after `interval` seconds,
        transport failures are not.
        """
        for attempt in range(1, max_attempts + 1):
            await asyncio.sleep(interval)
            response = await self._get(url)
            try:
                return model.model_validate(response.json())
            except ValueError as e:
                logger.debug(
                    f"{url} is not a {model.__name__} yet "
                    f"(attempt {attempt}/{max_attempts}): {e}"
                )

        raise PollTimeoutError(
            f"Failed to get necessary field on {url} after {max_attempts} attempts"
        )

    async def poll_for_result(self, url: str, job: JobSpec) -> str:
        counts = job.poll_build_result_counts
        for attempt in range(1, counts + 1):
            await asyncio.sleep(job.poll_build_result_interval_second)
            response = await self._get(url)
            try:
                page = JenkinsBuildResult.model_validate(response.json())
            except ValueError as e:
                raise ProtocolError(f"Failed to deserialize json on {url}: {e}") from e

            if page.result is not None:
                return page.result
            logger.debug(f"{job.identity} still running ({attempt}/{counts})")

        raise PollTimeoutError(
            f"Getting building result timeout on {url} after "
            f"{counts * job.poll_build_result_interval_second}s"
        )
