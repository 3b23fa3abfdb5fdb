from types import TracebackType
from typing import Iterator, Mapping, Type

from loguru import logger

from jenkins_trigger.clients.jenkins.client import JenkinsClient
from jenkins_trigger.config.settings import Config
from jenkins_trigger.exceptions.config import ConfigError


class InstanceRegistry(Mapping[str, JenkinsClient]):
    """
    Jenkins clients by instance name. Built once from the configuration and
    only read afterwards, so every job task shares it without locking.
    """

    def __init__(self, clients: dict[str, JenkinsClient]) -> None:
        self._clients = dict(clients)

    @classmethod
    def from_config(cls, config: Config) -> "InstanceRegistry":
        return cls(
            {
                instance.name: JenkinsClient.create_from_instance_configuration(instance)
                for instance in config.jenkins.instances
            }
        )

    def __getitem__(self, instance_name: str) -> JenkinsClient:
        return self._clients[instance_name]

    def get_client(self, instance_name: str) -> JenkinsClient:
        try:
            return self._clients[instance_name]
        except KeyError:
            raise ConfigError(f"No jenkins instance named {instance_name}") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._clients)

    def __len__(self) -> int:
        return len(self._clients)

    async def aclose(self) -> None:
        for name, client in self._clients.items():
            logger.debug(f"Closing http client of jenkins instance {name}")
            await client.aclose()

    async def __aenter__(self) -> "InstanceRegistry":
        return self

    async def __aexit__(
        self,
        exc_type: Type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()
