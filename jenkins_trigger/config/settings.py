from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

from pydantic import Field, PositiveInt, PrivateAttr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jenkins_trigger.config.base import BaseTriggerModel

LogLevelType = Literal["ERROR", "WARNING", "INFO", "DEBUG", "CRITICAL"]


class ApplicationSettings(BaseSettings):
    log_level: LogLevelType = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="JENKINS_TRIGGER__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class BuildDefaults(BaseTriggerModel):
    """
    The overridable build settings, shared by the global, instance and job
    layers. A job resolves each value from the most specific layer that sets it.
    """

    build: str | None = None
    poll_build_result_interval_second: PositiveInt | None = None
    poll_build_result_counts: PositiveInt | None = None
    parameters: dict[str, str] | None = None


class JenkinsJobConfig(BuildDefaults):
    pass


class JenkinsInstanceConfig(BuildDefaults):
    name: str
    url: str
    user: str
    password: str = Field(..., json_schema_extra={"sensitive": True})
    jobs: dict[str, JenkinsJobConfig] = Field(default_factory=dict)

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"{value!r} is not an absolute http(s) URL")
        return value


class JenkinsConfig(BuildDefaults):
    instances: list[JenkinsInstanceConfig] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_unique_instance_names(self) -> "JenkinsConfig":
        seen: set[str] = set()
        for instance in self.instances:
            if instance.name in seen:
                raise ValueError(f"Duplicate jenkins instance name {instance.name!r}")
            seen.add(instance.name)
        return self

    def get_instance(self, name: str) -> JenkinsInstanceConfig | None:
        return next(
            (instance for instance in self.instances if instance.name == name), None
        )


class FileConfig(BaseTriggerModel):
    path: Path


class Config(BaseTriggerModel):
    jenkins: JenkinsConfig
    file: FileConfig
    _base_path: Path = PrivateAttr(default_factory=Path)

    @property
    def base_path(self) -> Path:
        return self._base_path

    @property
    def job_list_path(self) -> Path:
        if self.file.path.is_absolute():
            return self.file.path
        return self._base_path / self.file.path
