from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

LOCATE_POLL_INTERVAL_SECONDS = 3
LOCATE_POLL_MAX_ATTEMPTS = 30


class JobState(StrEnum):
    TRIGGERED = "triggered"
    LOCATED = "located"
    EXECUTING = "executing"
    DONE = "done"


class JobSpec(BaseModel):
    """A job fully resolved against its instance and the global defaults."""

    model_config = ConfigDict(frozen=True)

    name: str
    instance_name: str
    build: str
    poll_build_result_interval_second: int
    poll_build_result_counts: int
    locate_poll_interval_second: int = LOCATE_POLL_INTERVAL_SECONDS
    locate_poll_counts: int = LOCATE_POLL_MAX_ATTEMPTS
    parameters: dict[str, str] | None = None

    @property
    def identity(self) -> str:
        return f"{self.instance_name}/{self.name}"


@dataclass(frozen=True)
class JobOutcome:
    result: str | None = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("JobOutcome holds exactly one of result or error")

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def succeeded(self) -> bool:
        return self.result == "SUCCESS"

    def __str__(self) -> str:
        if self.error is not None:
            return f"{type(self.error).__name__}: {self.error}"
        return str(self.result)


@dataclass(frozen=True)
class CompletionEvent:
    index: int
    identity: str
    outcome: JobOutcome
