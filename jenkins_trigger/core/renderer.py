from typing import Sequence

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from jenkins_trigger.core.models import JobSpec

PENDING_PLACEHOLDER = "pending"


class ProgressRenderer:
    """
    Keeps one status slot per job and repaints the whole block on every update.

    The block always has one line per job in the original job order, so the
    only cursor state needed between draws is the block height. On a terminal
    every line is cleared before it is written and cut to the console width,
    a wrapped line would make the block taller than its height.
    """

    def __init__(self, jobs: Sequence[JobSpec], console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)
        self._names = [job.name for job in jobs]
        self._slots: list[str | None] = [None] * len(jobs)
        self._draws = 0

    @property
    def draws(self) -> int:
        return self._draws

    def lines(self) -> list[str]:
        return [
            f"{name} -> {status if status is not None else PENDING_PLACEHOLDER}"
            for name, status in zip(self._names, self._slots)
        ]

    def update(self, index: int, status: str) -> None:
        self._slots[index] = status
        self.draw()

    def _print_line(self, line: str) -> None:
        if not self.console.is_terminal:
            self.console.out(line, highlight=False)
            return

        self.console.control(Control((ControlType.ERASE_IN_LINE, 2)))
        self.console.print(
            line,
            markup=False,
            highlight=False,
            emoji=False,
            no_wrap=True,
            overflow="ellipsis",
            crop=True,
        )

    def draw(self) -> None:
        if not self._slots:
            return

        if self._draws > 0:
            self.console.control(
                Control.move(0, -len(self._slots)), Control.move_to_column(0)
            )
        for line in self.lines():
            self._print_line(line)
        self._draws += 1
