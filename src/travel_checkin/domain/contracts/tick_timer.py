"""Protocol for the recurring countdown tick."""

from collections.abc import Callable
from typing import Protocol


class TickTimerProtocol(Protocol):
    """A cancellable recurring timer with at most one live schedule."""

    @property
    def is_running(self) -> bool:
        """Whether a schedule is currently live."""
        ...

    def start(self, on_tick: Callable[[], None]) -> None:
        """Invoke ``on_tick`` once per interval, replacing any previous schedule."""
        ...

    def cancel(self) -> None:
        """Stop the live schedule, if any."""
        ...
