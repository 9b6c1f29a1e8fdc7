"""Build operations: named scopes around logical units of build work (e.g single compilation)."""

from __future__ import annotations

from contextlib import AbstractContextManager, contextmanager
from time import perf_counter_ns
from typing import TYPE_CHECKING, Literal, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

type MessageLevel = Literal["INFO", "WARNING", "ERROR"]
type OnMessage = Callable[[MessageLevel, str], None]

NANOS_TO_SECONDS = 1_000_000_000


class BuildOperationExecutor(Protocol):
    def operation(self, name: str) -> AbstractContextManager[None]:
        """Scope of single operation, closed on both success and failure."""
        ...


class TimedBuildOperationExecutor:
    """Reports start and finish of each operation with time it took."""

    def __init__(self, on_message: OnMessage | None = None) -> None:
        self.on_message = on_message

    @contextmanager
    def operation(self, name: str) -> Generator[None]:
        self._emit("INFO", f"{name}...")
        start_time = perf_counter_ns()
        try:
            yield
        except BaseException:
            time_taken = (perf_counter_ns() - start_time) / NANOS_TO_SECONDS
            self._emit("ERROR", f"{name} failed after {time_taken:.2f}s")
            raise
        time_taken = (perf_counter_ns() - start_time) / NANOS_TO_SECONDS
        self._emit("INFO", f"{name} took {time_taken:.2f}s")

    def _emit(self, level: MessageLevel, text: str) -> None:
        if self.on_message:
            self.on_message(level, text)
