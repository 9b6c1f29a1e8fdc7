"""Worker leases: admission control for how many compiler processes run at once."""

from __future__ import annotations

import os
from contextlib import AbstractContextManager, contextmanager
from threading import BoundedSemaphore
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Generator


class WorkerLeaseService(Protocol):
    def lease(self) -> AbstractContextManager[None]:
        """Acquire lease for single process, released on leaving scope (even on errors)."""
        ...


class SemaphoreWorkerLeaseService:
    """Limits concurrently running invocations within current process."""

    def __init__(self, max_workers: int | None = None) -> None:
        self.max_workers = max_workers or os.cpu_count() or 1
        self._semaphore = BoundedSemaphore(self.max_workers)

    @contextmanager
    def lease(self) -> Generator[None]:
        with self._semaphore:
            yield
