"""Collaborators consumed by compiler: build operations, worker leases and process invocation."""

from .leases import SemaphoreWorkerLeaseService, WorkerLeaseService
from .operations import (
    BuildOperationExecutor,
    MessageLevel,
    OnMessage,
    TimedBuildOperationExecutor,
)
from .worker import (
    CommandLineToolInvocationWorker,
    CompilerInvocation,
    InvocationResult,
    SubprocessInvocationWorker,
    compose_invocation_environment,
)

__all__ = [
    "BuildOperationExecutor",
    "CommandLineToolInvocationWorker",
    "CompilerInvocation",
    "InvocationResult",
    "MessageLevel",
    "OnMessage",
    "SemaphoreWorkerLeaseService",
    "SubprocessInvocationWorker",
    "TimedBuildOperationExecutor",
    "WorkerLeaseService",
    "compose_invocation_environment",
]
