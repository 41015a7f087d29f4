"""Task registration and dispatch."""

import sys
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, TextIO

import structlog

from ..config.defaults import NetworkProfile, ProjectConfig
from ..errors import UnknownTaskError
from ..signers import SignerProvider, provider_for

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TaskContext:
    """Everything a task may look at while it runs."""
    config: ProjectConfig
    network: NetworkProfile
    out: TextIO = field(default_factory=lambda: sys.stdout)
    signer_provider: Callable[[NetworkProfile], SignerProvider] = provider_for

    def signers(self) -> SignerProvider:
        return self.signer_provider(self.network)


TaskAction = Callable[[TaskContext], Awaitable[Any]]


@dataclass(frozen=True)
class Task:
    """A named task and the coroutine function that implements it."""
    name: str
    description: str
    action: TaskAction


class TaskRegistry:
    """Registry of named tasks."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def register(self, name: str, description: str, action: TaskAction) -> Task:
        if name in self._tasks:
            raise ValueError(f"Task '{name}' is already registered")
        registered = Task(name=name, description=description, action=action)
        self._tasks[name] = registered
        return registered

    def task(self, name: str, description: str) -> Callable[[TaskAction], TaskAction]:
        """Decorator registering an async function as a task."""
        def decorator(action: TaskAction) -> TaskAction:
            self.register(name, description, action)
            return action
        return decorator

    def get(self, name: str) -> Task:
        try:
            return self._tasks[name]
        except KeyError:
            raise UnknownTaskError(
                f"Unknown task '{name}'",
                task_name=name,
                available=self.names(),
            ) from None

    def names(self) -> list[str]:
        return sorted(self._tasks)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __iter__(self):
        return iter(self._tasks[name] for name in self.names())


default_registry = TaskRegistry()
task = default_registry.task


async def run_task(
    name: str,
    context: TaskContext,
    registry: Optional[TaskRegistry] = None,
) -> Any:
    """Run a registered task against the given context."""
    registry = registry or default_registry
    selected = registry.get(name)

    logger.debug("Running task", task=name, network=context.network.name)
    result = await selected.action(context)
    logger.debug("Task finished", task=name, network=context.network.name)
    return result
