"""Abstract contract of the agent framework the benchmarks drive."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional

from aigentbench.framework.types import AgentConfig, Event, Memory, Session, Trace


class FrameworkError(Exception):
    """Raised when the framework cannot start or complete a run."""


class RunTimeoutError(FrameworkError):
    """Raised when waiting on a run exceeds its timeout."""


class FrameworkLoadError(FrameworkError):
    """Raised when a framework import path cannot be resolved."""


class AgentRun(ABC):
    """
    Handle to one in-flight agent execution.

    A run is consumed either by iterating ``events()`` until it closes or by
    awaiting ``wait()`` for the final text.
    """

    run_id: str

    @abstractmethod
    def events(self) -> AsyncIterator[Event]:
        """Yield content, tool, approval, error and eval events until the run finishes."""
        pass

    @abstractmethod
    async def wait(self, timeout: Optional[float] = None) -> str:
        """
        Block until the run finishes and return its final text.

        Args:
            timeout: Seconds to wait, or None to wait indefinitely

        Raises:
            RunTimeoutError: The run did not finish in time
            FrameworkError: The run failed
        """
        pass

    @abstractmethod
    def approve(self, approval_id: str, approved: bool = True) -> None:
        """Grant or refuse a pending tool call."""
        pass

    @abstractmethod
    async def cancel(self) -> None:
        """Stop the run and return once it has wound down; a finished run is left as is."""
        pass


class AgentFramework(ABC):
    """
    Entry point into an agent framework.

    Implementations wrap a concrete orchestration library; the benchmarks
    only ever call the methods defined here.
    """

    name: str = "framework"

    def new_session(self) -> Session:
        return Session()

    def new_memory(self) -> Memory:
        return Memory()

    def new_trace(self) -> Trace:
        return Trace()

    @abstractmethod
    async def start(self, agent: AgentConfig, prompt: str) -> AgentRun:
        """
        Start running ``agent`` on ``prompt``.

        Raises:
            FrameworkError: The run could not be started
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name})"
