"""Capability registry shared by all benchmark cases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from aigentbench.core.types import BenchResult
from aigentbench.framework.base import AgentFramework
from aigentbench.framework.types import AgentConfig

# (framework, model, timeout=None) -> BenchResult
CapabilityFn = Callable[..., Awaitable[BenchResult]]


@dataclass(frozen=True)
class Capability:
    """A named benchmark case."""
    name: str
    run: CapabilityFn
    description: str = ""


class CapabilityRegistry:
    """Registry of benchmark capabilities, kept in registration order."""
    
    _capabilities: dict[str, Capability] = {}
    
    @classmethod
    def register(cls, name: str, description: str = ""):
        """Decorator to register a capability entry point."""
        def decorator(fn: CapabilityFn) -> CapabilityFn:
            cls._capabilities[name] = Capability(name=name, run=fn, description=description)
            return fn
        return decorator
    
    @classmethod
    def get(cls, name: str) -> Optional[Capability]:
        """Get a capability by name, ignoring case."""
        for capability in cls._capabilities.values():
            if capability.name.lower() == name.lower():
                return capability
        return None
    
    @classmethod
    def list_all(cls) -> list[str]:
        return list(cls._capabilities.keys())
    
    @classmethod
    def all(cls) -> list[Capability]:
        return list(cls._capabilities.values())
    
    @classmethod
    def select(cls, names: Optional[list[str]] = None) -> list[Capability]:
        """Resolve capability names; an empty selection means every capability."""
        if not names:
            return cls.all()
        selected = []
        for name in names:
            capability = cls.get(name)
            if capability is None:
                raise ValueError(f"Unknown capability: {name}")
            selected.append(capability)
        return selected


async def run_and_wait(
    framework: AgentFramework,
    agent: AgentConfig,
    prompt: str,
    timeout: Optional[float] = None,
) -> str:
    """Start ``agent`` on ``prompt`` and block for its final text."""
    run = await framework.start(agent, prompt)
    return await run.wait(timeout)
