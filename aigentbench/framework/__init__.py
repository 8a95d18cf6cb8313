"""Boundary to the agent framework driven by the benchmarks."""

from aigentbench.framework.base import (
    AgentFramework,
    AgentRun,
    FrameworkError,
    FrameworkLoadError,
    RunTimeoutError,
)
from aigentbench.framework.loader import load_framework
from aigentbench.framework.scripted import ScriptedFramework
from aigentbench.framework.types import (
    AgentConfig,
    ApprovalEvent,
    ContentEvent,
    Document,
    ErrorEvent,
    EvalEvent,
    Event,
    Memory,
    ModelHandle,
    ModelResponse,
    Session,
    Tool,
    ToolCall,
    ToolEvent,
    Trace,
)

__all__ = [
    "AgentFramework",
    "AgentRun",
    "FrameworkError",
    "FrameworkLoadError",
    "RunTimeoutError",
    "load_framework",
    "ScriptedFramework",
    "AgentConfig",
    "ApprovalEvent",
    "ContentEvent",
    "Document",
    "ErrorEvent",
    "EvalEvent",
    "Event",
    "Memory",
    "ModelHandle",
    "ModelResponse",
    "Session",
    "Tool",
    "ToolCall",
    "ToolEvent",
    "Trace",
]
