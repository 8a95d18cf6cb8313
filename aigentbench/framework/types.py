"""Value types crossing the agent framework boundary."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelHandle(BaseModel):
    """Identifies a model the framework should call on the agent's behalf."""

    model_name: str = Field(description="Model identifier (e.g., 'gpt-4o-mini', 'llama3.2')")
    provider: str = Field(description="Provider name (e.g., 'openai', 'ollama', 'google')")
    api_key: Optional[str] = Field(default=None, repr=False)
    base_url: Optional[str] = Field(default=None)

    def __str__(self) -> str:
        return self.model_name


@dataclass
class ToolCall:
    """A tool call requested by the model."""
    name: str
    args: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: uuid4().hex[:12])

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "args": self.args}


@dataclass
class ModelResponse:
    """One model turn: text content and any tool calls."""
    content: str = ""
    tool_calls: list[ToolCall] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "tool_calls": [t.to_dict() for t in self.tool_calls],
        }


@dataclass
class Tool:
    """A callable tool made available to an agent."""
    name: str
    description: str
    execute: Callable[[dict[str, Any]], Any]
    input_schema: dict[str, Any] = field(default_factory=lambda: {"type": "object", "properties": {}})
    require_approval: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
            "require_approval": self.require_approval,
        }


@dataclass
class Document:
    """An in-memory document attached to an agent."""
    name: str
    content: bytes
    mime_type: str = "text/plain"
    id: str = field(default_factory=lambda: uuid4().hex[:12])

    @property
    def is_text(self) -> bool:
        return self.mime_type.startswith("text/")

    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


@dataclass
class Memory:
    """Memory handle: named compartments of saved entries."""
    compartments: dict[str, list[str]] = field(default_factory=dict)

    def save(self, content: str, compartment: str = "session") -> None:
        self.compartments.setdefault(compartment, []).append(content)

    def get(self, compartment: str = "session") -> list[str]:
        return list(self.compartments.get(compartment, []))

    def clear(self, compartment: str) -> None:
        self.compartments.pop(compartment, None)

    def content(self, compartment: str = "session") -> str:
        return "\n".join(self.compartments.get(compartment, []))


@dataclass
class Trace:
    """Trace handle: an append-only record of what a run did."""
    entries: list[dict[str, Any]] = field(default_factory=list)
    id: str = field(default_factory=lambda: uuid4().hex[:12])

    def record(self, kind: str, **data: Any) -> None:
        self.entries.append({"kind": kind, "timestamp": datetime.utcnow().isoformat(), **data})


@dataclass
class Session:
    """Session handle shared by the runs of one benchmark case."""
    id: str = field(default_factory=lambda: uuid4().hex[:12])
    trace: Optional[Trace] = None
    context: dict[str, Any] = field(default_factory=dict)


class AgentConfig(BaseModel):
    """Configuration record for one agent handed to the framework."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = ""
    description: str = ""
    instructions: str = ""
    model: Optional[ModelHandle] = None
    agents: list["AgentConfig"] = Field(default_factory=list)
    tools: list[Tool] = Field(default_factory=list)
    documents: list[Document] = Field(default_factory=list)
    memory: Optional[Memory] = None
    trace: Optional[Trace] = None
    session: Optional[Session] = None
    stream: bool = False
    enable_evaluation: bool = False
    max_llm_calls: int = Field(default=20, gt=0)

    def system_prompt(self) -> str:
        """Description and instructions joined the way agents are briefed."""
        parts = [p.strip() for p in (self.description, self.instructions) if p and p.strip()]
        return "\n\n".join(parts)


AgentConfig.model_rebuild()


# Events


@dataclass
class Event:
    """Base class for everything a run delivers."""
    run_id: str
    agent_name: str = ""


@dataclass
class ContentEvent(Event):
    content: str = ""


@dataclass
class ToolEvent(Event):
    tool_name: str = ""
    args: dict[str, Any] = field(default_factory=dict)
    result: Any = None
    error: Optional[str] = None


@dataclass
class ApprovalEvent(Event):
    approval_id: str = ""
    tool_name: str = ""
    args: dict[str, Any] = field(default_factory=dict)


@dataclass
class ErrorEvent(Event):
    err: Optional[BaseException] = None


@dataclass
class EvalEvent(Event):
    """One LLM call, reported when the agent has evaluation enabled."""
    sequence: int = 0
    timestamp: datetime = field(default_factory=datetime.utcnow)
    duration: float = 0.0
    messages: list[dict[str, Any]] = field(default_factory=list)
    response: ModelResponse = field(default_factory=ModelResponse)
    error: Optional[BaseException] = None
