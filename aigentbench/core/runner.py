"""Draining a run's event sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from aigentbench.framework.base import AgentRun
from aigentbench.framework.types import (
    ApprovalEvent,
    ContentEvent,
    ErrorEvent,
    EvalEvent,
    ToolEvent,
)
from aigentbench.utils.logging import get_logger

logger = get_logger("runner")


@dataclass
class RunOutcome:
    """Everything collected while draining one run."""
    
    chunks: list[str] = field(default_factory=list)
    tool_events: list[ToolEvent] = field(default_factory=list)
    eval_events: list[EvalEvent] = field(default_factory=list)
    errors: list[BaseException] = field(default_factory=list)
    approvals: int = 0
    event_count: int = 0
    
    @property
    def content(self) -> str:
        return "".join(self.chunks)
    
    @property
    def last_chunk(self) -> str:
        return self.chunks[-1] if self.chunks else ""
    
    @property
    def error(self) -> Optional[BaseException]:
        return self.errors[0] if self.errors else None


async def drain_run(
    run: AgentRun,
    *,
    auto_approve: bool = True,
    stop_on_error: bool = True,
    on_eval: Optional[Callable[[EvalEvent], None]] = None,
) -> RunOutcome:
    """
    Consume a run's events until the sequence closes.
    
    Content is accumulated, tool events are kept for inspection, approval
    requests are granted when ``auto_approve`` is set, and the first error
    ends the drain unless ``stop_on_error`` is False.
    
    Args:
        run: The run to drain
        auto_approve: Approve every approval request
        stop_on_error: Return as soon as an error event arrives
        on_eval: Called with every eval event
    """
    outcome = RunOutcome()
    
    async for event in run.events():
        outcome.event_count += 1
        
        if isinstance(event, ContentEvent):
            outcome.chunks.append(event.content)
        elif isinstance(event, ToolEvent):
            outcome.tool_events.append(event)
        elif isinstance(event, ApprovalEvent):
            outcome.approvals += 1
            if auto_approve:
                run.approve(event.approval_id, True)
        elif isinstance(event, ErrorEvent):
            outcome.errors.append(event.err or RuntimeError("unknown run error"))
            if stop_on_error:
                break
        elif isinstance(event, EvalEvent):
            outcome.eval_events.append(event)
            if on_eval is not None:
                on_eval(event)
    
    logger.debug(
        "run %s drained: %d events, %d chunks, %d errors",
        getattr(run, "run_id", "?"), outcome.event_count, len(outcome.chunks), len(outcome.errors),
    )
    return outcome
