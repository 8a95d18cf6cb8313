"""Reusable checks applied to eval events and tool calls.

Every check returns ``(passed, score, message)`` with the score in [0, 1].
"""

from __future__ import annotations

import json
from typing import Any, Callable

from aigentbench.framework.types import EvalEvent

CheckOutcome = tuple[bool, float, str]
EvalCheck = Callable[[EvalEvent], CheckOutcome]
ToolCheck = Callable[[str, dict[str, Any]], CheckOutcome]


def has_keywords(*keywords: str) -> EvalCheck:
    """Passes when at least half the keywords occur in the response, ignoring case."""
    def check(event: EvalEvent) -> CheckOutcome:
        if not keywords:
            return True, 1.0, "no keywords to check"
        content = event.response.content.lower()
        matches = sum(1 for keyword in keywords if keyword.lower() in content)
        score = matches / len(keywords)
        return score >= 0.5, score, f"found {matches}/{len(keywords)} keywords"
    return check


def calls_tools(*tools: str) -> EvalCheck:
    """Passes when at least half the named tools are called in the response."""
    def check(event: EvalEvent) -> CheckOutcome:
        if not tools:
            return True, 1.0, "no tools to check"
        called = {call.name for call in event.response.tool_calls}
        matches = sum(1 for tool in tools if tool in called)
        score = matches / len(tools)
        return score >= 0.5, score, f"called {matches}/{len(tools)} expected tools"
    return check


def has_content(min_length: int) -> EvalCheck:
    def check(event: EvalEvent) -> CheckOutcome:
        length = len(event.response.content.strip())
        passed = length >= min_length
        score = 1.0 if passed else length / min_length
        return passed, score, f"content length: {length} chars (min {min_length})"
    return check


def latency_under(max_seconds: float) -> EvalCheck:
    """Score decays as max/actual once the call runs over budget."""
    def check(event: EvalEvent) -> CheckOutcome:
        passed = event.duration <= max_seconds
        score = 1.0 if passed else max_seconds / event.duration
        return passed, score, f"took {event.duration:.2f}s (max {max_seconds:.2f}s)"
    return check


def no_errors() -> EvalCheck:
    def check(event: EvalEvent) -> CheckOutcome:
        if event.error is None:
            return True, 1.0, "no errors"
        return False, 0.0, f"error: {event.error}"
    return check


def no_tool_calls() -> EvalCheck:
    def check(event: EvalEvent) -> CheckOutcome:
        count = len(event.response.tool_calls)
        if count == 0:
            return True, 1.0, "no tool calls"
        return False, 0.0, f"has {count} tool calls"
    return check


def sequence_check(expected_sequence: int) -> EvalCheck:
    def check(event: EvalEvent) -> CheckOutcome:
        passed = event.sequence == expected_sequence
        return passed, 1.0 if passed else 0.0, f"sequence {event.sequence} (expected {expected_sequence})"
    return check


# Tool checks


def tool_args_not_empty() -> ToolCheck:
    def check(tool_name: str, args: dict[str, Any]) -> CheckOutcome:
        if not args:
            return False, 0.0, f"{tool_name} called without arguments"
        return True, 1.0, f"{tool_name} called with {len(args)} arguments"
    return check


def tool_args_contains(expected_text: str) -> ToolCheck:
    def check(tool_name: str, args: dict[str, Any]) -> CheckOutcome:
        rendered = json.dumps(args, sort_keys=True, default=str)
        if expected_text in rendered:
            return True, 1.0, f"{tool_name} arguments contain {expected_text!r}"
        return False, 0.0, f"{tool_name} arguments missing {expected_text!r}"
    return check
