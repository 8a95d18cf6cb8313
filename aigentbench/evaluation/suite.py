"""Evaluation suites and the processor that scores a run's eval events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from aigentbench.evaluation.checks import EvalCheck, ToolCheck
from aigentbench.framework.types import EvalEvent, ToolCall

# Required count meaning "called at least once"
AT_LEAST_ONCE = -1


@dataclass
class EvalResult:
    """Outcome of one check against one eval event."""
    check_name: str
    passed: bool
    score: float
    message: str = ""
    event_id: str = ""
    event_index: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "check_name": self.check_name,
            "passed": self.passed,
            "score": self.score,
            "message": self.message,
            "event_id": self.event_id,
            "event_index": self.event_index,
        }


@dataclass
class EvalSummary:
    """Aggregate of every check result for a run."""
    total_calls: int = 0
    total_checks: int = 0
    passed_checks: int = 0
    pass_rate: float = 0.0
    average_score: float = 0.0
    total_duration: float = 0.0
    results: list[EvalResult] = field(default_factory=list)


@dataclass
class CallResult:
    """Check results for a single LLM call."""
    call_number: int
    timestamp: datetime
    pass_rate: float
    avg_score: float
    duration: float
    results: list[EvalResult] = field(default_factory=list)


def summarize(results: list[EvalResult], events: list[EvalEvent]) -> EvalSummary:
    if not results:
        return EvalSummary(total_calls=len(events))
    passed = sum(1 for r in results if r.passed)
    return EvalSummary(
        total_calls=len(events),
        total_checks=len(results),
        passed_checks=passed,
        pass_rate=passed / len(results) * 100,
        average_score=sum(r.score for r in results) / len(results),
        total_duration=sum(e.duration for e in events),
        results=list(results),
    )


class EvalSuite:
    """
    A named collection of checks for an agent.

    Universal checks apply to every LLM call. A call that requests tools is
    scored by the matching tool checks; a final (tool-free) call is scored by
    the final checks plus required-tool and efficiency checks over the run
    history.
    """

    def __init__(self, name: str):
        self.name = name
        self.universal_checks: dict[str, EvalCheck] = {}
        self.final_checks: dict[str, EvalCheck] = {}
        self.tool_checks: dict[str, ToolCheck] = {}
        self.required_tools: dict[str, int] = {}

    def add_check(self, name: str, check: EvalCheck) -> None:
        self.universal_checks[name] = check

    def add_final_check(self, name: str, check: EvalCheck) -> None:
        self.final_checks[name] = check

    def add_tool_check(self, tool_name: str, check: ToolCheck) -> None:
        self.tool_checks[tool_name] = check

    def add_final_tool_check(self, tool_name: str, required_count: int = AT_LEAST_ONCE) -> None:
        """Require ``tool_name`` to be called ``required_count`` times (-1: at least once)."""
        if required_count != 0:
            self.required_tools[tool_name] = required_count

    def new_processor(self) -> "EvalProcessor":
        return EvalProcessor(self)

    def evaluate(self, event: EvalEvent) -> list[EvalResult]:
        """Score one event on its own, without run history."""
        return self.evaluate_with_history(event, [event], with_history_checks=False)

    def evaluate_with_history(
        self,
        event: EvalEvent,
        history: list[EvalEvent],
        with_history_checks: bool = True,
    ) -> list[EvalResult]:
        index = self._event_index(event, history)
        results = [
            self._apply(name, check, event, index)
            for name, check in self.universal_checks.items()
        ]

        if event.response.tool_calls:
            for call in event.response.tool_calls:
                check = self.tool_checks.get(call.name)
                if check is not None:
                    passed, score, message = check(call.name, call.args)
                    results.append(EvalResult(
                        check_name=f"tool_{call.name}_quality",
                        passed=passed, score=score, message=message,
                        event_id=event.run_id, event_index=index,
                    ))
                if with_history_checks:
                    score = self._duplicate_score(call, history)
                    results.append(EvalResult(
                        check_name=f"tool_{call.name}_efficiency",
                        passed=score > 0.5, score=score,
                        message=f"tool {call.name} efficiency",
                        event_id=event.run_id, event_index=index,
                    ))
            return results

        results.extend(
            self._apply(name, check, event, index)
            for name, check in self.final_checks.items()
        )
        if with_history_checks:
            required = self._required_tools_score(history)
            results.append(EvalResult(
                check_name="required_tools_complete",
                passed=required > 0.8, score=required,
                message="required tools validation",
                event_id=event.run_id, event_index=index,
            ))
            efficiency = self._efficiency_score(history)
            results.append(EvalResult(
                check_name="overall_efficiency",
                passed=efficiency > 0.7, score=efficiency,
                message="tool usage efficiency",
                event_id=event.run_id, event_index=index,
            ))
        return results

    @staticmethod
    def _apply(name: str, check: EvalCheck, event: EvalEvent, index: int) -> EvalResult:
        passed, score, message = check(event)
        return EvalResult(
            check_name=name, passed=passed, score=score, message=message,
            event_id=event.run_id, event_index=index,
        )

    @staticmethod
    def _event_index(event: EvalEvent, history: list[EvalEvent]) -> int:
        for i, past in enumerate(history):
            if past.run_id == event.run_id and past.sequence == event.sequence:
                return i
        return 0

    @staticmethod
    def _duplicate_score(current: ToolCall, history: list[EvalEvent]) -> float:
        """1.0 for a first call; lower the more earlier calls repeat the same arguments."""
        same_tool = 0
        duplicates = 0
        for event in history:
            for call in event.response.tool_calls:
                if call is current or call.name != current.name:
                    continue
                same_tool += 1
                if call.args == current.args:
                    duplicates += 1
        if same_tool == 0:
            return 1.0
        return 1.0 - duplicates / same_tool

    def _required_tools_score(self, history: list[EvalEvent]) -> float:
        if not self.required_tools:
            return 1.0
        counts: dict[str, int] = {}
        for event in history:
            for call in event.response.tool_calls:
                if call.name in self.required_tools:
                    counts[call.name] = counts.get(call.name, 0) + 1

        total_required = 0
        total_called = 0
        for tool_name, required in self.required_tools.items():
            if required == AT_LEAST_ONCE:
                total_required += 1
                total_called += 1 if counts.get(tool_name, 0) >= 1 else 0
            else:
                total_required += required
                total_called += counts.get(tool_name, 0)
        return min(total_called, total_required) / total_required

    def _efficiency_score(self, history: list[EvalEvent]) -> float:
        """Distinct tools over total calls, with a bonus for short runs."""
        names = [call.name for event in history for call in event.response.tool_calls]
        if not names:
            return 1.0
        efficiency = len(set(names)) / len(names)
        if len(names) <= 3 and self.required_tools:
            efficiency += 0.2
        return min(efficiency, 1.0)


class EvalProcessor:
    """Collects a run's eval events; scoring is deferred until a summary is asked for."""

    def __init__(self, suite: EvalSuite):
        self.suite = suite
        self.events: list[EvalEvent] = []
        self.results: list[EvalResult] = []

    def process_event(self, event: EvalEvent) -> None:
        self.events.append(event)

    def summary(self) -> EvalSummary:
        if not self.events:
            return EvalSummary()
        self.results = []
        for event in self.events:
            self.results.extend(self.suite.evaluate_with_history(event, self.events))
        return summarize(self.results, self.events)

    def call_results(self) -> list[CallResult]:
        """Break the results down per LLM call."""
        if not self.events:
            return []
        if not self.results:
            self.summary()

        calls = []
        for i, event in enumerate(self.events):
            results = [r for r in self.results if r.event_index == i]
            passed = sum(1 for r in results if r.passed)
            calls.append(CallResult(
                call_number=i + 1,
                timestamp=event.timestamp,
                pass_rate=passed / len(results) * 100 if results else 0.0,
                avg_score=sum(r.score for r in results) / len(results) if results else 0.0,
                duration=event.duration,
                results=results,
            ))
        return calls

    def failed(self) -> list[EvalResult]:
        return [r for r in self.results if not r.passed]
