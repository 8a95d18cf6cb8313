"""Evaluation checks, suites and prompt-variant comparison."""

from aigentbench.evaluation.checks import (
    calls_tools,
    has_content,
    has_keywords,
    latency_under,
    no_errors,
    no_tool_calls,
    sequence_check,
    tool_args_contains,
    tool_args_not_empty,
)
from aigentbench.evaluation.classify import (
    calculate_accuracy_relevance,
    is_accuracy_check,
    is_relevance_check,
)
from aigentbench.evaluation.suite import EvalProcessor, EvalResult, EvalSuite, EvalSummary

__all__ = [
    "calls_tools",
    "has_content",
    "has_keywords",
    "latency_under",
    "no_errors",
    "no_tool_calls",
    "sequence_check",
    "tool_args_contains",
    "tool_args_not_empty",
    "calculate_accuracy_relevance",
    "is_accuracy_check",
    "is_relevance_check",
    "EvalProcessor",
    "EvalResult",
    "EvalSuite",
    "EvalSummary",
]
