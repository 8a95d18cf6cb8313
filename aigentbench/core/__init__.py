"""Core result types and run helpers."""

from aigentbench.core.results import (
    ResponseValidationError,
    create_bench_result,
    find_in_order,
    truncate_string,
    validate_response,
)
from aigentbench.core.runner import RunOutcome, drain_run
from aigentbench.core.types import AgentTestResult, BenchResult

__all__ = [
    "AgentTestResult",
    "BenchResult",
    "ResponseValidationError",
    "create_bench_result",
    "find_in_order",
    "truncate_string",
    "validate_response",
    "RunOutcome",
    "drain_run",
]
