"""Helpers for building and checking benchmark results."""

from __future__ import annotations

import time
from typing import Optional, Union

from aigentbench.core.types import BenchResult
from aigentbench.framework.types import ModelHandle


class ResponseValidationError(Exception):
    """Raised when a response misses expected content."""


def create_bench_result(
    test_case: str,
    model: Union[ModelHandle, str],
    start: float,
    response: str = "",
    error: Optional[BaseException] = None,
) -> BenchResult:
    """
    Build a result for a finished (or failed) capability run.
    
    Args:
        test_case: Capability name
        model: Model handle or name the run used
        start: ``time.perf_counter()`` value taken when the run began
        response: Final text produced by the agent
        error: Error that ended the run, if any
    """
    model_name = model.model_name if isinstance(model, ModelHandle) else str(model)
    return BenchResult(
        test_case=test_case,
        model_name=model_name,
        success=error is None,
        duration=time.perf_counter() - start,
        error_message=str(error) if error is not None else "",
        response=response,
    )


def validate_response(response: str, expected: str) -> None:
    """Raise ResponseValidationError unless ``expected`` occurs in ``response``, ignoring case."""
    if expected.lower() not in response.lower():
        raise ResponseValidationError(f"response does not contain {expected!r}")


def find_in_order(response: str, expected: list[str]) -> dict[str, int]:
    """
    Locate each expected string and check they appear left to right.
    
    Returns:
        Mapping of each string to its first position
    
    Raises:
        ResponseValidationError: A string is missing or out of order
    """
    positions = {}
    for item in expected:
        pos = response.find(item)
        if pos == -1:
            raise ResponseValidationError(f"missing {item!r} in response")
        positions[item] = pos
    
    ordered = [positions[item] for item in expected]
    if any(later <= earlier for earlier, later in zip(ordered, ordered[1:])):
        raise ResponseValidationError(f"not in correct order ({' -> '.join(expected)})")
    return positions


def truncate_string(text: str, max_length: int) -> str:
    """Cap ``text`` at ``max_length`` characters, marking the cut with '...'."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
