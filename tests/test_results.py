"""Tests for result helpers."""

import time

import pytest

from aigentbench.core.results import (
    ResponseValidationError,
    create_bench_result,
    find_in_order,
    truncate_string,
    validate_response,
)
from aigentbench.core.types import AgentTestResult, BenchResult
from aigentbench.framework.base import FrameworkError
from aigentbench.framework.types import ModelHandle


class TestCreateBenchResult:
    """Tests for create_bench_result."""
    
    def test_success_without_error(self):
        model = ModelHandle(model_name="gpt-4o-mini", provider="openai")
        result = create_bench_result("SimpleAgent", model, time.perf_counter(), "Sydney")
        
        assert result.success
        assert result.model_name == "gpt-4o-mini"
        assert result.response == "Sydney"
        assert result.error_message == ""
        assert result.duration >= 0
    
    def test_error_marks_failure(self):
        result = create_bench_result("SimpleAgent", "llama3.2", time.perf_counter(), "", FrameworkError("boom"))
        
        assert not result.success
        assert result.error_message == "boom"
        assert result.model_name == "llama3.2"
    
    def test_fail_returns_same_result(self):
        result = BenchResult(test_case="x", model_name="m", success=True)
        assert result.fail("nope") is result
        assert not result.success
        assert result.error_message == "nope"


class TestValidation:
    """Tests for response checks."""
    
    def test_validate_ignores_case(self):
        validate_response("The capital is SYDNEY.", "sydney")
    
    def test_validate_missing(self):
        with pytest.raises(ResponseValidationError):
            validate_response("The capital is Melbourne.", "sydney")
    
    def test_find_in_order_positions(self):
        positions = find_in_order("expert1, expert2, expert3", ["expert1", "expert2", "expert3"])
        assert positions == {"expert1": 0, "expert2": 9, "expert3": 18}
    
    def test_find_in_order_wrong_order(self):
        with pytest.raises(ResponseValidationError, match="order"):
            find_in_order("expert2 expert1 expert3", ["expert1", "expert2", "expert3"])
    
    def test_find_in_order_missing(self):
        with pytest.raises(ResponseValidationError, match="expert3"):
            find_in_order("expert1 expert2", ["expert1", "expert2", "expert3"])
    
    def test_find_in_order_is_case_sensitive(self):
        with pytest.raises(ResponseValidationError):
            find_in_order("calculator: 42 explainer: ...", ["Calculator:", "Explainer:"])


def test_truncate_string():
    assert truncate_string("short", 10) == "short"
    assert truncate_string("a" * 12, 10) == "a" * 10 + "..."


def test_result_dicts():
    bench = BenchResult(test_case="Streaming", model_name="m", success=True, duration=1.5)
    assert bench.to_dict()["duration"] == 1.5
    
    variant = AgentTestResult(name="Original", failed=["no errors: error: x"])
    assert variant.to_dict()["failed"] == ["no errors: error: x"]
