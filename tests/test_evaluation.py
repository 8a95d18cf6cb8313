"""Tests for eval checks, suites and check classification."""

import pytest

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
from aigentbench.evaluation.suite import EvalResult, EvalSuite
from aigentbench.framework.types import EvalEvent, ModelResponse, ToolCall


def make_event(content="", tool_calls=None, sequence=0, duration=0.5, error=None, run_id="run"):
    return EvalEvent(
        run_id=run_id,
        sequence=sequence,
        duration=duration,
        response=ModelResponse(content=content, tool_calls=tool_calls or []),
        error=error,
    )


class TestChecks:
    """Tests for individual checks."""
    
    def test_has_keywords_half_passes(self):
        passed, score, _ = has_keywords("expert1", "expert2", "expert3", "expert4")(make_event("Expert1 and expert2"))
        assert passed
        assert score == 0.5
    
    def test_has_keywords_below_half(self):
        passed, score, message = has_keywords("expert1", "expert2", "expert3")(make_event("expert1"))
        assert not passed
        assert score == pytest.approx(1 / 3)
        assert message == "found 1/3 keywords"
    
    def test_calls_tools(self):
        event = make_event(tool_calls=[ToolCall("save_memory", {"content": "plan"})])
        assert calls_tools("save_memory")(event)[0]
        assert not calls_tools("save_memory")(make_event("text"))[0]
    
    def test_has_content(self):
        assert has_content(10)(make_event("a long enough answer"))[:2] == (True, 1.0)
        passed, score, _ = has_content(10)(make_event("short"))
        assert not passed
        assert score == 0.5
    
    def test_latency_under(self):
        assert latency_under(30.0)(make_event(duration=2.0))[0]
        passed, score, _ = latency_under(1.0)(make_event(duration=4.0))
        assert not passed
        assert score == 0.25
    
    def test_no_errors(self):
        assert no_errors()(make_event()) == (True, 1.0, "no errors")
        assert no_errors()(make_event(error=RuntimeError("x")))[:2] == (False, 0.0)
    
    def test_no_tool_calls(self):
        assert no_tool_calls()(make_event("ok"))[0]
        assert not no_tool_calls()(make_event(tool_calls=[ToolCall("a")]))[0]
    
    def test_sequence_check(self):
        assert sequence_check(2)(make_event(sequence=2))[0]
        assert not sequence_check(2)(make_event(sequence=1))[0]
    
    def test_tool_arg_checks(self):
        assert tool_args_not_empty()("lookup", {"company_number": "150"})[0]
        assert not tool_args_not_empty()("lookup", {})[0]
        assert tool_args_contains("150")("lookup", {"company_number": "150"})[0]
        assert not tool_args_contains("151")("lookup", {"company_number": "150"})[0]


class TestEvalSuite:
    """Tests for EvalSuite and EvalProcessor."""
    
    def test_universal_and_final_checks(self):
        suite = EvalSuite("test")
        suite.add_check("has content", has_content(2))
        suite.add_final_check("no tool calls", no_tool_calls())
        
        results = suite.evaluate(make_event("answer"))
        assert [r.check_name for r in results] == ["has content", "no tool calls"]
        assert all(r.passed for r in results)
    
    def test_tool_call_event_uses_tool_checks(self):
        suite = EvalSuite("test")
        suite.add_final_check("no tool calls", no_tool_calls())
        suite.add_tool_check("lookup", tool_args_not_empty())
        
        results = suite.evaluate(make_event(tool_calls=[ToolCall("lookup", {})]))
        assert [r.check_name for r in results] == ["tool_lookup_quality"]
        assert not results[0].passed
    
    def test_history_checks(self):
        suite = EvalSuite("test")
        suite.add_final_tool_check("lookup")
        
        call = make_event(tool_calls=[ToolCall("lookup", {"n": "1"})], sequence=0)
        final = make_event("Nexxia", sequence=1)
        history = [call, final]
        
        call_results = {r.check_name: r for r in suite.evaluate_with_history(call, history)}
        assert call_results["tool_lookup_efficiency"].score == 1.0
        
        final_results = {r.check_name: r for r in suite.evaluate_with_history(final, history)}
        assert final_results["required_tools_complete"].score == 1.0
        assert final_results["overall_efficiency"].passed
        assert final_results["overall_efficiency"].event_index == 1
    
    def test_repeated_calls_lower_efficiency(self):
        suite = EvalSuite("test")
        first = make_event(tool_calls=[ToolCall("lookup", {"n": "1"})], sequence=0)
        second = make_event(tool_calls=[ToolCall("lookup", {"n": "1"})], sequence=1)
        history = [first, second]
        
        results = suite.evaluate_with_history(second, history)
        efficiency = [r for r in results if r.check_name == "tool_lookup_efficiency"][0]
        assert efficiency.score == 0.0
        assert not efficiency.passed
    
    def test_required_tool_missing(self):
        suite = EvalSuite("test")
        suite.add_final_tool_check("save_memory", 2)
        
        history = [
            make_event(tool_calls=[ToolCall("save_memory", {"content": "a"})], sequence=0),
            make_event("done", sequence=1),
        ]
        results = suite.evaluate_with_history(history[1], history)
        required = [r for r in results if r.check_name == "required_tools_complete"][0]
        assert required.score == 0.5
        assert not required.passed
    
    def test_processor_summary(self):
        suite = EvalSuite("test")
        suite.add_check("has content", has_content(5))
        processor = suite.new_processor()
        
        processor.process_event(make_event("", tool_calls=[ToolCall("lookup", {})], sequence=0, duration=1.0))
        processor.process_event(make_event("final answer", sequence=1, duration=2.0))
        summary = processor.summary()
        
        assert summary.total_calls == 2
        assert summary.total_duration == 3.0
        assert summary.total_checks == len(summary.results)
        assert 0 < summary.pass_rate < 100
        assert [r.check_name for r in processor.failed()] == ["has content"]
        
        calls = processor.call_results()
        assert [c.call_number for c in calls] == [1, 2]
        assert calls[1].pass_rate == 100.0
    
    def test_processor_without_events(self):
        processor = EvalSuite("empty").new_processor()
        summary = processor.summary()
        
        assert summary.total_checks == 0
        assert summary.pass_rate == 0.0
        assert processor.call_results() == []


class TestClassification:
    """Tests for accuracy/relevance classification."""
    
    @pytest.mark.parametrize("name", [
        "calls save memory", "no errors", "has content", "tool_lookup_quality",
        "sequence check", "Output Format", "required_tools_complete",
    ])
    def test_accuracy_names(self, name):
        assert is_accuracy_check(name)
    
    @pytest.mark.parametrize("name", [
        "has expert keywords", "responds quickly", "names table", "Relevant answer",
    ])
    def test_relevance_names(self, name):
        assert is_relevance_check(name)
        assert not is_accuracy_check(name)
    
    def test_neither(self):
        assert not is_accuracy_check("overall_efficiency")
        assert not is_relevance_check("overall_efficiency")
    
    def test_both_counts_as_accuracy(self):
        assert is_accuracy_check("correct tool order")
        assert is_relevance_check("correct tool order")
        
        accuracy, relevance = calculate_accuracy_relevance([EvalResult("correct tool order", True, 0.8)])
        assert accuracy == 0.8
        assert relevance == 0.0
    
    def test_classification_is_stable(self):
        for name in ["no errors", "has expert keywords", "overall_efficiency"]:
            assert is_accuracy_check(name) == is_accuracy_check(name)
            assert is_relevance_check(name) == is_relevance_check(name)
    
    def test_calculate_scores(self):
        results = [
            EvalResult("no errors", True, 1.0),
            EvalResult("has content", False, 0.5),
            EvalResult("has expert keywords", True, 1.0),
            EvalResult("overall_efficiency", True, 0.9),
        ]
        assert calculate_accuracy_relevance(results) == (0.75, 1.0)
    
    def test_calculate_empty(self):
        assert calculate_accuracy_relevance([]) == (0.0, 0.0)
