"""Tests for the benchmark driver and aggregate statistics."""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from aigentbench.bench import run_capability, run_models
from aigentbench.core.types import BenchResult
from aigentbench.framework.types import ModelHandle
from aigentbench.metrics import summarize_model, summarize_results
from aigentbench.scenarios import CapabilityRegistry
from aigentbench.scenarios.base import Capability


def quiet_console():
    return Console(file=io.StringIO(), width=120)


class TestMetrics:
    """Tests for per-model summaries."""
    
    def test_summarize_model(self):
        results = [
            BenchResult("a", "m", True, duration=1.0),
            BenchResult("b", "m", False, duration=2.0),
            BenchResult("c", "m", True, duration=3.0),
            BenchResult("d", "m", True, duration=4.0),
        ]
        summary = summarize_model("m", results)
        
        assert summary.run_count == 4
        assert summary.success_rate == 0.75
        assert summary.duration_mean == pytest.approx(2.5)
        assert summary.duration_p50 == pytest.approx(2.5)
        assert summary.duration_max == 4.0
        assert summary.to_dict()["duration"]["p95"] == pytest.approx(3.85)
    
    def test_summarize_empty(self):
        summary = summarize_model("m", [])
        assert summary.success_rate == 0.0
        assert summary.run_count == 0
    
    def test_summarize_results_groups_by_model(self):
        summaries = summarize_results([
            [BenchResult("a", "x", True, duration=1.0)],
            [BenchResult("a", "y", False, duration=2.0), BenchResult("b", "y", True, duration=2.0)],
        ])
        assert list(summaries) == ["x", "y"]
        assert summaries["y"].success_count == 1


@pytest.mark.asyncio
async def test_run_models_all_pass(framework, model, tmp_path: Path):
    console = quiet_console()
    bench = await run_models(
        framework,
        [model],
        timeout=5.0,
        report_path=str(tmp_path / "comparison_report.md"),
        output_path=str(tmp_path / "results.json"),
        console=console,
    )
    
    assert bench.all_passed
    assert len(bench.all_results) == 9
    assert bench.summaries["test-model"].success_rate == 1.0
    
    report = (tmp_path / "comparison_report.md").read_text(encoding="utf-8")
    assert "| SimpleAgent | ✅ Success |" in report
    assert "| MemoryPersistence (timing) |" in report
    
    data = json.loads((tmp_path / "results.json").read_text(encoding="utf-8"))
    assert data["summary"]["test-model"]["run_count"] == 9
    
    output = console.file.getvalue()
    assert output.count("SUCCESS") == 9


@pytest.mark.asyncio
async def test_run_models_failures_stay_local(failing_framework, tmp_path: Path):
    models = [
        ModelHandle(model_name="first", provider="ollama"),
        ModelHandle(model_name="second", provider="ollama"),
    ]
    selected = CapabilityRegistry.select(["SimpleAgent", "Streaming"])
    console = quiet_console()
    
    bench = await run_models(
        failing_framework, models, selected,
        report_path=str(tmp_path / "report.md"), console=console,
    )
    
    assert [len(r) for r in bench.results_by_model] == [2, 2]
    assert not any(r.success for r in bench.all_results)
    assert console.file.getvalue().count("FAILED") == 4
    assert bench.output_path is None


@pytest.mark.asyncio
async def test_run_capability_contains_crash(framework, model):
    async def crash(framework, model, timeout=None):
        raise KeyError("boom")
    
    result = await run_capability(Capability("Crash", crash), framework, model)
    
    assert not result.success
    assert result.test_case == "Crash"
    assert "KeyError" in result.error_message
