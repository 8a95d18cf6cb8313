"""Benchmark driver: every capability against every model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from rich.console import Console

from aigentbench.core.types import BenchResult
from aigentbench.framework.base import AgentFramework
from aigentbench.framework.types import ModelHandle
from aigentbench.metrics import ModelSummary, summarize_results
from aigentbench.reporting import export_results_json, format_duration, write_comparison_report
from aigentbench.scenarios.base import Capability, CapabilityRegistry
from aigentbench.utils.logging import get_logger

logger = get_logger("bench")


@dataclass
class BenchmarkRun:
    """Result of a complete benchmark run."""
    
    benchmark_id: str
    timestamp: datetime
    results_by_model: list[list[BenchResult]] = field(default_factory=list)
    summaries: dict[str, ModelSummary] = field(default_factory=dict)
    report_path: Optional[str] = None
    output_path: Optional[str] = None
    
    @property
    def all_results(self) -> list[BenchResult]:
        return [r for model_results in self.results_by_model for r in model_results]
    
    @property
    def all_passed(self) -> bool:
        return all(r.success for r in self.all_results)


async def run_capability(
    capability: Capability,
    framework: AgentFramework,
    model: ModelHandle,
    timeout: Optional[float] = None,
) -> BenchResult:
    """Run one capability, turning any unexpected exception into a failed result."""
    try:
        return await capability.run(framework, model, timeout=timeout)
    except Exception as e:
        logger.exception("%s crashed for %s", capability.name, model.model_name)
        return BenchResult(
            test_case=capability.name,
            model_name=model.model_name,
            success=False,
            error_message=f"{type(e).__name__}: {e}",
        )


async def run_models(
    framework: AgentFramework,
    models: list[ModelHandle],
    capabilities: Optional[list[Capability]] = None,
    *,
    timeout: Optional[float] = None,
    report_path: Optional[str] = "comparison_report.md",
    output_path: Optional[str] = None,
    console: Optional[Console] = None,
) -> BenchmarkRun:
    """
    Run each capability for each model, one at a time.
    
    Args:
        framework: Framework the capabilities drive
        models: Models to benchmark
        capabilities: Capabilities to run, every registered one by default
        timeout: Seconds each run may take
        report_path: Where to write the Markdown comparison, None to skip
        output_path: Where to write the JSON export, None to skip
        console: Console for progress output
        
    Returns:
        Every result grouped by model plus per-model summaries
    """
    console = console or Console()
    capabilities = capabilities if capabilities is not None else CapabilityRegistry.all()
    
    bench = BenchmarkRun(benchmark_id=uuid4().hex[:12], timestamp=datetime.utcnow())
    logger.info(
        "benchmark %s: %d models x %d capabilities",
        bench.benchmark_id, len(models), len(capabilities),
    )
    
    for model in models:
        console.print(f"\n🤖 Testing [bold]{model.model_name}[/bold]")
        console.print("-" * 31)
        
        results = []
        for capability in capabilities:
            result = await run_capability(capability, framework, model, timeout)
            results.append(result)
            
            duration = format_duration(result.duration)
            if result.success:
                console.print(f"  {capability.name}... [green]✅ SUCCESS[/green] ({duration})")
            else:
                console.print(f"  {capability.name}... [red]❌ FAILED[/red] ({duration})")
                logger.info("%s failed for %s: %s", capability.name, model.model_name, result.error_message)
        
        bench.results_by_model.append(results)
    
    bench.summaries = summarize_results(bench.results_by_model)
    
    if report_path:
        bench.report_path = write_comparison_report(bench.results_by_model, report_path)
        console.print(f"\n📊 Comparison report generated: {bench.report_path}")
    
    if output_path:
        summary = {name: s.to_dict() for name, s in bench.summaries.items()}
        bench.output_path = export_results_json(bench.results_by_model, output_path, summary)
        console.print(f"[green]Results saved to {bench.output_path}[/green]")
    
    return bench
