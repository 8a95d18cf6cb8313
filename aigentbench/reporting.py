"""Console and file reporting for benchmark and evaluation results.

Exports:
- Ranked comparison table of prompt variants (rich)
- Markdown model comparison report
- JSON export of benchmark results
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.table import Table

from aigentbench.core.results import truncate_string
from aigentbench.core.types import AgentTestResult, BenchResult

RANK_MARKERS = ["🏆 ", "🥈 ", "🥉 "]
PREVIEW_LENGTH = 200
DEFAULT_REPORT_PATH = "comparison_report.md"


def format_duration(seconds: float) -> str:
    """Milliseconds below one second, seconds with one decimal otherwise."""
    if seconds < 1.0:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def rank_results(results: list[AgentTestResult]) -> list[AgentTestResult]:
    """
    Order variants by average score, best first.

    Bubble sort that only swaps on a strictly lower score, so ties keep
    their input order. The input list is left untouched.
    """
    ranked = list(results)
    n = len(ranked)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if ranked[j].avg_score < ranked[j + 1].avg_score:
                ranked[j], ranked[j + 1] = ranked[j + 1], ranked[j]
    return ranked


def print_comparison_table(results: list[AgentTestResult], console: Optional[Console] = None) -> None:
    console = console or Console()
    ranked = rank_results(results)

    table = Table(title="Agent Performance Comparison")
    table.add_column("Agent", style="cyan")
    table.add_column("Pass%", justify="right")
    table.add_column("AvgScore", justify="right", style="green")
    table.add_column("Accuracy", justify="right")
    table.add_column("Relevance", justify="right")
    table.add_column("Duration", justify="right")
    table.add_column("Errors", justify="right", style="red")

    for i, result in enumerate(ranked):
        rank = RANK_MARKERS[i] if i < len(RANK_MARKERS) else ""
        table.add_row(
            f"{rank}{result.name}",
            f"{result.pass_rate:.1f}%",
            f"{result.avg_score:.2f}",
            f"{result.accuracy_score:.2f}",
            f"{result.relevance_score:.2f}",
            format_duration(result.duration),
            str(result.error_count),
        )

    console.print()
    console.print(table)

    if ranked:
        winner = ranked[0]
        console.print(
            f"\n🎯 Best Performer: [bold]{winner.name}[/bold] "
            f"({winner.avg_score:.2f} avg score, {winner.pass_rate:.1f}% pass rate)"
        )


def print_detailed_results(results: list[AgentTestResult], console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print("\n[bold]=== Detailed Results ===[/bold]")

    for result in results:
        console.print(f"\n[bold]--- {result.name} ---[/bold]")

        if result.failed:
            console.print("[red]❌ Failed Checks:[/red]")
            for failure in result.failed:
                console.print(f"   • {failure}", markup=False)
        else:
            console.print("[green]✅ All checks passed[/green]")

        if result.content:
            console.print(f"📄 Response: {truncate_string(result.content, PREVIEW_LENGTH)}", markup=False)


def generate_comparison_report(
    results_by_model: list[list[BenchResult]],
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Build the Markdown model comparison report.

    Every capability gets a Success/Failure row and a timing row; a model
    that has no result for a capability shows N/A. Models and capabilities
    appear in the order they were first seen.
    """
    generated_at = generated_at or datetime.now()

    groups: dict[str, dict[str, BenchResult]] = {}
    models: list[str] = []
    capabilities: list[str] = []

    for model_results in results_by_model:
        for result in model_results:
            groups.setdefault(result.test_case, {})[result.model_name] = result
            if result.model_name not in models:
                models.append(result.model_name)
            if result.test_case not in capabilities:
                capabilities.append(result.test_case)

    lines: list[str] = []
    lines.append("# Model Comparison Report")
    lines.append("")
    lines.append(f"Generated on: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("")
    lines.append("| Capability" + "".join(f" | {model}" for model in models) + " |")
    lines.append("|---" + "|---" * len(models) + "|")

    for capability in capabilities:
        status = []
        timing = []
        for model in models:
            result = groups[capability].get(model)
            if result is None:
                status.append("N/A")
                timing.append("N/A")
            else:
                status.append("✅ Success" if result.success else "❌ Failure")
                timing.append(f"{result.duration:.1f}s")
        lines.append(f"| {capability}" + "".join(f" | {s}" for s in status) + " |")
        lines.append(f"| {capability} (timing)" + "".join(f" | {t}" for t in timing) + " |")

    return "\n".join(lines) + "\n"


def write_comparison_report(
    results_by_model: list[list[BenchResult]],
    path: str | Path = DEFAULT_REPORT_PATH,
) -> str:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_comparison_report(results_by_model), encoding="utf-8")
    return str(path)


def export_results_json(
    results_by_model: list[list[BenchResult]],
    path: str | Path,
    summary: Optional[dict[str, Any]] = None,
) -> str:
    """Write every result, plus an optional per-model summary, as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "generated_at": datetime.utcnow().isoformat(),
        "results": [r.to_dict() for model_results in results_by_model for r in model_results],
        "summary": summary or {},
    }
    path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    return str(path)
