"""Aggregate statistics over benchmark results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from aigentbench.core.types import BenchResult


@dataclass
class ModelSummary:
    """Aggregated outcome of every capability run for one model."""
    
    model_name: str
    run_count: int
    success_count: int
    duration_mean: float
    duration_p50: float
    duration_p95: float
    duration_max: float
    
    @property
    def success_rate(self) -> float:
        if self.run_count == 0:
            return 0.0
        return self.success_count / self.run_count
    
    def to_dict(self) -> dict[str, Any]:
        return {
            "model_name": self.model_name,
            "run_count": self.run_count,
            "success_count": self.success_count,
            "success_rate": self.success_rate,
            "duration": {
                "mean": self.duration_mean,
                "p50": self.duration_p50,
                "p95": self.duration_p95,
                "max": self.duration_max,
            },
        }


def summarize_model(model_name: str, results: list[BenchResult]) -> ModelSummary:
    if not results:
        return ModelSummary(model_name, 0, 0, 0.0, 0.0, 0.0, 0.0)
    
    durations = np.array([r.duration for r in results], dtype=float)
    return ModelSummary(
        model_name=model_name,
        run_count=len(results),
        success_count=sum(1 for r in results if r.success),
        duration_mean=float(np.mean(durations)),
        duration_p50=float(np.percentile(durations, 50)),
        duration_p95=float(np.percentile(durations, 95)),
        duration_max=float(np.max(durations)),
    )


def summarize_results(results_by_model: list[list[BenchResult]]) -> dict[str, ModelSummary]:
    """Group results by model name, in first-seen order, and summarize each."""
    grouped: dict[str, list[BenchResult]] = {}
    for model_results in results_by_model:
        for result in model_results:
            grouped.setdefault(result.model_name, []).append(result)
    return {name: summarize_model(name, results) for name, results in grouped.items()}
