"""Result records produced by the benchmarks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BenchResult:
    """Outcome of one capability run against one model."""
    
    test_case: str
    model_name: str
    success: bool
    duration: float = 0.0
    error_message: str = ""
    response: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    
    def fail(self, message: str) -> "BenchResult":
        """Mark the result failed with a human-readable message."""
        self.success = False
        self.error_message = message
        return self
    
    def to_dict(self) -> dict[str, Any]:
        return {
            "test_case": self.test_case,
            "model_name": self.model_name,
            "success": self.success,
            "duration": self.duration,
            "error_message": self.error_message,
            "response": self.response,
            "metadata": self.metadata,
        }


@dataclass
class AgentTestResult:
    """Evaluation results for a single agent variant."""
    
    name: str
    pass_rate: float = 0.0
    avg_score: float = 0.0
    accuracy_score: float = 0.0
    relevance_score: float = 0.0
    duration: float = 0.0
    error_count: int = 0
    content: str = ""
    failed: list[str] = field(default_factory=list)
    
    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "pass_rate": self.pass_rate,
            "avg_score": self.avg_score,
            "accuracy_score": self.accuracy_score,
            "relevance_score": self.relevance_score,
            "duration": self.duration,
            "error_count": self.error_count,
            "content": self.content,
            "failed": self.failed,
        }
