"""Classification of check names into accuracy and relevance buckets."""

from __future__ import annotations

from aigentbench.evaluation.suite import EvalResult

ACCURACY_PATTERNS = (
    "calls tools", "calls save memory", "calls", "tool",
    "no errors", "error", "sequence", "order",
    "has content", "content", "structure", "format",
)

RELEVANCE_PATTERNS = (
    "keywords", "expert", "names", "table",
    "responds", "relevant", "appropriate", "correct",
)


def is_accuracy_check(check_name: str) -> bool:
    """True when the check name mentions any accuracy pattern, ignoring case."""
    name = check_name.lower()
    return any(pattern in name for pattern in ACCURACY_PATTERNS)


def is_relevance_check(check_name: str) -> bool:
    """True when the check name mentions any relevance pattern, ignoring case."""
    name = check_name.lower()
    return any(pattern in name for pattern in RELEVANCE_PATTERNS)


def calculate_accuracy_relevance(results: list[EvalResult]) -> tuple[float, float]:
    """
    Average the scores of accuracy checks and of relevance checks.

    A check in both buckets counts towards accuracy only. Buckets with no
    checks score 0.0.

    Returns:
        (accuracy, relevance)
    """
    accuracy: list[float] = []
    relevance: list[float] = []

    for result in results:
        if is_accuracy_check(result.check_name):
            accuracy.append(result.score)
        elif is_relevance_check(result.check_name):
            relevance.append(result.score)

    accuracy_score = sum(accuracy) / len(accuracy) if accuracy else 0.0
    relevance_score = sum(relevance) / len(relevance) if relevance else 0.0
    return accuracy_score, relevance_score
