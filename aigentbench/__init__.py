"""aigentbench: capability benchmark harness for agent frameworks."""

from aigentbench.bench import BenchmarkRun, run_models
from aigentbench.config import BenchmarkRunConfig, load_config
from aigentbench.core.types import AgentTestResult, BenchResult
from aigentbench.framework import AgentFramework, ScriptedFramework, load_framework
from aigentbench.providers import create_model
from aigentbench.scenarios import CapabilityRegistry
from aigentbench import reporting, metrics

__version__ = "0.1.0"

__all__ = [
    "BenchmarkRun",
    "run_models",
    "BenchmarkRunConfig",
    "load_config",
    "AgentTestResult",
    "BenchResult",
    "AgentFramework",
    "ScriptedFramework",
    "load_framework",
    "create_model",
    "CapabilityRegistry",
    "reporting",
    "metrics",
]
