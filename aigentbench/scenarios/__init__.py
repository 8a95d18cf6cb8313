"""Benchmark capabilities, registered in the order they run."""

from aigentbench.scenarios.base import Capability, CapabilityRegistry, run_and_wait
from aigentbench.scenarios.simple import run_simple_agent
from aigentbench.scenarios.tool_integration import run_tool_integration
from aigentbench.scenarios.team import run_team_coordination
from aigentbench.scenarios.files import run_file_attachments
from aigentbench.scenarios.chain import run_multi_agent_chain
from aigentbench.scenarios.concurrent import run_concurrent_runs
from aigentbench.scenarios.streaming import run_streaming, run_streaming_with_tools
from aigentbench.scenarios.memory import run_memory_persistence

__all__ = [
    "Capability",
    "CapabilityRegistry",
    "run_and_wait",
    "run_simple_agent",
    "run_tool_integration",
    "run_team_coordination",
    "run_file_attachments",
    "run_multi_agent_chain",
    "run_concurrent_runs",
    "run_streaming",
    "run_streaming_with_tools",
    "run_memory_persistence",
]
