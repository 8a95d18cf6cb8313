"""Several runs of one agent started before any of them is awaited."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from aigentbench.core.results import create_bench_result, truncate_string
from aigentbench.core.types import BenchResult
from aigentbench.framework.base import AgentFramework, FrameworkError
from aigentbench.framework.types import AgentConfig, ModelHandle
from aigentbench.scenarios.base import CapabilityRegistry
from aigentbench.scenarios.tooling import SECRET_COMPANY_NAME, new_secret_number_tool


@dataclass(frozen=True)
class RunRequest:
    name: str
    message: str
    expects_tool: bool


RUN_REQUESTS = [
    RunRequest("tool call request", "What is the name of the company with the number 150? Use tools.", True),
    RunRequest("simple question", "What is the capital of France? respond with the name of the city only", False),
    RunRequest("another simple question", "What is 2 + 2? respond with the answer only", False),
]


def new_concurrent_agent(framework: AgentFramework, model: ModelHandle) -> AgentConfig:
    return AgentConfig(
        name="concurrent-agent",
        model=model,
        description="You are a helpful assistant that can perform various tasks.",
        instructions="use tools when requested.",
        tools=[new_secret_number_tool()],
        trace=framework.new_trace(),
    )


@CapabilityRegistry.register("ConcurrentRuns", "Three overlapping runs of the same agent")
async def run_concurrent_runs(
    framework: AgentFramework,
    model: ModelHandle,
    timeout: Optional[float] = None,
) -> BenchResult:
    start = time.perf_counter()
    agent = new_concurrent_agent(framework, model)
    
    runs = []
    try:
        for request in RUN_REQUESTS:
            runs.append(await framework.start(agent, request.message))
        responses = [await run.wait(timeout) for run in runs]
    except FrameworkError as e:
        for run in runs:
            await run.cancel()
        return create_bench_result("ConcurrentRuns", model, start, "", e)
    
    result = create_bench_result("ConcurrentRuns", model, start, "\n".join(responses))
    
    for i, (request, response) in enumerate(zip(RUN_REQUESTS, responses), start=1):
        if not response.strip():
            return result.fail(f"Run {i} ({request.name}) returned an empty response")
        if "Error:" in response:
            return result.fail(f"Run {i} ({request.name}) returned an error: {truncate_string(response, 100)}")
        if request.expects_tool and SECRET_COMPANY_NAME.lower() not in response.lower():
            return result.fail(f"Run {i} ({request.name}) should contain the company name")
    
    result.metadata["run_count"] = len(runs)
    result.metadata["response_previews"] = [truncate_string(r, 60) for r in responses]
    return result
