"""Plain question answering with no tools."""

from __future__ import annotations

import time
from typing import Optional

from aigentbench.core.results import (
    ResponseValidationError,
    create_bench_result,
    truncate_string,
    validate_response,
)
from aigentbench.core.types import BenchResult
from aigentbench.framework.base import AgentFramework, FrameworkError
from aigentbench.framework.types import AgentConfig, ModelHandle
from aigentbench.scenarios.base import CapabilityRegistry, run_and_wait

PROMPT = "What is the capital of New South Wales, Australia?"
EXPECTED = "sydney"


def new_simple_agent(model: ModelHandle) -> AgentConfig:
    return AgentConfig(
        name="assistant",
        model=model,
        description="You are a helpful assistant that provides clear and concise answers.",
        instructions="Always explain your reasoning and provide examples when possible.",
    )


@CapabilityRegistry.register("SimpleAgent", "Single agent answers a factual question")
async def run_simple_agent(
    framework: AgentFramework,
    model: ModelHandle,
    timeout: Optional[float] = None,
) -> BenchResult:
    start = time.perf_counter()
    
    try:
        response = await run_and_wait(framework, new_simple_agent(model), PROMPT, timeout)
    except FrameworkError as e:
        return create_bench_result("SimpleAgent", model, start, "", e)
    
    result = create_bench_result("SimpleAgent", model, start, response)
    
    try:
        validate_response(response, EXPECTED)
    except ResponseValidationError as e:
        return result.fail(str(e))
    
    result.metadata["expected_content"] = EXPECTED
    result.metadata["response_preview"] = truncate_string(response, 100)
    return result
