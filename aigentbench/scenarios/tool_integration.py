"""A single agent answering through a tool call."""

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
from aigentbench.scenarios.tooling import SECRET_COMPANY_NAME, new_secret_number_tool

PROMPT = "tell me the name of the company with the number 150. Use tools."


def new_tool_agent(model: ModelHandle) -> AgentConfig:
    return AgentConfig(
        name="test-agent",
        model=model,
        description="You are a helpful assistant that provides clear and concise answers.",
        instructions="Always explain your reasoning and provide examples when possible.",
        tools=[new_secret_number_tool()],
    )


@CapabilityRegistry.register("ToolIntegration", "Agent must call a lookup tool to answer")
async def run_tool_integration(
    framework: AgentFramework,
    model: ModelHandle,
    timeout: Optional[float] = None,
) -> BenchResult:
    start = time.perf_counter()
    
    try:
        response = await run_and_wait(framework, new_tool_agent(model), PROMPT, timeout)
    except FrameworkError as e:
        return create_bench_result("ToolIntegration", model, start, "", e)
    
    result = create_bench_result("ToolIntegration", model, start, response)
    
    try:
        validate_response(response, SECRET_COMPANY_NAME)
    except ResponseValidationError as e:
        return result.fail(str(e))
    
    result.metadata["expected_content"] = SECRET_COMPANY_NAME
    result.metadata["response_preview"] = truncate_string(response, 100)
    return result
