"""Streaming agents drained event by event."""

from __future__ import annotations

import asyncio
import time
from typing import Optional

from aigentbench.core.results import (
    ResponseValidationError,
    create_bench_result,
    truncate_string,
    validate_response,
)
from aigentbench.core.runner import drain_run
from aigentbench.core.types import BenchResult
from aigentbench.framework.base import AgentFramework, FrameworkError, RunTimeoutError
from aigentbench.framework.types import AgentConfig, ModelHandle
from aigentbench.scenarios.base import CapabilityRegistry
from aigentbench.scenarios.tooling import SECRET_COMPANY_NAME, new_secret_number_tool

MIN_CHUNKS = 2


def new_streaming_agent(model: ModelHandle) -> AgentConfig:
    return AgentConfig(
        name="streaming-agent",
        model=model,
        description="You are a helpful assistant that provides clear and concise answers.",
        instructions="Always explain your reasoning and provide examples when possible.",
        stream=True,
    )


def new_streaming_with_tools_agent(model: ModelHandle) -> AgentConfig:
    agent = new_streaming_agent(model)
    agent.tools = [new_secret_number_tool()]
    return agent


async def _run_streaming_case(
    test_case: str,
    framework: AgentFramework,
    model: ModelHandle,
    agent: AgentConfig,
    prompt: str,
    expected: str,
    timeout: Optional[float] = None,
) -> BenchResult:
    start = time.perf_counter()
    
    session = framework.new_session()
    session.trace = framework.new_trace()
    agent.session = session
    
    try:
        run = await framework.start(agent, prompt)
    except FrameworkError as e:
        return create_bench_result(test_case, model, start, "", e)
    
    try:
        outcome = await asyncio.wait_for(drain_run(run), timeout)
    except asyncio.TimeoutError:
        await run.cancel()
        error = RunTimeoutError(f"no end of stream within {timeout}s")
        return create_bench_result(test_case, model, start, "", error)
    
    if outcome.error is not None:
        return create_bench_result(test_case, model, start, "", outcome.error)
    
    content = outcome.content
    result = create_bench_result(test_case, model, start, content)
    
    try:
        validate_response(content, expected)
    except ResponseValidationError as e:
        return result.fail(str(e))
    
    if len(outcome.chunks) < MIN_CHUNKS:
        return result.fail("Should have received streaming chunks")
    
    result.metadata["chunk_count"] = len(outcome.chunks)
    result.metadata["approvals"] = outcome.approvals
    result.metadata["expected_content"] = expected
    result.metadata["response_preview"] = truncate_string(content, 100)
    return result


@CapabilityRegistry.register("Streaming", "Streamed answer arrives in several chunks")
async def run_streaming(
    framework: AgentFramework,
    model: ModelHandle,
    timeout: Optional[float] = None,
) -> BenchResult:
    return await _run_streaming_case(
        "Streaming",
        framework,
        model,
        new_streaming_agent(model),
        "What is the capital of France and give me a brief summary of the city",
        "paris",
        timeout,
    )


@CapabilityRegistry.register("StreamingWithTools", "Streamed answer that depends on a tool call")
async def run_streaming_with_tools(
    framework: AgentFramework,
    model: ModelHandle,
    timeout: Optional[float] = None,
) -> BenchResult:
    return await _run_streaming_case(
        "StreamingWithTools",
        framework,
        model,
        new_streaming_with_tools_agent(model),
        "tell me the name of the company with the number 150. Use tools.",
        SECRET_COMPANY_NAME,
        timeout,
    )
