"""A fact saved to memory in one run and recalled in the next."""

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

FACT = "teal"

SAVE_PROMPT = (
    f"My favourite colour is {FACT}. Save this fact to your session memory with the save_memory tool "
    "and confirm once it is saved."
)
RECALL_PROMPT = "What is my favourite colour? Check your memory and answer with the colour only."


def new_memory_agent(framework: AgentFramework, model: ModelHandle) -> AgentConfig:
    return AgentConfig(
        name="memory-agent",
        model=model,
        description="You are a helpful assistant with a persistent memory.",
        instructions=(
            "Save facts the user asks you to remember with the save_memory tool. "
            "When asked about something, consult your memory before answering."
        ),
        memory=framework.new_memory(),
        session=framework.new_session(),
        trace=framework.new_trace(),
    )


@CapabilityRegistry.register("MemoryPersistence", "Memory written in one run is read in the next")
async def run_memory_persistence(
    framework: AgentFramework,
    model: ModelHandle,
    timeout: Optional[float] = None,
) -> BenchResult:
    start = time.perf_counter()
    agent = new_memory_agent(framework, model)
    
    try:
        first = await run_and_wait(framework, agent, SAVE_PROMPT, timeout)
        response = await run_and_wait(framework, agent, RECALL_PROMPT, timeout)
    except FrameworkError as e:
        return create_bench_result("MemoryPersistence", model, start, "", e)
    
    result = create_bench_result("MemoryPersistence", model, start, response)
    
    try:
        validate_response(response, FACT)
    except ResponseValidationError as e:
        return result.fail(f"fact not recalled: {e}")
    
    result.metadata["expected_content"] = FACT
    result.metadata["save_response_preview"] = truncate_string(first, 100)
    result.metadata["response_preview"] = truncate_string(response, 100)
    return result
