"""A coordinator delegating to two specialist sub-agents in a fixed order."""

from __future__ import annotations

import time
from typing import Optional

from aigentbench.core.results import (
    ResponseValidationError,
    create_bench_result,
    find_in_order,
    truncate_string,
    validate_response,
)
from aigentbench.core.types import BenchResult
from aigentbench.framework.base import AgentFramework, FrameworkError
from aigentbench.framework.types import AgentConfig, ModelHandle
from aigentbench.scenarios.base import CapabilityRegistry, run_and_wait

PROMPT = "What is 15 + 27 and what does this calculation represent?"
EXPECTED = ["Calculator:", "Explainer:", "42"]


def new_team_agent(framework: AgentFramework, model: ModelHandle) -> AgentConfig:
    calculator = AgentConfig(
        name="calculator",
        model=model,
        description="You are a calculator. When given a math problem, solve it and return only the numerical result.",
        instructions="Solve the math problem and return only the number. Do not add any explanation or text.",
    )
    explainer = AgentConfig(
        name="explainer",
        model=model,
        description=(
            "You are a math teacher. When given a calculation, explain what it means in simple terms "
            "in terms of the office oranges that you have."
        ),
        instructions=(
            "Explain the calculation in simple terms. Start your response with 'EXPLANATION: ' "
            "followed by your explanation."
        ),
    )
    return AgentConfig(
        name="coordinator",
        model=model,
        description="""
        You are a coordinator for a math problem solving team.
        When you receive a math question, you must first use the calculator to get the answer,
        then use the explainer to explain what the calculation means in terms of the office oranges that you have.
        Always use both agents in this order.
        """,
        instructions="""
        You must call a single tool each time and wait for the answer before calling another tool.
        Use the output from the calculator as input to the explainer.
        Respond with both answers clearly labeled: "Calculator: [result]" and "Explainer: [explanation]".
        Do not add any additional text or commentary.""",
        agents=[calculator, explainer],
        trace=framework.new_trace(),
    )


@CapabilityRegistry.register("TeamCoordination", "Coordinator calls two sub-agents in order")
async def run_team_coordination(
    framework: AgentFramework,
    model: ModelHandle,
    timeout: Optional[float] = None,
) -> BenchResult:
    start = time.perf_counter()
    
    try:
        response = await run_and_wait(framework, new_team_agent(framework, model), PROMPT, timeout)
    except FrameworkError as e:
        return create_bench_result("TeamCoordination", model, start, "", e)
    
    result = create_bench_result("TeamCoordination", model, start, response)
    
    try:
        for expected in EXPECTED:
            validate_response(response, expected)
        positions = find_in_order(response, ["Calculator:", "Explainer:"])
    except ResponseValidationError as e:
        return result.fail(str(e))
    
    result.metadata["expected_content"] = EXPECTED
    result.metadata["label_positions"] = positions
    result.metadata["response_preview"] = truncate_string(response, 100)
    return result
