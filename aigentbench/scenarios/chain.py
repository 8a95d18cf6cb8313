"""Coordinator calling a chain of expert sub-agents one after another.

Besides the benchmark case itself this module holds the coordinator prompt
variants compared by ``aigentbench.evaluation.variants``.
"""

from __future__ import annotations

import time
from typing import Optional

from aigentbench.core.results import (
    ResponseValidationError,
    create_bench_result,
    find_in_order,
    truncate_string,
)
from aigentbench.core.types import BenchResult
from aigentbench.framework.base import AgentFramework, FrameworkError
from aigentbench.framework.types import AgentConfig, ModelHandle
from aigentbench.scenarios.base import CapabilityRegistry
from aigentbench.scenarios.tooling import new_company_name_tool

NUM_EXPERTS = 3
EXPECTED_EXPERTS = [f"expert{i + 1}" for i in range(NUM_EXPERTS)]

PROMPT = """get the names of expert1, expert2 and expert3 then retrieve their company names.
respond with a table of the experts, their company names and their id numbers in the order"""


def create_expert_agents(model: ModelHandle, enable_evaluation: bool = False) -> list[AgentConfig]:
    """Experts that answer with their own name, company number and id."""
    experts = []
    for i in range(NUM_EXPERTS):
        name = f"expert{i + 1}"
        experts.append(AgentConfig(
            name=name,
            model=model,
            description="You are an expert in a group of experts. Your role is to respond with your name",
            instructions=(
                "Remember:\n"
                "return your name only\n"
                "do not add any additional information\n"
                f"My name is {name} and my company number is {i + 1} and my id number is ID{i + 1}."
            ),
            enable_evaluation=enable_evaluation,
        ))
    return experts


def _coordinator(
    framework: AgentFramework,
    model: ModelHandle,
    experts: list[AgentConfig],
    name: str,
    description: str,
    instructions: str,
    enable_evaluation: bool,
) -> AgentConfig:
    return AgentConfig(
        name=name,
        model=model,
        description=description,
        instructions=instructions,
        agents=experts,
        tools=[new_company_name_tool()],
        memory=framework.new_memory(),
        trace=framework.new_trace(),
        enable_evaluation=enable_evaluation,
    )


def create_original_coordinator(
    framework: AgentFramework,
    model: ModelHandle,
    experts: list[AgentConfig],
    enable_evaluation: bool = True,
) -> AgentConfig:
    return _coordinator(
        framework, model, experts,
        name="coordinator",
        description="You are the coordinator retrieve information from experts.",
        instructions="""
        Create a plan for what you have to do and save the plan to memory.
        Update the plan as you proceed to reflect tasks already completed.
        Call each expert one by one in order to request their name - what is your name?
        Wait until you have received the response from the expert before calling the next expert.
        Save each expert name to memory.
        Once you have all the names, retrieve the company names for each expert using the company_name tool.
        Finally, respond with a table of the experts, their company names and their id numbers in the order.""",
        enable_evaluation=enable_evaluation,
    )


def create_enhanced_coordinator(
    framework: AgentFramework,
    model: ModelHandle,
    experts: list[AgentConfig],
    enable_evaluation: bool = True,
) -> AgentConfig:
    return _coordinator(
        framework, model, experts,
        name="enhanced_coordinator",
        description=(
            "You are a coordinator that systematically retrieves information from experts "
            "and organizes the results."
        ),
        instructions="""
TASK OVERVIEW:
You must contact experts sequentially to gather their information and create a structured table.

STEP-BY-STEP PROCESS:
1. Create and save a plan to memory with clear steps
2. Contact expert1 with the question "what is your name?" and wait for response
3. Use the company name tool to get expert1's company information
4. Save expert1's complete information to memory
5. Repeat for expert2, then expert3
6. After collecting all information, create a table with columns: Expert Name | Company Name | ID Number
7. Present results in order: expert1, expert2, expert3

CRITICAL RULES:
- You MUST call experts sequentially (one at a time)
- Wait for each expert's complete response before proceeding
- Use only information provided by experts - do not make up data
- Save progress to memory after each step
- Final output must be a clear table format""",
        enable_evaluation=enable_evaluation,
    )


def create_step_by_step_coordinator(
    framework: AgentFramework,
    model: ModelHandle,
    experts: list[AgentConfig],
    enable_evaluation: bool = True,
) -> AgentConfig:
    steps = []
    for i, expert in enumerate(experts, start=2):
        steps.append(
            f"STEP {i}: {expert.name.capitalize()} Information Gathering\n"
            f"- Call {expert.name} with message: \"what is your name?\"\n"
            f"- Wait for {expert.name}'s response\n"
            f"- Use company_name tool to get {expert.name}'s company information\n"
            f"- Save {expert.name}'s data to memory (name, company, ID)\n"
        )
    order = ", ".join(expert.name for expert in experts)
    return _coordinator(
        framework, model, experts,
        name="step_by_step_coordinator",
        description="You are a methodical coordinator that follows explicit steps to complete tasks.",
        instructions=(
            "Follow these exact steps in order:\n\n"
            "STEP 1: Plan Creation\n"
            "- Create a detailed plan and save it to memory\n"
            "- Plan should list all steps you will take\n\n"
            + "\n".join(steps)
            + f"\nSTEP {len(experts) + 2}: Create Final Table\n"
            "- Review all collected information from memory\n"
            "- Create table format: | Expert | Company | ID |\n"
            f"- Present in order: {order}\n"
            "- Return only the table, no additional commentary\n\n"
            "IMPORTANT: Complete each step fully before moving to the next step."
        ),
        enable_evaluation=enable_evaluation,
    )


def create_sequential_coordinator(
    framework: AgentFramework,
    model: ModelHandle,
    experts: list[AgentConfig],
    enable_evaluation: bool = True,
) -> AgentConfig:
    return _coordinator(
        framework, model, experts,
        name="sequential_coordinator",
        description="You are a coordinator that processes tasks in strict sequential order.",
        instructions="""
SEQUENTIAL PROCESSING PROTOCOL:

PHASE 1 - Planning:
Save a plan to memory outlining the sequential steps

PHASE 2 - Sequential Expert Contact:
Execute in this exact order:
a) Contact expert1 -> Wait for response -> Process response -> Save to memory
b) Contact expert2 -> Wait for response -> Process response -> Save to memory
c) Contact expert3 -> Wait for response -> Process response -> Save to memory

PHASE 3 - Company Information Retrieval:
For each expert (in order):
a) Use company_name tool for expert1 -> Save company info to memory
b) Use company_name tool for expert2 -> Save company info to memory
c) Use company_name tool for expert3 -> Save company info to memory

PHASE 4 - Table Generation:
Create table with format:
| Expert Name | Company Name | ID Number |
|-------------|--------------|-----------|
| expert1     | [company]    | [ID]      |
| expert2     | [company]    | [ID]      |
| expert3     | [company]    | [ID]      |

CRITICAL RULES:
- Never process multiple experts simultaneously
- Always wait for complete response before next action
- Update memory after each completed action
- Maintain strict sequential order: expert1 -> expert2 -> expert3""",
        enable_evaluation=enable_evaluation,
    )


def new_multi_agent_chain_agent(framework: AgentFramework, model: ModelHandle) -> AgentConfig:
    experts = create_expert_agents(model)
    return _coordinator(
        framework, model, experts,
        name="coordinator",
        description="You are the coordinator retrieve information from experts.",
        instructions="""
        Create a plan for what you have to do and save the plan to memory.
        Update the plan as you proceed to reflect tasks already completed.
        Call each expert one by one in order to request their name - what is your name?
        Wait until you have received the response from the expert before calling the next expert.
        Save each expert name to memory.
        You must call each expert in order and wait for the expert's response before calling the next expert.
        ie. call expert1, wait for the response, then call expert2, wait for the response,
        then call expert3, wait for the response.
        Do no make up information. Use only the names provided by the agents.
        Return the final names as received from the last expert. do not add any additional text or commentary.""",
        enable_evaluation=False,
    )


@CapabilityRegistry.register("MultiAgentChain", "Coordinator calls expert1, expert2, expert3 in order")
async def run_multi_agent_chain(
    framework: AgentFramework,
    model: ModelHandle,
    timeout: Optional[float] = None,
) -> BenchResult:
    start = time.perf_counter()

    coordinator = new_multi_agent_chain_agent(framework, model)
    coordinator.session = framework.new_session()

    try:
        run = await framework.start(coordinator, PROMPT)
        response = await run.wait(timeout)
    except FrameworkError as e:
        return create_bench_result("MultiAgentChain", model, start, "", e)

    result = create_bench_result("MultiAgentChain", model, start, response)

    try:
        positions = find_in_order(response, EXPECTED_EXPERTS)
    except ResponseValidationError as e:
        return result.fail(f"Experts check failed: {e}")

    result.metadata["expected_experts"] = EXPECTED_EXPERTS
    result.metadata["expert_positions"] = positions
    result.metadata["response_preview"] = truncate_string(response, 100)
    return result
