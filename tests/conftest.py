"""Shared fixtures: a scripted model that passes every capability."""

from __future__ import annotations

from typing import Any

import pytest

from aigentbench.framework.base import AgentFramework, FrameworkError
from aigentbench.framework.scripted import ScriptedFramework
from aigentbench.framework.types import AgentConfig, ModelHandle, ModelResponse, Tool, ToolCall


def last_prompt(messages: list[dict[str, Any]]) -> str:
    for message in reversed(messages):
        if message["role"] == "user":
            return message["content"]
    return ""


def tool_results(messages: list[dict[str, Any]]) -> list[str]:
    return [m["content"] for m in messages if m["role"] == "tool"]


def coordinator_response(agent: AgentConfig, messages: list[dict[str, Any]], tools: list[Tool]) -> ModelResponse:
    """Plan to memory, call each expert in turn, look up companies, answer with a table."""
    names = {tool.name for tool in tools}
    experts = [sub.name for sub in agent.agents]

    plan: list[ToolCall] = []
    if "save_memory" in names:
        plan.append(ToolCall("save_memory", {"content": "plan: ask each expert, then look up companies"}))
    plan.extend(ToolCall(expert, {"input": "what is your name?"}) for expert in experts)
    if "company_name" in names:
        plan.extend(ToolCall("company_name", {"company_number": str(i + 1)}) for i in range(len(experts)))

    step = len(tool_results(messages))
    if step < len(plan):
        return ModelResponse(tool_calls=[plan[step]])

    rows = ["| Expert | Company | ID |", "|---|---|---|"]
    for i, expert in enumerate(experts):
        rows.append(f"| {expert} | company {i + 1} | ID{i + 1} |")
    return ModelResponse(content="\n".join(rows))


def benchmark_responder(agent: AgentConfig, messages: list[dict[str, Any]], tools: list[Tool]):
    prompt = last_prompt(messages)
    results = tool_results(messages)

    if agent.name.startswith("expert"):
        return agent.name

    if agent.agents and agent.agents[0].name.startswith("expert"):
        return coordinator_response(agent, messages, tools)

    if agent.name == "coordinator":
        if not results:
            return ModelResponse(tool_calls=[ToolCall("calculator", {"input": "15 + 27"})])
        if len(results) == 1:
            return ModelResponse(tool_calls=[ToolCall("explainer", {"input": results[0]})])
        return f"Calculator: {results[0]}\nExplainer: {results[1]}"

    if agent.name == "calculator":
        return "42"

    if agent.name == "explainer":
        return "EXPLANATION: 42 is how many oranges the office has after adding 15 to 27."

    if agent.name == "file-analyst":
        attached = " ".join(m["content"] for m in messages if m["content"].startswith("Attached file"))
        if "artificial intelligence" in attached:
            return "SUCCESS: The file is sample content about artificial intelligence and machine learning."
        return "I could not read the file."

    if agent.name == "memory-agent":
        if "favourite colour is" in prompt:
            if not results:
                return ModelResponse(tool_calls=[ToolCall("save_memory", {"content": "favourite colour: teal"})])
            return "Saved your favourite colour."
        memory = " ".join(m["content"] for m in messages if m["role"] == "system")
        return "teal" if "teal" in memory else "I do not know."

    if "number 150" in prompt:
        if not results:
            return ModelResponse(tool_calls=[ToolCall("lookup_company_name", {"company_number": "150"})])
        return f"The company with the number 150 is {results[0]}."

    if "New South Wales" in prompt:
        return "The capital of New South Wales is Sydney."

    if "capital of France" in prompt:
        if agent.stream:
            return "Paris is the capital of France, famous for the Eiffel Tower, the Louvre and its cafes."
        return "Paris"

    if "2 + 2" in prompt:
        return "4"

    return "I am not sure."


class FailingFramework(AgentFramework):
    """Framework that refuses to start any run."""

    name = "failing"

    async def start(self, agent, prompt):
        raise FrameworkError("connection refused")


@pytest.fixture
def model():
    return ModelHandle(model_name="test-model", provider="ollama")


@pytest.fixture
def framework():
    return ScriptedFramework(responder=benchmark_responder)


@pytest.fixture
def failing_framework():
    return FailingFramework()
