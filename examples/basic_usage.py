"""Basic usage example for aigentbench.

Runs the whole capability suite offline against a scripted framework whose
"model" answers from a canned table.
"""

import asyncio

from aigentbench import CapabilityRegistry, ScriptedFramework, run_models
from aigentbench.framework.types import ModelHandle, ModelResponse, ToolCall


def canned_model(agent, messages, tools):
    """A tiny stand-in for an LLM."""
    prompt = next(m["content"] for m in reversed(messages) if m["role"] == "user")
    tool_results = [m["content"] for m in messages if m["role"] == "tool"]
    
    if "number 150" in prompt:
        if not tool_results:
            return ModelResponse(tool_calls=[ToolCall("lookup_company_name", {"company_number": "150"})])
        return f"The company is {tool_results[0]}."
    if "New South Wales" in prompt:
        return "Sydney"
    if "capital of France" in prompt:
        return "Paris, the capital of France, sits on the Seine."
    return "I don't know."


async def run_basic_benchmark():
    """Run three capabilities against the scripted framework."""
    
    framework = ScriptedFramework(responder=canned_model)
    model = ModelHandle(model_name="canned", provider="ollama")
    
    capabilities = CapabilityRegistry.select(["SimpleAgent", "ToolIntegration", "Streaming"])
    
    result = await run_models(
        framework,
        [model],
        capabilities,
        timeout=10.0,
        report_path="results/comparison_report.md",
    )
    
    print(f"\nBenchmark ID: {result.benchmark_id}")
    for name, summary in result.summaries.items():
        print(f"{name}: {summary.success_rate:.0%} success, p50 {summary.duration_p50 * 1000:.1f}ms")
    
    return result


if __name__ == "__main__":
    asyncio.run(run_basic_benchmark())
