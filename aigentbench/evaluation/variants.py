"""Comparing coordinator prompt variants on the multi-agent chain task."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from rich.console import Console

from aigentbench.core.runner import drain_run
from aigentbench.core.types import AgentTestResult
from aigentbench.evaluation.checks import calls_tools, has_content, has_keywords, latency_under, no_errors
from aigentbench.evaluation.classify import calculate_accuracy_relevance
from aigentbench.evaluation.suite import EvalSuite
from aigentbench.framework.base import AgentFramework, FrameworkError
from aigentbench.framework.types import AgentConfig, ModelHandle
from aigentbench.reporting import format_duration, print_comparison_table, print_detailed_results
from aigentbench.scenarios import chain
from aigentbench.utils.logging import get_logger

logger = get_logger("evaluation.variants")

VariantFactory = Callable[[AgentFramework, ModelHandle, list[AgentConfig]], AgentConfig]


@dataclass(frozen=True)
class AgentVariant:
    """A named way of building the coordinator."""
    name: str
    description: str
    create_agent: VariantFactory


CHAIN_VARIANTS = [
    AgentVariant("Original", "Base multi-agent coordinator", chain.create_original_coordinator),
    AgentVariant("Enhanced-Coordinator", "Systematic coordinator with detailed steps", chain.create_enhanced_coordinator),
    AgentVariant("Step-by-Step", "Explicit step-by-step methodology", chain.create_step_by_step_coordinator),
    AgentVariant("Sequential", "Sequential processing emphasis", chain.create_sequential_coordinator),
]


def build_chain_eval_suite() -> EvalSuite:
    suite = EvalSuite("MultiAgentChain Evaluation")
    suite.add_check("has expert keywords", has_keywords(*chain.EXPECTED_EXPERTS))
    suite.add_check("calls save memory", calls_tools("save_memory"))
    suite.add_check("has content", has_content(10))
    suite.add_check("no errors", no_errors())
    suite.add_check("responds quickly", latency_under(30.0))
    return suite


async def run_single_agent_test(
    framework: AgentFramework,
    agent: AgentConfig,
    name: str,
    suite: EvalSuite,
    user_message: str,
) -> AgentTestResult:
    """Run one variant to completion and score its eval events."""
    result = AgentTestResult(name=name)

    try:
        run = await framework.start(agent, user_message)
    except FrameworkError as e:
        result.error_count = 1
        result.failed.append(f"Start error: {e}")
        return result

    processor = suite.new_processor()
    outcome = await drain_run(run, stop_on_error=False, on_eval=processor.process_event)
    logger.debug("%s: processed %d events, %d errors", name, outcome.event_count, len(outcome.errors))

    summary = processor.summary()

    result.pass_rate = summary.pass_rate
    result.avg_score = summary.average_score
    result.duration = summary.total_duration
    result.error_count = len(outcome.errors)
    # Non-streaming agents deliver their answer as the last content event
    result.content = outcome.last_chunk
    result.accuracy_score, result.relevance_score = calculate_accuracy_relevance(summary.results)

    for check in summary.results:
        if not check.passed:
            result.failed.append(f"{check.check_name}: {check.message}")

    return result


async def run_agent_variant_tests(
    framework: AgentFramework,
    variants: list[AgentVariant],
    experts: list[AgentConfig],
    model: ModelHandle,
    suite: EvalSuite,
    user_message: str,
    console: Optional[Console] = None,
) -> list[AgentTestResult]:
    """Run every variant in turn against the same experts."""
    console = console or Console()
    results = []

    for variant in variants:
        console.print(f"\n[bold]--- Testing {variant.name} ---[/bold]")
        agent = variant.create_agent(framework, model, experts)
        result = await run_single_agent_test(framework, agent, variant.name, suite, user_message)
        results.append(result)

        console.print(
            f"{variant.name}: {result.pass_rate:.1f}% pass rate, {result.avg_score:.2f} avg score "
            f"(duration: {format_duration(result.duration)}, failed checks: {len(result.failed)})"
        )

    return results


async def evaluate_chain_prompts(
    framework: AgentFramework,
    model: ModelHandle,
    console: Optional[Console] = None,
) -> list[AgentTestResult]:
    """Compare every coordinator prompt variant and print the ranking."""
    console = console or Console()
    console.print("[bold blue]=== Testing MultiAgentChain Prompt Variations ===[/bold blue]")

    suite = build_chain_eval_suite()
    experts = chain.create_expert_agents(model, enable_evaluation=True)

    results = await run_agent_variant_tests(
        framework, CHAIN_VARIANTS, experts, model, suite, chain.PROMPT, console=console,
    )

    print_comparison_table(results, console=console)
    print_detailed_results(results, console=console)
    return results
