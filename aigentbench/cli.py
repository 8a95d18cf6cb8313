"""Command-line interface for aigentbench."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from aigentbench.config import BenchmarkRunConfig, load_config, load_env
from aigentbench.framework.base import AgentFramework, FrameworkLoadError
from aigentbench.framework.loader import load_framework
from aigentbench.framework.types import ModelHandle
from aigentbench.providers import MODELS_TABLE, create_model
from aigentbench.utils.logging import setup_logging

app = typer.Typer(
    name="aigentbench",
    help="aigentbench: capability benchmark for agent frameworks",
)
console = Console()


def _print_available_models() -> None:
    console.print("\nAvailable models:")
    for desc in MODELS_TABLE:
        console.print(f"  {desc.name}")


def _resolve_models(names: list[str]) -> list[ModelHandle]:
    models = []
    for name in names:
        model = create_model(name)
        if model is None:
            console.print(f"[red]Model unknown or missing authentication: {name}[/red]")
            _print_available_models()
            raise typer.Exit(1)
        models.append(model)
    if not models:
        console.print("[red]No valid models specified[/red]")
        _print_available_models()
        raise typer.Exit(1)
    return models


def _resolve_framework(config: BenchmarkRunConfig) -> AgentFramework:
    path = config.resolved_framework()
    if not path:
        console.print("[red]No framework configured; use --framework or set AIGENTBENCH_FRAMEWORK[/red]")
        raise typer.Exit(1)
    try:
        return load_framework(path, **config.framework_kwargs)
    except FrameworkLoadError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _read_config(config_path: Optional[str]) -> BenchmarkRunConfig:
    if not config_path:
        return BenchmarkRunConfig()

    path = Path(config_path)
    if not path.exists():
        console.print(f"[red]Config file not found: {config_path}[/red]")
        raise typer.Exit(1)

    try:
        return load_config(path)
    except json.JSONDecodeError as e:
        console.print(f"[red]Config file is not valid JSON: {e}[/red]")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid config {config_path}:[/red]")
        console.print(str(e), markup=False)
        raise typer.Exit(1)


def _build_config(
    config_path: Optional[str],
    models: Optional[list[str]] = None,
    capabilities: Optional[list[str]] = None,
    framework: Optional[str] = None,
    timeout: Optional[float] = None,
    report: Optional[str] = None,
    output: Optional[str] = None,
    env_file: Optional[str] = None,
    verbose: bool = False,
) -> BenchmarkRunConfig:
    config = _read_config(config_path)

    overrides = {
        "models": models or None,
        "capabilities": capabilities or None,
        "framework": framework,
        "wait_timeout": timeout,
        "report_path": report,
        "output_path": output,
        "env_file": env_file,
        "verbose": True if verbose else None,
    }
    data = config.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})

    # Command-line values pass the same field constraints as the file
    try:
        config = BenchmarkRunConfig.model_validate(data)
    except ValidationError as e:
        console.print("[red]Invalid options:[/red]")
        console.print(str(e), markup=False)
        raise typer.Exit(1)

    setup_logging(logging.DEBUG if config.verbose else logging.WARNING)
    load_env(config.env_file)
    return config


@app.command()
def run(
    models: Optional[list[str]] = typer.Argument(None, help="Model names, e.g. gpt-4o-mini gemma3:12b"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to JSON config file"),
    capability: Optional[list[str]] = typer.Option(None, "--capability", "-k", help="Capability to run (repeatable)"),
    framework: Optional[str] = typer.Option(None, "--framework", "-f", help="Framework as 'module:attribute'"),
    timeout: Optional[float] = typer.Option(None, "--timeout", "-t", help="Seconds each run may take"),
    report: Optional[str] = typer.Option(None, "--report", "-r", help="Markdown comparison report path"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="JSON results path"),
    env_file: Optional[str] = typer.Option(None, "--env-file", help="Environment file with provider keys"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Run the capability benchmark for one or more models."""
    from aigentbench.bench import run_models
    from aigentbench.scenarios import CapabilityRegistry

    config = _build_config(config_path, models, capability, framework, timeout, report, output, env_file, verbose)

    try:
        selected = CapabilityRegistry.select(config.capabilities)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        console.print(f"Available: {', '.join(CapabilityRegistry.list_all())}")
        raise typer.Exit(1)

    handles = _resolve_models(config.models)
    bench_framework = _resolve_framework(config)

    console.print("\n[bold]Running aigentbench[/bold]")
    console.print(f"Framework: {bench_framework.name}")
    console.print(f"Models: {', '.join(m.model_name for m in handles)}")
    console.print(f"Capabilities: {len(selected)}")

    result = asyncio.run(run_models(
        bench_framework,
        handles,
        selected,
        timeout=config.wait_timeout,
        report_path=config.report_path,
        output_path=config.output_path,
        console=console,
    ))

    passed = sum(1 for r in result.all_results if r.success)
    console.print(f"\n[bold]{passed}/{len(result.all_results)} capability runs succeeded[/bold]")


@app.command()
def models():
    """List the known model names."""
    table = Table(title="Available Models")
    table.add_column("Name", style="cyan")
    table.add_column("Provider", style="green")

    for desc in MODELS_TABLE:
        table.add_row(desc.name, desc.provider.__name__.replace("_provider", ""))

    console.print(table)


@app.command()
def capabilities():
    """List benchmark capabilities in the order they run."""
    from aigentbench.scenarios import CapabilityRegistry

    table = Table(title="Capabilities")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for cap in CapabilityRegistry.all():
        table.add_row(cap.name, cap.description)

    console.print(table)


@app.command()
def prompts(
    model: str = typer.Argument(..., help="Model name"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to JSON config file"),
    framework: Optional[str] = typer.Option(None, "--framework", "-f", help="Framework as 'module:attribute'"),
    env_file: Optional[str] = typer.Option(None, "--env-file", help="Environment file with provider keys"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Compare the coordinator prompt variants of the multi-agent chain."""
    from aigentbench.evaluation.variants import evaluate_chain_prompts

    config = _build_config(config_path, framework=framework, env_file=env_file, verbose=verbose)
    handle = _resolve_models([model])[0]
    bench_framework = _resolve_framework(config)

    asyncio.run(evaluate_chain_prompts(bench_framework, handle, console=console))


@app.command()
def version():
    """Show version information."""
    from aigentbench import __version__
    console.print(f"aigentbench v{__version__}")


if __name__ == "__main__":
    app()
