"""Configuration models for aigentbench runs.

A run is described by one ``BenchmarkRunConfig``, loaded from JSON and
overridden from the command line.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from aigentbench.utils.logging import get_logger

logger = get_logger("config")

FRAMEWORK_ENV_VAR = "AIGENTBENCH_FRAMEWORK"


class BenchmarkRunConfig(BaseModel):
    """Canonical config for a single benchmark execution."""

    config_version: str = "0.1"

    models: list[str] = Field(default_factory=list)
    capabilities: list[str] = Field(default_factory=list, description="Empty means every capability")

    framework: Optional[str] = Field(default=None, description="'module:attribute' import path")
    framework_kwargs: dict[str, Any] = Field(default_factory=dict)

    report_path: str = "comparison_report.md"
    output_path: Optional[str] = Field(default=None, description="JSON export of all results")
    env_file: Optional[str] = ".env"

    wait_timeout: Optional[float] = Field(default=None, gt=0, description="Seconds per run")
    verbose: bool = False

    def resolved_framework(self) -> Optional[str]:
        return self.framework or os.getenv(FRAMEWORK_ENV_VAR) or None


def load_config(path: str | Path) -> BenchmarkRunConfig:
    """Read a run config from a JSON file."""
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    return BenchmarkRunConfig.model_validate(data)


def load_env(env_file: Optional[str]) -> bool:
    """Load provider keys from ``env_file`` without overriding the environment."""
    if not env_file:
        return False
    if not Path(env_file).exists():
        logger.debug("env file %s not found", env_file)
        return False
    return load_dotenv(env_file, override=False)
