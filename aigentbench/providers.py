"""Model table: which model names the benchmark knows and how to reach them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional

from aigentbench.framework.types import ModelHandle
from aigentbench.utils.logging import get_logger

logger = get_logger("providers")

DEFAULT_OLLAMA_URL = "http://localhost:11434"


def openai_provider(model_name: str) -> Optional[ModelHandle]:
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        logger.error("OPENAI_API_KEY is not set")
        return None
    return ModelHandle(
        model_name=model_name,
        provider="openai",
        api_key=api_key,
        base_url=os.getenv("OPENAI_BASE_URL") or None,
    )


def ollama_provider(model_name: str) -> Optional[ModelHandle]:
    return ModelHandle(
        model_name=model_name,
        provider="ollama",
        base_url=os.getenv("OLLAMA_HOST", DEFAULT_OLLAMA_URL),
    )


def gemini_provider(model_name: str) -> Optional[ModelHandle]:
    api_key = os.getenv("GOOGLE_API_KEY")
    if not api_key:
        logger.error("GOOGLE_API_KEY is not set")
        return None
    return ModelHandle(model_name=model_name, provider="google", api_key=api_key)


@dataclass(frozen=True)
class ModelDesc:
    """A known model name and the provider that builds its handle."""
    name: str
    provider: Callable[[str], Optional[ModelHandle]]


MODELS_TABLE: list[ModelDesc] = [
    ModelDesc("gpt-4o-mini", openai_provider),
    ModelDesc("gpt-4o", openai_provider),
    ModelDesc("qwen", ollama_provider),
    ModelDesc("llama3.2", ollama_provider),
    ModelDesc("gemma", ollama_provider),
    ModelDesc("deepseek", ollama_provider),
    ModelDesc("gemini", gemini_provider),
]


def model_names() -> list[str]:
    return [desc.name for desc in MODELS_TABLE]


def create_model(model_name: str) -> Optional[ModelHandle]:
    """
    Build a handle for ``model_name``.

    An exact table match wins; otherwise the first entry the name starts
    with is used, so ``gemma3:12b`` resolves through ``gemma``.

    Returns:
        The handle, or None when the model is unknown or its API key is missing
    """
    for desc in MODELS_TABLE:
        if desc.name == model_name:
            return desc.provider(model_name)

    for desc in MODELS_TABLE:
        if model_name.startswith(desc.name):
            return desc.provider(model_name)

    logger.warning("Unknown model: %s", model_name)
    return None
