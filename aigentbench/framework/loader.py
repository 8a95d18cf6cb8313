"""Resolve a framework from an import path."""

from __future__ import annotations

import importlib
from typing import Any

from aigentbench.framework.base import AgentFramework, FrameworkLoadError

# Short names accepted in place of a full "module:attribute" path
KNOWN_FRAMEWORKS = {
    "scripted": "aigentbench.framework.scripted:ScriptedFramework",
}


def load_framework(path: str, **kwargs: Any) -> AgentFramework:
    """
    Import and instantiate a framework.

    Args:
        path: ``"package.module:attribute"`` or a short name from KNOWN_FRAMEWORKS.
            The attribute may be an AgentFramework instance, a subclass or a factory.
        **kwargs: Passed to the class or factory

    Returns:
        The framework instance
    """
    target = KNOWN_FRAMEWORKS.get(path, path)
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise FrameworkLoadError(f"Framework path must look like 'module:attribute', got {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise FrameworkLoadError(f"Cannot import framework module {module_name!r}: {e}") from e

    try:
        obj = getattr(module, attr)
    except AttributeError as e:
        raise FrameworkLoadError(f"Module {module_name!r} has no attribute {attr!r}") from e

    if not isinstance(obj, AgentFramework):
        if not callable(obj):
            raise FrameworkLoadError(f"{target} is neither a framework nor a factory")
        obj = obj(**kwargs)

    if not isinstance(obj, AgentFramework):
        raise FrameworkLoadError(f"{target} did not produce an AgentFramework (got {type(obj).__name__})")
    return obj
