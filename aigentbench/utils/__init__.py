"""Utility functions for aigentbench."""

from aigentbench.utils.logging import setup_logging, get_logger

__all__ = [
    "setup_logging",
    "get_logger",
]
