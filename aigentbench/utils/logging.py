"""Log configuration shared by the CLI and the library modules."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

# Provider clients inside the framework are chatty at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "openai", "urllib3")


def setup_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure the root logger for a benchmark process.

    Repeated calls replace the previous handlers, so the CLI can switch
    to DEBUG once ``--verbose`` has been parsed.

    Args:
        level: Threshold for the root logger
        format_string: Record format; ``LOG_FORMAT`` when omitted
        log_file: Also append records to this file
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=format_string or LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``aigentbench.`` namespace, e.g. ``framework.scripted``."""
    return logging.getLogger(f"aigentbench.{name}")
