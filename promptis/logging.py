#!/usr/bin/env python3
"""
Structured logging for promptis.

Library code only asks for loggers; the ``promptis`` command calls
``setup_logging()`` once at startup. Applications embedding ``Prompter`` keep
whatever logging setup they already have.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.typing import Processor

from .config import PromptisConfig, get_config


def setup_logging(config: Optional[PromptisConfig] = None) -> None:
    """Route structlog through stdlib logging on stderr.

    Args:
        config: Settings to use; defaults to the global configuration
    """
    config = config or get_config()

    # stdout carries the prompts, so log lines go to stderr
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, config.log_level),
    )

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]
    if config.log_format == "json":
        processors += [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "promptis") -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)
