"""Logging setup for greptile_cli.

Records are rendered by structlog and written to stderr; stdout carries
only the answer text. Modules obtain loggers through get_logger() and
leave configuration to the command-line entry point.
"""

import logging
import sys

import structlog
from structlog.typing import Processor

__all__ = [
    "configure_logging",
    "get_logger",
    "level_for_verbosity",
]

QUIET_LOGGERS = ("httpx", "httpcore")


def level_for_verbosity(verbose: bool) -> int:
    """Map the --verbose flag to a logging level.

    Progress events are logged at INFO, so they only show up when
    verbose output was requested. Failures are always shown.
    """
    return logging.INFO if verbose else logging.WARNING


def _build_processors(json_output: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
    ]
    if not json_output:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
        return processors

    # JSON lines are read after the fact, so they carry their own timestamp
    processors.extend(
        [
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ]
    )
    return processors


def configure_logging(level: int = logging.WARNING, json_output: bool = False) -> None:
    """Route structlog through the standard library to stderr.

    Safe to call more than once; the last call wins.

    Args:
        level: Root logging level (see level_for_verbosity)
        json_output: Render one JSON object per line instead of console text
    """
    structlog.configure(
        processors=_build_processors(json_output),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


# Library use without the CLI still logs to stderr, never stdout
configure_logging()
