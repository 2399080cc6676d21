"""Structured logging for the steelkilt rules engine.

Engine modules log through structlog: dice at debug, resolved exchanges
and casts at info, refused rule actions at warning. Nothing is configured
on import; a front end or simulation script calls ``configure_logging``
once, and the level and renderer come from ``Settings`` unless given.

Example:
    >>> from steelkilt.core.logging import configure_logging, get_logger
    >>> configure_logging()  # STEELKILT_LOG_LEVEL / STEELKILT_JSON_LOGS
    >>> logger = get_logger(__name__)
    >>> logger.info("Exchange resolved", attacker="Aldric", hit=True, damage=7)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


def _engine_context(seed: int | None) -> Processor:
    """Build a processor tagging every event with the engine and dice seed.

    A logged simulation run with a fixed seed can be replayed from the seed
    in its own log lines.
    """

    def add_engine_context(
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict.setdefault("engine", "steelkilt")
        if seed is not None:
            event_dict.setdefault("dice_seed", seed)
        return event_dict

    return add_engine_context


def configure_logging(
    *,
    level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """Configure engine-wide logging on stderr.

    Args:
        level: Minimum level to emit; defaults to ``Settings.log_level``.
        json_format: Render one JSON object per line instead of console
            output; defaults to ``Settings.json_logs``.

    Raises:
        ConfigurationError: If the settings cannot be loaded.
    """
    from steelkilt.core.config import get_settings

    settings = get_settings()
    if level is None:
        level = settings.log_level
    if json_format is None:
        json_format = settings.json_logs

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _engine_context(settings.dice.seed),
    ]
    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger bound to ``name`` (typically ``__name__``)."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind values included in every later log line, such as a combat id.

    Example:
        >>> bind_context(combat_id="arena-3")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
