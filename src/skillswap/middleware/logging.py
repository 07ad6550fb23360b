"""Structured logging configuration with structlog."""

import logging

import structlog

from skillswap.config import Settings


def _service_context(settings: Settings) -> structlog.types.Processor:
    """Stamp every event with the running version and environment."""

    def add_service(_logger: object, _method: str, event_dict: dict) -> dict:
        event_dict.setdefault("service", "skillswap")
        event_dict.setdefault("version", settings.app_version)
        event_dict.setdefault("environment", settings.environment)
        return event_dict

    return add_service


def build_processors(settings: Settings) -> list[structlog.types.Processor]:
    """Processor chain for the configured format; debug adds call-site details."""
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _service_context(settings),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if settings.debug:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.LINENO,
                }
            )
        )
    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=settings.debug))
    return processors


def setup_logging(settings: Settings) -> None:
    """Configure structlog and the stdlib root level from settings.

    Loggers are cached after first use except in debug, where tests and
    reloads reconfigure logging repeatedly.
    """
    structlog.configure(
        processors=build_processors(settings),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=not settings.debug,
    )

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)
