"""Structured Logging for the Declension Backend

structlog in front of stdlib logging, so uvicorn and library records share
the same renderer: colored console output in development, one JSON object
per line when LOG_JSON is set. Request correlation IDs travel in
contextvars and are merged into every event.
"""
import logging
import sys
from functools import lru_cache
from uuid import uuid4

import structlog
from structlog.types import EventDict, Processor

SERVICE_NAME = "lingua-declension"
SERVICE_VERSION = "0.1.0"

# Third-party loggers that are too chatty at INFO.
QUIET_LOGGERS = ("uvicorn.access", "httpx")


def _add_service_info(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", SERVICE_VERSION)
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _add_service_info,
    ]


def _renderer(json_logs: bool) -> Processor:
    if json_logs:
        # Lexicon words are Cyrillic; keep them readable in the JSON output.
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Args:
        level: Root log level name; unknown names fall back to INFO.
        json_logs: JSON lines instead of console output.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[
            *shared,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, _renderer(json_logs)],
    ))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # uvicorn installs its own handlers; let records propagate to ours instead
    logging.getLogger("uvicorn").handlers = []
    logging.getLogger("uvicorn.error").handlers = []
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_correlation_id() -> str:
    return uuid4().hex[:8]


def bind_context(**kwargs) -> None:
    """Bind key-value pairs to every event logged from the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


@lru_cache(maxsize=None)
def domain_logger(domain: str) -> structlog.stdlib.BoundLogger:
    """Logger named `lingua.<domain>`, one per domain."""
    return get_logger(f"lingua.{domain}")


def api_logger() -> structlog.stdlib.BoundLogger:
    """HTTP requests and route handlers."""
    return domain_logger("api")


def lexicon_logger() -> structlog.stdlib.BoundLogger:
    """Lexicon file loading and store construction."""
    return domain_logger("lexicon")


def declension_logger() -> structlog.stdlib.BoundLogger:
    """Form resolution and the declension service."""
    return domain_logger("declension")
