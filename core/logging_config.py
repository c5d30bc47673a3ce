"""
Structlog logging configuration for the payment layer.

stdlib logging is bridged into the same processor chain so that plugin
libraries logging through ``logging`` end up in one stream.
"""
import json
import logging
from typing import Any, List, Optional

import structlog
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import ProcessorFormatter

from core.config import settings


PAYMENT_LOGGER_NAME = "payments"


def _shared_processors() -> List[Any]:
    return [
        merge_contextvars,
        add_log_level,
        TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(console: bool) -> Any:
    if console:
        return ConsoleRenderer(colors=True)

    # structlog hands default/sort_keys to the serializer
    def _dumps(obj, default=None, **kwargs):
        return json.dumps(obj, ensure_ascii=False, default=default, **kwargs)

    return JSONRenderer(serializer=_dumps)


def configure_logging(
    *,
    debug: Optional[bool] = None,
    level: Optional[str] = None,
    payment_logger: str = "structlog",
) -> None:
    """Configure structlog, the stdlib root handler and the payments logger.

    ``payment_logger="null"`` silences the ``payments`` stdlib logger as well,
    matching the dropping logger returned by ``make_payment_logger``.
    """
    debug = settings.DEBUG if debug is None else debug
    level = level or ("DEBUG" if debug else settings.LOG_LEVEL)
    if payment_logger not in {"structlog", "null"}:
        raise ValueError(f"Unsupported payment logger: {payment_logger}")

    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[ProcessorFormatter.remove_processors_meta, _renderer(debug)],
        )
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level))

    logging.getLogger(PAYMENT_LOGGER_NAME).disabled = payment_logger == "null"


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger."""
    return structlog.get_logger(name)


def _drop_event(logger, method_name, event_dict):
    raise structlog.DropEvent


def make_payment_logger(choice: str) -> Any:
    """Logger for the payment dispatcher, chosen explicitly by configuration.

    ``structlog`` returns the configured ``payments`` logger, ``null`` a
    logger whose processor chain drops every event.
    """
    if choice == "structlog":
        return get_logger(PAYMENT_LOGGER_NAME)
    if choice == "null":
        return structlog.wrap_logger(structlog.ReturnLogger(), processors=[_drop_event])
    raise ValueError(f"Unsupported payment logger: {choice}")


configure_logging()
