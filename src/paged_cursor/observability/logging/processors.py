"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from paged_cursor.observability.logging.filters import SensitiveFieldsFilter


class RedactingProcessor:
    """structlog processor that redacts sensitive keys anywhere in the event.

    Usage::

        import structlog
        from paged_cursor.observability.logging.processors import RedactingProcessor

        structlog.configure(processors=[RedactingProcessor(), ...])
    """

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._filter = SensitiveFieldsFilter(sensitive_fields)

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._filter.redact_deep(event_dict)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["RedactingProcessor", "get_logger"]
