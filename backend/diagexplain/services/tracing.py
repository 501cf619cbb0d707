"""Optional structured trace events for classification and resolution."""
from __future__ import annotations

import logging
from typing import Any, Protocol

logger = logging.getLogger("diagexplain.trace")


class TraceHook(Protocol):
    def __call__(self, event: str, **fields: Any) -> None:
        ...


def logging_trace(event: str, **fields: Any) -> None:
    """TraceHook that writes events to the `diagexplain.trace` logger at DEBUG."""
    logger.debug("%s %s", event, fields)


def emit(trace: TraceHook | None, event: str, **fields: Any) -> None:
    if trace is None:
        return
    trace(event, **fields)
