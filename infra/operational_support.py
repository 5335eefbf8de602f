from __future__ import annotations

import logging
import secrets
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterator

# correlates every log line written while one schedule operation runs
_trace_id_var: ContextVar[str | None] = ContextVar("sched_trace_id", default=None)


def create_trace_id() -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
    return f"trc-{stamp}-{secrets.token_hex(4)}"


def current_trace_id() -> str | None:
    return (_trace_id_var.get() or "").strip() or None


@contextmanager
def bind_trace_id(trace_id: str | None = None) -> Iterator[str]:
    """Bind ``trace_id`` (or a fresh one) for the duration of the block."""
    bound = (trace_id or "").strip() or create_trace_id()
    token = _trace_id_var.set(bound)
    try:
        yield bound
    finally:
        _trace_id_var.reset(token)


class TraceIdLogFilter(logging.Filter):
    """Stamps ``record.trace_id`` so formatters can reference it; never drops records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = current_trace_id() or "-"
        return True


__all__ = ["bind_trace_id", "current_trace_id", "create_trace_id", "TraceIdLogFilter"]
