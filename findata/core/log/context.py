"""Run metadata (job, seed, output directory) attached to every log record."""
from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Dict, Iterator, Mapping


_fields: contextvars.ContextVar[Mapping[str, object]] = contextvars.ContextVar(
    "findata_log_context", default={}
)


def _merged(values: Mapping[str, object]) -> dict[str, object]:
    merged = dict(_fields.get())
    merged.update({key: value for key, value in values.items() if value is not None})
    return merged


class LogContext:
    """Binds key/value pairs that :class:`ContextFilter` renders before each message."""

    def bind(self, **values: object) -> None:
        _fields.set(_merged(values))

    @contextmanager
    def scoped(self, **values: object) -> Iterator[None]:
        """Bind ``values`` only for the duration of a ``with`` block."""

        token = _fields.set(_merged(values))
        try:
            yield
        finally:
            _fields.reset(token)

    def clear(self) -> None:
        _fields.set({})

    def as_dict(self) -> Dict[str, object]:
        return dict(_fields.get())


class ContextFilter(logging.Filter):
    """Expose bound fields as ``record.context`` (``"k=v k2=v2 "`` or ``""``).

    Records already stamped on the calling thread keep their value when the
    queue listener runs the filter again.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "context", None) is not None:
            return True
        fields = _fields.get()
        record.context = "".join(f"{key}={value} " for key, value in fields.items())
        return True


log_context = LogContext()
