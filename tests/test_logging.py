"""Logging helpers: run context, timers and amount formatting."""
from __future__ import annotations

import io
import logging
from decimal import Decimal

import pytest

from findata.core.formatting import humanize_currency, humanize_number
from findata.core.log import log_context, timeit
from findata.core.log.context import ContextFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("findata", logging.INFO, __file__, 1, "hello", None, None)


def test_context_filter_renders_bound_values() -> None:
    log_context.bind(job="generate", seed=42, skipped=None)
    record = _record()

    assert ContextFilter().filter(record)
    assert record.context == "job=generate seed=42 "


def test_scoped_context_is_restored() -> None:
    log_context.bind(job="generate")
    with log_context.scoped(dataset="transactions"):
        assert log_context.as_dict() == {"job": "generate", "dataset": "transactions"}
    assert log_context.as_dict() == {"job": "generate"}


def test_empty_context_renders_nothing() -> None:
    record = _record()
    ContextFilter().filter(record)

    assert record.context == ""


def test_timeit_logs_throughput(caplog) -> None:
    logger = logging.getLogger("findata.test.timer")
    with caplog.at_level(logging.INFO, logger="findata.test.timer"):
        with timeit("Generation", logger=logger, unit="transactions", total=300):
            pass

    assert "Generation completed" in caplog.text
    assert "300 transactions" in caplog.text


def test_timeit_logs_failure(caplog) -> None:
    logger = logging.getLogger("findata.test.timer")
    with caplog.at_level(logging.INFO, logger="findata.test.timer"):
        with pytest.raises(RuntimeError):
            with timeit("Generation", logger=logger):
                raise RuntimeError("boom")

    assert "Generation failed" in caplog.text


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("25000000"), "25.0M"),
        (1234, "1234"),
        (-15000, "-15.0k"),
        (Decimal("5000.50"), "5000.5"),
    ],
)
def test_humanize_number(value, expected) -> None:
    assert humanize_number(value, short=True) == expected


def test_humanize_currency_prefixes_code() -> None:
    assert humanize_currency(Decimal("25000000")) == "IDR 25.0M"
    assert humanize_currency(75000, currency="EUR", short=False) == "EUR 75.0 thousand"


def test_progress_track_yields_rows_unchanged() -> None:
    from rich.console import Console

    from findata.core.log.progress import ProgressManager

    manager = ProgressManager(console=Console(file=io.StringIO()))
    rows = [{"id": 1}, {"id": 2}, {"id": 3}]

    assert list(manager.track(rows, description="Writing", total=len(rows))) == rows
