"""Shared fixtures for the findata test suite."""
from __future__ import annotations

from datetime import date

import pytest

from findata.core.config import get_settings
from findata.core.log import log_context

ENV_VARS = (
    "FINDATA_OUTPUT_DIR",
    "FINDATA_TRANSACTIONS",
    "FINDATA_INITIAL_BALANCE",
    "FINDATA_TRANSACTION_SEED",
    "FINDATA_BALANCE_SHEET_YEAR",
    "FINDATA_QUARTERS",
    "FINDATA_BALANCE_SHEET_SEED",
    "FINDATA_STARTING_EQUITY",
    "FINDATA_CURRENCY",
    "FINDATA_LOG_DIR",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Start every test from default settings and an empty log context."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    log_context.clear()
    yield
    get_settings.cache_clear()
    log_context.clear()


@pytest.fixture
def fixed_window() -> tuple[date, date]:
    return date(2024, 1, 1), date(2024, 12, 31)
