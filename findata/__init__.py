"""Seeded synthetic bank transactions and quarterly balance sheets for demos."""

from .core import get_logger, get_settings
from .domain import BalanceSheet, LineItem, Transaction
from .errors import EmptyCatalogError, GeneratorError, InvalidRangeError
from .generators import (
    DivisionByZeroMetric,
    FinancialMetrics,
    calculate_metrics,
    generate_all_data,
    generate_balance_sheets,
    generate_transactions,
)

__all__ = [
    "BalanceSheet",
    "DivisionByZeroMetric",
    "EmptyCatalogError",
    "FinancialMetrics",
    "GeneratorError",
    "InvalidRangeError",
    "LineItem",
    "Transaction",
    "calculate_metrics",
    "generate_all_data",
    "generate_balance_sheets",
    "generate_transactions",
    "get_logger",
    "get_settings",
]
