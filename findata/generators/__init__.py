"""Seeded generators for transactions, balance sheets and derived metrics."""

from .balance_sheet import (
    generate_balance_sheets,
    generate_multi_year_balance_sheets,
    generate_sample_balance_sheets,
)
from .catalog import CATALOG, Category, CategoryProfile, CategorySelection
from .generate_all import DatasetSummary, GeneratedDataset, generate_all_data
from .metrics import DivisionByZeroMetric, FinancialMetrics, calculate_metrics
from .prng import SeededRandom
from .transactions import (
    generate_monthly_transactions,
    generate_sample_transactions,
    generate_transactions,
)

__all__ = [
    "CATALOG",
    "Category",
    "CategoryProfile",
    "CategorySelection",
    "DatasetSummary",
    "DivisionByZeroMetric",
    "FinancialMetrics",
    "GeneratedDataset",
    "SeededRandom",
    "calculate_metrics",
    "generate_all_data",
    "generate_balance_sheets",
    "generate_monthly_transactions",
    "generate_multi_year_balance_sheets",
    "generate_sample_balance_sheets",
    "generate_sample_transactions",
    "generate_transactions",
]
