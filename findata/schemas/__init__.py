"""Pydantic record models for the tabular-store loading contract."""

from .records import (
    ACCOUNT_COLUMNS,
    SUMMARY_COLUMNS,
    TRANSACTION_COLUMNS,
    BalanceSheetAccountRow,
    BalanceSheetRecord,
    BalanceSheetSummaryRecord,
    ClassifiedItemRecord,
    EquityItemRecord,
    MetricsRecord,
    TransactionRecord,
    balance_sheet_records,
    flatten_balance_sheets,
    summarize_balance_sheets,
    transaction_records,
)

__all__ = [
    "ACCOUNT_COLUMNS",
    "SUMMARY_COLUMNS",
    "TRANSACTION_COLUMNS",
    "BalanceSheetAccountRow",
    "BalanceSheetRecord",
    "BalanceSheetSummaryRecord",
    "ClassifiedItemRecord",
    "EquityItemRecord",
    "MetricsRecord",
    "TransactionRecord",
    "balance_sheet_records",
    "flatten_balance_sheets",
    "summarize_balance_sheets",
    "transaction_records",
]
