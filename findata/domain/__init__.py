"""Domain records shared by the generators and the record layer."""

from .models import (
    CURRENCY_PRECISION,
    TOTAL_PRECISION,
    AccountCategory,
    BalanceSheet,
    LineItem,
    Transaction,
    TransactionType,
    add_currency,
    round_currency,
    round_whole,
    to_decimal,
)

__all__ = [
    "CURRENCY_PRECISION",
    "TOTAL_PRECISION",
    "AccountCategory",
    "BalanceSheet",
    "LineItem",
    "Transaction",
    "TransactionType",
    "add_currency",
    "round_currency",
    "round_whole",
    "to_decimal",
]
