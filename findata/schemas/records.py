"""Record shapes handed to the tabular store.

Field names and formats are the loading contract: camelCase keys, dates as
``YYYY-MM-DD`` strings, amounts as plain numbers, enumerations as strings.
Use ``model_dump(by_alias=True)`` (or the list helpers below) to get them.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Iterable, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from findata.domain.models import BalanceSheet, LineItem, Transaction
from findata.generators.metrics import DivisionByZeroMetric, FinancialMetrics


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    @field_serializer("date", check_fields=False)
    def serialize_date(self, value: dt.date) -> str:
        return value.isoformat()


class TransactionRecord(_Record):
    id: str
    date: dt.date
    description: str
    category: str
    amount: Decimal
    balance: Decimal
    merchant: str
    type: Literal["credit", "debit"]

    @field_serializer("amount", "balance")
    def serialize_amount(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_domain(cls, txn: Transaction) -> "TransactionRecord":
        return cls(
            id=txn.id,
            date=txn.date,
            description=txn.description,
            category=txn.category.value,
            amount=txn.amount,
            balance=txn.balance,
            merchant=txn.merchant,
            type=txn.type.value,
        )


class ClassifiedItemRecord(BaseModel):
    """Asset or liability line item."""

    name: str
    amount: int
    category: Literal["current", "non-current"]

    @classmethod
    def from_domain(cls, item: LineItem) -> "ClassifiedItemRecord":
        if item.category is None:
            raise ValueError(f"line item {item.name!r} has no current/non-current tag")
        return cls(name=item.name, amount=item.amount, category=item.category.value)


class EquityItemRecord(BaseModel):
    name: str
    amount: int


class BalanceSheetRecord(_Record):
    period: str
    date: dt.date
    assets: list[ClassifiedItemRecord]
    liabilities: list[ClassifiedItemRecord]
    equity: list[EquityItemRecord]
    total_assets: int
    total_liabilities: int
    total_equity: int

    @classmethod
    def from_domain(cls, sheet: BalanceSheet) -> "BalanceSheetRecord":
        return cls(
            period=sheet.period,
            date=sheet.date,
            assets=[ClassifiedItemRecord.from_domain(item) for item in sheet.assets],
            liabilities=[ClassifiedItemRecord.from_domain(item) for item in sheet.liabilities],
            equity=[EquityItemRecord(name=item.name, amount=item.amount) for item in sheet.equity],
            total_assets=sheet.total_assets,
            total_liabilities=sheet.total_liabilities,
            total_equity=sheet.total_equity,
        )


class BalanceSheetSummaryRecord(_Record):
    period: str
    date: dt.date
    total_assets: int
    total_liabilities: int
    total_equity: int


class BalanceSheetAccountRow(BaseModel):
    """One line item of one balance sheet, flattened for SQL querying."""

    model_config = ConfigDict(frozen=True)

    period: str
    date: dt.date
    account_type: Literal["asset", "liability", "equity"]
    account_name: str
    amount: int
    category: Optional[Literal["current", "non-current"]] = None

    @field_serializer("date")
    def serialize_date(self, value: dt.date) -> str:
        return value.isoformat()


class MetricsRecord(_Record):
    """Metrics with undefined ratios rendered as ``None``."""

    current_ratio: Optional[float]
    debt_to_equity_ratio: Optional[float]
    working_capital: int
    total_assets: int
    total_liabilities: int
    total_equity: int

    @classmethod
    def from_domain(cls, metrics: FinancialMetrics) -> "MetricsRecord":
        def _ratio(value: Decimal | DivisionByZeroMetric) -> Optional[float]:
            if isinstance(value, DivisionByZeroMetric):
                return None
            return float(value)

        return cls(
            current_ratio=_ratio(metrics.current_ratio),
            debt_to_equity_ratio=_ratio(metrics.debt_to_equity_ratio),
            working_capital=metrics.working_capital,
            total_assets=metrics.total_assets,
            total_liabilities=metrics.total_liabilities,
            total_equity=metrics.total_equity,
        )


TRANSACTION_COLUMNS = ["id", "date", "description", "category", "amount", "balance", "merchant", "type"]
ACCOUNT_COLUMNS = ["period", "date", "account_type", "account_name", "amount", "category"]
SUMMARY_COLUMNS = ["period", "date", "totalAssets", "totalLiabilities", "totalEquity"]


def transaction_records(transactions: Iterable[Transaction]) -> list[dict[str, object]]:
    return [TransactionRecord.from_domain(txn).model_dump(by_alias=True) for txn in transactions]


def balance_sheet_records(sheets: Iterable[BalanceSheet]) -> list[dict[str, object]]:
    return [BalanceSheetRecord.from_domain(sheet).model_dump(by_alias=True) for sheet in sheets]


def flatten_balance_sheets(sheets: Iterable[BalanceSheet]) -> list[dict[str, object]]:
    """Assets, then liabilities, then equity rows of every sheet, sheet by sheet."""

    rows: list[dict[str, object]] = []
    sections = (("asset", "assets"), ("liability", "liabilities"), ("equity", "equity"))
    for sheet in sheets:
        for account_type, attr in sections:
            for item in getattr(sheet, attr):
                row = BalanceSheetAccountRow(
                    period=sheet.period,
                    date=sheet.date,
                    account_type=account_type,
                    account_name=item.name,
                    amount=item.amount,
                    category=item.category.value if item.category is not None else None,
                )
                rows.append(row.model_dump())
    return rows


def summarize_balance_sheets(sheets: Iterable[BalanceSheet]) -> list[dict[str, object]]:
    """Totals per sheet, ordered by quarter-end date."""

    ordered = sorted(sheets, key=lambda sheet: sheet.date)
    return [
        BalanceSheetSummaryRecord(
            period=sheet.period,
            date=sheet.date,
            total_assets=sheet.total_assets,
            total_liabilities=sheet.total_liabilities,
            total_equity=sheet.total_equity,
        ).model_dump(by_alias=True)
        for sheet in ordered
    ]
