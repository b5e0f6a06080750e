"""Immutable domain records produced by the generators."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from enum import Enum
from typing import TYPE_CHECKING, Sequence, Union

from findata.errors import InvalidRangeError

if TYPE_CHECKING:
    from findata.generators.catalog import Category

# Transactions are kept to the cent, balance sheet figures to whole units.
CURRENCY_PRECISION = Decimal("0.01")
TOTAL_PRECISION = Decimal("1")

Amount = Union[Decimal, int, float, str]


def to_decimal(value: Amount, field: str = "amount") -> Decimal:
    """Convert an input amount, keeping ``0.1`` as ``0.1`` rather than its binary expansion.

    Raises:
        InvalidRangeError: ``value`` is not a finite number.
    """

    if isinstance(value, Decimal):
        converted = value
    else:
        try:
            converted = Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidRangeError(f"{field} must be a number, got {value!r}") from exc
    if not converted.is_finite():
        raise InvalidRangeError(f"{field} must be finite, got {value!r}")
    return converted


def exact_precision(*values: Decimal) -> int:
    """Significant digits that hold the sum of ``values`` without rounding."""

    top = max(max(value.adjusted() for value in values), 0) + 2
    bottom = min(min(value.as_tuple().exponent for value in values), 0)
    return top - bottom


def _quantize(value: Decimal | float | int, exponent: Decimal) -> Decimal:
    if not isinstance(value, Decimal):
        value = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact_precision(value, exponent))
        return value.quantize(exponent, rounding=ROUND_HALF_UP)


def round_currency(value: Decimal | float | int) -> Decimal:
    """Round half-up to :data:`CURRENCY_PRECISION`, at any magnitude."""

    return _quantize(value, CURRENCY_PRECISION)


def round_whole(value: Decimal | float | int) -> int:
    """Round half-up to :data:`TOTAL_PRECISION` and return an ``int``."""

    return int(_quantize(value, TOTAL_PRECISION))


def add_currency(balance: Decimal, amount: Decimal) -> Decimal:
    """``balance + amount`` rounded to the cent; the sum itself is exact."""

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact_precision(balance, amount))
        return round_currency(balance + amount)


class TransactionType(str, Enum):
    CREDIT = "credit"
    DEBIT = "debit"

    @classmethod
    def for_amount(cls, amount: Decimal) -> "TransactionType":
        return cls.CREDIT if amount >= 0 else cls.DEBIT


class AccountCategory(str, Enum):
    """Liquidity tag carried by asset and liability line items."""

    CURRENT = "current"
    NON_CURRENT = "non-current"


@dataclass(frozen=True, slots=True)
class Transaction:
    """One bank statement line with the running balance after it."""

    id: str
    date: date
    category: Category
    merchant: str
    amount: Decimal
    balance: Decimal
    description: str

    @property
    def type(self) -> TransactionType:
        return TransactionType.for_amount(self.amount)


@dataclass(frozen=True, slots=True)
class LineItem:
    """Named balance sheet amount; equity items have no ``category``."""

    name: str
    amount: int
    category: AccountCategory | None = None


def _sum_items(items: Sequence[LineItem]) -> int:
    return sum(item.amount for item in items)


@dataclass(frozen=True, slots=True)
class BalanceSheet:
    """Quarter-end snapshot; totals satisfy assets = liabilities + equity."""

    period: str
    date: date
    assets: tuple[LineItem, ...]
    liabilities: tuple[LineItem, ...]
    equity: tuple[LineItem, ...]
    total_assets: int
    total_liabilities: int
    total_equity: int

    @property
    def current_assets(self) -> int:
        return _sum_items([a for a in self.assets if a.category is AccountCategory.CURRENT])

    @property
    def current_liabilities(self) -> int:
        return _sum_items(
            [item for item in self.liabilities if item.category is AccountCategory.CURRENT]
        )

    def line_item(self, name: str) -> LineItem:
        """Return the first line item called ``name`` across all sections."""

        for item in (*self.assets, *self.liabilities, *self.equity):
            if item.name == name:
                return item
        raise KeyError(name)
