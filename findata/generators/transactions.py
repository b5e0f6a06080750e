"""Generate a reproducible bank statement with a running balance."""
from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Mapping, Optional

from findata.core.log import get_logger
from findata.domain.models import Amount, Transaction, add_currency, round_currency, to_decimal
from findata.errors import InvalidRangeError
from findata.generators.catalog import (
    CATALOG,
    Category,
    CategoryProfile,
    CategorySelection,
    catalog_categories,
    category_weights,
    validate_catalog,
)
from findata.generators.prng import SeededRandom

logger = get_logger(__name__)

DEFAULT_INITIAL_BALANCE = Decimal("5000")
DEFAULT_NUM_TRANSACTIONS = 300
DEFAULT_SEED = 42
DEFAULT_WINDOW = timedelta(days=365)


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def transaction_id(index: int) -> str:
    return f"txn_{index:06d}"


def describe(phrase: str, merchant: str) -> str:
    return f"{phrase} - {merchant}"


def _draw_dates(
    rng: SeededRandom, start: datetime, end: datetime, count: int
) -> list[date]:
    span = end - start
    stamps = [start + span * rng.next() for _ in range(count)]
    stamps.sort()
    return [stamp.date() for stamp in stamps]


def generate_transactions(
    start_date: Optional[date | datetime] = None,
    end_date: Optional[date | datetime] = None,
    initial_balance: Amount = DEFAULT_INITIAL_BALANCE,
    num_transactions: int = DEFAULT_NUM_TRANSACTIONS,
    seed: int = DEFAULT_SEED,
    *,
    catalog: Mapping[Category, CategoryProfile] = CATALOG,
    selection: CategorySelection = CategorySelection.UNIFORM,
) -> list[Transaction]:
    """Return ``num_transactions`` transactions ordered by date.

    Dates are drawn uniformly between ``start_date`` and ``end_date``
    (default: the year up to today) and sorted before any category or amount
    is drawn, so ids and balances follow chronological order. Each balance
    is the previous balance plus the signed amount, rounded to the cent.

    Raises:
        InvalidRangeError: ``end_date`` precedes ``start_date`` or
            ``num_transactions`` is negative, or ``initial_balance`` is not
            a finite number.
        EmptyCatalogError: ``catalog`` is empty or has a category without
            merchants.
    """

    if end_date is None:
        end_date = date.today()
    if start_date is None:
        start_date = _as_datetime(end_date) - DEFAULT_WINDOW

    start = _as_datetime(start_date)
    end = _as_datetime(end_date)
    if end < start:
        raise InvalidRangeError(
            f"end_date {end.isoformat()} is before start_date {start.isoformat()}"
        )
    if num_transactions < 0:
        raise InvalidRangeError(f"num_transactions must be >= 0, got {num_transactions}")
    validate_catalog(catalog)
    selection = CategorySelection(selection)

    categories = catalog_categories(catalog)
    weights = category_weights(catalog) if selection is CategorySelection.WEIGHTED else None
    balance = to_decimal(initial_balance, "initial_balance")

    logger.debug(
        "Generating %s transactions between %s and %s (seed=%s, selection=%s)",
        num_transactions,
        start.date().isoformat(),
        end.date().isoformat(),
        seed,
        selection.value,
    )

    rng = SeededRandom(seed)
    dates = _draw_dates(rng, start, end, num_transactions)

    transactions: list[Transaction] = []
    for index, txn_date in enumerate(dates):
        if weights is None:
            category = rng.choice(categories)
        else:
            category = rng.weighted_choice(categories, weights)
        profile = catalog[category]

        merchant = rng.choice(profile.merchants)
        low, high = profile.amount_range
        magnitude = round_currency(rng.next_float(low, high))
        amount = magnitude if profile.is_income else -magnitude
        balance = add_currency(balance, amount)
        phrase = rng.choice(profile.descriptions)

        transactions.append(
            Transaction(
                id=transaction_id(index),
                date=txn_date,
                category=category,
                merchant=merchant,
                amount=amount,
                balance=balance,
                description=describe(phrase, merchant),
            )
        )

    return transactions


def generate_monthly_transactions(
    year: int,
    month: int,
    count: int = 50,
    seed: Optional[int] = None,
) -> list[Transaction]:
    """Transactions within one calendar month; seed defaults to ``year * 100 + month``."""

    if not 1 <= month <= 12:
        raise InvalidRangeError(f"month must be between 1 and 12, got {month}")
    last_day = calendar.monthrange(year, month)[1]
    return generate_transactions(
        start_date=date(year, month, 1),
        end_date=date(year, month, last_day),
        num_transactions=count,
        seed=seed if seed is not None else year * 100 + month,
    )


def generate_sample_transactions(
    count: int = 10_000,
    initial_balance: Amount = Decimal("25000000"),
    seed: int = 12345,
    end_date: Optional[date] = None,
) -> list[Transaction]:
    """The demo statement: ten thousand transactions from a 25 million balance."""

    return generate_transactions(
        end_date=end_date,
        initial_balance=initial_balance,
        num_transactions=count,
        seed=seed,
    )
