"""Quarterly balance sheets that always satisfy assets = liabilities + equity.

Every line item is drawn and rounded to whole currency units first; totals
are exact integer sums of those items. Total equity is then derived as
``total_assets - total_liabilities`` and retained earnings is the residual
after common stock, so the identity holds by construction.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, date
from decimal import Decimal, localcontext
from typing import Sequence

from findata.core.log import get_logger
from findata.domain.models import (
    AccountCategory,
    Amount,
    BalanceSheet,
    LineItem,
    round_whole,
    to_decimal,
)
from findata.errors import InvalidRangeError
from findata.generators.prng import SeededRandom

logger = get_logger(__name__)

CURRENT = AccountCategory.CURRENT
NON_CURRENT = AccountCategory.NON_CURRENT

GROWTH_RANGE = (-0.05, 0.15)
DEPRECIATION_RATE = Decimal("0.1")
COMMON_STOCK_SHARE = Decimal("0.4")
QUARTERS_PER_YEAR = 4

COMMON_STOCK = "Common Stock"
RETAINED_EARNINGS = "Retained Earnings"


@dataclass(frozen=True)
class _Draw:
    """One sampled line item: name, range and whether growth scales it."""

    name: str
    low: float
    high: float
    category: AccountCategory
    grows: bool = False


# Order matters: it fixes the sequence of draws from the PRNG.
CURRENT_ASSETS: Sequence[_Draw] = (
    _Draw("Cash and Cash Equivalents", 15_000, 40_000, CURRENT, grows=True),
    _Draw("Accounts Receivable", 8_000, 20_000, CURRENT, grows=True),
    _Draw("Inventory", 10_000, 25_000, CURRENT, grows=True),
    _Draw("Prepaid Expenses", 2_000, 5_000, CURRENT),
)
FIXED_ASSETS: Sequence[_Draw] = (
    _Draw("Property, Plant & Equipment", 80_000, 120_000, NON_CURRENT),
    _Draw("Equipment", 30_000, 50_000, NON_CURRENT),
)
LIABILITIES: Sequence[_Draw] = (
    _Draw("Accounts Payable", 5_000, 15_000, CURRENT),
    _Draw("Short-term Debt", 8_000, 12_000, CURRENT),
    _Draw("Accrued Expenses", 3_000, 7_000, CURRENT),
    _Draw("Long-term Debt", 40_000, 60_000, NON_CURRENT),
    _Draw("Deferred Tax Liabilities", 5_000, 10_000, NON_CURRENT),
)
ACCUMULATED_DEPRECIATION = "Accumulated Depreciation"


def quarter_end(year: int, quarter: int) -> date:
    """Last calendar day of ``quarter`` (Q1 ends in March, Q4 in December).

    Quarters past the fourth roll into later years: Q5 2024 ends on
    2025-03-31.
    """

    year += (quarter - 1) // QUARTERS_PER_YEAR
    month = (quarter - 1) % QUARTERS_PER_YEAR * 3 + 3
    return date(year, month, calendar.monthrange(year, month)[1])


def period_label(year: int, quarter: int) -> str:
    return f"Q{quarter} {year}"


def _sample(rng: SeededRandom, draw: _Draw, growth: float) -> LineItem:
    value = rng.next_float(draw.low, draw.high)
    if draw.grows:
        value *= growth
    return LineItem(name=draw.name, amount=round_whole(value), category=draw.category)


def _quarter(
    rng: SeededRandom, year: int, quarter: int, common_stock: int
) -> BalanceSheet:
    growth = 1 + rng.next_float(*GROWTH_RANGE)

    assets = [_sample(rng, draw, growth) for draw in CURRENT_ASSETS]
    fixed = [_sample(rng, draw, growth) for draw in FIXED_ASSETS]
    gross_fixed = sum(item.amount for item in fixed)
    depreciation = -round_whole(Decimal(gross_fixed) * DEPRECIATION_RATE * quarter)
    assets.extend(fixed)
    assets.append(LineItem(ACCUMULATED_DEPRECIATION, depreciation, NON_CURRENT))

    liabilities = [_sample(rng, draw, growth) for draw in LIABILITIES]

    total_assets = sum(item.amount for item in assets)
    total_liabilities = sum(item.amount for item in liabilities)
    total_equity = total_assets - total_liabilities
    retained_earnings = total_equity - common_stock

    return BalanceSheet(
        period=period_label(year, quarter),
        date=quarter_end(year, quarter),
        assets=tuple(assets),
        liabilities=tuple(liabilities),
        equity=(
            LineItem(COMMON_STOCK, common_stock),
            LineItem(RETAINED_EARNINGS, retained_earnings),
        ),
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        total_equity=total_equity,
    )


def generate_balance_sheets(
    year: int = 2024,
    quarters: int = QUARTERS_PER_YEAR,
    seed: int = 42,
    starting_equity: Amount = 50_000,
) -> list[BalanceSheet]:
    """Return one balance sheet per quarter, Q1 first.

    ``quarters`` above four keep counting (Q5, Q6, ...) with dates in the
    following years, and depreciation keeps accumulating.

    Common stock is fixed at 40% of ``starting_equity`` for every quarter;
    retained earnings absorbs whatever the sampled assets and liabilities
    leave over, and may be negative.

    Raises:
        InvalidRangeError: ``quarters`` is below 1 or runs past the last
            representable year, or ``starting_equity`` is not a positive number.
    """

    if quarters < 1:
        raise InvalidRangeError(f"quarters must be >= 1, got {quarters}")
    if year + (quarters - 1) // QUARTERS_PER_YEAR > MAXYEAR:
        raise InvalidRangeError(f"{quarters} quarters from {year} run past year {MAXYEAR}")
    equity = to_decimal(starting_equity, "starting_equity")
    if equity <= 0:
        raise InvalidRangeError(f"starting_equity must be positive, got {starting_equity}")

    with localcontext() as ctx:
        digits = len(equity.as_tuple().digits) + len(COMMON_STOCK_SHARE.as_tuple().digits)
        ctx.prec = max(ctx.prec, digits)
        common_stock = round_whole(equity * COMMON_STOCK_SHARE)
    logger.debug(
        "Generating %s balance sheets for %s (seed=%s, common_stock=%s)",
        quarters,
        year,
        seed,
        common_stock,
    )

    rng = SeededRandom(seed)
    return [_quarter(rng, year, q, common_stock) for q in range(1, quarters + 1)]


def generate_multi_year_balance_sheets(start_year: int, num_years: int) -> list[BalanceSheet]:
    """Four quarters per year; each year is its own stream seeded ``year * 1000``."""

    if num_years < 0:
        raise InvalidRangeError(f"num_years must be >= 0, got {num_years}")
    sheets: list[BalanceSheet] = []
    for offset in range(num_years):
        year = start_year + offset
        sheets.extend(
            generate_balance_sheets(
                year=year,
                quarters=QUARTERS_PER_YEAR,
                seed=year * 1000,
                starting_equity=50_000 + offset * 5_000,
            )
        )
    return sheets


def generate_sample_balance_sheets() -> list[BalanceSheet]:
    return generate_balance_sheets(year=2024, quarters=4, seed=54321, starting_equity=75_000)
