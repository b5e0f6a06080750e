"""Tests for the balance sheet ratio helpers."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

from findata.domain.models import AccountCategory, BalanceSheet, LineItem
from findata.generators.balance_sheet import generate_sample_balance_sheets
from findata.generators.metrics import DivisionByZeroMetric, calculate_metrics

CURRENT = AccountCategory.CURRENT
NON_CURRENT = AccountCategory.NON_CURRENT


def _sheet(
    *,
    current_assets: int = 60_000,
    fixed_assets: int = 100_000,
    current_liabilities: int = 20_000,
    long_term: int = 40_000,
) -> BalanceSheet:
    assets = (
        LineItem("Cash and Cash Equivalents", current_assets, CURRENT),
        LineItem("Property, Plant & Equipment", fixed_assets, NON_CURRENT),
    )
    liabilities = (
        LineItem("Accounts Payable", current_liabilities, CURRENT),
        LineItem("Long-term Debt", long_term, NON_CURRENT),
    )
    total_assets = current_assets + fixed_assets
    total_liabilities = current_liabilities + long_term
    total_equity = total_assets - total_liabilities
    return BalanceSheet(
        period="Q1 2024",
        date=date(2024, 3, 31),
        assets=assets,
        liabilities=liabilities,
        equity=(LineItem("Common Stock", 20_000), LineItem("Retained Earnings", total_equity - 20_000)),
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        total_equity=total_equity,
    )


def test_ratios_for_known_sheet() -> None:
    metrics = calculate_metrics(_sheet())

    assert metrics.current_ratio == Decimal("3.00")
    assert metrics.debt_to_equity_ratio == Decimal("0.60")
    assert metrics.working_capital == 40_000
    assert metrics.total_assets == 160_000
    assert metrics.total_liabilities == 60_000
    assert metrics.total_equity == 100_000
    assert metrics.is_fully_defined


def test_ratios_round_half_up_to_cents() -> None:
    metrics = calculate_metrics(_sheet(current_assets=10_000, current_liabilities=30_000))

    assert metrics.current_ratio == Decimal("0.33")
    assert metrics.current_ratio.as_tuple().exponent == -2


def test_zero_current_liabilities_is_tagged_not_raised() -> None:
    metrics = calculate_metrics(_sheet(current_liabilities=0))

    assert isinstance(metrics.current_ratio, DivisionByZeroMetric)
    assert metrics.current_ratio.metric == "current_ratio"
    assert str(metrics.current_ratio) == "undefined"
    assert metrics.working_capital == 60_000
    assert not metrics.is_fully_defined


def test_zero_equity_is_tagged_not_raised() -> None:
    metrics = calculate_metrics(_sheet(current_assets=0, fixed_assets=60_000))

    assert metrics.total_equity == 0
    assert isinstance(metrics.debt_to_equity_ratio, DivisionByZeroMetric)
    assert metrics.debt_to_equity_ratio.numerator == 60_000


def test_metrics_on_generated_sheets() -> None:
    for sheet in generate_sample_balance_sheets():
        metrics = calculate_metrics(sheet)
        assert metrics.working_capital == sheet.current_assets - sheet.current_liabilities
        assert metrics.current_ratio > 0
        assert metrics.total_assets == metrics.total_liabilities + metrics.total_equity
