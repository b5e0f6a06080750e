"""Liquidity and leverage ratios derived from a single balance sheet."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from findata.domain.models import BalanceSheet

RATIO_PRECISION = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class DivisionByZeroMetric:
    """A ratio whose denominator is zero; rendered as ``undefined``."""

    metric: str
    numerator: int

    def __str__(self) -> str:
        return "undefined"


Ratio = Decimal | DivisionByZeroMetric


@dataclass(frozen=True, slots=True)
class FinancialMetrics:
    current_ratio: Ratio
    debt_to_equity_ratio: Ratio
    working_capital: int
    total_assets: int
    total_liabilities: int
    total_equity: int

    @property
    def is_fully_defined(self) -> bool:
        return not any(
            isinstance(value, DivisionByZeroMetric)
            for value in (self.current_ratio, self.debt_to_equity_ratio)
        )


def _ratio(metric: str, numerator: int, denominator: int) -> Ratio:
    if denominator == 0:
        return DivisionByZeroMetric(metric=metric, numerator=numerator)
    return (Decimal(numerator) / Decimal(denominator)).quantize(
        RATIO_PRECISION, rounding=ROUND_HALF_UP
    )


def calculate_metrics(sheet: BalanceSheet) -> FinancialMetrics:
    current_assets = sheet.current_assets
    current_liabilities = sheet.current_liabilities
    return FinancialMetrics(
        current_ratio=_ratio("current_ratio", current_assets, current_liabilities),
        debt_to_equity_ratio=_ratio(
            "debt_to_equity_ratio", sheet.total_liabilities, sheet.total_equity
        ),
        working_capital=current_assets - current_liabilities,
        total_assets=sheet.total_assets,
        total_liabilities=sheet.total_liabilities,
        total_equity=sheet.total_equity,
    )
