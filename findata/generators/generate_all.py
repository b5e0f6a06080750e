"""Build the demo transaction and balance-sheet datasets in one call."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from findata.core.config import Settings, get_settings
from findata.core.log import get_logger, timeit
from findata.domain.models import BalanceSheet, Transaction
from findata.generators.balance_sheet import (
    QUARTERS_PER_YEAR,
    generate_balance_sheets,
    generate_multi_year_balance_sheets,
)
from findata.generators.transactions import generate_transactions

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DatasetSummary:
    transaction_count: int
    balance_sheet_count: int
    first_transaction_date: Optional[date]
    last_transaction_date: Optional[date]
    first_period: Optional[str]
    last_period: Optional[str]

    @classmethod
    def describe(
        cls, transactions: Sequence[Transaction], balance_sheets: Sequence[BalanceSheet]
    ) -> "DatasetSummary":
        return cls(
            transaction_count=len(transactions),
            balance_sheet_count=len(balance_sheets),
            first_transaction_date=transactions[0].date if transactions else None,
            last_transaction_date=transactions[-1].date if transactions else None,
            first_period=balance_sheets[0].period if balance_sheets else None,
            last_period=balance_sheets[-1].period if balance_sheets else None,
        )


@dataclass(frozen=True, slots=True)
class GeneratedDataset:
    transactions: tuple[Transaction, ...]
    balance_sheets: tuple[BalanceSheet, ...]
    summary: DatasetSummary


def generate_all_data(
    settings: Optional[Settings] = None,
    *,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    years: int = 1,
) -> GeneratedDataset:
    """Generate both datasets using ``settings`` (environment defaults otherwise).

    With ``years`` above one the balance sheets come from
    :func:`generate_multi_year_balance_sheets` starting at the configured
    year, which fixes quarters, seeds and equity per year.
    """

    settings = settings or get_settings()
    txn_cfg = settings.transactions
    bs_cfg = settings.balance_sheets

    with timeit("Transaction generation", logger=logger, unit="transactions", total=txn_cfg.count):
        transactions = generate_transactions(
            start_date=start_date,
            end_date=end_date,
            initial_balance=txn_cfg.initial_balance,
            num_transactions=txn_cfg.count,
            seed=txn_cfg.seed,
        )

    sheet_count = years * QUARTERS_PER_YEAR if years > 1 else bs_cfg.quarters
    with timeit("Balance sheet generation", logger=logger, unit="sheets", total=sheet_count):
        if years > 1:
            balance_sheets = generate_multi_year_balance_sheets(bs_cfg.year, years)
        else:
            balance_sheets = generate_balance_sheets(
                year=bs_cfg.year,
                quarters=bs_cfg.quarters,
                seed=bs_cfg.seed,
                starting_equity=bs_cfg.starting_equity,
            )

    return GeneratedDataset(
        transactions=tuple(transactions),
        balance_sheets=tuple(balance_sheets),
        summary=DatasetSummary.describe(transactions, balance_sheets),
    )
