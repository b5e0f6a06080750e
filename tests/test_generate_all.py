"""The combined demo dataset and its summary."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

from findata.core.config import BalanceSheetSettings, Settings, TransactionSettings
from findata.generators.balance_sheet import generate_multi_year_balance_sheets
from findata.generators.generate_all import DatasetSummary, generate_all_data


def test_dataset_summary_reflects_generated_data() -> None:
    settings = Settings(
        transactions=TransactionSettings(count=120, initial_balance=Decimal("1000"), seed=9),
        balance_sheets=BalanceSheetSettings(year=2023, quarters=3, seed=1, starting_equity=Decimal("40000")),
    )

    dataset = generate_all_data(settings, start_date=date(2023, 1, 1), end_date=date(2023, 12, 31))

    summary = dataset.summary
    assert summary.transaction_count == 120
    assert summary.balance_sheet_count == 3
    assert summary.first_transaction_date == dataset.transactions[0].date
    assert summary.last_transaction_date == dataset.transactions[-1].date
    assert summary.first_period == "Q1 2023"
    assert summary.last_period == "Q3 2023"


def test_summary_of_empty_dataset() -> None:
    summary = DatasetSummary.describe([], [])

    assert summary.transaction_count == 0
    assert summary.first_transaction_date is None
    assert summary.last_period is None


def test_defaults_come_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("FINDATA_TRANSACTIONS", "15")
    monkeypatch.setenv("FINDATA_QUARTERS", "1")

    dataset = generate_all_data(end_date=date(2024, 12, 31))

    assert len(dataset.transactions) == 15
    assert [sheet.period for sheet in dataset.balance_sheets] == ["Q1 2024"]


def test_multi_year_sheets_replace_single_year_settings() -> None:
    settings = Settings(
        transactions=TransactionSettings(count=5, seed=9),
        balance_sheets=BalanceSheetSettings(year=2022, quarters=2, seed=1),
    )

    dataset = generate_all_data(settings, end_date=date(2024, 12, 31), years=2)

    assert list(dataset.balance_sheets) == generate_multi_year_balance_sheets(2022, 2)
    assert dataset.summary.balance_sheet_count == 8
    assert dataset.summary.last_period == "Q4 2023"
