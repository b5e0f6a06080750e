"""End-to-end runs of the generation command."""
from __future__ import annotations

import json

import pytest

from findata.cli import main, parse_args
from findata.export import BALANCE_SHEETS_JSON, TRANSACTIONS_JSON


def test_parse_args_defaults_leave_settings_untouched() -> None:
    args = parse_args([])

    assert args.transactions is None
    assert args.seed is None
    assert args.years == 1


def test_main_writes_requested_dataset(tmp_path) -> None:
    exit_code = main(
        [
            "--output",
            str(tmp_path),
            "--transactions",
            "25",
            "--seed",
            "7",
            "--start",
            "2024-01-01",
            "--end",
            "2024-03-31",
            "--quarters",
            "2",
            "--log-level",
            "WARNING",
        ]
    )

    assert exit_code == 0
    transactions = json.loads((tmp_path / TRANSACTIONS_JSON).read_text(encoding="utf-8"))
    assert len(transactions) == 25
    assert all("2024-01-01" <= txn["date"] <= "2024-03-31" for txn in transactions)
    sheets = json.loads((tmp_path / BALANCE_SHEETS_JSON).read_text(encoding="utf-8"))
    assert [sheet["period"] for sheet in sheets] == ["Q1 2024", "Q2 2024"]


def test_main_multi_year(tmp_path) -> None:
    exit_code = main(
        ["--output", str(tmp_path), "--transactions", "5", "--year", "2022", "--years", "3"]
    )

    assert exit_code == 0
    sheets = json.loads((tmp_path / BALANCE_SHEETS_JSON).read_text(encoding="utf-8"))
    assert len(sheets) == 12
    assert sheets[0]["period"] == "Q1 2022"
    assert sheets[-1]["period"] == "Q4 2024"


def test_main_reports_invalid_parameters(tmp_path) -> None:
    exit_code = main(["--output", str(tmp_path), "--transactions", "5", "--quarters", "0"])

    assert exit_code == 2
    assert not (tmp_path / TRANSACTIONS_JSON).exists()


def test_main_rejects_reversed_dates(tmp_path) -> None:
    exit_code = main(
        ["--output", str(tmp_path), "--start", "2024-05-01", "--end", "2024-04-01"]
    )

    assert exit_code == 2


@pytest.mark.parametrize(
    "flags",
    [
        ["--quarters", "2"],
        ["--bs-seed", "9"],
        ["--starting-equity", "60000"],
    ],
)
def test_multi_year_rejects_single_year_flags(flags, tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--output", str(tmp_path), "--years", "2", *flags])

    assert excinfo.value.code == 2
    assert flags[0] in capsys.readouterr().err
    assert not (tmp_path / BALANCE_SHEETS_JSON).exists()


def test_years_must_be_positive() -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--years", "0"])

    assert excinfo.value.code == 2


def test_main_quarters_past_four(tmp_path) -> None:
    exit_code = main(["--output", str(tmp_path), "--transactions", "5", "--quarters", "5"])

    assert exit_code == 0
    sheets = json.loads((tmp_path / BALANCE_SHEETS_JSON).read_text(encoding="utf-8"))
    assert sheets[-1]["period"] == "Q5 2024"
    assert sheets[-1]["date"] == "2025-03-31"


def test_main_reports_non_finite_balance(tmp_path) -> None:
    exit_code = main(["--output", str(tmp_path), "--transactions", "5", "--initial-balance", "Infinity"])

    assert exit_code == 2
