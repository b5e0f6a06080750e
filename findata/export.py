"""Write generated datasets to JSON and CSV files for the tabular store."""
from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from findata.core.log import get_logger, progress_manager
from findata.generators.generate_all import GeneratedDataset
from findata.schemas.records import (
    ACCOUNT_COLUMNS,
    SUMMARY_COLUMNS,
    TRANSACTION_COLUMNS,
    balance_sheet_records,
    flatten_balance_sheets,
    summarize_balance_sheets,
    transaction_records,
)

logger = get_logger(__name__)

TRANSACTIONS_JSON = "transactions.json"
TRANSACTIONS_CSV = "transactions.csv"
BALANCE_SHEETS_JSON = "balance-sheets.json"
ACCOUNTS_CSV = "balance_sheet_accounts.csv"
SUMMARY_CSV = "balance_sheet_summary.csv"


def write_json(path: Path, rows: Sequence[Mapping[str, object]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(list(rows), handle, indent=2, ensure_ascii=False)
        handle.write("\n")
    logger.info("Wrote %s rows to %s", f"{len(rows):,}", path)
    return path


def write_csv(path: Path, headers: Sequence[str], rows: Iterable[Mapping[str, object]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=headers)
        writer.writeheader()
        for row in rows:
            writer.writerow({key: "" if row.get(key) is None else row.get(key) for key in headers})
            count += 1
    logger.info("Wrote %s rows to %s", f"{count:,}", path)
    return path


def export_dataset(dataset: GeneratedDataset, output_dir: Path) -> list[Path]:
    """Write every file of ``dataset`` into ``output_dir`` and return their paths."""

    txn_rows = transaction_records(dataset.transactions)
    sheet_rows = balance_sheet_records(dataset.balance_sheets)

    written = [
        write_json(output_dir / TRANSACTIONS_JSON, txn_rows),
        write_csv(
            output_dir / TRANSACTIONS_CSV,
            TRANSACTION_COLUMNS,
            progress_manager.track(
                txn_rows, description="Writing transactions", total=len(txn_rows)
            ),
        ),
        write_json(output_dir / BALANCE_SHEETS_JSON, sheet_rows),
        write_csv(output_dir / ACCOUNTS_CSV, ACCOUNT_COLUMNS, flatten_balance_sheets(dataset.balance_sheets)),
        write_csv(output_dir / SUMMARY_CSV, SUMMARY_COLUMNS, summarize_balance_sheets(dataset.balance_sheets)),
    ]
    return written
