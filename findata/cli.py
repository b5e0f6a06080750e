"""Generate the demo transaction and balance-sheet datasets and write them to disk."""
from __future__ import annotations

import argparse
from dataclasses import replace
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Optional, Sequence

from findata.core.config import Settings, get_settings
from findata.core.formatting import humanize_currency
from findata.core.log import configure_from_settings, get_logger, log_context, shutdown_logging
from findata.errors import GeneratorError
from findata.export import export_dataset
from findata.generators.generate_all import GeneratedDataset, generate_all_data
from findata.generators.metrics import calculate_metrics

logger = get_logger(__name__)


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from exc


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", type=Path, default=None, help="Directory for the generated files")
    parser.add_argument("--transactions", type=int, default=None, help="Number of transactions to generate")
    parser.add_argument("--initial-balance", type=Decimal, default=None, help="Opening account balance")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the transaction stream")
    parser.add_argument("--start", type=_iso_date, default=None, help="First transaction date (YYYY-MM-DD)")
    parser.add_argument("--end", type=_iso_date, default=None, help="Last transaction date (YYYY-MM-DD)")
    parser.add_argument("--year", type=int, default=None, help="Fiscal year of the first balance sheet")
    parser.add_argument(
        "--quarters",
        type=int,
        default=None,
        help="Number of quarterly sheets (past 4 they run into the next year)",
    )
    parser.add_argument("--bs-seed", type=int, default=None, help="Seed for the balance sheet stream")
    parser.add_argument("--starting-equity", type=Decimal, default=None, help="Equity the company started with")
    parser.add_argument(
        "--years",
        type=int,
        default=1,
        help="Generate this many consecutive years of balance sheets (seeded year * 1000)",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args(argv)
    if args.years < 1:
        parser.error(f"--years must be at least 1, got {args.years}")
    if args.years > 1:
        fixed = [
            flag
            for flag, value in (
                ("--quarters", args.quarters),
                ("--bs-seed", args.bs_seed),
                ("--starting-equity", args.starting_equity),
            )
            if value is not None
        ]
        if fixed:
            parser.error(
                f"{', '.join(fixed)} cannot be combined with --years; multi-year sheets "
                "use four quarters, seed year * 1000 and growing equity"
            )
    return args


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    txn = settings.transactions
    txn = replace(
        txn,
        count=args.transactions if args.transactions is not None else txn.count,
        initial_balance=args.initial_balance if args.initial_balance is not None else txn.initial_balance,
        seed=args.seed if args.seed is not None else txn.seed,
    )
    sheets = settings.balance_sheets
    sheets = replace(
        sheets,
        year=args.year if args.year is not None else sheets.year,
        quarters=args.quarters if args.quarters is not None else sheets.quarters,
        seed=args.bs_seed if args.bs_seed is not None else sheets.seed,
        starting_equity=args.starting_equity if args.starting_equity is not None else sheets.starting_equity,
    )
    return replace(
        settings,
        transactions=txn,
        balance_sheets=sheets,
        output_dir=args.output if args.output is not None else settings.output_dir,
        log_level=args.log_level or settings.log_level,
    )


def _log_summary(dataset: GeneratedDataset, currency: str) -> None:
    summary = dataset.summary
    logger.info(
        "Generated %s transactions (%s to %s) and %s balance sheets (%s to %s)",
        f"{summary.transaction_count:,}",
        summary.first_transaction_date,
        summary.last_transaction_date,
        summary.balance_sheet_count,
        summary.first_period,
        summary.last_period,
    )
    if dataset.transactions:
        logger.info(
            "Closing balance %s",
            humanize_currency(dataset.transactions[-1].balance, currency=currency),
        )
    if dataset.balance_sheets:
        latest = dataset.balance_sheets[-1]
        metrics = calculate_metrics(latest)
        logger.info(
            "%s: assets %s, current ratio %s, debt/equity %s, working capital %s",
            latest.period,
            humanize_currency(latest.total_assets, currency=currency),
            metrics.current_ratio,
            metrics.debt_to_equity_ratio,
            humanize_currency(metrics.working_capital, currency=currency),
        )


def run(settings: Settings, args: argparse.Namespace) -> GeneratedDataset:
    dataset = generate_all_data(
        settings, start_date=args.start, end_date=args.end, years=args.years
    )
    _log_summary(dataset, settings.currency)
    export_dataset(dataset, settings.output_dir)
    return dataset


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = _apply_overrides(get_settings(), args)

    configure_from_settings(settings)
    log_context.bind(job="generate", output=str(settings.output_dir))
    try:
        run(settings, args)
    except GeneratorError as exc:
        logger.error("Generation failed: %s", exc)
        return 2
    finally:
        log_context.clear()
        shutdown_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
