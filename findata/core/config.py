"""Environment-driven configuration for dataset generation runs."""
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _load_env(dotenv_path: Optional[Path] = None) -> None:
    """Load the .env file once for the process."""

    if getattr(_load_env, "_loaded", False):  # type: ignore[attr-defined]
        return

    load_dotenv(dotenv_path or PROJECT_ROOT / ".env")
    setattr(_load_env, "_loaded", True)  # type: ignore[attr-defined]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_decimal(name: str, default: Decimal) -> Decimal:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class TransactionSettings:
    """Parameters for the sample transaction history."""

    count: int = 10_000
    initial_balance: Decimal = Decimal("25000000")
    seed: int = 12345

    @classmethod
    def from_env(cls) -> "TransactionSettings":
        defaults = cls()
        return cls(
            count=_env_int("FINDATA_TRANSACTIONS", defaults.count),
            initial_balance=_env_decimal("FINDATA_INITIAL_BALANCE", defaults.initial_balance),
            seed=_env_int("FINDATA_TRANSACTION_SEED", defaults.seed),
        )


@dataclass(frozen=True)
class BalanceSheetSettings:
    """Parameters for the sample quarterly balance sheets."""

    year: int = 2024
    quarters: int = 4
    seed: int = 54321
    starting_equity: Decimal = Decimal("75000")

    @classmethod
    def from_env(cls) -> "BalanceSheetSettings":
        defaults = cls()
        return cls(
            year=_env_int("FINDATA_BALANCE_SHEET_YEAR", defaults.year),
            quarters=_env_int("FINDATA_QUARTERS", defaults.quarters),
            seed=_env_int("FINDATA_BALANCE_SHEET_SEED", defaults.seed),
            starting_equity=_env_decimal("FINDATA_STARTING_EQUITY", defaults.starting_equity),
        )


@dataclass(frozen=True)
class Settings:
    """Container for generator configuration."""

    transactions: TransactionSettings
    balance_sheets: BalanceSheetSettings
    output_dir: Path = Path("data/generated")
    currency: str = "IDR"
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, dotenv_path: Optional[Path] = None) -> "Settings":
        """Build ``Settings`` using environment variables (optionally from ``.env``)."""

        _load_env(dotenv_path)

        log_dir = os.getenv("FINDATA_LOG_DIR")
        return cls(
            transactions=TransactionSettings.from_env(),
            balance_sheets=BalanceSheetSettings.from_env(),
            output_dir=Path(os.getenv("FINDATA_OUTPUT_DIR", "data/generated")),
            currency=os.getenv("FINDATA_CURRENCY", "IDR"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=Path(log_dir) if log_dir else None,
        )


@lru_cache()
def get_settings(dotenv_path: Optional[Path] = None) -> Settings:
    """Return a cached settings instance."""

    return Settings.from_env(dotenv_path=dotenv_path)
