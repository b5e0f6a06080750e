"""Wall-clock timing for generation steps, logged with records-per-second."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Iterator, Optional


@dataclass
class StepTimer:
    """Measures one step; ``total`` is the number of records it produces."""

    label: str
    unit: str = "items"
    total: Optional[int] = None
    started: float = field(default_factory=perf_counter)
    finished: Optional[float] = None

    @property
    def elapsed(self) -> float:
        end = self.finished if self.finished is not None else perf_counter()
        return end - self.started

    @property
    def rate(self) -> Optional[float]:
        if not self.total or self.elapsed <= 0:
            return None
        return self.total / self.elapsed

    def stop(self) -> None:
        self.finished = perf_counter()

    def describe(self, success: bool = True) -> str:
        verb = "completed in" if success else "failed after"
        message = f"{self.label} {verb} {self.elapsed:.2f}s"
        if self.total is None:
            return message
        detail = f"{self.total:,} {self.unit}"
        if success and self.rate is not None:
            detail += f" @ {self.rate:,.0f} {self.unit}/s"
        return f"{message} ({detail})"


@contextmanager
def timeit(
    label: str,
    *,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    unit: str = "items",
    total: Optional[int] = None,
) -> Iterator[StepTimer]:
    """Log how long the wrapped block took; failures are logged at ERROR and re-raised.

    Args:
        label: Description of the step, e.g. "Transaction generation"
        logger: Logger to report on (defaults to "findata.timer")
        level: Level for the success message
        unit: What ``total`` counts, e.g. "transactions"
        total: Number of records the step produces, for the throughput figure
    """
    log = logger or logging.getLogger("findata.timer")
    timer = StepTimer(label=label, unit=unit, total=total)
    try:
        yield timer
    except Exception:
        timer.stop()
        log.error(timer.describe(success=False))
        raise
    timer.stop()
    log.log(level, timer.describe())
