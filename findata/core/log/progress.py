"""Progress bars for file writes, drawn on the console the log handler uses."""
from __future__ import annotations

from typing import Iterable, Iterator, Optional, TypeVar

from rich.console import Console
from rich.progress import Progress

T = TypeVar("T")


class ProgressManager:
    """Owns the shared console; ``init_logging`` swaps in the handler's console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)

    def use_console(self, console: Console) -> None:
        self.console = console

    def reset_console(self) -> None:
        self.use_console(Console(stderr=True))

    def track(
        self,
        rows: Iterable[T],
        *,
        description: str,
        total: Optional[int] = None,
    ) -> Iterator[T]:
        """Yield ``rows`` unchanged while advancing a transient bar."""

        with Progress(console=self.console, transient=True) as progress:
            yield from progress.track(rows, total=total, description=description)


progress_manager = ProgressManager()
