"""Progress reporting for batch detection, with rich fallback to logging."""

import logging
import sys
from contextlib import contextmanager
from typing import Callable, Optional

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class ProgressTracker:
    """Tracks how many texts of a batch have been processed."""

    def __init__(
        self,
        total: int,
        use_rich: Optional[bool] = None,
        callback: Optional[ProgressCallback] = None,
        log_every: int = 100,
    ):
        self.total = total
        self.callback = callback
        self.log_every = max(1, log_every)
        self.completed = 0
        self._task_id = None
        self._progress = None

        if use_rich is None:
            use_rich = self._is_tty()

        if use_rich:
            from rich.progress import (
                BarColumn, MofNCompleteColumn, Progress,
                SpinnerColumn, TextColumn, TimeElapsedColumn,
            )
            self._progress = Progress(
                SpinnerColumn(),
                TextColumn("[bold blue]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                TimeElapsedColumn(),
                transient=True,
            )

    @staticmethod
    def _is_tty() -> bool:
        """Check if stderr is connected to a terminal."""
        return sys.stderr.isatty()

    @property
    def uses_rich(self) -> bool:
        return self._progress is not None

    @contextmanager
    def track(self, description: str = "Detecting"):
        """Context manager wrapping a whole batch."""
        if self._progress is not None:
            self._progress.start()
            self._task_id = self._progress.add_task(description, total=self.total or None)
        else:
            logger.info("%s: %d texts", description, self.total)
        try:
            yield self
        finally:
            if self._progress is not None:
                self._progress.stop()
                self._task_id = None
            logger.info("Processed %d/%d texts", self.completed, self.total)

    def advance(self, increment: int = 1) -> None:
        """Record processed texts."""
        self.completed += increment
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, completed=self.completed)
        elif self.completed % self.log_every == 0:
            logger.info("Progress: %d/%d", self.completed, self.total)
        if self.callback:
            self.callback(self.completed, self.total)
