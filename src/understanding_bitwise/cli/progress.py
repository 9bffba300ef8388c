"""Rich-based progress display driven by cross-check callbacks.

This module bridges the ``progress_callback`` of
:func:`~understanding_bitwise.core.variants.run_cross_checks` with a Rich
:class:`~rich.progress.Progress` bar.  The core only reports
``(family_name, cases_completed)``; rendering happens here.

Design
------
* :class:`RichSweepProgress` manages a Rich Progress context.
* :meth:`__call__` is the callback handed to the core.
* One task per family, created lazily on its first callback.
* Shutdown-safe: once stopped, further calls are ignored.
"""

from __future__ import annotations

from typing import Any

from understanding_bitwise.cli.console import get_rich_console
from understanding_bitwise.exceptions import EnvironmentError


class RichSweepProgress:
    """Callable progress adapter for Rich.

    Usage::

        with RichSweepProgress(cases_per_family) as progress:
            run_cross_checks(samples, seed, progress_callback=progress)
    """

    def __init__(self, totals: dict[str, int]) -> None:
        try:
            from rich.progress import (
                BarColumn,
                MofNCompleteColumn,
                Progress,
                SpinnerColumn,
                TextColumn,
                TimeElapsedColumn,
            )
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._progress: Any = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=get_rich_console(),
            transient=True,
        )
        self._totals: dict[str, int] = dict(totals)
        self._task_ids: dict[str, Any] = {}
        self._started: bool = False

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> RichSweepProgress:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the Rich progress display."""
        if not self._started:
            self._progress.start()
            self._started = True

    def stop(self) -> None:
        """Stop the Rich progress display (idempotent)."""
        if self._started:
            self._progress.stop()
            self._started = False

    # ------------------------------------------------------------------
    # Callback
    # ------------------------------------------------------------------

    def __call__(self, family: str, completed: int) -> None:
        """Record that *completed* cases of *family* have been checked."""
        if not self._started:
            return

        task_id = self._task_ids.get(family)
        if task_id is None:
            task_id = self._progress.add_task(family, total=self._totals.get(family))
            self._task_ids[family] = task_id
        self._progress.update(task_id, completed=completed)
