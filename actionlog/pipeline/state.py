"""
Run-scoped shared state: a cancellation flag and a first-error slot.

One RunState is created per run and handed to every thread of that run.
The flag only ever goes from clear to set. The error slot keeps the first
failure recorded; later failures are logged at debug level and dropped.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)


class RunState:
    """Cancellation flag plus single-error slot shared by one run."""

    def __init__(self) -> None:
        self._cancelled = threading.Event()
        self._lock = threading.Lock()
        self._error: Optional[Exception] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        if not self._cancelled.is_set():
            logger.warning("Run cancelled: no new files will be processed")
        self._cancelled.set()

    def record_failure(self, error: Exception) -> bool:
        """
        Store error if the slot is empty, then cancel the run.

        Returns:
            True if this error became the run's error
        """
        with self._lock:
            first = self._error is None
            if first:
                self._error = error

        if first:
            logger.error(f"Fatal error: {error}")
        else:
            logger.debug(f"Discarding later error: {error}")

        self.cancel()
        return first

    @property
    def error(self) -> Optional[Exception]:
        with self._lock:
            return self._error

    def raise_if_failed(self) -> None:
        error = self.error
        if error is not None:
            raise error
