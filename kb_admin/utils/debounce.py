"""
Debounced calls for search-as-you-type filters.

Each new ``call`` cancels the one still waiting, so only the last value
typed within ``delay`` seconds reaches the API.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Run only the most recent of a burst of calls."""

    def __init__(self, delay: float):
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self.delay = delay
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: tuple[Callable[..., Any], tuple, dict] | None = None
        # Bumped on every schedule or cancel; a timer only fires its own generation.
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def call(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        """Schedule ``fn`` after ``delay``, replacing any pending call."""
        with self._lock:
            self._cancel_locked()
            self._pending = (fn, args, kwargs)
            self._timer = threading.Timer(self.delay, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            self._cancel_locked()

    def flush(self) -> Any:
        """Run the pending call now and return its result (None if idle)."""
        with self._lock:
            pending = self._pending
            self._cancel_locked()
        if pending is None:
            return None
        fn, args, kwargs = pending
        return fn(*args, **kwargs)

    def _cancel_locked(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._pending = None

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            pending = self._pending
            self._timer = None
            self._pending = None
        if pending is None:
            return
        fn, args, kwargs = pending
        try:
            fn(*args, **kwargs)
        except Exception:
            logger.exception("Debounced call %r failed", fn)
