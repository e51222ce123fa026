"""Source of unique order identifiers."""

from __future__ import annotations

import threading

_ID_LIMIT = 1 << 32


class OrderIdManager:
    """Hands out consecutive 32-bit order ids; safe to share between threads."""

    def __init__(self, start: int = 0) -> None:
        if not 0 <= start < _ID_LIMIT:
            raise ValueError(f"start must be in [0, {_ID_LIMIT}), got {start}")
        self._counter = start
        self._lock = threading.Lock()

    def next_order_id(self) -> int:
        """Return the current id and advance, wrapping at 2**32."""
        with self._lock:
            value = self._counter
            self._counter = (value + 1) % _ID_LIMIT
        return value