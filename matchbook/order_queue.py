"""First-in, first-out queue of orders resting at one price level."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .order import Order


class OrderQueue:
    """Orders at a single price, kept in arrival order."""

    def __init__(self) -> None:
        self._orders: deque[Order] = deque()

    def add_order(self, order: Order) -> None:
        """Append an order that could not be filled right away."""
        self._orders.append(order)

    def remove_order(self) -> Order:
        """Remove and return the oldest order."""
        if not self._orders:
            raise IndexError("Attempt to remove from empty queue")
        return self._orders.popleft()

    def remove_order_by_id(self, order_id: int) -> bool:
        """Remove the first order with ``order_id``; report whether one was found."""
        for order in self._orders:
            if order.id == order_id:
                self._orders.remove(order)
                return True
        return False

    def remove_front(self) -> None:
        """Drop the oldest order, doing nothing if the queue is empty."""
        if self._orders:
            self._orders.popleft()

    def front(self) -> Order:
        """Return the oldest order without removing it."""
        if not self._orders:
            raise IndexError("Attempted to access front of empty queue.")
        return self._orders[0]

    def is_empty(self) -> bool:
        return not self._orders

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self._orders)