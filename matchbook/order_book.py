"""Price-time priority order book that fills one resting order per match."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .id_manager import OrderIdManager
from .order import Order, OrderSide, OrderType
from .order_queue import OrderQueue

logger = logging.getLogger(__name__)

_Side = dict[float, OrderQueue]


class OrderBook:
    """Holds resting buy and sell orders and matches incoming ones against them.

    Bids are served highest price first, asks lowest price first, and orders
    at one price in arrival order.  A market order that finds nothing to
    match is dropped; a limit order that finds nothing rests in the book.
    """

    def __init__(self, id_manager: OrderIdManager) -> None:
        self._id_manager = id_manager
        self._buy_side: _Side = {}
        self._sell_side: _Side = {}

    def add_order(self, order: Order) -> Order | None:
        """Submit ``order``; return the resting order it was filled against, if any.

        The order's timestamp and id are assigned here.
        """
        order.timestamp = int(time.time())
        order.id = self._id_manager.next_order_id()
        side_name = order.side.name.lower()
        logger.info("New %s order @ %s", side_name, order.price)

        if order.side is OrderSide.BUY:
            opposite, own, descending = self._sell_side, self._buy_side, False

            def crosses(level: float) -> bool:
                return level <= order.price

        else:
            opposite, own, descending = self._buy_side, self._sell_side, True

            def crosses(level: float) -> bool:
                return level >= order.price

        if order.type is OrderType.MARKET:
            match = self._take(opposite, descending, lambda level: True)
        else:
            match = self._take(opposite, descending, crosses)

        kind = order.type.name.lower()
        if match is not None:
            price, resting = match
            logger.info("Fulfilled %s %s order @ %s", side_name, kind, price)
            return resting

        if order.type is OrderType.MARKET:
            logger.info("Fulfilled %s market order @ FAILED", side_name)
        else:
            own.setdefault(order.price, OrderQueue()).add_order(order)
        return None

    def bids(self) -> list[tuple[float, list[Order]]]:
        """Resting buy orders by price level, best (highest) first."""
        return self._snapshot(self._buy_side, descending=True)

    def asks(self) -> list[tuple[float, list[Order]]]:
        """Resting sell orders by price level, best (lowest) first."""
        return self._snapshot(self._sell_side, descending=False)

    @staticmethod
    def _snapshot(side: _Side, descending: bool) -> list[tuple[float, list[Order]]]:
        return [(price, list(side[price])) for price in sorted(side, reverse=descending)]

    @staticmethod
    def _take(
        side: _Side, descending: bool, acceptable: Callable[[float], bool]
    ) -> tuple[float, Order] | None:
        for price in sorted(side, reverse=descending):
            if not acceptable(price):
                break
            queue = side[price]
            if not queue.is_empty():
                resting = queue.remove_order()
                if queue.is_empty():
                    del side[price]
                return price, resting
        return None