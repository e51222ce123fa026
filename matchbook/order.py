"""Order record and the enumerations that describe it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class OrderType(IntEnum):
    """How an order is priced."""

    MARKET = 0
    LIMIT = 1


class OrderSide(IntEnum):
    """Which side of the book an order belongs to."""

    BUY = 0
    SELL = 1


@dataclass
class Order:
    """A single order.

    ``timestamp`` and ``id`` are assigned by the order book when the order
    is submitted; whatever the client puts there is overwritten.
    """

    price: float
    type: OrderType
    side: OrderSide
    timestamp: int = 0
    id: int = 0

    def __post_init__(self) -> None:
        self.type = OrderType(self.type)
        self.side = OrderSide(self.side)
        self.price = float(self.price)