# matchbook

An in-memory order book that matches each incoming order against resting
orders on the opposite side. It uses price-time priority.

- **Buy orders** match against the sell side. Matching starts at the lowest ask.
- **Sell orders** match against the buy side. Matching starts at the highest bid.
- **Market orders** take the best price available. If the opposite side is
  empty, the order is dropped.
- **Limit orders** match only at their own price or a better one. If no
  match is found, the order rests in the book at its price level.
- Orders at the same price level are served first in, first out.

A match fills exactly one resting order: the oldest one at the best price
level that crosses. Quantities are not modelled. An order either matches one
resting order in full or it does not match.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from matchbook.order import Order, OrderSide, OrderType
from matchbook.id_manager import OrderIdManager
from matchbook.order_book import OrderBook

book = OrderBook(OrderIdManager(start=0))

# A limit sell with nothing to match rests on the ask side.
book.add_order(Order(price=101.0, type=OrderType.LIMIT, side=OrderSide.SELL))

# A limit buy at 102 crosses the resting ask at 101. The ask is removed
# from the book and returned.
filled = book.add_order(Order(price=102.0, type=OrderType.LIMIT, side=OrderSide.BUY))

# A limit buy at 99 finds no ask at or below its price, so it rests as a bid.
# add_order returns None.
book.add_order(Order(price=99.0, type=OrderType.LIMIT, side=OrderSide.BUY))

book.bids()   # [(99.0, [Order(...)])], best (highest) price first
book.asks()   # [], best (lowest) price first
```

`OrderBook.add_order` overwrites the order's `timestamp` with the current
Unix time in whole seconds. It overwrites the order's `id` with the next
value from the book's `OrderIdManager`. It returns the resting order the
incoming order was filled against, or `None` if there was no match.

`bids()` and `asks()` return snapshots of the book. Each snapshot is a list
of `(price, [orders])` pairs, and the orders in each pair are in arrival order.

The book reports new orders, fills and failed market orders through the
standard `logging` module, at INFO level, under the logger name
`matchbook.order_book`.

### Orders

`Order` is a dataclass with the fields `price`, `type` (`OrderType.MARKET`
or `OrderType.LIMIT`), `side` (`OrderSide.BUY` or `OrderSide.SELL`),
`timestamp` and `id`. When an `Order` is created, `price` is converted to
`float`, and `type` and `side` are converted to their enums. Plain integers
are accepted for `type` and `side`:

```python
Order(price=100, type=1, side=0)   # a limit buy at 100.0
```

### Price level queues

`OrderQueue` is the first-in, first-out queue that holds the orders at one
price level. It can also be used on its own:

```python
from matchbook.order_queue import OrderQueue

queue = OrderQueue()
queue.add_order(order)
queue.front()                 # peek at the oldest order; IndexError if empty
queue.remove_order()          # pop the oldest order; IndexError if empty
queue.remove_front()          # pop the oldest order; no-op if empty
queue.remove_order_by_id(7)   # True if an order with id 7 was removed
len(queue), queue.is_empty(), list(queue)
```

### Order ids

`OrderIdManager` hands out consecutive 32-bit ids, wrapping at `2**32`.
A single manager can be shared between threads. `start` must lie in
`[0, 2**32)`; any other value raises `ValueError`.

```python
ids = OrderIdManager(start=0)
ids.next_order_id()  # 0
ids.next_order_id()  # 1
```

## What it does not do

matchbook is a library only. It does not provide any of the following:

- a network server or client
- a command-line program
- persistence of the book or of the id counter
- cancellation or modification of resting orders through the book
- partial fills or order quantities