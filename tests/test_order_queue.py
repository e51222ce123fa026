import pytest

from matchbook.order import Order, OrderSide, OrderType
from matchbook.order_queue import OrderQueue


def _order(order_id, price=100.0):
    return Order(price=price, type=OrderType.LIMIT, side=OrderSide.BUY, id=order_id)


def test_new_queue_is_empty():
    queue = OrderQueue()
    assert queue.is_empty()
    assert len(queue) == 0
    assert list(queue) == []


def test_orders_come_out_in_arrival_order():
    queue = OrderQueue()
    orders = [_order(i) for i in range(1, 4)]
    for order in orders:
        queue.add_order(order)
    assert len(queue) == len(orders)
    assert [queue.remove_order() for _ in orders] == orders
    assert queue.is_empty()


def test_front_peeks_without_removing():
    queue = OrderQueue()
    first, second = _order(1), _order(2)
    queue.add_order(first)
    queue.add_order(second)
    assert queue.front() is first
    assert len(queue) == 2


def test_front_of_empty_queue_raises():
    with pytest.raises(IndexError):
        OrderQueue().front()


def test_remove_from_empty_queue_raises():
    with pytest.raises(IndexError):
        OrderQueue().remove_order()


def test_remove_front_on_empty_queue_is_harmless():
    queue = OrderQueue()
    queue.remove_front()
    assert queue.is_empty()


def test_remove_front_drops_oldest():
    queue = OrderQueue()
    first, second = _order(1), _order(2)
    queue.add_order(first)
    queue.add_order(second)
    queue.remove_front()
    assert list(queue) == [second]


def test_remove_by_id_finds_matching_order():
    queue = OrderQueue()
    orders = [_order(i) for i in (10, 20, 30)]
    for order in orders:
        queue.add_order(order)
    assert queue.remove_order_by_id(20) is True
    assert [o.id for o in queue] == [10, 30]


def test_remove_by_id_reports_missing_order():
    queue = OrderQueue()
    queue.add_order(_order(5))
    assert queue.remove_order_by_id(6) is False
    assert len(queue) == 1


def test_remove_by_id_only_removes_first_match():
    queue = OrderQueue()
    a, b = _order(7, price=1.0), _order(7, price=2.0)
    queue.add_order(a)
    queue.add_order(b)
    assert queue.remove_order_by_id(7) is True
    assert list(queue) == [b]