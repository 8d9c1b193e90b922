import pytest

from dsakit.fifo import ArrayQueue
from dsakit.stack import Overflow, Underflow


def test_fifo_order():
    queue = ArrayQueue()
    for value in [1, 2, 3]:
        queue.enqueue(value)
    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [1, 2, 3]


def test_iteration_front_to_rear():
    queue = ArrayQueue()
    for value in [4, 5, 6]:
        queue.enqueue(value)
    queue.dequeue()
    assert list(queue) == [5, 6]
    assert len(queue) == 2


def test_empty_queue():
    queue = ArrayQueue()
    assert queue.is_empty()
    assert len(queue) == 0
    assert list(queue) == []


def test_dequeue_empty_raises():
    with pytest.raises(Underflow):
        ArrayQueue().dequeue()


def test_dequeue_after_draining_raises():
    queue = ArrayQueue()
    queue.enqueue(1)
    queue.dequeue()
    assert queue.is_empty()
    with pytest.raises(Underflow):
        queue.dequeue()


def test_default_capacity_is_one_hundred():
    queue = ArrayQueue()
    for value in range(100):
        queue.enqueue(value)
    with pytest.raises(Overflow):
        queue.enqueue(100)
    assert len(queue) == 100


def test_slots_are_not_reused():
    queue = ArrayQueue(capacity=2)
    queue.enqueue("a")
    queue.enqueue("b")
    queue.dequeue()
    queue.dequeue()
    assert queue.is_empty()
    with pytest.raises(Overflow):
        queue.enqueue("c")


def test_len_tracks_operations():
    queue = ArrayQueue(capacity=5)
    queue.enqueue(1)
    queue.enqueue(2)
    queue.enqueue(3)
    queue.dequeue()
    assert len(queue) == 2
    assert not queue.is_empty()


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        ArrayQueue(capacity)