import pytest

from dsprimer.circular_queue import QUE_LEN, CircularQueue


def test_source_example_is_first_in_first_out():
    queue = CircularQueue()
    for value in range(1, 6):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(5)] == [1, 2, 3, 4, 5]
    assert queue.is_empty()


def test_default_queue_keeps_one_slot_free():
    queue = CircularQueue()
    assert queue.capacity == QUE_LEN - 1
    for value in range(QUE_LEN - 1):
        queue.enqueue(value)
    with pytest.raises(OverflowError):
        queue.enqueue(-1)
    assert len(queue) == QUE_LEN - 1


def test_small_queue_wraps_after_freeing_a_slot():
    queue = CircularQueue(size=4)
    queue.enqueue(1)
    queue.enqueue(2)
    queue.enqueue(3)
    with pytest.raises(OverflowError):
        queue.enqueue(4)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert len(queue) == 3
    assert queue.peek() == 2
    assert (queue.dequeue(), queue.dequeue(), queue.dequeue()) == (2, 3, 4)


def test_many_wraparounds_preserve_order():
    queue = CircularQueue(size=3)
    seen = []
    for value in range(50):
        queue.enqueue(value)
        seen.append(queue.dequeue())
    assert seen == list(range(50))
    assert queue.is_empty()


def test_peek_does_not_consume():
    queue = CircularQueue()
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.peek() == "a"
    assert queue.peek() == "a"
    assert len(queue) == 2


def test_empty_queue_errors():
    queue = CircularQueue()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek()


@pytest.mark.parametrize("size", [0, 1])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        CircularQueue(size=size)