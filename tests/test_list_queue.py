import pytest

from dsprimer.list_queue import ListQueue


def test_source_example():
    queue = ListQueue()
    for value in [1, 2, 3, 4, 5]:
        queue.enqueue(value)
    out = []
    while not queue.is_empty():
        out.append(queue.dequeue())
    assert out == [1, 2, 3, 4, 5]
    assert len(queue) == 0


def test_reuse_after_emptying():
    queue = ListQueue()
    queue.enqueue("a")
    assert queue.dequeue() == "a"
    assert queue.is_empty()
    queue.enqueue("b")
    queue.enqueue("c")
    assert queue.peek() == "b"
    assert queue.dequeue() == "b"
    assert queue.dequeue() == "c"


def test_peek_keeps_front():
    queue = ListQueue()
    queue.enqueue(10)
    queue.enqueue(20)
    assert queue.peek() == 10
    assert len(queue) == 2


def test_nothing_to_take_from_empty_queue():
    queue = ListQueue()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek()


def test_large_number_of_items():
    queue = ListQueue()
    for value in range(500):
        queue.enqueue(value)
    assert len(queue) == 500
    assert [queue.dequeue() for _ in range(500)] == list(range(500))