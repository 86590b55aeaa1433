import pytest

from dsprimer.array_stack import STACK_LEN, ArrayStack


def test_source_example_comes_out_reversed():
    stack = ArrayStack()
    for value in range(1, 6):
        stack.push(value)
    popped = [stack.pop() for _ in range(len(stack))]
    assert popped == [5, 4, 3, 2, 1]
    assert stack.is_empty()


def test_default_capacity_matches_source_constant():
    assert ArrayStack().capacity == STACK_LEN == 100


def test_default_capacity_fills_then_overflows():
    stack = ArrayStack()
    for value in range(STACK_LEN):
        stack.push(value)
    with pytest.raises(OverflowError):
        stack.push(0)
    assert stack.peek() == STACK_LEN - 1
    assert len(stack) == STACK_LEN


def test_small_capacity_overflow_keeps_contents():
    stack = ArrayStack(capacity=2)
    stack.push("a")
    stack.push("b")
    with pytest.raises(OverflowError):
        stack.push("c")
    assert repr(stack) == "ArrayStack(['a', 'b'])"


@pytest.mark.parametrize("capacity", [0, -5])
def test_invalid_capacity_rejected(capacity):
    with pytest.raises(ValueError):
        ArrayStack(capacity=capacity)


def test_empty_stack_refuses_pop_and_peek():
    stack = ArrayStack()
    assert stack.is_empty()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_peek_leaves_top_in_place():
    stack = ArrayStack()
    stack.push("a")
    stack.push("b")
    assert stack.peek() == "b"
    assert len(stack) == 2
    assert stack.pop() == "b"
    assert stack.peek() == "a"