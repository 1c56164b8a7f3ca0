import random
from collections import deque

import pytest

from dsakit.bounded_deque import BoundedDeque


def test_empty_deque_errors():
    dq = BoundedDeque()
    with pytest.raises(IndexError):
        dq.left()
    with pytest.raises(IndexError):
        dq.right()
    with pytest.raises(IndexError):
        dq.pop_left()
    with pytest.raises(IndexError):
        dq.pop_right()


def test_push_left_then_pop_right():
    dq = BoundedDeque(5)
    for value in (1, 2, 3, 4, 5):
        dq.push_left(value)
    with pytest.raises(OverflowError):
        dq.push_left(5)
    with pytest.raises(OverflowError):
        dq.push_right(5)
    assert [dq.pop_right() for _ in range(len(dq))] == [1, 2, 3, 4, 5]
    with pytest.raises(IndexError):
        dq.pop_left()


def test_push_right_then_pop_left():
    dq = BoundedDeque(5)
    for value in (1, 2, 3, 4, 5):
        dq.push_right(value)
    with pytest.raises(OverflowError):
        dq.push_right(6)
    assert [dq.pop_left() for _ in range(len(dq))] == [1, 2, 3, 4, 5]
    with pytest.raises(IndexError):
        dq.pop_right()


def test_mixed_operations():
    dq = BoundedDeque(5)
    dq.push_left(1)
    dq.push_right(2)
    dq.push_left(3)
    dq.push_right(4)
    dq.push_left(5)
    with pytest.raises(OverflowError):
        dq.push_right(6)
    assert (dq.left(), dq.right()) == (5, 4)
    assert dq.pop_right() == 4
    assert dq.pop_left() == 5
    dq.push_right(7)
    dq.push_left(9)
    assert (dq.left(), dq.right()) == (9, 7)
    assert [dq.pop_right() for _ in range(len(dq))] == [7, 2, 1, 3, 9]
    assert len(dq) == 0


def test_matches_unbounded_deque_model():
    rng = random.Random(1234)
    dq = BoundedDeque(4)
    model = deque()
    for step in range(500):
        op = rng.choice(["pl", "pr", "ol", "or"])
        if op in ("pl", "pr"):
            if len(model) == 4:
                with pytest.raises(OverflowError):
                    (dq.push_left if op == "pl" else dq.push_right)(step)
                continue
            if op == "pl":
                dq.push_left(step)
                model.appendleft(step)
            else:
                dq.push_right(step)
                model.append(step)
        else:
            if not model:
                with pytest.raises(IndexError):
                    (dq.pop_left if op == "ol" else dq.pop_right)()
                continue
            if op == "ol":
                assert dq.pop_left() == model.popleft()
            else:
                assert dq.pop_right() == model.pop()
        assert len(dq) == len(model)
        if model:
            assert dq.left() == model[0]
            assert dq.right() == model[-1]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedDeque(0)