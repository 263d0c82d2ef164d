import pytest

from algolab.queues import ArrayQueue, ListQueue


def _drain(q):
    out = []
    while q:
        out.append(q.pop())
    return out


def test_array_queue_grows_and_preserves_order():
    q = ArrayQueue()
    assert q.capacity() == 100
    for i in range(300):
        q.push(i)
    assert len(q) == 300
    assert q.capacity() == 400
    assert _drain(q) == list(range(300))
    assert q.capacity() == 400


def test_array_queue_growth_after_wraparound():
    q = ArrayQueue(4)
    for v in "abc":
        q.push(v)
    assert q.pop() == "a"
    assert q.pop() == "b"
    for v in "defg":
        q.push(v)
    assert q.capacity() >= len(q)
    assert _drain(q) == list("cdefg")


def test_array_queue_zero_capacity_still_works():
    q = ArrayQueue(0)
    q.push(1)
    q.push(2)
    assert q.front() == 1
    assert _drain(q) == [1, 2]


def test_array_queue_errors():
    q = ArrayQueue(2)
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(ValueError):
        ArrayQueue(-1)


def test_list_queue_order_and_errors():
    q = ListQueue()
    for i in range(10):
        q.push(i)
    assert q.front() == 0
    assert len(q) == 10
    assert _drain(q) == list(range(10))
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.front()