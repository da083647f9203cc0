import pytest

from algokit.containers import DSU, Queue, Stack


def test_dsu_initial_parents():
    dsu = DSU(10)
    assert dsu.parents == list(range(10))
    assert len(dsu) == 10


def test_dsu_empty():
    assert DSU(0).parents == []


def test_queue():
    q = Queue()
    q.enqueue(37)
    q.enqueue(42)
    q.enqueue(73)
    assert q.dequeue() == 37
    assert q.dequeue() == 42
    assert q.peek() == 73
    assert len(q) == 1
    assert q.is_empty() is False


def test_queue_empty_behaviour():
    q = Queue()
    assert q.is_empty() is True
    assert q.peek() is None
    with pytest.raises(IndexError):
        q.dequeue()


def test_queue_drains_in_order():
    q = Queue()
    for item in "abc":
        q.enqueue(item)
    assert [q.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert q.is_empty() is True


def test_stack():
    s = Stack()
    s.push(37)
    s.push(42)
    s.push(73)
    assert s.pop() == 73
    assert s.pop() == 42
    assert s.peek() == 37
    assert len(s) == 1
    assert s.is_empty() is False


def test_stack_empty_behaviour():
    s = Stack()
    assert s.is_empty() is True
    assert s.pop() is None
    with pytest.raises(IndexError):
        s.peek()