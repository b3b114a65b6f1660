import pytest

from dstructs.linkqueue import LinkQueue


def test_new_queue_is_empty():
    q = LinkQueue()
    assert q.is_empty()
    assert len(q) == 0
    assert list(q) == []


def test_fifo_order():
    q = LinkQueue()
    for i in range(1, 7):
        q.enqueue(2 * i)
        assert len(q) == i
    assert list(q) == [2, 4, 6, 8, 10, 12]
    assert q.dequeue() == 2
    assert list(q) == [4, 6, 8, 10, 12]
    assert len(q) == 5
    assert q.head() == 4


def test_dequeue_last_resets_rear():
    q = LinkQueue()
    q.enqueue("a")
    assert q.dequeue() == "a"
    assert q.is_empty()
    q.enqueue("b")
    assert list(q) == ["b"]
    assert q.head() == "b"


def test_clear():
    q = LinkQueue()
    for x in range(5):
        q.enqueue(x)
    assert not q.is_empty()
    q.clear()
    assert q.is_empty()
    assert len(q) == 0
    q.enqueue(9)
    assert list(q) == [9]


def test_empty_errors():
    q = LinkQueue()
    with pytest.raises(IndexError):
        q.head()
    with pytest.raises(IndexError):
        q.dequeue()


def test_round_trip_preserves_items():
    items = list(range(20))
    q = LinkQueue()
    for x in items:
        q.enqueue(x)
    out = [q.dequeue() for _ in items]
    assert out == items
    assert q.is_empty()