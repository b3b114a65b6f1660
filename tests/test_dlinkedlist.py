import operator

import pytest

from dstructs.dlinkedlist import DoublyCircularList


def _greater(e, data):
    return data > e


def _filled():
    lst = DoublyCircularList()
    for i in range(1, 7):
        lst.insert(i, 2 * i)
    return lst


def _assert_links(lst):
    nodes = [lst.node_at(i) for i in range(1, len(lst) + 1)]
    for a, b in zip(nodes, nodes[1:]):
        assert a.next is b
        assert b.prior is a
    if nodes:
        assert nodes[0].prior.next is nodes[0]
        assert nodes[-1].next.prior is nodes[-1]
        assert nodes[-1].next is nodes[0].prior


def test_new_list_is_empty():
    lst = DoublyCircularList()
    assert lst.is_empty() is True
    assert len(lst) == 0
    assert list(lst) == []


def test_constructor_items():
    lst = DoublyCircularList([3, 1, 2])
    assert list(lst) == [3, 1, 2]
    _assert_links(lst)


def test_insert_and_iterate():
    lst = _filled()
    assert list(lst) == [2, 4, 6, 8, 10, 12]
    assert len(lst) == 6
    _assert_links(lst)


def test_walkthrough_operations():
    lst = _filled()
    assert lst.delete(6) == 12
    assert len(lst) == 5
    assert lst.get(3) == 6
    assert lst.locate(7, _greater) == 4
    assert lst.prior(6) == 4
    assert lst.next_of(6) == 8
    assert lst.node_at(3).data == 6
    _assert_links(lst)


def test_insert_in_middle_and_front():
    lst = DoublyCircularList([1, 3])
    lst.insert(2, 2)
    lst.insert(1, 0)
    assert list(lst) == [0, 1, 2, 3]
    _assert_links(lst)


def test_locate_missing_is_none():
    assert _filled().locate(100, operator.eq) is None


@pytest.mark.parametrize("i", [0, -2, 7])
def test_node_at_out_of_range_is_none(i):
    assert _filled().node_at(i) is None


@pytest.mark.parametrize("i", [0, 8])
def test_insert_bad_position(i):
    with pytest.raises(IndexError):
        _filled().insert(i, 1)


@pytest.mark.parametrize("i", [0, 7])
def test_delete_bad_position(i):
    with pytest.raises(IndexError):
        _filled().delete(i)


def test_get_bad_position():
    with pytest.raises(IndexError):
        _filled().get(7)


def test_prior_of_first_raises():
    with pytest.raises(ValueError):
        _filled().prior(2)


def test_next_of_last_raises():
    with pytest.raises(ValueError):
        _filled().next_of(12)


def test_prior_of_missing_raises():
    with pytest.raises(ValueError):
        _filled().prior(99)


def test_clear():
    lst = _filled()
    lst.clear()
    assert lst.is_empty() is True
    assert len(lst) == 0


def test_delete_all_leaves_empty():
    lst = _filled()
    removed = [lst.delete(1) for _ in range(6)]
    assert removed == [2, 4, 6, 8, 10, 12]
    assert lst.is_empty() is True