import io

import pytest

from dstructs.linkedlist import LinkedList, Node, merge


def greater(e, data):
    return data > e


@pytest.fixture
def filled():
    lst = LinkedList()
    for i in range(1, 7):
        lst.insert(i, 2 * i)
    return lst


def test_new_list_is_empty():
    lst = LinkedList()
    assert lst.is_empty()
    assert len(lst) == 0


def test_node_links():
    tail = Node(2)
    head = Node(1, tail)
    assert head.next is tail
    assert tail.next is None


def test_insert_builds_in_order(filled):
    assert list(filled) == [2 * i for i in range(1, 7)]
    assert len(filled) == 6


@pytest.mark.parametrize("pos", [0, 8])
def test_insert_out_of_range(filled, pos):
    with pytest.raises(IndexError):
        filled.insert(pos, 99)


def test_delete_last(filled):
    assert filled.delete(6) == 12
    assert list(filled) == [2, 4, 6, 8, 10]
    with pytest.raises(IndexError):
        filled.delete(6)
    with pytest.raises(IndexError):
        filled.delete(0)


def test_get(filled):
    assert filled.get(3) == 6
    with pytest.raises(IndexError):
        filled.get(7)
    with pytest.raises(IndexError):
        filled.get(0)


def test_locate(filled):
    values = list(filled)
    assert filled.locate(7, greater) == values.index(8) + 1
    assert filled.locate(100, greater) is None


def test_prior_and_next(filled):
    assert filled.prior(6) == 4
    assert filled.next_of(6) == 8


def test_prior_and_next_errors(filled):
    with pytest.raises(ValueError):
        filled.prior(2)
    with pytest.raises(ValueError):
        filled.next_of(12)
    with pytest.raises(ValueError):
        LinkedList().prior(1)


def test_clear(filled):
    filled.clear()
    assert filled.is_empty()
    assert list(filled) == []


def test_head_insertion_reverses_input():
    data = [1, 3, 5, 7, 9]
    lst = LinkedList.from_head_insertion(io.StringIO(" ".join(map(str, data))), 5)
    assert list(lst) == list(reversed(data))


def test_tail_insertion_keeps_order():
    data = [2, 4, 6, 8, 10]
    lst = LinkedList.from_tail_insertion(io.StringIO(" ".join(map(str, data))), 5)
    assert list(lst) == data


def test_creation_from_short_stream_raises():
    with pytest.raises(ValueError):
        LinkedList.from_tail_insertion(io.StringIO("1 2"), 3)
    with pytest.raises(ValueError):
        LinkedList.from_head_insertion(io.StringIO(""), 1)


def test_merge_sorted_lists():
    a = [1, 3, 5, 7, 9]
    b = [2, 4, 6, 8, 10]
    la = LinkedList.from_head_insertion(io.StringIO(" ".join(map(str, reversed(a)))), 5)
    lb = LinkedList.from_tail_insertion(io.StringIO(" ".join(map(str, b))), 5)
    lc = merge(la, lb)
    assert lc is la
    assert list(lc) == sorted(a + b)
    assert lb.is_empty()


def test_merge_with_empty_side():
    assert list(merge(LinkedList(), LinkedList([1, 2]))) == [1, 2]
    assert list(merge(LinkedList([3]), LinkedList())) == [3]