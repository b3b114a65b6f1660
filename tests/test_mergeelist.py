import io

import pytest

from dstructs.extlist import ExtLinkedList
from dstructs.mergeelist import compare_values, create_ascending, merge


def build(values):
    lst = ExtLinkedList()
    for pos, v in enumerate(values, 1):
        lst.insert(pos, v)
    return lst


def test_compare_values_sign():
    assert compare_values(5, 3) > 0
    assert compare_values(3, 5) < 0
    assert compare_values(4, 4) == 0


def test_create_ascending_reads_in_order():
    lst = create_ascending(io.StringIO("3 5 8 11\n"), 4)
    assert list(lst) == [3, 5, 8, 11]
    assert len(lst) == 4


def test_create_ascending_short_stream():
    with pytest.raises(ValueError):
        create_ascending(io.StringIO("1 2"), 3)


def test_merge_sorted_result():
    a = [3, 5, 8, 11]
    b = [2, 6, 8, 9, 11, 15]
    la, lb = build(a), build(b)
    lc = merge(la, lb, compare_values)
    assert list(lc) == sorted(a + b)
    assert len(lc) == len(a) + len(b)
    assert lc.tail.data == max(a + b)


def test_merge_empties_inputs():
    la, lb = build([1, 4]), build([2, 3])
    merge(la, lb, compare_values)
    assert la.is_empty() and lb.is_empty()
    assert list(la) == [] and list(lb) == []


def test_merge_with_empty_side():
    lc = merge(build([]), build([1, 2, 3]), compare_values)
    assert list(lc) == [1, 2, 3]
    assert len(lc) == 3


def test_merge_ties_prefer_first_list():
    la = build([(1, "a"), (2, "a")])
    lb = build([(1, "b"), (2, "b")])
    lc = merge(la, lb, lambda x, y: x[0] - y[0])
    assert list(lc) == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]