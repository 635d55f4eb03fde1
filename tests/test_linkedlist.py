import pytest

from cubmap.ft.linkedlist import LinkedList


def test_init_keeps_order():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_front_prepends():
    lst = LinkedList(["b", "c"])
    lst.add_front("a")
    assert list(lst) == ["a", "b", "c"]


def test_add_back_appends_and_last():
    lst = LinkedList()
    lst.add_back("x")
    lst.add_back("y")
    assert list(lst) == ["x", "y"]
    assert lst.last() == "y"


def test_len_counts_elements():
    items = ["p", "q", "r", "s"]
    assert len(LinkedList(items)) == len(items)


def test_clear_calls_delete_in_order_and_empties():
    seen = []
    lst = LinkedList(["a", "b"])
    lst.clear(seen.append)
    assert seen == ["a", "b"]
    assert list(lst) == []
    assert len(lst) == 0


def test_clear_without_delete_still_empties():
    lst = LinkedList([1, 2])
    lst.clear(None)
    assert list(lst) == []


def test_iterate_visits_every_element():
    seen = []
    LinkedList([5, 6, 7]).iterate(seen.append)
    assert seen == [5, 6, 7]


def test_iterate_without_func_changes_nothing():
    lst = LinkedList([1])
    lst.iterate(None)
    assert list(lst) == [1]


def test_map_builds_new_list():
    source = LinkedList(["a", "b"])
    mapped = source.map(str.upper, lambda _: None)
    assert list(mapped) == ["A", "B"]
    assert list(source) == ["a", "b"]


def test_map_failure_deletes_partial_result():
    deleted = []

    def func(value):
        if value == "boom":
            raise RuntimeError("failed")
        return value * 2

    source = LinkedList(["a", "b", "boom"])
    with pytest.raises(RuntimeError):
        source.map(func, deleted.append)
    assert deleted == ["aa", "bb"]


def test_map_requires_func_and_delete():
    with pytest.raises(ValueError):
        LinkedList([1]).map(None, print)
    with pytest.raises(ValueError):
        LinkedList([1]).map(str, None)