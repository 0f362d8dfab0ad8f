import pytest

from staffroll.linkedlist import LinkedList


def _by_value(a, b):
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def test_new_list_is_empty():
    items = LinkedList()
    assert len(items) == 0
    assert items.is_empty() is True
    assert list(items) == []


def test_construct_from_iterable_keeps_order():
    items = LinkedList(["a", "b", "c"])
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3
    assert items.is_empty() is False


def test_append_increases_length_and_places_last():
    items = LinkedList()
    for n, value in enumerate([10, 20, 30], start=1):
        items.append(value)
        assert len(items) == n
        assert items[n - 1] == value


def test_getitem_out_of_range():
    items = LinkedList([1, 2])
    assert items[1] == 2
    with pytest.raises(IndexError):
        items[2]
    with pytest.raises(IndexError):
        items[-1]
    assert list(items) == [1, 2]
    assert len(items) == 2


def test_getitem_rejects_non_int():
    items = LinkedList([1])
    with pytest.raises(TypeError):
        items["0"]
    assert items[0] == 1
    assert list(items) == [1]


def test_setitem_replaces_element():
    items = LinkedList([1, 2, 3])
    items[1] = 99
    assert list(items) == [1, 99, 3]
    assert len(items) == 3


def test_setitem_out_of_range():
    items = LinkedList([1])
    with pytest.raises(IndexError):
        items[1] = 5
    assert list(items) == [1]
    assert len(items) == 1


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_insert_at_each_position(index):
    base = ["a", "b", "c"]
    items = LinkedList(base)
    items.insert(index, "x")
    expected = base[:index] + ["x"] + base[index:]
    assert list(items) == expected
    assert items[index] == "x"


@pytest.mark.parametrize("index", [-1, 4])
def test_insert_out_of_range(index):
    items = LinkedList(["a", "b", "c"])
    with pytest.raises(IndexError):
        items.insert(index, "x")
    assert list(items) == ["a", "b", "c"]


@pytest.mark.parametrize("index", [0, 1, 2])
def test_remove_at(index):
    base = ["a", "b", "c"]
    items = LinkedList(base)
    items.remove_at(index)
    assert list(items) == base[:index] + base[index + 1:]
    assert len(items) == 2


def test_remove_at_out_of_range():
    items = LinkedList(["a"])
    with pytest.raises(IndexError):
        items.remove_at(1)
    with pytest.raises(IndexError):
        LinkedList().remove_at(0)
    assert list(items) == ["a"]


def test_pop_returns_removed_element():
    items = LinkedList(["a", "b", "c"])
    assert items.pop(1) == "b"
    assert list(items) == ["a", "c"]
    assert items.pop(0) == "a"
    assert list(items) == ["c"]


def test_pop_out_of_range():
    items = LinkedList(["a"])
    with pytest.raises(IndexError):
        items.pop(1)
    assert list(items) == ["a"]


def test_clear_empties_list():
    items = LinkedList([1, 2, 3])
    items.clear()
    assert len(items) == 0
    assert items.is_empty() is True
    items.append(4)
    assert list(items) == [4]


def test_index_of_first_occurrence():
    items = LinkedList(["a", "b", "a"])
    assert items.index_of("a") == 0
    assert items.index_of("b") == 1


def test_index_of_by_identity():
    first, second = object(), object()
    items = LinkedList([first, second])
    assert items.index_of(second) == 1


def test_index_of_missing_raises():
    with pytest.raises(ValueError):
        LinkedList(["a"]).index_of("z")


def test_contains():
    items = LinkedList(["a", "b"])
    assert "a" in items
    assert "z" not in items
    assert "a" not in LinkedList()


def test_contains_all_same_elements_any_order():
    items = LinkedList([1, 2, 3])
    assert items.contains_all(LinkedList([3, 1, 2])) is True


def test_contains_all_different_length_is_false():
    items = LinkedList([1, 2, 3])
    assert items.contains_all(LinkedList([1, 2])) is False


def test_contains_all_missing_element_is_false():
    items = LinkedList([1, 2, 3])
    assert items.contains_all(LinkedList([1, 2, 4])) is False


def test_sub_list_half_open():
    items = LinkedList(["a", "b", "c", "d"])
    part = items.sub_list(1, 3)
    assert list(part) == ["b", "c"]
    assert list(items) == ["a", "b", "c", "d"]


def test_sub_list_empty_when_start_not_before_stop():
    items = LinkedList(["a", "b", "c"])
    assert list(items.sub_list(2, 2)) == []
    assert list(items.sub_list(2, 1)) == []


@pytest.mark.parametrize("start,stop", [(-1, 2), (0, 4), (4, 4), (0, -1)])
def test_sub_list_bad_bounds(start, stop):
    items = LinkedList(["a", "b", "c"])
    with pytest.raises(IndexError):
        items.sub_list(start, stop)


def test_clone_is_independent_copy():
    marker = object()
    items = LinkedList(["a", marker, "c"])
    copy = items.clone()
    assert list(copy) == list(items)
    assert copy[1] is marker
    copy.append("d")
    assert len(items) == 3
    assert items.contains_all(copy) is False


def test_sort_ascending():
    items = LinkedList([5, 1, 4, 2, 3])
    items.sort(_by_value, True)
    assert list(items) == sorted([5, 1, 4, 2, 3])


def test_sort_descending():
    items = LinkedList([5, 1, 4, 2, 3])
    items.sort(_by_value, False)
    assert list(items) == sorted([5, 1, 4, 2, 3], reverse=True)


def test_sort_keeps_all_elements():
    values = [3, 3, 1, 2, 1]
    items = LinkedList(values)
    items.sort(_by_value, True)
    assert sorted(items) == sorted(values)
    assert list(items) == sorted(values)


def test_sort_by_key_comparator():
    records = [("c", 3), ("a", 1), ("b", 2)]
    items = LinkedList(records)
    items.sort(lambda x, y: _by_value(x[1], y[1]), True)
    assert [name for name, _ in items] == ["a", "b", "c"]


def test_sort_empty_and_single():
    empty = LinkedList()
    empty.sort(_by_value, True)
    assert list(empty) == []
    single = LinkedList([7])
    single.sort(_by_value, False)
    assert list(single) == [7]


def test_sort_requires_callable():
    with pytest.raises(TypeError):
        LinkedList([2, 1]).sort(None, True)