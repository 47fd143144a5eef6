import pytest

from pushswap.libft.linked import LinkedList


def test_items_kept_in_order():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None


def test_append_adds_at_end():
    items = LinkedList(["a"])
    items.append("b")
    assert list(items) == ["a", "b"]
    assert items.last() == "b"
    assert len(items) == 2


def test_appendleft_adds_at_front():
    items = LinkedList([2, 3])
    items.appendleft(1)
    assert list(items) == [1, 2, 3]
    assert items.last() == 3


def test_appendleft_on_empty_sets_last():
    items = LinkedList()
    items.appendleft("x")
    assert items.last() == "x"
    items.append("y")
    assert list(items) == ["x", "y"]


def test_for_each_visits_every_item_in_order():
    seen = []
    LinkedList([4, 5, 6]).for_each(seen.append)
    assert seen == [4, 5, 6]


def test_map_returns_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda value: value * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_clear_releases_each_item_then_empties():
    released = []
    items = LinkedList(["p", "q", "r"])
    items.clear(released.append)
    assert released == ["p", "q", "r"]
    assert len(items) == 0
    assert items.last() is None


def test_clear_without_release_empties():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []
    items.append(3)
    assert list(items) == [3]


@pytest.mark.parametrize("values", [[], [0], list(range(20))])
def test_length_matches_items(values):
    assert len(LinkedList(values)) == len(values)