import pytest

from solong.linked import LinkedList, Node


def test_empty_list_has_no_last_and_zero_length():
    items = LinkedList()
    assert items.last() is None
    assert len(items) == 0
    assert list(items) == []


def test_constructor_keeps_order():
    items = LinkedList(["a", "b", "c"])
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_push_front_prepends():
    items = LinkedList([2, 3])
    node = items.push_front(1)
    assert items.head is node
    assert list(items) == [1, 2, 3]


def test_push_back_appends_and_last_is_new_node():
    items = LinkedList([1])
    node = items.push_back(2)
    assert items.last() is node
    assert node.content == 2
    assert list(items) == [1, 2]


def test_push_back_on_empty_sets_head():
    items = LinkedList()
    node = items.push_back("x")
    assert items.head is node
    assert items.last() is node


def test_node_links():
    second = Node("b")
    first = Node("a", second)
    assert first.next is second
    assert second.next is None


def test_iterate_visits_in_order():
    seen = []
    LinkedList([3, 1, 2]).iterate(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list_and_leaves_original():
    items = LinkedList([1, 2, 3])
    doubled = items.map(lambda value: value * 2)
    assert list(doubled) == [2, 4, 6]
    assert list(items) == [1, 2, 3]
    assert doubled.head is not items.head


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_clear_calls_deleter_on_each_content():
    deleted = []
    items = LinkedList(["a", "b", "c"])
    items.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(items) == 0
    assert items.head is None


def test_clear_without_deleter_empties():
    items = LinkedList(range(5))
    items.clear()
    assert list(items) == []


@pytest.mark.parametrize("values", [[], [0], list(range(10))])
def test_length_matches_iteration(values):
    items = LinkedList(values)
    assert len(items) == len(list(items)) == len(values)