import pytest

from pushswap.lists import LinkedList, Node


def test_empty_list_has_no_last_and_zero_length():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_constructor_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_add_front_prepends():
    lst = LinkedList(["b"])
    node = lst.add_front("a")
    assert lst.head is node
    assert list(lst) == ["a", "b"]


def test_add_back_appends_and_updates_last():
    lst = LinkedList()
    lst.add_back(1)
    node = lst.add_back(2)
    assert lst.last() is node
    assert node.content == 2
    assert list(lst) == [1, 2]


def test_nodes_are_linked():
    lst = LinkedList(["x", "y"])
    assert isinstance(lst.head, Node)
    assert lst.head.next.content == "y"
    assert lst.head.next.next is None


@pytest.mark.parametrize("items", [[], [0], list(range(10))])
def test_length_matches_iteration(items):
    lst = LinkedList(items)
    assert len(lst) == len(list(lst)) == len(items)


def test_clear_calls_delete_in_order_and_empties():
    seen = []
    lst = LinkedList([3, 1, 2])
    lst.clear(seen.append)
    assert seen == [3, 1, 2]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_content():
    seen = []
    lst = LinkedList(["a", "b", "c"])
    lst.for_each(seen.append)
    assert seen == ["a", "b", "c"]
    assert list(lst) == ["a", "b", "c"]