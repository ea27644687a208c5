import pytest

from megalibft.linked_list import LinkedList, Node


def test_construct_from_items():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_push_front_order():
    lst = LinkedList()
    lst.push_front("a")
    lst.push_front("b")
    lst.push_front("c")
    assert list(lst) == ["c", "b", "a"]
    assert lst.last().data == "a"


def test_push_back_order():
    lst = LinkedList()
    for item in ("x", "y", "z"):
        lst.push_back(item)
    assert list(lst) == ["x", "y", "z"]
    assert lst.last().data == "z"
    assert lst.last().next is None


def test_mixed_pushes():
    lst = LinkedList([2])
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3
    assert lst.head.data == 1


def test_push_returns_node():
    lst = LinkedList()
    node = lst.push_back(7)
    assert isinstance(node, Node) and node.data == 7
    assert lst.last() is node
    assert lst.head is node


def test_last_after_push_front_on_empty():
    lst = LinkedList()
    node = lst.push_front("only")
    assert lst.last() is node


def test_len_matches_iteration():
    lst = LinkedList(range(10))
    lst.push_front(-1)
    lst.push_back(10)
    assert len(lst) == len(list(lst))


def test_for_each_visits_in_order():
    seen = []
    LinkedList(["p", "q", "r"]).for_each(seen.append)
    assert seen == ["p", "q", "r"]


def test_for_each_without_function_leaves_list():
    lst = LinkedList([1, 2])
    lst.for_each(None)
    assert list(lst) == [1, 2]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(str)
    assert list(mapped) == ["1", "2", "3"]
    assert list(original) == [1, 2, 3]
    assert mapped is not original
    assert len(mapped) == len(original)


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str)) == []


def test_map_requires_function():
    with pytest.raises(TypeError):
        LinkedList([1]).map(None)


def test_clear():
    lst = LinkedList([1, 2, 3])
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    lst.push_back(4)
    assert list(lst) == [4]


def test_nodes_are_linked():
    lst = LinkedList(["a", "b"])
    assert lst.head.next is lst.last()
    assert lst.head.next.data == "b"