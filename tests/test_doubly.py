from dsalgo.doubly import DoublyLinkedList

ITEMS = [3, 1, 4, 1, 5, 9, 2, 6]


def test_forward_and_reverse_iteration():
    lst = DoublyLinkedList(ITEMS)
    assert list(lst) == ITEMS
    assert list(reversed(lst)) == ITEMS[::-1]


def test_insert_first_reverses_order():
    lst = DoublyLinkedList()
    for value in ITEMS:
        lst.insert_first(value)
    assert list(lst) == ITEMS[::-1]
    assert list(reversed(lst)) == ITEMS


def test_mixed_inserts():
    lst = DoublyLinkedList(ITEMS)
    lst.insert_first(100)
    lst.insert_last(200)
    assert list(lst) == [100] + ITEMS + [200]
    assert list(reversed(lst)) == ([100] + ITEMS + [200])[::-1]


def test_search():
    lst = DoublyLinkedList(ITEMS)
    for value in ITEMS:
        assert lst.search(value) == ITEMS.index(value)
    assert lst.search(1000) is None
    assert DoublyLinkedList().search(3) is None


def test_str_formats():
    lst = DoublyLinkedList([1, 2])
    assert str(lst) == "[1] -> [2] -> NULL"
    assert lst.format_reverse() == "Print List Reverse: [2] -> [1] -> NULL"


def test_empty_iteration():
    lst = DoublyLinkedList()
    assert list(lst) == []
    assert list(reversed(lst)) == []