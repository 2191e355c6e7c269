"""Tests for reversing a LinkedList."""

from linkedlists import DoublyLinkedList, LinkedList, SinglyLinkedList


def test_reverse_singly() -> None:
    """Test reversing a singly linked list."""
    lst = SinglyLinkedList[int]()
    assert lst.reverse().is_empty

    lst.append(1)
    assert lst.reverse().count == 1
    assert lst.reverse().render() == "1"

    lst.append(2)
    lst.append(3)
    assert lst.reverse().count == 3
    assert lst.reverse().render() == "3 -> 2 -> 1"


def test_reverse_doubly() -> None:
    """Test reversing a doubly linked list."""
    lst = DoublyLinkedList[int]()
    assert lst.reverse().is_empty

    lst.append(1)
    assert lst.reverse().count == 1
    assert lst.reverse().render() == "1"

    lst.append(2)
    lst.append(3)
    assert lst.reverse().count == 3
    assert lst.reverse().render() == "3 <-> 2 <-> 1"


def test_reverse_does_not_mutate() -> None:
    """Test that reversing leaves the original list alone."""
    lst = DoublyLinkedList[int]()
    lst.extend([1, 2, 3])
    result = lst.reverse()

    assert lst.render() == "1 <-> 2 <-> 3"
    assert result.head is not lst.tail
    result.sanity_check()
    lst.sanity_check()


def test_reverse_keeps_variant() -> None:
    """Test that the reversed list has the same type and mode."""
    assert type(SinglyLinkedList[int]().reverse()) is SinglyLinkedList
    assert type(DoublyLinkedList[int]().reverse()) is DoublyLinkedList

    base = LinkedList[int](False)
    base.extend([1, 2])
    reversed_base = base.reverse()
    assert type(reversed_base) is LinkedList
    assert not reversed_base.doubly_linked
    assert reversed_base.render() == "2 -> 1"


def test_double_reverse_round_trips() -> None:
    """Test that reversing twice renders the original list."""
    for lst in (SinglyLinkedList[str](), DoublyLinkedList[str]()):
        lst.extend("abcde")
        assert lst.reverse().reverse().render() == lst.render()


def test_reversed_iteration() -> None:
    """Test the reversed() protocol for both modes."""
    singly = SinglyLinkedList[int]()
    doubly = DoublyLinkedList[int]()
    singly.extend([1, 2, 3])
    doubly.extend([1, 2, 3])

    assert list(reversed(singly)) == [3, 2, 1]
    assert list(reversed(doubly)) == [3, 2, 1]
