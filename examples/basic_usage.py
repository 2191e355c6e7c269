"""Basic usage example for linkedlists."""

import logging

from linkedlists import CyclicInputError, DoublyLinkedList, Node, SinglyLinkedList


def main() -> None:
    """Demonstrate basic list operations."""
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    print("=== Singly Linked List ===\n")

    singly = SinglyLinkedList[int]()
    singly.extend([1, 2, 3])
    print(f"Built: {singly}  (count={singly.count})")

    # Insert a chain of two nodes into the middle
    chain = Node(10, Node(11, doubly_linked=False), doubly_linked=False)
    singly.insert(chain, 1)
    print(f"After inserting 10 -> 11 at index 1: {singly}")

    # The list holds copies, so this does not touch it
    chain.data = 99
    print(f"After changing the caller's node: {singly}")

    singly.remove(2)
    print(f"After removing 2: {singly}")
    print(f"Reversed: {singly.reverse()}\n")

    print("=== Doubly Linked List ===\n")

    doubly = DoublyLinkedList[int]()
    doubly.extend([1, 2, 3, 4])
    doubly.appendleft(-1)
    print(f"Built: {doubly}")
    print(f"Backwards: {list(reversed(doubly))}")
    print(f"Has cycle: {doubly.has_cycle()}")

    # Tamper with the links directly
    assert doubly.tail is not None
    doubly.tail.next = doubly.node_at(1)
    print(f"Has cycle after redirecting the tail: {doubly.has_cycle()}\n")

    print("=== Cyclic input ===\n")

    loop = Node(1, doubly_linked=False)
    loop.next = Node(2, loop, doubly_linked=False)
    try:
        SinglyLinkedList(loop)
    except CyclicInputError as exc:
        logging.getLogger("basic_usage").info("Rejected: %s", exc)


if __name__ == "__main__":
    main()
