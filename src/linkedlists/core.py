"""Main LinkedList implementation."""

import logging
from collections.abc import Iterable, Iterator
from typing import Generic

from linkedlists.errors import CyclicInputError, IncompatibleLinkageError
from linkedlists.node import Node
from linkedlists.types import DOUBLY_SEPARATOR, SINGLY_SEPARATOR, T

logger = logging.getLogger(__name__)


class LinkedList(Generic[T]):
    """
    Singly or doubly linked list that owns copies of every node handed to it.

    Nodes passed to the constructor or to insert() are copied together with
    everything reachable through their ``next`` links, so later changes to the
    caller's nodes never reach the list. The linkage mode is fixed for the
    lifetime of the list.
    """

    def __init__(self, doubly_linked: bool = True, head: Node[T] | None = None) -> None:
        """
        Initialize the list.

        Args:
            doubly_linked: Whether nodes keep a ``prev`` link as well as ``next``
            head: Optional first node of a chain to copy into the list

        Raises:
            IncompatibleLinkageError: If a node in the chain has the other linkage mode
            CyclicInputError: If the chain loops back on itself
        """
        self._doubly_linked = doubly_linked
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._count = 0

        if head is not None:
            self._head, self._tail, self._count = self._copy_chain(head)

    @property
    def head(self) -> Node[T] | None:
        """First node of the list, None when empty."""
        return self._head

    @property
    def tail(self) -> Node[T] | None:
        """Last node of the list, None when empty."""
        return self._tail

    @property
    def count(self) -> int:
        """Number of nodes owned by the list."""
        return self._count

    @property
    def is_empty(self) -> bool:
        """True if the list holds no nodes."""
        return self._count == 0

    @property
    def doubly_linked(self) -> bool:
        """Whether nodes keep ``prev`` links, fixed at construction."""
        return self._doubly_linked

    def insert(self, node: Node[T] | None, index: int | None = None) -> None:
        """
        Insert a copy of ``node`` and its successors at ``index``.

        Args:
            node: First node of the chain to copy in. None is ignored.
            index: Position the copied chain starts at. None, a negative
                value or anything past the end appends to the list.

        Raises:
            IncompatibleLinkageError: If a node in the chain has the other linkage mode
            CyclicInputError: If the chain loops back on itself
        """
        if node is None:
            logger.debug("Ignoring insert of None into %r", self)
            return

        first, last, copied = self._copy_chain(node)

        if index is None or index < 0 or index >= self._count:
            if self._tail is None:
                self._head = first
            else:
                self._tail.next = first
                first.prev = self._tail
            self._tail = last
        else:
            previous, current = self._locate(index)

            # Connect the copied segment to the trailing nodes
            last.next = current
            current.prev = last

            # Connect the leading nodes, or take over the head
            first.prev = previous
            if previous is None:
                self._head = first
            else:
                previous.next = first

        self._count += copied

    def append(self, data: T) -> None:
        """Append a single element to the end of the list."""
        self.insert(self._new_node(data))

    def appendleft(self, data: T) -> None:
        """Prepend a single element to the beginning of the list."""
        self.insert(self._new_node(data), 0)

    def extend(self, values: Iterable[T]) -> None:
        """Append every element of ``values`` in order."""
        for data in values:
            self.append(data)

    def remove(self, data: T, start_at: int = 0) -> bool:
        """
        Remove the first node holding ``data`` at or after position ``start_at``.

        Returns:
            True if a node was removed, False if nothing matched
        """
        previous: Node[T] | None = None
        current = self._head
        position = 0

        while current is not None and position < self._count:
            if position >= start_at and current.data == data:
                self._unlink(previous, current)
                return True
            previous = current
            current = current.next
            position += 1

        logger.debug("No %r found at or after position %d", data, start_at)
        return False

    def reverse(self) -> "LinkedList[T]":
        """Return a new list of the same kind with the elements in reverse order."""
        reversed_list = self._empty_like()
        for data in reversed(self):
            reversed_list.append(data)
        return reversed_list

    def has_cycle(self) -> bool:
        """Detect a loop in the ``next`` links using Floyd's tortoise and hare."""
        slow = fast = self._head
        # slow trails fast, so it is never None while fast can still advance
        while slow is not None and fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def node_at(self, index: int) -> Node[T]:
        """
        Return the node currently at ``index``.

        Raises:
            IndexError: If index is outside the list
        """
        if index < 0 or index >= self._count:
            raise IndexError(f"Index {index} out of range for list of {self._count}")
        return self._locate(index)[1]

    def render(self) -> str:
        """Render the elements head to tail, joined by the link separator."""
        separator = DOUBLY_SEPARATOR if self._doubly_linked else SINGLY_SEPARATOR
        return f" {separator} ".join(str(data) for data in self)

    def sanity_check(self) -> None:
        """
        Assert the structural invariants of the list.

        Meant for tests; the checks are skipped when Python runs with -O.
        """
        if self._count == 0:
            assert self._head is None and self._tail is None
            return
        assert self._head is not None and self._tail is not None
        assert self._head.prev is None
        assert self._tail.next is None

        current = self._head
        for _ in range(self._count - 1):
            assert current.doubly_linked == self._doubly_linked
            assert current.next is not None
            if self._doubly_linked:
                assert current.next.prev is current
            current = current.next
        assert current is self._tail
        assert current.doubly_linked == self._doubly_linked

    def __iter__(self) -> Iterator[T]:
        """Iterate over the elements head to tail."""
        for node in self._nodes():
            yield node.data

    def __reversed__(self) -> Iterator[T]:
        """Iterate over the elements tail to head."""
        if self._doubly_linked:
            current = self._tail
            for _ in range(self._count):
                if current is None:
                    break
                yield current.data
                current = current.prev
        else:
            # No backward links, so buffer everything first
            stack = [node.data for node in self._nodes()]
            while stack:
                yield stack.pop()

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._count

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._count > 0

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[Node[T]]:
        """Yield owned nodes head to tail, never more than ``count`` of them."""
        current = self._head
        for _ in range(self._count):
            if current is None:
                break
            yield current
            current = current.next

    def _new_node(self, data: T) -> Node[T]:
        return Node(data, doubly_linked=self._doubly_linked)

    def _empty_like(self) -> "LinkedList[T]":
        if type(self) is LinkedList:
            return LinkedList(self._doubly_linked)
        return type(self)()

    def _check_compatible(self, node: Node[T]) -> None:
        if node.doubly_linked != self._doubly_linked:
            raise IncompatibleLinkageError(
                f"Cannot insert node that is {'' if node.doubly_linked else 'not '}doubly "
                f"linked into a list that is{'' if self._doubly_linked else ' not'}"
            )

    def _copy_chain(self, source: Node[T]) -> tuple[Node[T], Node[T], int]:
        """
        Copy ``source`` and every node reachable from it through ``next``.

        The copies are linked to each other only; the caller splices them in.

        Returns:
            Tuple of (first copy, last copy, number of nodes copied)

        Raises:
            IncompatibleLinkageError: If a node has the other linkage mode
            CyclicInputError: If a source node is reached twice
        """
        self._check_compatible(source)
        first = last = Node.copy(source)
        first.next = None
        first.prev = None
        seen = {id(source)}
        count = 1

        current = source.next
        while current is not None:
            if id(current) in seen:
                raise CyclicInputError(
                    f"Chain loops back to {current!r} after {count} nodes"
                )
            seen.add(id(current))
            self._check_compatible(current)

            node = Node.copy(current)
            node.next = None
            node.prev = last
            last.next = node
            last = node
            count += 1
            current = current.next

        return first, last, count

    def _locate(self, index: int) -> tuple[Node[T] | None, Node[T]]:
        """
        Find the node at ``index`` and its predecessor.

        Doubly linked lists walk backward from the tail when the index is
        closer to it. ``index`` must already be in range.
        """
        start_from_head = not self._doubly_linked or index == 0 or self._count / index > 2

        previous: Node[T] | None = None

        if start_from_head:
            logger.debug("Locating index %d of %d from the head", index, self._count)
            current = self._head
            for _ in range(index):
                if current is None:
                    break
                previous = current
                current = current.next
        else:
            logger.debug("Locating index %d of %d from the tail", index, self._count)
            current = self._tail
            for _ in range(self._count - 1 - index):
                if current is None:
                    break
                current = current.prev
            if current is not None:
                previous = current.prev

        if current is None:
            raise RuntimeError(f"Unexpected end of list while locating index {index}")
        return previous, current

    def _unlink(self, previous: Node[T] | None, node: Node[T]) -> None:
        following = node.next

        if previous is None:
            self._head = following
        else:
            previous.next = following

        if following is None:
            self._tail = previous
        else:
            following.prev = previous

        node.prev = None
        node.next = None
        self._count -= 1


class SinglyLinkedList(LinkedList[T]):
    """Linked list whose nodes only keep a ``next`` link."""

    def __init__(self, head: Node[T] | None = None) -> None:
        super().__init__(False, head)


class DoublyLinkedList(LinkedList[T]):
    """Linked list whose nodes keep both ``next`` and ``prev`` links."""

    def __init__(self, head: Node[T] | None = None) -> None:
        super().__init__(True, head)
