"""List node carrying a payload and its forward/backward links."""

from typing import Generic

from linkedlists.errors import InvalidArgumentError
from linkedlists.types import T


class Node(Generic[T]):
    """
    A node in a singly or doubly linked chain.

    The linkage mode is fixed at construction. A singly linked node never
    holds a ``prev`` reference: assignments to it are discarded and reading
    it always gives None.
    """

    __slots__ = ("data", "next", "_prev", "_doubly_linked")

    def __init__(
        self,
        data: T,
        next: "Node[T] | None" = None,
        prev: "Node[T] | None" = None,
        *,
        doubly_linked: bool = True,
    ) -> None:
        self._doubly_linked = doubly_linked
        self.data = data
        self.next: Node[T] | None = next
        self._prev: Node[T] | None = prev if doubly_linked else None

    @classmethod
    def copy(cls, source: "Node[T] | None") -> "Node[T]":
        """
        Create a new node replicating ``source``.

        Links are copied by reference, not followed.

        Raises:
            InvalidArgumentError: If source is None
        """
        if source is None:
            raise InvalidArgumentError("A non-None node must be passed in for copying")
        return cls(
            source.data,
            source.next,
            source.prev,
            doubly_linked=source.doubly_linked,
        )

    def __copy__(self) -> "Node[T]":
        return type(self).copy(self)

    @property
    def prev(self) -> "Node[T] | None":
        """The previous node, always None for singly linked nodes."""
        return self._prev

    @prev.setter
    def prev(self, node: "Node[T] | None") -> None:
        self._prev = node if self._doubly_linked else None

    @property
    def doubly_linked(self) -> bool:
        return self._doubly_linked

    def __repr__(self) -> str:
        mode = "doubly" if self._doubly_linked else "singly"
        return f"Node({self.data!r}, {mode})"
