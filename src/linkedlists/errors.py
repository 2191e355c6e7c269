"""Exception classes for linkedlists."""


class LinkedListError(Exception):
    """Base exception for all linkedlists errors."""


class IncompatibleLinkageError(LinkedListError):
    """Raised when a singly linked node meets a doubly linked list, or the reverse."""


class InvalidArgumentError(LinkedListError):
    """Raised when a node argument is None where a node is required."""


class CyclicInputError(LinkedListError):
    """Raised when a chain handed to a list for copying loops back on itself."""
