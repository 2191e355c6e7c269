"""linkedlists - Singly and doubly linked lists with copy-on-insert semantics."""

import logging

from linkedlists.core import DoublyLinkedList, LinkedList, SinglyLinkedList
from linkedlists.errors import (
    CyclicInputError,
    IncompatibleLinkageError,
    InvalidArgumentError,
    LinkedListError,
)
from linkedlists.node import Node
from linkedlists.types import LinkSeparator

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.0.1"

__all__ = [
    "LinkedList",
    "SinglyLinkedList",
    "DoublyLinkedList",
    "Node",
    "LinkedListError",
    "IncompatibleLinkageError",
    "InvalidArgumentError",
    "CyclicInputError",
    "LinkSeparator",
]
