"""Type definitions for linkedlists."""

from typing import Literal, TypeAlias, TypeVar

# Generic type variable for node payloads
T = TypeVar("T")

# Separator placed between rendered elements
LinkSeparator: TypeAlias = Literal["->", "<->"]

SINGLY_SEPARATOR: LinkSeparator = "->"
DOUBLY_SEPARATOR: LinkSeparator = "<->"
