"""Part and PartKind definitions for the Linefold accumulator.

The Formatter produces an ordered list of Part objects that the renderer
consumes. Each Part has a kind and its already-formatted content.

Thread Safety:
Part is frozen (immutable) and safe to share across threads.
PartKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class PartKind(Enum):
    """Kinds of parts the renderer knows how to lay out."""

    INLINE = auto()  # concatenated onto the current line
    BREAK = auto()  # ends the current line
    BLOCK = auto()  # always a line of its own
    CONTAINER_OPEN = auto()  # <div ...>, never cleaned
    CONTAINER_CLOSE = auto()  # </div>, never cleaned


@dataclass(frozen=True, slots=True)
class Part:
    """One appended unit, held in append order.

    Attributes:
        content: Formatted text (or tag) carried by the part
        kind: How the renderer lays the part out

    """

    content: str
    kind: PartKind = PartKind.INLINE

    def __repr__(self) -> str:
        return f"Part({self.kind.name}, {self.content!r})"
