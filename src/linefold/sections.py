"""Section bookkeeping for split output.

``Formatter.split()`` renders the current parts and hands the result to a
SectionManager, which keeps it frozen while the formatter starts a fresh
part list. Later appends can never alter a finalized section.

Example:
    >>> fmt = Formatter().add("A").split().add("B")
    >>> fmt.collect_fragments()
    ['A', 'B']
    >>> fmt.combine(" | ")
    'A | B'

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from linefold.parts import Part
from linefold.presence import is_present
from linefold.renderers.protocol import PartRenderer
from linefold.utils.logger import get_logger

logger = get_logger(__name__)


class SectionManager:
    """Ordered store of rendered, frozen sections.

    Not thread-safe; owned by a single Formatter.
    """

    __slots__ = ("_finalized", "_count")

    def __init__(self) -> None:
        self._finalized: list[str] = []
        self._count = 0

    @property
    def count(self) -> int:
        """Number of sections finalized since the last reset."""
        return self._count

    @property
    def has_splits(self) -> bool:
        return self._count > 0

    @property
    def finalized(self) -> tuple[str, ...]:
        return tuple(self._finalized)

    def freeze(self, parts: Sequence[Part], renderer: PartRenderer) -> bool:
        """Render ``parts`` and store the result as the next section.

        Returns:
            False (and stores nothing) when ``parts`` is empty
        """
        if not parts:
            return False
        rendered = renderer.render(parts)
        self._finalized.append(rendered)
        self._count += 1
        logger.debug(
            "Froze section %d from %d parts (%d chars)",
            self._count,
            len(parts),
            len(rendered),
        )
        return True

    def fragments(self, current: str | None = None) -> list[str]:
        """Present finalized sections, oldest first, plus ``current`` when given.

        Sections that rendered blank are skipped, as is a blank ``current``.
        """
        result = [f for f in self._finalized if is_present(f)]
        if current is not None and is_present(current):
            result.append(current)
        return result

    def reset(self) -> None:
        self._finalized.clear()
        self._count = 0


def combine_fragments(fragments: Iterable[str], separator: str) -> str:
    """Join the present fragments with ``separator``; blank ones are skipped."""
    return separator.join(f for f in fragments if is_present(f))
