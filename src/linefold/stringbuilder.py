"""StringBuilder for O(n) output accumulation.

The renderer appends fragments (joined line runs, container tags) to a list
and joins once at the end instead of growing a string with ``+=``.

Thread Safety:
StringBuilder instances are local to each render call.
No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<div>")
            >>> sb.append_joined(["A", "B"], "<br>")
            >>> sb.append("</div>")
            >>> sb.build()
            '<div>A<br>B</div>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_joined(self, strings: Iterable[str], separator: str) -> StringBuilder:
        """Append ``separator.join(strings)`` as one fragment.

        Returns:
            self for method chaining
        """
        return self.append(separator.join(strings))

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)
