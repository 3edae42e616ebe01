"""PartRenderer protocol: stable interface for part renderers.

Any object that implements ``render(parts) -> str`` conforms to this protocol.
The built-in ``LineRenderer`` is the reference implementation; the section
manager freezes fragments through this interface.

Example:
    from linefold.renderers.protocol import PartRenderer

    def render_all(renderer: PartRenderer, batches: list[list[Part]]) -> list[str]:
        return [renderer.render(parts) for parts in batches]

"""

from collections.abc import Sequence
from typing import Protocol

from linefold.parts import Part


class PartRenderer(Protocol):
    """Protocol for part renderers.

    Implementations must accept an ordered part sequence, leave it untouched,
    and return the rendered string.

    """

    def render(self, parts: Sequence[Part]) -> str:
        """Render parts to a string.

        Args:
            parts: Parts in append order.

        Returns:
            Rendered string output.

        """
        ...
