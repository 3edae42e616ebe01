"""Linefold renderers.

Renderers convert an ordered part list into output text.

Available Renderers:
- LineRenderer: two-phase line grouping and assembly with delimiter cleaning

Thread Safety:
Renderers hold only an immutable FormatConfig and keep all working state
local to each render() call.

"""

from linefold.renderers.lines import (
    LineEntry,
    LineRenderer,
    assemble,
    clean_line,
    group_lines,
    render_parts,
)
from linefold.renderers.protocol import PartRenderer

__all__ = [
    "LineEntry",
    "LineRenderer",
    "PartRenderer",
    "assemble",
    "clean_line",
    "group_lines",
    "render_parts",
]
