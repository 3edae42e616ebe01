"""Line renderer: turns an ordered part list into one string.

Rendering runs in two phases.

Phase 1 (``group_lines``) walks the parts and groups runs of INLINE content
into lines. BREAK ends a line, BLOCK is a line of its own, and container
tags become separate ``container`` entries so they never share a line with
text.

Phase 2 (``assemble``) cleans each line (when auto-clean is on), drops blank
ones, joins consecutive lines with the mode line break, and emits container
tags verbatim between the joined runs.

Example:
    >>> from linefold.parts import Part, PartKind
    >>> parts = [Part("A"), Part("\\n", PartKind.BREAK), Part(", B")]
    >>> render_parts(parts, FormatConfig())
    'A\\nB'

Thread Safety:
All functions are pure. ``render_parts`` reads the part list and never
mutates it; all accumulation happens in call-local state.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

from linefold.config import CLEAN_DELIMITERS, FormatConfig
from linefold.errors import RenderError
from linefold.parts import Part, PartKind
from linefold.presence import WHITESPACE
from linefold.stringbuilder import StringBuilder


@dataclass(frozen=True, slots=True)
class LineEntry:
    """Phase-1 output: a grouped line or a container tag.

    Attributes:
        kind: "line" for text, "container" for structural tags
        content: Concatenated line text or the raw tag
        block: True when the line came from a BLOCK part

    """

    kind: Literal["line", "container"]
    content: str
    block: bool = False


def clean_line(line: str, delimiters: Sequence[str] = CLEAN_DELIMITERS) -> str:
    """Strip whitespace and dangling delimiters from both ends of a line.

    Each pass tries every delimiter in order, removing one occurrence from
    the start and one from the end of the re-trimmed string. Passes repeat
    until nothing changes, so the result is a fixpoint:

        >>> clean_line("  , A: 5 , ")
        'A: 5'
        >>> clean_line(", ")
        ''

    Note that ``"-"`` is a delimiter, so a leading minus sign is removed too.
    """
    line = line.strip(WHITESPACE)
    changed = True
    while changed:
        changed = False
        for delim in delimiters:
            trimmed = line.strip(WHITESPACE)
            if trimmed.startswith(delim):
                line = trimmed[len(delim):]
                changed = True

            trimmed = line.strip(WHITESPACE)
            if trimmed.endswith(delim):
                line = trimmed[: -len(delim)]
                changed = True

    return line.strip(WHITESPACE)


def group_lines(parts: Iterable[Part]) -> list[LineEntry]:
    """Phase 1: group parts into line and container entries."""
    entries: list[LineEntry] = []
    current: list[str] = []

    def flush() -> None:
        if current:
            entries.append(LineEntry("line", "".join(current)))
            current.clear()

    for part in parts:
        match part.kind:
            case PartKind.INLINE:
                current.append(part.content)
            case PartKind.BREAK:
                flush()
            case PartKind.BLOCK:
                flush()
                entries.append(LineEntry("line", part.content, block=True))
            case PartKind.CONTAINER_OPEN | PartKind.CONTAINER_CLOSE:
                flush()
                entries.append(LineEntry("container", part.content))
            case _:
                raise RenderError(f"Unknown part kind: {part.kind!r}")

    flush()
    return entries


def _is_block_markup(entry: LineEntry, block_tags: Sequence[str]) -> bool:
    """Builder-made block tags (``<div ...>...</div>``) stay uncleaned in markup mode."""
    if not entry.block:
        return False
    return any(
        entry.content.startswith((f"<{tag}", f"</{tag}>")) for tag in block_tags
    )


def assemble(entries: Iterable[LineEntry], config: FormatConfig) -> str:
    """Phase 2: clean, filter and join entries into the final string."""
    sb = StringBuilder()
    pending: list[str] = []
    line_break = config.line_break

    for entry in entries:
        if entry.kind == "container":
            if pending:
                sb.append_joined(pending, line_break)
                pending = []
            sb.append(entry.content)
            continue

        content = entry.content
        if config.auto_clean and not (
            config.markup and _is_block_markup(entry, config.block_tags)
        ):
            content = clean_line(content, config.clean_delimiters)

        if content.strip(WHITESPACE):
            pending.append(content)

    if pending:
        sb.append_joined(pending, line_break)

    return sb.build()


class LineRenderer:
    """Render part lists with a fixed FormatConfig.

    Usage:
        >>> renderer = LineRenderer(FormatConfig(markup=True, auto_clean=False))
        >>> renderer.render([Part("A"), Part("<br>", PartKind.BREAK), Part("B")])
        'A<br>B'

    Thread Safety:
        Holds only an immutable config; safe to share across threads.
    """

    __slots__ = ("_config",)

    def __init__(self, config: FormatConfig | None = None) -> None:
        self._config = config or FormatConfig()

    @property
    def config(self) -> FormatConfig:
        return self._config

    def render(self, parts: Sequence[Part]) -> str:
        """Render parts to a string."""
        if not parts:
            return ""
        return assemble(group_lines(parts), self._config)


def render_parts(parts: Sequence[Part], config: FormatConfig) -> str:
    """Render an ordered part list to a string.

    Args:
        parts: Parts in append order (read, never mutated)
        config: Mode flags and cleaning settings

    Returns:
        Rendered text or markup
    """
    return LineRenderer(config).render(parts)
