"""Fluent Formatter: accumulate parts, render text or markup.

The Formatter owns the ordered part list for the section being built, the
one-shot pending style, and a FormatConfig. Three kinds of methods live here:

- Primitives (``append_inline``, ``append_break``, ``append_block``,
  ``append_container_open``/``append_container_close``) append a Part as-is.
- Convenience methods (``add``, ``add_line``, ``add_inline``, ``add_bold`` ...)
  decide *whether* to append: values that are not present are skipped, so
  the part list only ever holds meaningful content.
- Output methods (``render``, ``split``, ``combine`` ...) run the part list
  through the line renderer.

Example:
    >>> fmt = Formatter()
    >>> fmt.add("Asha", "Name").add_break().add(None, "Phone").add(0, "Balance")
    Formatter(parts=3, sections=0, markup=False)
    >>> print(fmt)
    Name: Asha
    Balance: 0

Thread Safety:
A Formatter is a single-owner mutable builder. Do not share one instance
across threads without external locking.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any

from linefold.config import FormatConfig, get_format_config
from linefold.errors import PartError
from linefold.fields import FieldSpec, Key, lookup
from linefold.parts import Part, PartKind
from linefold.presence import is_present, normalize
from linefold.renderers.lines import LineRenderer
from linefold.sections import SectionManager, combine_fragments
from linefold.utils.logger import get_logger
from linefold.utils.text import format_attributes, wrap_tag

logger = get_logger(__name__)


@dataclass(slots=True)
class PendingStyle:
    """Class/style waiting for the next tag-emitting call."""

    css_class: str | None = None
    style: str | None = None


class Formatter:
    """Fluent text/markup builder.

    Every mutating method returns ``self`` so calls chain:

        >>> Formatter(FormatConfig(markup=True)).with_class("hint").add_span("ok").render()
        '<span class="hint">ok</span>'

    """

    __slots__ = ("_config", "_parts", "_pending", "_sections")

    def __init__(self, config: FormatConfig | None = None) -> None:
        """Initialize an empty formatter.

        Args:
            config: Starting configuration (defaults to the context config)
        """
        self._config = config if config is not None else get_format_config()
        self._parts: list[Part] = []
        self._pending = PendingStyle()
        self._sections = SectionManager()

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def config(self) -> FormatConfig:
        return self._config

    def markup_mode(self, enabled: bool = True) -> Formatter:
        """Switch between HTML output and plain text.

        Only affects parts appended afterwards; existing BREAK parts keep the
        token they were created with.
        """
        self._config = replace(self._config, markup=enabled)
        return self

    def auto_clean(self, enabled: bool = True) -> Formatter:
        """Enable or disable delimiter cleaning at line edges."""
        self._config = replace(self._config, auto_clean=enabled)
        return self

    def with_delimiter(self, delimiter: str) -> Formatter:
        """Set the default joiner for grouped inline values."""
        self._config = replace(self._config, item_delimiter=delimiter)
        return self

    def with_line_delimiter(self) -> Formatter:
        """Join grouped inline values with the mode line break."""
        self._config = replace(self._config, item_delimiter=self._config.line_break)
        return self

    # =========================================================================
    # Pending style
    # =========================================================================

    def with_class(self, css_class: str) -> Formatter:
        """Apply a CSS class to the next tag-emitting call only."""
        self._pending.css_class = css_class
        return self

    def with_style(self, style: str) -> Formatter:
        """Apply an inline style to the next tag-emitting call only."""
        self._pending.style = style
        return self

    def with_css(self, css_class: str | None = None, style: str | None = None) -> Formatter:
        """Set class and/or style for the next tag; None leaves a value alone."""
        if css_class is not None:
            self._pending.css_class = css_class
        if style is not None:
            self._pending.style = style
        return self

    def build_attributes(self, css_class: str | None = None, style: str | None = None) -> str:
        """Resolve and consume the pending style.

        Explicit arguments win over the pending values, per property. The
        pending style is cleared whether or not it was used.

        Returns:
            "" or an escaped ``' class="..." style="..."'`` fragment
        """
        final_class = css_class if css_class is not None else self._pending.css_class
        final_style = style if style is not None else self._pending.style
        self._pending = PendingStyle()
        return format_attributes(final_class, final_style)

    # =========================================================================
    # Primitives
    # =========================================================================

    def _append(self, operation: str, content: Any, kind: PartKind) -> Formatter:
        if not isinstance(content, str):
            raise PartError(operation, content)
        self._parts.append(Part(content, kind))
        return self

    def append_inline(self, text: str) -> Formatter:
        """Append text to the current line."""
        return self._append("append_inline", text, PartKind.INLINE)

    def append_break(self) -> Formatter:
        """End the current line (``<br>`` in markup mode, newline otherwise)."""
        return self._append("append_break", self._config.line_break, PartKind.BREAK)

    def append_block(self, content: str) -> Formatter:
        """Append content that always occupies a line of its own."""
        return self._append("append_block", content, PartKind.BLOCK)

    def append_container_open(self, tag: str) -> Formatter:
        """Append a pre-built opening tag. Ignored in plain text mode."""
        if not self._config.markup:
            logger.debug("Container open %r ignored in plain text mode", tag)
            return self
        return self._append("append_container_open", tag, PartKind.CONTAINER_OPEN)

    def append_container_close(self, tag: str = "</div>") -> Formatter:
        """Append a closing tag. Ignored in plain text mode."""
        if not self._config.markup:
            return self
        return self._append("append_container_close", tag, PartKind.CONTAINER_CLOSE)

    add_break = append_break

    # =========================================================================
    # Values
    # =========================================================================

    @staticmethod
    def _labeled(value: Any, prefix: str, separator: str, suffix: str = "") -> str:
        text = normalize(value)
        if prefix:
            return f"{prefix}{separator}{text}{suffix}"
        return f"{text}{suffix}"

    def add(self, value: Any, prefix: str = "", separator: str = ": ") -> Formatter:
        """Append ``prefix: value`` (or just the value) when it is present."""
        if is_present(value):
            self.append_inline(self._labeled(value, prefix, separator))
        return self

    def add_with_suffix(
        self,
        value: Any,
        prefix: str = "",
        suffix: str = "",
        separator: str = ": ",
    ) -> Formatter:
        """Like ``add`` with ``suffix`` glued after the value (e.g. units)."""
        if is_present(value):
            self.append_inline(self._labeled(value, prefix, separator, suffix))
        return self

    def add_raw(self, value: Any) -> Formatter:
        if is_present(value):
            self.append_inline(normalize(value))
        return self

    def add_if(
        self, condition: Any, value: Any, prefix: str = "", separator: str = ": "
    ) -> Formatter:
        if condition:
            self.add(value, prefix, separator)
        return self

    def add_break_if(self, condition: Any) -> Formatter:
        if condition:
            self.append_break()
        return self

    def add_line(self, value: Any, prefix: str = "", separator: str = ": ") -> Formatter:
        """Append the value and a break; nothing at all when absent."""
        if is_present(value):
            self.add(value, prefix, separator).append_break()
        return self

    def add_raw_line(self, value: Any) -> Formatter:
        if is_present(value):
            self.add_raw(value).append_break()
        return self

    def add_lines(
        self, values: Iterable[Any], prefix: str = "", separator: str = ": "
    ) -> Formatter:
        """Append each present value on its own line."""
        for value in values:
            self.add_line(value, prefix, separator)
        return self

    def add_from_mapping(
        self, data: Any, key: str, prefix: str = "", separator: str = ": "
    ) -> Formatter:
        """``add(data[key])``; missing keys and non-mapping data are absent."""
        return self.add(lookup(data, Key(key)), prefix, separator)

    def add_line_from_mapping(
        self, data: Any, key: str, prefix: str = "", separator: str = ": "
    ) -> Formatter:
        return self.add_line(lookup(data, Key(key)), prefix, separator)

    def add_multiple(
        self, data: Any, keys: Iterable[str], prefix: str = "", separator: str = ": "
    ) -> Formatter:
        """Append ``data[key]`` for each key on its own line."""
        for key in keys:
            self.add_line_from_mapping(data, key, prefix, separator)
        return self

    # =========================================================================
    # Grouped inline values
    # =========================================================================

    def _append_group(self, values: list[str], inline_delimiter: str | None) -> Formatter:
        if values:
            delimiter = (
                inline_delimiter if inline_delimiter is not None else self._config.item_delimiter
            )
            self.append_inline(delimiter.join(values))
        return self

    def add_inline(
        self,
        data: Any,
        fields: Sequence[FieldSpec],
        inline_delimiter: str | None = None,
        separator: str = ": ",
    ) -> Formatter:
        """Append several fields of ``data`` on one line.

        Absent fields are dropped before joining, so no stray delimiter is
        left where they would have been.

        Args:
            data: Mapping to read values from
            fields: ``Key``/``KeyWithPrefix`` specs, in output order
            inline_delimiter: Joiner override (default: config item delimiter)
            separator: Goes between a prefix and its value
        """
        values = [
            self._labeled(value, field.prefix, separator)
            for field in fields
            if is_present(value := lookup(data, field))
        ]
        return self._append_group(values, inline_delimiter)

    def add_inline_values(
        self, values: Iterable[Any], inline_delimiter: str | None = None
    ) -> Formatter:
        """Append present values on one line, joined by the item delimiter."""
        return self._append_group(
            [normalize(v) for v in values if is_present(v)], inline_delimiter
        )

    def add_inline_line(
        self,
        data: Any,
        fields: Sequence[FieldSpec],
        inline_delimiter: str | None = None,
        separator: str = ": ",
    ) -> Formatter:
        """``add_inline`` followed by a break, only if something was added."""
        before = len(self._parts)
        self.add_inline(data, fields, inline_delimiter, separator)
        if len(self._parts) > before:
            self.append_break()
        return self

    # =========================================================================
    # Tags
    # =========================================================================

    def add_heading(
        self,
        title: Any,
        content: Any = None,
        css_class: str | None = None,
        style: str | None = None,
    ) -> Formatter:
        """Append a title line, optionally followed by raw content.

        Markup mode wraps the title in ``<strong>``; plain text upper-cases it.
        """
        if not is_present(title):
            return self
        self.add_bold(title, css_class, style).append_break()
        return self.add_raw(content)

    def add_bold(
        self, value: Any, css_class: str | None = None, style: str | None = None
    ) -> Formatter:
        if not is_present(value):
            return self
        text = normalize(value)
        if self._config.markup:
            return self.append_inline(
                wrap_tag("strong", text, self.build_attributes(css_class, style))
            )
        return self.append_inline(text.upper())

    def add_bold_line(
        self, value: Any, css_class: str | None = None, style: str | None = None
    ) -> Formatter:
        if is_present(value):
            self.add_bold(value, css_class, style).append_break()
        return self

    def add_tag(
        self,
        tag: str,
        content: Any,
        css_class: str | None = None,
        style: str | None = None,
    ) -> Formatter:
        """Wrap content in ``<tag>`` inline; plain text gets the bare content."""
        if not is_present(content):
            return self
        text = normalize(content)
        if self._config.markup:
            return self.append_inline(wrap_tag(tag, text, self.build_attributes(css_class, style)))
        return self.append_inline(text)

    def add_span(
        self, content: Any, css_class: str | None = None, style: str | None = None
    ) -> Formatter:
        return self.add_tag("span", content, css_class, style)

    add_styled = add_span

    def add_div(
        self, content: Any, css_class: str | None = None, style: str | None = None
    ) -> Formatter:
        """Wrap content in a ``<div>`` block; plain text appends it inline."""
        if not is_present(content):
            return self
        text = normalize(content)
        if self._config.markup:
            return self.append_block(
                wrap_tag("div", text, self.build_attributes(css_class, style))
            )
        return self.append_inline(text)

    def add_styled_line(
        self, content: Any, css_class: str | None = None, style: str | None = None
    ) -> Formatter:
        """A ``<div>`` block in markup mode, content plus break in plain text."""
        if not is_present(content):
            return self
        if self._config.markup:
            return self.add_div(content, css_class, style)
        return self.add_raw(content).append_break()

    def start_container(self, css_class: str | None = None, style: str | None = None) -> Formatter:
        """Open a ``<div>`` that wraps everything up to ``end_container()``."""
        if not self._config.markup:
            return self
        return self.append_container_open(f"<div{self.build_attributes(css_class, style)}>")

    def end_container(self) -> Formatter:
        return self.append_container_close("</div>")

    # =========================================================================
    # Sections
    # =========================================================================

    def split(self) -> Formatter:
        """Freeze the current parts as a finished section and start a new one.

        No-op when nothing has been appended since the last split.
        """
        if self._sections.freeze(self._parts, LineRenderer(self._config)):
            self._parts = []
        return self

    def collect_fragments(self) -> list[str]:
        """Non-blank finalized sections plus the open one, oldest first."""
        current = self._render_current() if self._parts else None
        return self._sections.fragments(current)

    def combine(self, separator: str = "<br>") -> str:
        """Join the present fragments with ``separator``."""
        return combine_fragments(self.collect_fragments(), separator)

    def reset_sections(self) -> Formatter:
        """Forget finalized sections; the current parts are kept."""
        self._sections.reset()
        return self

    @property
    def section_count(self) -> int:
        """Number of sections finalized by ``split()``."""
        return self._sections.count

    # =========================================================================
    # Output and introspection
    # =========================================================================

    def _render_current(self) -> str:
        return LineRenderer(self._config).render(self._parts)

    def render(self, separator: str | None = None) -> str:
        """Render everything appended so far.

        Args:
            separator: Joiner between sections when ``split()`` has been used
                (default: the mode line break). Ignored otherwise.
        """
        if self._sections.has_splits:
            return self.combine(separator or self._config.line_break)
        return self._render_current()

    to_string = render

    def __str__(self) -> str:
        return self.render()

    @property
    def parts(self) -> tuple[Part, ...]:
        return tuple(self._parts)

    def count(self) -> int:
        """Number of parts in the current section."""
        return len(self._parts)

    def is_empty(self) -> bool:
        return not self._parts

    def clear(self) -> Formatter:
        """Drop all parts and sections. Config and pending style are kept."""
        self._parts = []
        self._sections.reset()
        return self

    def __len__(self) -> int:
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)

    def __repr__(self) -> str:
        return (
            f"Formatter(parts={len(self._parts)}, sections={self._sections.count}, "
            f"markup={self._config.markup})"
        )


def create(config: FormatConfig | None = None, **overrides: Any) -> Formatter:
    """Create a Formatter, optionally overriding config fields.

    Example:
        >>> create(markup=True, item_delimiter=" | ").config.item_delimiter
        ' | '
    """
    base = config if config is not None else get_format_config()
    if overrides:
        base = replace(base, **overrides)
    return Formatter(base)
