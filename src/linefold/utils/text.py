"""Markup text helpers for Linefold.

Example:
    >>> from linefold.utils.text import escape_html, format_attributes
    >>> escape_html('a "b"')
    'a &quot;b&quot;'
    >>> format_attributes("note", None)
    ' class="note"'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters for safe use in attributes.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text safe for use in a double-quoted attribute value

    Examples:
        >>> escape_html("<b class='x'>")
        '&lt;b class=&#x27;x&#x27;&gt;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)


def format_attributes(css_class: str | None, style: str | None) -> str:
    """Build a ``class``/``style`` attribute fragment.

    Empty or None values are omitted. Values are escaped.

    Returns:
        "" when nothing is set, otherwise the attributes with a leading space
    """
    attributes: list[str] = []
    if css_class:
        attributes.append(f'class="{escape_html(css_class)}"')
    if style:
        attributes.append(f'style="{escape_html(style)}"')
    return " " + " ".join(attributes) if attributes else ""


def wrap_tag(tag: str, content: str, attributes: str = "") -> str:
    """Wrap content in an open/close tag pair."""
    return f"<{tag}{attributes}>{content}</{tag}>"
