"""
Linefold: fluent text and markup assembly

Append labeled values, breaks, blocks and containers in order; Linefold
renders them as plain text or HTML, skipping absent values and repairing
the punctuation they leave behind.

Quick Start:
    >>> from linefold import Formatter, KeyWithPrefix
    >>> customer = {"name": "Asha", "mobile": "", "pan": "ABCDE1234F"}
    >>> fmt = Formatter()
    >>> fmt.add_line(customer["name"], "Customer")
    Formatter(parts=2, sections=0, markup=False)
    >>> fmt.add_inline(customer, [KeyWithPrefix("mobile", "M"), KeyWithPrefix("pan", "PAN")])
    Formatter(parts=3, sections=0, markup=False)
    >>> print(fmt)
    Customer: Asha
    PAN: ABCDE1234F

    >>> # HTML output with one-shot styling
    >>> from linefold import create
    >>> create(markup=True).with_class("label").add_bold("Total").add(0, "").render()
    '<strong class="label">Total</strong>0'

Sections:
    >>> fmt = Formatter().add("A").split().add("B")
    >>> fmt.combine(" | ")
    'A | B'

Installation:
    pip install linefold             # zero runtime dependencies
    pip install linefold[test]       # + pytest, hypothesis
"""

from linefold.config import (
    CLEAN_DELIMITERS,
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from linefold.errors import ConfigError, LinefoldError, PartError, RenderError
from linefold.fields import FieldSpec, Key, KeyWithPrefix
from linefold.formatter import Formatter, PendingStyle, create
from linefold.parts import Part, PartKind
from linefold.presence import is_present, normalize
from linefold.renderers.lines import LineRenderer, clean_line, render_parts
from linefold.renderers.protocol import PartRenderer

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022, grouped by category for maintainability
    # Version
    "__version__",
    # Builder
    "Formatter",
    "PendingStyle",
    "create",
    # Parts
    "Part",
    "PartKind",
    # Fields
    "FieldSpec",
    "Key",
    "KeyWithPrefix",
    # Presence
    "is_present",
    "normalize",
    # Renderer
    "LineRenderer",
    "PartRenderer",
    "clean_line",
    "render_parts",
    # Configuration (ContextVar-based)
    "CLEAN_DELIMITERS",
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
    # Errors
    "LinefoldError",
    "ConfigError",
    "PartError",
    "RenderError",
]
