"""ContextVar-based format configuration for Linefold.

A FormatConfig holds the mode flags the renderer reads: markup vs plain text,
auto-clean, the default item delimiter and the delimiter set stripped from
line edges. New Formatter instances start from the config of the current
context, so an application can switch defaults without threading a config
through every call site.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so setting a default in one thread never leaks into another.

Usage:
    # Per formatter
    fmt = Formatter(FormatConfig(markup=True))

    # Default for every formatter created inside the block
    with format_config_context(FormatConfig(markup=True, item_delimiter=" | ")):
        html = Formatter().add("x").render()

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from linefold.errors import ConfigError

# Order matters: the cleaner tries them in sequence on every pass
CLEAN_DELIMITERS: tuple[str, ...] = (
    ", ",
    ",",
    ": ",
    ":",
    "; ",
    ";",
    " - ",
    "-",
    " | ",
    "|",
)

MARKUP_LINE_BREAK = "<br>"
TEXT_LINE_BREAK = "\n"


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable format configuration.

    Formatter toggles (``markup_mode()``, ``with_delimiter()`` ...) swap in a
    modified copy rather than mutating this object, so a config can be shared
    freely.

    Attributes:
        markup: Emit HTML tags and ``<br>`` line breaks instead of plain text
        auto_clean: Strip dangling delimiters from line edges while rendering
        item_delimiter: Joiner for grouped inline values
        clean_delimiters: Tokens the line cleaner strips, in order
        block_tags: Tags whose builder-made blocks are exempt from cleaning

    """

    markup: bool = False
    auto_clean: bool = True
    item_delimiter: str = ", "
    clean_delimiters: tuple[str, ...] = CLEAN_DELIMITERS
    block_tags: tuple[str, ...] = ("div",)

    def __post_init__(self) -> None:
        if any(not d for d in self.clean_delimiters):
            raise ConfigError("clean_delimiters", "delimiters must be non-empty strings")
        if any(not t for t in self.block_tags):
            raise ConfigError("block_tags", "tag names must be non-empty strings")

    @property
    def line_break(self) -> str:
        """Line-break token for the current mode."""
        return MARKUP_LINE_BREAK if self.markup else TEXT_LINE_BREAK

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "FormatConfig":
        """Create FormatConfig from a dictionary.

        Useful when settings come from YAML/TOML/JSON. Unknown keys are
        silently ignored; list values are converted to tuples.

        Example:
            >>> config = FormatConfig.from_dict({
            ...     "markup": True,
            ...     "block_tags": ["div", "section"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.block_tags
            ('div', 'section')

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {
            k: tuple(v) if isinstance(v, list) else v
            for k, v in config_dict.items()
            if k in valid_fields
        }
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FormatConfig = FormatConfig()

_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get the format configuration of the current context."""
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set the default format configuration for the current context.

    Only affects Formatter instances created afterwards.
    """
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to the module default configuration."""
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for a temporary default config.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with format_config_context(FormatConfig(markup=True)):
        ...     get_format_config().markup
        True
        >>> get_format_config().markup
        False

    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "CLEAN_DELIMITERS",
    "FormatConfig",
    "format_config_context",
    "get_format_config",
    "reset_format_config",
    "set_format_config",
]
