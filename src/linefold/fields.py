"""Field specs for grouped inline appends.

``Formatter.add_inline`` takes an explicit, ordered sequence of field specs
instead of guessing the shape of its keys argument:

    >>> fields = [Key("name"), KeyWithPrefix("mobile", "M"), KeyWithPrefix("pan", "PAN")]
    >>> Formatter().add_inline({"name": "Asha", "pan": "X1"}, fields).render()
    'Asha, PAN: X1'

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Key:
    """Look up ``name`` and render the value alone."""

    name: str | None

    @property
    def prefix(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class KeyWithPrefix:
    """Look up ``name`` and render ``prefix + separator + value``."""

    name: str | None
    prefix: str = ""


FieldSpec = Key | KeyWithPrefix


def lookup(data: Any, field: FieldSpec) -> Any:
    """Return the value for ``field`` or None when it cannot be found.

    A missing name, a missing key, or non-mapping data all count as absent.
    """
    if field.name is None or not isinstance(data, Mapping):
        return None
    return data.get(field.name)


__all__ = ["FieldSpec", "Key", "KeyWithPrefix", "lookup"]
