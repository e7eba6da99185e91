"""Structured style tokens.

A token is a ``(property, axis, value)`` record: ``mt-10`` is
``StyleToken("m", "t", 10)``, ``w-100`` is ``StyleToken("w", None, 100)`` and
``items-center`` is the keyword ``StyleToken("items-center")``. Turning tokens
into literal class strings belongs to the renderer; ``str()`` is only a debug
spelling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flexsight.engine.context import Node

# Spacing properties whose zero value carries no information.
_SPACING = frozenset({"m", "p", "space", "gap"})
# Properties spelled without a dash between property and axis (mt, px, ...).
_FUSED_AXIS = frozenset({"m", "p"})


@dataclass(frozen=True)
class StyleToken:
    property: str
    axis: str | None = None
    value: float | None = None

    @property
    def is_keyword(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        if self.value is None:
            return self.property
        value = _format_number(self.value)
        if self.axis is None:
            return f"{self.property}-{value}"
        if self.property in _FUSED_AXIS:
            return f"{self.property}{self.axis}-{value}"
        return f"{self.property}-{self.axis}-{value}"

    def to_dict(self) -> dict[str, object]:
        return {"property": self.property, "axis": self.axis, "value": self.value}


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def keyword(name: str) -> StyleToken:
    return StyleToken(name)


def add_keyword(node: Node, name: str) -> None:
    node.class_list.append(StyleToken(name))


def add_spacing(node: Node, prop: str, axis: str, value: float) -> None:
    """Append a margin/padding/space token, skipping zero values."""
    value = round(float(value), 2)
    if prop in _SPACING and value == 0:
        return
    node.class_list.append(StyleToken(prop, axis, value))


def add_size(node: Node, prop: str, value: float) -> None:
    """Append a dimension (``w``/``h``) or offset (``left``/``top``/...) token."""
    node.class_list.append(StyleToken(prop, None, round(float(value), 2)))


def has_keyword(node: Node, *names: str) -> bool:
    return any(t.is_keyword and t.property in names for t in node.class_list)


def class_names(node: Node) -> list[str]:
    """Debug spelling of a node's tokens, in emission order."""
    return [str(t) for t in node.class_list]
