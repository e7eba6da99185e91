"""Main/cross axis lookup for Row and Column containers."""

from __future__ import annotations

from dataclasses import dataclass

from flexsight.engine.enums import Direction


@dataclass(frozen=True)
class Axis:
    start: str
    end: str
    dimension: str
    # Token axis for symmetric utilities (px, space-x, my, ...)
    name: str

    @property
    def horizontal(self) -> bool:
        return self.name == "x"

    @property
    def s(self) -> str:
        return self.start[0]

    @property
    def e(self) -> str:
        return self.end[0]


X_AXIS = Axis("left", "right", "width", "x")
Y_AXIS = Axis("top", "bottom", "height", "y")


def main_axis(direction: Direction) -> Axis:
    return Y_AXIS if direction == Direction.COLUMN else X_AXIS


def cross_axis(direction: Direction) -> Axis:
    return X_AXIS if direction == Direction.COLUMN else Y_AXIS
