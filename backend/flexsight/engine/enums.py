"""Closed vocabularies shared by every layer."""

from __future__ import annotations

import enum


class SizeSpec(str, enum.Enum):
    """Per-axis sizing mode."""

    UNKNOWN = ""
    # Explicit pixels
    FIXED = "Fixed"
    # Driven by content
    AUTO = "Auto"
    # Allocated by the parent, e.g. flex-1 or stretch
    CONSTRAINED = "Constrained"


class Direction(str, enum.Enum):
    UNSET = ""
    ROW = "Row"
    COLUMN = "Column"


class Role(str, enum.Enum):
    PAGE = "page"
    BORDER = "border"
    DIVIDER = "divider"
    LIST_X = "list-x"
    LIST_Y = "list-y"
    LIST_WRAP = "list-wrap"
    LIST_ITEM = "list-item"
    SCROLLER = "scroller"
    BTN = "btn"
    TAB = "tab"
    DIALOG = "dialog"


LIST_ROLES = frozenset({Role.LIST_X, Role.LIST_Y, Role.LIST_WRAP})


class BuildStage(str, enum.Enum):
    PRE = "pre"
    TREE = "tree"
    FULL = "full"
