"""Shared spatial constants for the build and measure layers.

Design tools export bounds with sub-pixel rounding noise. Every geometric
comparison absorbs it with a fixed pixel tolerance instead of a fraction of
the canvas, because layout tokens are emitted in absolute pixels.
"""

# Two pixels absorbs rounding of both edges of a box.
DEFAULT_TOLERANCE = 2.0

# Boxes this thin are hairlines: borders when flush with an edge, dividers otherwise.
HAIRLINE_THICKNESS = 1.0

# A run needs at least this many instances to become a list.
MIN_REPEAT_COUNT = 2

# Single-line text box wider than its content by more than one em is treated as fixed width.
TEXT_EXCESS_EM = 1.0
