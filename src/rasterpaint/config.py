"""
Configuration & Global Constants
================================
This module serves as the central registry for drawing constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (hand ratios, timer intervals,
   canvas margins) scattered throughout the code.
2. Consistency: The model layer and the Qt shell read the same defaults.

Exports:
    INK_RGBA (tuple): Colour written by the pen (opaque black).
    DEFAULT_TOOL (str): Tool selected when a session starts.
    TICK_INTERVAL_MS (int): Period of the clock animation timer.
    SECONDS_HAND_RATIO, MINUTES_HAND_RATIO, HOURS_HAND_RATIO (float):
        Hand lengths as a fraction of the clock radius.
    DEFAULT_HOUR_FORMULA (str): Hour-hand angle formula ("legacy" or "standard").
    DEFAULT_CANVAS_SIZE, CANVAS_MARGIN (tuple), TOOLBAR_HEIGHT (int):
        Canvas sizing when the window is laid out.
"""
from typing import Final

# Pixels
INK_RGBA: Final[tuple[int, int, int, int]] = (0, 0, 0, 255)
OPAQUE: Final[int] = 255

# Tools
DEFAULT_TOOL: Final[str] = "line"

# Clock
TICK_INTERVAL_MS: Final[int] = 1000
SECONDS_HAND_RATIO: Final[float] = 0.95
MINUTES_HAND_RATIO: Final[float] = 0.75
HOURS_HAND_RATIO: Final[float] = 0.55

# "legacy" reproduces the original hour-hand angle, "standard" is the usual 12-hour dial
DEFAULT_HOUR_FORMULA: Final[str] = "legacy"

# Canvas (Qt shell); the buffer fills the screen minus the toolbar row and margins
DEFAULT_CANVAS_SIZE: Final[tuple[int, int]] = (1024, 640)
CANVAS_MARGIN: Final[tuple[int, int]] = (2, 8)
TOOLBAR_HEIGHT: Final[int] = 150
