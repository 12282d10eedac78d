"""Shared constants for the editing engine."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
CURSOR_HOME = f"{CSI}H"
CLEAR_LINE = f"{CSI}K"
INVERT_ON = f"{CSI}7m"
INVERT_OFF = f"{CSI}m"
DEFAULT_COLORS = f"{CSI}39;49m"
DEFAULT_FG = f"{CSI}39m"

# Columns a tab occupies in the render form
TAB_STOP = 4

# Rows reserved below the text view (status bar + message bar)
RESERVED_ROWS = 2

# Standard 8-color SGR foreground codes; add 10 for the background variant
COLORS_8 = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}
BG_OFFSET = 10
DEFAULT_BG = 49

GUTTER_COLOR = COLORS_8["green"]
FILLER = "~"
