"""Token colours, their names and the terminal escape codes used to show them."""

from enum import IntEnum

NUM_COLORS = 5
MAX_COLORS = 10

ESCAPE = "\033"

RESET = "\033[0m"
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[0;33m"
BLUE = "\033[0;34m"
HIGH_BLACK = "\033[0;90m"
HIGH_CYAN = "\033[0;96m"


class Color(IntEnum):
    """Every colour a resource can have; only the first NUM_COLORS are in play."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    RED = 3
    WHITE = 4
    GOLD = 5
    PEARL = 6
    AQUAMARINE = 7
    OCTARINE = 8
    CHESTNUT = 9


_NAMES = {
    Color.BLACK: "Black",
    Color.BLUE: "Blue",
    Color.GREEN: "Green",
    Color.RED: "Red",
    Color.WHITE: "White",
    Color.GOLD: "Gold",
    Color.PEARL: "Pearl",
    Color.AQUAMARINE: "Aquamarine",
    Color.OCTARINE: "Octarine",
    Color.CHESTNUT: "Chestnut",
}

_SHORT_NAMES = {
    Color.BLACK: "K",
    Color.BLUE: "B",
    Color.GREEN: "G",
    Color.RED: "R",
    Color.WHITE: "W",
    Color.GOLD: "D",
    Color.PEARL: "P",
    Color.AQUAMARINE: "A",
    Color.OCTARINE: "O",
    Color.CHESTNUT: "C",
}

_PREFIXES = {
    Color.BLACK: HIGH_BLACK,
    Color.BLUE: BLUE,
    Color.GREEN: GREEN,
    Color.RED: RED,
}


def color_to_string(color):
    """Return the full name of a colour."""
    return _NAMES[Color(color)]


def color_to_short_string(color):
    """Return the one-letter name of a colour."""
    return _SHORT_NAMES[Color(color)]


def color_prefix(color, enabled=False):
    """Return the escape code that paints text in ``color``, or "" when disabled."""
    if not enabled:
        return ""
    return _PREFIXES.get(Color(color), RESET)


def visible_length(text):
    """Return the length of ``text`` as shown on a terminal, ignoring colour codes."""
    size = 0
    in_code = False
    for char in text:
        if char == ESCAPE:
            in_code = True
        elif in_code:
            if char == "m":
                in_code = False
        else:
            size += 1
    return size