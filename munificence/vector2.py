"""Two-dimensional vectors for laying out the board."""

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Vector2:
    """A point or displacement on the display grid."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __neg__(self):
        return Vector2(-self.x, -self.y)

    def __str__(self):
        return f"Vec2: (x, y) = ({self.x:f}, {self.y:f})"

    def norm(self):
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm2(self):
        """Return a length that weighs the x axis half, matching text cells."""
        return math.sqrt(0.25 * self.x * self.x + self.y * self.y)

    def is_inside(self, top_left, bottom_right):
        """Return True when strictly inside the rectangle given by two corners."""
        if self.x - top_left.x < 1 or self.x >= bottom_right.x:
            return False
        if self.y - top_left.y < 1 or self.y >= bottom_right.y:
            return False
        return True

    def arrow(self, line_size):
        """Return the arrow for a unit step of ``line_size``, "•" for zero, else ""."""
        arrows = {
            "right": "→",
            "left": "←",
            "down": "↓",
            "up": "↑",
            "zero": "•",
        }
        steps = directions(line_size)
        for name, char in arrows.items():
            if self == steps[name]:
                return char
        return ""


def directions(line_size):
    """Return the named unit steps for a grid of ``line_size``."""
    return {
        "zero": Vector2(0, 0),
        "ones": Vector2(line_size, line_size),
        "up": Vector2(0, -line_size),
        "down": Vector2(0, line_size),
        "left": Vector2(-line_size, 0),
        "right": Vector2(line_size, 0),
    }