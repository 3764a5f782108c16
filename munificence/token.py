"""Tokens: the coloured resources players pick from the market."""

from dataclasses import dataclass, field
import random as _random

from .color_set import ColorSet
from .colors import NUM_COLORS

NUM_TOKENS = 25
MAX_COLORS_PER_TOKEN = 2


@dataclass(eq=False)
class Token:
    """A single token on the board.

    Tokens are compared by identity: two tokens holding the same colours are
    still different pieces. Use ``same_colors`` to compare their contents.
    """

    colors: ColorSet = field(default_factory=ColorSet)

    @classmethod
    def simple(cls, color):
        """Return a token holding one resource of ``color``."""
        return cls(ColorSet.simple(color))

    def same_colors(self, other):
        """Return True when both tokens hold exactly the same resources."""
        return self.colors == other.colors

    def display(self, prefix=""):
        """Return the long description of the token after ``prefix``."""
        return f"{prefix}Token({self.colors.display()}"

    def short_display(self):
        """Return the compact description, e.g. ``T(R=1)``."""
        return self.colors.short_display("T")


def _default_tokens(count):
    tokens = []
    for index in range(count):
        color = index % NUM_COLORS
        if index < NUM_COLORS:
            counts = [0] * NUM_COLORS
            counts[color] = 2
            tokens.append(Token(ColorSet(counts)))
        else:
            tokens.append(Token.simple(color))
    return tokens


def make_tokens(seed=0, count=NUM_TOKENS):
    """Create the tokens of a game.

    Seed 0 gives the standard set: one double token per colour followed by
    simple tokens cycling through the colours. Any other seed draws tokens of
    one or two random resources.
    """
    if count < 0:
        raise ValueError("token count cannot be negative")
    if seed == 0:
        return _default_tokens(count)
    rng = _random.Random(seed)
    tokens = []
    for _ in range(count):
        num_resources = rng.randrange(MAX_COLORS_PER_TOKEN) + 1
        tokens.append(Token(ColorSet.random(num_resources, rng)))
    return tokens