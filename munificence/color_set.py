"""Multisets of colours: costs, provisions and token contents."""

from dataclasses import dataclass
import random as _random

from .colors import NUM_COLORS, Color, color_to_short_string


@dataclass(frozen=True)
class ColorSet:
    """A count of resources for each colour in play."""

    counts: tuple = ()

    def __post_init__(self):
        counts = tuple(int(n) for n in self.counts)
        if len(counts) > NUM_COLORS:
            raise ValueError(f"a colour set holds at most {NUM_COLORS} counts")
        if any(n < 0 for n in counts):
            raise ValueError("colour counts cannot be negative")
        object.__setattr__(self, "counts", counts + (0,) * (NUM_COLORS - len(counts)))

    @classmethod
    def zero(cls):
        """Return the empty set."""
        return cls()

    @classmethod
    def simple(cls, color):
        """Return a set holding one resource of ``color``."""
        color = Color(color)
        if color >= NUM_COLORS:
            raise ValueError(f"colour {color.name} is not in play")
        counts = [0] * NUM_COLORS
        counts[color] = 1
        return cls(counts)

    @classmethod
    def random(cls, num_colors, rng=None):
        """Return a set of ``num_colors`` resources, each of a random colour."""
        rng = rng or _random.Random()
        counts = [0] * NUM_COLORS
        for _ in range(num_colors):
            counts[rng.randrange(NUM_COLORS)] += 1
        return cls(counts)

    def __getitem__(self, color):
        return self.counts[color]

    def __iter__(self):
        return iter(self.counts)

    def union(self, other):
        """Return the sum of both sets, colour by colour."""
        return ColorSet(a + b for a, b in zip(self.counts, other.counts))

    def inter(self, other):
        """Return the smaller count of each colour present in both sets."""
        return ColorSet(min(a, b) for a, b in zip(self.counts, other.counts))

    def num_colors(self):
        """Return how many colours have a non-zero count."""
        return sum(1 for n in self.counts if n)

    def num_resources(self):
        """Return the total number of resources."""
        return sum(self.counts)

    def is_zero(self):
        """Return True when the set holds nothing."""
        return not any(self.counts)

    def display(self):
        """Return the long description of the non-zero colours."""
        return "".join(
            f"{color_to_short_string(i)}={i} (Q:{n}),"
            for i, n in enumerate(self.counts)
            if n
        )

    def short_display(self, prefix):
        """Return the compact description, e.g. ``T(R=1)``."""
        body = "".join(
            f"{color_to_short_string(i)}={n}"
            for i, n in enumerate(self.counts)
            if n
        )
        return f"{prefix}({body})"