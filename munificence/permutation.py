"""Permutations of slot indices."""

import random as _random


def identity(size):
    """Return the identity permutation of ``size`` elements."""
    return tuple(range(size))


def random_permutation(size, rng=None):
    """Return a uniformly shuffled permutation of ``size`` elements."""
    rng = rng or _random.Random()
    order = list(range(size))
    for index in range(size):
        other = index + rng.randrange(size - index)
        order[index], order[other] = order[other], order[index]
    return tuple(order)