"""The market: slots of tokens, filled in the order of a permutation."""

import random as _random

from .permutation import identity, random_permutation
from .skills import MAX_SKILLS_PER_TRIGGER, TOKEN_SKILLS
from .token import NUM_TOKENS


class Market:
    """A fixed number of slots, each empty or holding a token.

    Paid tokens go to the first free slot in ``permutation`` order.
    """

    def __init__(self, size=NUM_TOKENS, permutation=None):
        if size < 0:
            raise ValueError("market size cannot be negative")
        self.slots = [None] * size
        self.permutation = identity(size) if permutation is None else tuple(permutation)
        if sorted(self.permutation) != list(range(size)):
            raise ValueError("permutation must order every slot exactly once")

    def __contains__(self, token):
        return any(slot is token for slot in self.slots)

    def __iter__(self):
        return (slot for slot in self.slots if slot is not None)

    @property
    def size(self):
        return len(self.slots)

    def populate(self, tokens, rng=None):
        """Fill the slots with ``tokens`` and draw a random payment order."""
        tokens = list(tokens)
        if len(tokens) > self.size:
            raise ValueError("more tokens than market slots")
        self.permutation = random_permutation(self.size, rng)
        self.slots = tokens + [None] * (self.size - len(tokens))

    def pick(self, token):
        """Remove ``token`` from its slot and return it."""
        for index, slot in enumerate(self.slots):
            if slot is token:
                self.slots[index] = None
                return token
        raise ValueError("token is not in the market")

    def pay(self, token):
        """Put ``token`` in the first free slot by permutation order; return the slot."""
        for index in self.permutation:
            if self.slots[index] is None:
                self.slots[index] = token
                return index
        raise OverflowError("market is full")

    def num_tokens(self):
        """Return how many slots hold a token."""
        return sum(1 for slot in self.slots if slot is not None)

    def first_available(self):
        """Return the index of the first occupied slot, or None if empty."""
        return next((i for i, slot in enumerate(self.slots) if slot is not None), None)

    def shuffle(self, rng=None):
        """Shuffle the slots in place."""
        (rng or _random.Random()).shuffle(self.slots)

    def linked_tokens(self, nb, rng=None):
        """Return the start of a random run of ``nb`` adjacent tokens, or None."""
        if nb < 1:
            raise ValueError("a run holds at least one token")
        starts = []
        count = 0
        for index, slot in enumerate(self.slots):
            if slot is None:
                count = 0
                continue
            count += 1
            if count >= nb:
                starts.append(index - nb + 1)
        if not starts:
            return None
        return (rng or _random.Random()).choice(starts)

    def filtered(self, colors):
        """Return the tokens that share at least one colour with ``colors``."""
        return [token for token in self if not token.colors.inter(colors).is_zero()]

    def copy(self):
        """Return a market with the same slots and order, independent of this one."""
        other = Market(self.size, self.permutation)
        other.slots = list(self.slots)
        return other


def assign_token_skills(registry, tokens, rng=None):
    """Give each token each token skill with a 1 in NUM_TOKENS chance."""
    rng = rng or _random.Random()
    for token in tokens:
        skills = []
        for skill in TOKEN_SKILLS:
            if len(skills) < MAX_SKILLS_PER_TRIGGER and rng.randrange(NUM_TOKENS) < 1:
                skills.append(skill)
        registry.add(token, skills)