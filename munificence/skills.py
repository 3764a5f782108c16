"""Skills attached to builders and tokens, and the registry linking them."""

from enum import IntEnum

MAX_SKILLS_PER_TRIGGER = 3


class SkillId(IntEnum):
    """Identifiers of every skill in the game."""

    NO_SKILL = 0
    TOKEN_ROB = 1
    TURN_ROB = 2
    GENTRY_MASTER = 3
    MASTERS_HAND = 4
    MARKET_PANIC = 5
    FAVOR_ROB = 6
    GUILD_PANIC = 7


BUILDER_FIRST_SKILL = SkillId.TOKEN_ROB
BUILDER_LAST_SKILL = SkillId.MASTERS_HAND
TOKEN_FIRST_SKILL = SkillId.MARKET_PANIC
TOKEN_LAST_SKILL = SkillId.GUILD_PANIC
NUM_SKILLS = TOKEN_LAST_SKILL + 1

BUILDER_SKILLS = tuple(SkillId(i) for i in range(BUILDER_FIRST_SKILL, BUILDER_LAST_SKILL + 1))
TOKEN_SKILLS = tuple(SkillId(i) for i in range(TOKEN_FIRST_SKILL, TOKEN_LAST_SKILL + 1))

_STRINGS = {
    SkillId.NO_SKILL: "no skill",
    SkillId.TOKEN_ROB: "token_rob",
    SkillId.TURN_ROB: "turn_rob",
    SkillId.GENTRY_MASTER: "gentry master",
    SkillId.MASTERS_HAND: "masters_hand",
    SkillId.MARKET_PANIC: "market_panic",
    SkillId.FAVOR_ROB: "favor_rob",
    SkillId.GUILD_PANIC: "guild_panic",
}


def skill_string(skill_id):
    """Return the name of a skill."""
    return _STRINGS[SkillId(skill_id)]


class SkillRegistry:
    """Links trigger objects (builders, tokens) to up to three skills each.

    Triggers are matched by identity. ``capacity`` bounds the number of
    distinct triggers; None means no bound.
    """

    def __init__(self, capacity=None):
        self.capacity = capacity
        self._entries = {}

    def __len__(self):
        return len(self._entries)

    def __contains__(self, trigger):
        return id(trigger) in self._entries

    def add(self, trigger, skills):
        """Attach ``skills`` to ``trigger``, replacing any it already had."""
        if trigger is None:
            raise ValueError("a skill trigger cannot be None")
        skills = tuple(SkillId(s) for s in skills)
        if len(skills) > MAX_SKILLS_PER_TRIGGER:
            raise ValueError(f"at most {MAX_SKILLS_PER_TRIGGER} skills per trigger")
        padded = skills + (SkillId.NO_SKILL,) * (MAX_SKILLS_PER_TRIGGER - len(skills))
        key = id(trigger)
        if (
            key not in self._entries
            and self.capacity is not None
            and len(self._entries) >= self.capacity
        ):
            raise OverflowError("no room left for another skill trigger")
        self._entries[key] = (trigger, padded)

    def skills_of(self, trigger):
        """Return the skill slots of ``trigger``, or () if it has none."""
        entry = self._entries.get(id(trigger))
        return entry[1] if entry else ()

    def has_skills(self, trigger):
        """Return True when the first skill slot of ``trigger`` holds a real skill."""
        skills = self.skills_of(trigger)
        return bool(skills) and skills[0] != SkillId.NO_SKILL

    def num_skills(self, trigger):
        """Return how many real skills ``trigger`` carries."""
        return sum(1 for s in self.skills_of(trigger) if s != SkillId.NO_SKILL)

    def reset(self):
        """Forget every trigger."""
        self._entries.clear()

    def describe(self, trigger):
        """Return one line per skill that ``trigger`` executes."""
        if not self.has_skills(trigger):
            return []
        return [
            f"{skill_string(s)} skill execute"
            for s in self.skills_of(trigger)
            if s != SkillId.NO_SKILL
        ]