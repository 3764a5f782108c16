# munificence

The building blocks of a board game where players collect coloured tokens
from a shared market and spend them to pay costs.

## What is inside

- `munificence.colors`: the `Color` enumeration, `color_to_string` and
  `color_to_short_string`, `color_prefix` (an ANSI escape code for a colour,
  or `""` unless `enabled=True`) and `visible_length`, which measures text
  while ignoring colour escape sequences.
- `munificence.color_set`: `ColorSet`, an immutable count of resources per
  colour in play, with `zero`, `simple`, `random`, `union`, `inter`,
  `num_colors`, `num_resources`, `is_zero`, and `display` / `short_display`,
  which return description strings.
- `munificence.permutation`: `identity` and `random_permutation`, both
  returning tuples of slot indices.
- `munificence.containers`: `BoundedQueue` and `BoundedStack`,
  fixed-capacity containers. Adding to a full one raises `OverflowError`;
  taking from an empty one raises `IndexError`.
- `munificence.vector2`: `Vector2` with addition, negation, `norm`, `norm2`
  (x axis weighted half), `is_inside` and `arrow`, plus `directions`, which
  gives the named unit steps for a grid size.
- `munificence.token`: `Token`, compared by identity (`same_colors` compares
  contents), and `make_tokens`, which builds the tokens for a seed. Seed 0
  gives the fixed default set: one double token per colour, then simple
  tokens cycling through the colours.
- `munificence.skills`: `SkillId`, `skill_string` and `SkillRegistry`, which
  ties up to three skills to each trigger object (a token, for example) and
  answers `skills_of`, `has_skills`, `num_skills` and `describe`.
- `munificence.market`: `Market`, a row of token slots, with `populate`,
  `pick`, `pay` (into the first free slot along the placement permutation),
  `num_tokens`, `first_available`, `shuffle`, `linked_tokens`, `filtered` and
  `copy`, plus `assign_token_skills`, which gives each token each token skill
  with a 1 in 25 chance.
- `munificence.can_buy`: the payment search. `is_buyable` deducts the
  colour sets that builders provide from a cost, then finds the most
  efficient subset of a market's tokens that covers what is left, returned
  as a market (empty when the cost cannot be paid). `can_buy` tells whether
  a payment was found. `efficiency`, `compare_markets`, `best_market`,
  `find_best_payment`, `can_use_market` and `is_usable` are the pieces it is
  built from.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from munificence.color_set import ColorSet
from munificence.colors import Color
from munificence.market import Market
from munificence.token import Token
from munificence.can_buy import is_buyable, can_buy

market = Market()
for color in (Color.BLACK, Color.BLUE, Color.BLUE):
    market.pay(Token.simple(color))

cost = ColorSet.simple(Color.BLUE).union(ColorSet.simple(Color.BLACK))
payment = is_buyable(cost, market, [])
print(can_buy(payment), payment.num_tokens())  # True 2
```

Randomised operations take an optional `random.Random` instance so that
results can be replayed from a seed.

## What it does not do

This package is the model layer only. It has no builders, guild, players,
turns or game loop, and no command to play a game. The skill registry
records which skills a token carries, but the effects of skills are not
carried out here. Display helpers return strings; nothing draws a board on
screen.