import random

import pytest

from munificence.can_buy import (
    best_market,
    can_buy,
    can_use_market,
    compare_markets,
    efficiency,
    find_best_payment,
    is_buyable,
    is_usable,
)
from munificence.color_set import ColorSet
from munificence.colors import NUM_COLORS
from munificence.market import Market
from munificence.token import Token

COST = ColorSet((1, 2, 2, 1, 1))


def _market_of(tokens):
    market = Market()
    for token in tokens:
        market.pay(token)
    return market


def _simple_tokens(cost):
    return [Token.simple(color) for color in range(NUM_COLORS) for _ in range(cost[color])]


def _complex_tokens(cost, rng):
    tokens = []
    for color in range(NUM_COLORS):
        for _ in range(cost[color]):
            counts = [0] * NUM_COLORS
            counts[color] = 1
            counts[rng.randrange(NUM_COLORS)] += 1
            tokens.append(Token(ColorSet(counts)))
    return tokens


def test_is_usable():
    assert is_usable(ColorSet((1, 0, 0)), ColorSet((2, 0, 0))) is True
    assert is_usable(ColorSet((1, 0, 0)), ColorSet((0, 3, 0))) is False


def test_can_use_market():
    tokens = [Token.simple(0), Token.simple(1)]
    assert can_use_market(ColorSet((1, 1)), tokens) is True
    assert can_use_market(ColorSet((2, 1)), tokens) is False


def test_can_use_empty_market_never_pays():
    assert can_use_market(ColorSet.zero(), []) is False


def test_efficiency_values():
    assert efficiency([Token(ColorSet((1, 1, 2)))], ColorSet((1, 0, 1))) == pytest.approx(1.0)
    assert efficiency([Token.simple(0)], ColorSet((1, 1))) == pytest.approx(0.5)


def test_efficiency_of_nothing_to_pay_raises():
    with pytest.raises(ValueError):
        efficiency([Token.simple(0)], ColorSet.zero())


def test_compare_prefers_fewer_tokens_at_same_efficiency():
    to_pay = ColorSet((1, 1))
    one = [Token(ColorSet((1, 1)))]
    two = [Token.simple(0), Token.simple(1)]
    assert compare_markets(one, two, to_pay) == 1
    assert compare_markets(two, one, to_pay) == -1
    assert compare_markets(two, two, to_pay) == 0


def test_compare_worse_efficiency_loses():
    to_pay = ColorSet((1, 1))
    exact = [Token.simple(0), Token.simple(1)]
    wasteful = [Token(ColorSet((1, 1))), Token.simple(0)]
    assert compare_markets(wasteful, exact, to_pay) == -1
    # a better first market with the same token count compares equal
    assert compare_markets(exact, wasteful, to_pay) == 0


def test_best_market_keeps_second_on_tie():
    to_pay = ColorSet((1,))
    first = [Token.simple(0)]
    second = [Token.simple(0)]
    assert best_market(first, second, to_pay) is second


def test_buyable_with_simple_tokens():
    market = _market_of(_simple_tokens(COST))
    payment = is_buyable(COST, market)
    assert can_buy(payment) is True
    assert payment.num_tokens() == COST.num_resources()


def test_not_buyable_after_removing_a_token():
    market = _market_of(_simple_tokens(COST))
    index = market.linked_tokens(1, random.Random(3))
    market.pick(market.slots[index])
    assert can_buy(is_buyable(COST, market)) is False


@pytest.mark.parametrize("seed", [0, 1, 2, 7])
def test_buyable_with_complex_tokens(seed):
    market = _market_of(_complex_tokens(COST, random.Random(seed)))
    assert can_buy(is_buyable(COST, market)) is True


@pytest.mark.parametrize("seed", [0, 1, 2, 7])
def test_best_way_to_pay_uses_single_full_token(seed):
    market = _market_of(_complex_tokens(COST, random.Random(seed)))
    full = Token(COST)
    market.pay(full)
    payment = is_buyable(COST, market)
    assert payment.num_tokens() == 1
    assert full in payment


def test_provided_colors_lower_the_cost():
    market = _market_of([Token.simple(0)])
    cost = ColorSet((1, 1))
    assert can_buy(is_buyable(cost, market)) is False
    payment = is_buyable(cost, market, [ColorSet((0, 1))])
    assert can_buy(payment) is True
    assert list(payment) == list(market)


def test_cost_fully_provided_is_not_payable_with_tokens():
    market = _market_of([Token.simple(0)])
    assert can_buy(is_buyable(ColorSet((1,)), market, [ColorSet((1,))])) is False


def test_find_best_payment_empty_when_impossible():
    market = _market_of([Token.simple(0)])
    assert find_best_payment(market, ColorSet((0, 1))).num_tokens() == 0


def test_find_best_payment_leaves_source_untouched():
    tokens = _simple_tokens(ColorSet((1, 1)))
    market = _market_of(tokens)
    payment = find_best_payment(market, ColorSet((1, 1)))
    assert payment.slots[:2] == tokens
    assert market.num_tokens() == 2


def test_can_buy_none():
    assert can_buy(None) is False