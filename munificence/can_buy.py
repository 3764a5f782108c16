"""Deciding whether a cost can be paid, and choosing the tokens to pay it with."""

from .color_set import ColorSet
from .market import Market

_SAME_EFFICIENCY = 0.005


def _colors_of(token):
    return token.colors


def is_usable(colors, cost):
    """Return True when ``colors`` holds some colour that ``cost`` asks for."""
    return any(have and need for have, need in zip(colors, cost))


def can_use_market(to_pay, market):
    """Return True when the tokens of ``market`` together cover ``to_pay``.

    An empty market never pays, not even for an empty cost.
    """
    left = list(to_pay)
    for token in market:
        left = [max(need - have, 0) for need, have in zip(left, _colors_of(token))]
        if not any(left):
            return True
    return False


def efficiency(market, to_pay):
    """Return the summed share of ``to_pay`` that each token of ``market`` covers.

    A token's share is the number of resources it has in common with
    ``to_pay`` divided by the number of resources in ``to_pay``; a payment
    that uses every resource exactly once scores 1.
    """
    total = to_pay.num_resources()
    if total == 0:
        raise ValueError("nothing to pay")
    return sum(_colors_of(token).inter(to_pay).num_resources() / total for token in market)


def _num_tokens(market):
    return sum(1 for _ in market)


def compare_markets(first, second, to_pay):
    """Return 1 if ``first`` pays ``to_pay`` better, -1 if ``second`` does, else 0.

    Markets whose efficiency is close to 1 are better. When ``first`` is not
    noticeably further from 1 than ``second``, the one with fewer tokens wins.
    """
    first_dist = abs(efficiency(first, to_pay) - 1)
    second_dist = abs(efficiency(second, to_pay) - 1)

    if first_dist - second_dist < _SAME_EFFICIENCY:
        first_count = _num_tokens(first)
        second_count = _num_tokens(second)
        if first_count == second_count:
            return 0
        return 1 if first_count < second_count else -1

    if first_dist < second_dist:
        return 1
    if first_dist > second_dist:
        return -1
    return 0


def best_market(first, second, to_pay):
    """Return ``first`` if it strictly pays ``to_pay`` better, else ``second``."""
    return first if compare_markets(first, second, to_pay) == 1 else second


def _search(base, chosen, start, to_pay, limit, best):
    if can_use_market(to_pay, chosen):
        if not can_use_market(to_pay, best):
            return chosen
        return best_market(chosen, best, to_pay)
    if len(chosen) < limit:
        for index in range(start, len(base)):
            best = _search(base, chosen + (base[index],), index + 1, to_pay, limit, best)
    return best


def find_best_payment(market, to_pay):
    """Return a market holding the best set of tokens from ``market`` to pay ``to_pay``.

    Every combination of at most as many tokens as ``to_pay`` has resources
    is considered; the result is empty when none of them pays.
    """
    base = tuple(market)
    chosen = _search(base, (), 0, to_pay, to_pay.num_resources(), ())
    payment = Market(market.size)
    for token in chosen:
        payment.pay(token)
    return payment


def is_buyable(cost, market, provided=()):
    """Return the tokens of ``market`` to spend on ``cost``, as a market.

    ``provided`` holds the colour sets that the player's builders supply;
    they lower the cost before any token is chosen. The returned market is
    empty when the cost cannot be paid.
    """
    left = list(cost)
    for supply in provided:
        left = [max(need - have, 0) for need, have in zip(left, supply)]
    payment = find_best_payment(market, ColorSet(left))
    if payment.num_tokens() == 0:
        return Market(market.size)
    return payment


def can_buy(payment):
    """Return True when ``payment`` (as returned by ``is_buyable``) holds any token."""
    return payment is not None and payment.num_tokens() > 0