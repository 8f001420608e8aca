"""Random number helpers.

The player never touches a global generator.  Every roll goes through an
``rng`` object which is anything with a ``randint(low, high)`` method
returning an integer between both bounds inclusive.  By default that is
libtcod's :class:`tcod.random.Random`, but tests are free to hand in a
:class:`random.Random` or a stub that always returns the same number.
"""
from __future__ import annotations

import logging
from typing import Dict, Hashable, Optional, Sequence

import tcod.random

logger = logging.getLogger(__name__)


def new_rng(seed: Optional[Hashable] = None) -> tcod.random.Random:
    """Return a fresh Mersenne Twister generator, seeded if *seed* is given."""
    return tcod.random.Random(tcod.random.MERSENNE_TWISTER, seed=seed)


def roll(rng, low: int, high: int) -> int:
    """Return a random integer between *low* and *high* inclusive.

    The value returned by *rng* is clamped into the range, so the result
    is always within bounds even when the generator misbehaves.
    """
    if low > high:
        raise ValueError(f"invalid range: {low} > {high}")
    value = int(rng.randint(low, high))
    if value < low or value > high:
        logger.debug("rng returned %d outside [%d, %d], clamping", value, low, high)
    return max(low, min(high, value))


def random_choice_index(rng, chances: Sequence[int]) -> int:
    """Choose one option from a list of chances and return its index."""
    total = sum(chances)
    if total <= 0:
        raise ValueError("chances must add up to a positive number")
    #the dice will land on some number between 1 and the sum of chances
    dice = roll(rng, 1, total)

    #go through all chances, keeping the sum so far
    running_sum = 0
    for choice, weight in enumerate(chances):
        running_sum += weight
        if dice <= running_sum:
            return choice


def random_choice(rng, chances_dict: Dict[str, int]) -> str:
    """Pick a key of *chances_dict* weighted by its value."""
    strings = list(chances_dict.keys())
    chances = list(chances_dict.values())
    return strings[random_choice_index(rng, chances)]
