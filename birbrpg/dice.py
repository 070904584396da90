"""Dice rolls and damage multipliers."""

from __future__ import annotations

import random

_MULTIPLIER_LOW = 50
_MULTIPLIER_HIGH = 150


def roll_dice(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a uniformly chosen integer between ``low`` and ``high``, inclusive."""
    if high < low:
        raise ValueError(f"invalid dice range: {low}..{high}")
    source = rng if rng is not None else random
    return source.randint(low, high)


def damage_multiplier(rng: random.Random | None = None) -> float:
    """Return a multiplier between 1.5 and 2.5 in steps of 0.01."""
    return roll_dice(_MULTIPLIER_LOW, _MULTIPLIER_HIGH, rng) / 100.0 + 1.0