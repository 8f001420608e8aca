"""Tunable numbers for the player entity.

Everything that controls how strong a freshly rolled player is, how much
an attack may vary and what a potion is worth lives here so that the
balance can be adjusted without touching the game logic.
"""
from __future__ import annotations

#starting stats, both bounds inclusive
HEALTH_MIN = 95
HEALTH_MAX = 104
STRENGTH_MIN = 7
STRENGTH_MAX = 11
AGILITY_MIN = 7
AGILITY_MAX = 11

#an attack lands within strength +/- this amount
ATTACK_VARIANCE = 5

#potions
HEALTH_POTION = "health"
STRENGTH_POTION = "strength"
AGILITY_POTION = "agility"
POTION_TYPES = (HEALTH_POTION, STRENGTH_POTION, AGILITY_POTION)

HEALTH_POTION_MIN = 30
HEALTH_POTION_MAX = 40
STAT_POTION_MIN = 7
STAT_POTION_MAX = 12

#relative chance of each potion type when one is rolled at random
POTION_CHANCES = {
    STRENGTH_POTION: 1,
    AGILITY_POTION: 1,
    HEALTH_POTION: 1,
}

HEALTH_MESSAGE = "{name}'s health is now {health}!"
