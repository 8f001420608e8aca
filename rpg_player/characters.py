"""Character definitions.

:class:`Character` holds the combat stats shared by anything that can
fight, and :class:`Player` adds the potion inventory on top.  Stats are
rolled at construction from an injectable random source so that tests
can pin the numbers down.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Union

from . import dice, settings
from .items import Potion

logger = logging.getLogger(__name__)


class Character:
    """Basic game character.

    Parameters
    ----------
    name:
        Human readable identifier of the character.
    rng:
        Random source with a ``randint(low, high)`` method.  A new
        :func:`dice.new_rng` generator is created when omitted.
    """

    def __init__(self, name: str, rng=None) -> None:
        self.name = name
        self.rng = rng if rng is not None else dice.new_rng()
        self.health = dice.roll(self.rng, settings.HEALTH_MIN, settings.HEALTH_MAX)
        self.strength = dice.roll(self.rng, settings.STRENGTH_MIN, settings.STRENGTH_MAX)
        self.agility = dice.roll(self.rng, settings.AGILITY_MIN, settings.AGILITY_MAX)
        logger.debug(
            "rolled %s: health=%d strength=%d agility=%d",
            name, self.health, self.strength, self.agility,
        )

    def get_health(self) -> str:
        return settings.HEALTH_MESSAGE.format(name=self.name, health=self.health)

    def is_alive(self) -> bool:
        return self.health > 0

    def reduce_health(self, amount: int) -> int:
        """Reduce :attr:`health` by ``amount`` down to a minimum of zero.

        Negative amounts are ignored.  Returns the damage actually taken.
        """
        before = self.health
        self.health = max(0, self.health - max(0, amount))
        logger.debug("%s took %d damage", self.name, before - self.health)
        return before - self.health

    def get_attack_value(self) -> int:
        """Return :attr:`strength` give or take ``ATTACK_VARIANCE``."""
        low = self.strength - settings.ATTACK_VARIANCE
        high = self.strength + settings.ATTACK_VARIANCE
        return dice.roll(self.rng, low, high)


class Player(Character):
    """Player controlled character carrying a list of potions."""

    def __init__(self, name: str, rng=None) -> None:
        super().__init__(name, rng)
        self.inventory: List[Potion] = [Potion(settings.HEALTH_POTION, rng=self.rng)]

    def get_stats(self) -> Dict[str, int]:
        return {
            "potions": len(self.inventory),
            "health": self.health,
            "strength": self.strength,
            "agility": self.agility,
        }

    def get_inventory(self) -> Union[List[Potion], bool]:
        """Return the inventory, or ``False`` when it is empty."""
        if self.inventory:
            return self.inventory
        return False

    def add_potion(self, potion: Potion) -> None:
        self.inventory.append(potion)
        logger.debug("%s picked up a %s potion", self.name, potion.name)

    def use_potion(self, index: int) -> Potion:
        """Drink the potion at ``index`` and return it.

        The potion's value is added to the stat it is named after.  An
        index outside the inventory raises :class:`IndexError` and leaves
        the inventory as it was.
        """
        if not 0 <= index < len(self.inventory):
            raise IndexError(f"no potion at index {index}")
        potion = self.inventory.pop(index)
        if potion.name == settings.HEALTH_POTION:
            self.health += potion.value
        elif potion.name == settings.STRENGTH_POTION:
            self.strength += potion.value
        elif potion.name == settings.AGILITY_POTION:
            self.agility += potion.value
        logger.debug("%s used a %s potion (+%d)", self.name, potion.name, potion.value)
        return potion
