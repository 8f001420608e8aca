"""Item definitions.

The only item a player carries is the :class:`Potion`.  A potion knows
which stat it boosts and by how much; applying it is up to whoever drinks
it (see :meth:`characters.Player.use_potion`).
"""
from __future__ import annotations

from dataclasses import InitVar, dataclass
from typing import Optional

from . import dice, settings


@dataclass(eq=False)
class Potion:
    """Consumable that raises one stat.

    Parameters
    ----------
    name:
        Stat boosted by the potion: ``"health"``, ``"strength"`` or
        ``"agility"``.  A random type is picked when omitted.
    value:
        Amount added to the stat.  Rolled from the potion type when
        omitted.
    rng:
        Random source used for the rolls above.
    """

    name: Optional[str] = None
    value: Optional[int] = None
    rng: InitVar[object] = None

    def __post_init__(self, rng) -> None:
        if rng is None:
            rng = dice.new_rng()
        if self.name is None:
            self.name = dice.random_choice(rng, settings.POTION_CHANCES)
        if self.name not in settings.POTION_TYPES:
            raise ValueError(f"unknown potion type: {self.name!r}")
        if self.value is None:
            if self.name == settings.HEALTH_POTION:
                self.value = dice.roll(
                    rng, settings.HEALTH_POTION_MIN, settings.HEALTH_POTION_MAX
                )
            else:
                self.value = dice.roll(
                    rng, settings.STAT_POTION_MIN, settings.STAT_POTION_MAX
                )
