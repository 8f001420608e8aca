"""Manual demonstration of the player entity.

Running this module will roll a player, show its stats, swing once, take
a hit and drink a potion so developers can see the pieces interact.
"""
from __future__ import annotations

import logging

from . import dice
from .characters import Player
from .items import Potion


def setup_demo(seed=None):
    """Create a demo player carrying one extra random potion."""
    rng = dice.new_rng(seed)
    player = Player("Hero", rng=rng)
    player.add_potion(Potion(rng=rng))
    return player


def main(seed=None) -> None:
    """Run a very small demonstration."""
    player = setup_demo(seed)
    print(f"{player.name} enters the dungeon with {player.get_stats()}")
    damage = player.get_attack_value()
    print(f"{player.name} swings for {damage} damage!")
    player.reduce_health(damage)
    print(player.get_health())
    potion = player.use_potion(0)
    print(f"{player.name} drinks a {potion.name} potion (+{potion.value}).")
    print(player.get_health())


if __name__ == "__main__":  # pragma: no cover - manual demonstration
    logging.basicConfig(level=logging.DEBUG)
    main()
