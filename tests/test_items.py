"""Tests for :mod:`rpg_player.items`.

The tests modify :data:`sys.path` so that the project root is available
on the import path when tests are executed from within the ``tests``
directory.
"""
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from rpg_player import dice, settings
from rpg_player.items import Potion


def test_random_potion_has_known_type():
    for seed in range(30):
        potion = Potion(rng=dice.new_rng(seed))
        assert potion.name in settings.POTION_TYPES


def test_health_potion_value_range():
    for seed in range(30):
        potion = Potion("health", rng=dice.new_rng(seed))
        assert settings.HEALTH_POTION_MIN <= potion.value <= settings.HEALTH_POTION_MAX


def test_stat_potion_value_range():
    for seed in range(30):
        potion = Potion("agility", rng=dice.new_rng(seed))
        assert settings.STAT_POTION_MIN <= potion.value <= settings.STAT_POTION_MAX


def test_explicit_value_is_kept():
    assert Potion("strength", 3).value == 3


def test_unknown_potion_type():
    with pytest.raises(ValueError):
        Potion("mana")


def test_potions_compare_by_identity():
    assert Potion("health", 30) != Potion("health", 30)


def test_potion_does_not_keep_the_rng():
    rng = dice.new_rng(1)
    potion = Potion("health", rng=rng)
    assert not hasattr(potion, "rng")
    assert potion.name == "health"


def test_player_potions_do_not_share_the_player_rng():
    from rpg_player.characters import Player

    player = Player("Dave", rng=dice.new_rng(3))
    assert not hasattr(player.inventory[0], "rng")
