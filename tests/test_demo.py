"""Tests for :mod:`rpg_player.demo`.

The tests modify :data:`sys.path` so that the project root is available
on the import path when tests are executed from within the ``tests``
directory.
"""
from pathlib import Path
import re
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from rpg_player import demo


def test_setup_demo_gives_two_potions():
    player = demo.setup_demo(seed=5)
    assert player.name == "Hero"
    assert player.get_stats()["potions"] == 2


def test_main_prints_the_story(capsys):
    demo.main(seed=5)
    out = capsys.readouterr().out
    assert "Hero enters the dungeon" in out
    assert "potion" in out


def test_main_subtracts_the_printed_damage(capsys):
    demo.main(seed=5)
    out = capsys.readouterr().out
    start = int(re.search(r"'health': (\d+)", out).group(1))
    damage = int(re.search(r"swings for (-?\d+) damage", out).group(1))
    after = int(re.search(r"health is now (\d+)!", out).group(1))
    assert after == max(0, start - damage)
