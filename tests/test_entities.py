import io
import random

import pytest

from labworks.entities import (
    Character,
    Entity,
    Item,
    Potion,
    Trap,
    random_move,
    random_value,
)


class ScriptedRng:
    """Returns queued values from randint, then repeats the last one."""

    def __init__(self, *values):
        self.values = list(values)

    def randint(self, low, high):
        value = self.values.pop(0) if len(self.values) > 1 else self.values[0]
        assert low <= value <= high
        return value


def test_random_value_stays_in_bounds():
    rng = random.Random(3)
    draws = {random_value(2, 5, rng) for _ in range(200)}
    assert draws <= {2, 3, 4, 5}
    assert len(draws) == 4


def test_random_value_single_point():
    assert random_value(7, 7, random.Random(1)) == 7


@pytest.mark.parametrize(
    "direction, expected",
    [(0, (10, 20)), (1, (9, 20)), (2, (11, 20)), (3, (10, 21)), (4, (10, 19))],
)
def test_random_move_directions(direction, expected):
    assert random_move(10, 20, ScriptedRng(direction)) == expected


def test_random_move_is_at_most_one_step():
    rng = random.Random(5)
    for _ in range(100):
        x, y = random_move(0, 0, rng)
        assert abs(x) + abs(y) <= 1


def test_entity_is_abstract():
    with pytest.raises(TypeError):
        Entity(0, 0)


def test_character_update_moves():
    hero = Character(3, 2, ScriptedRng(2))
    hero.update()
    assert (hero.x, hero.y) == (4, 2)


def test_character_starts_healthy():
    hero = Character(3, 2)
    assert hero.representation() == "O"
    assert hero.should_destroy() is False


def test_character_stepping_on_trap_dies():
    hero = Character(0, 0)
    hero.out = io.StringIO()
    trap = Trap(5, 5, ScriptedRng(0))
    hero.interact_with(trap)
    assert hero.representation() == "."
    assert hero.should_destroy() is True
    assert "Character stepped on a trap ." in hero.out.getvalue()


def test_character_potion_message_and_stays_healthy():
    hero = Character(0, 0)
    hero.out = io.StringIO()
    hero.interact_with(Potion(5, 5, ScriptedRng(0)))
    assert hero.representation() == "O"
    assert "Character healed thanks to a potion O" in hero.out.getvalue()


def test_character_ignores_other_characters():
    hero = Character(0, 0)
    hero.out = io.StringIO()
    hero.interact_with(Character(0, 0))
    assert hero.representation() == "O"
    assert hero.out.getvalue() == ""


def test_item_position_within_area():
    rng = random.Random(11)
    for _ in range(50):
        trap = Trap(4, 3, rng)
        assert 0 <= trap.x < 4
        assert 0 <= trap.y < 3


def test_item_does_not_move():
    potion = Potion(10, 10, ScriptedRng(5))
    before = (potion.x, potion.y)
    potion.update()
    assert (potion.x, potion.y) == before


def test_item_consume_marks_for_removal():
    potion = Potion(10, 10, ScriptedRng(1))
    assert potion.should_destroy() is False
    potion.consume()
    assert potion.should_destroy() is True


def test_trap_triggers_on_anything():
    trap = Trap(10, 10, ScriptedRng(1))
    assert trap.representation() == "X"
    trap.interact_with(Potion(10, 10, ScriptedRng(1)))
    assert trap.should_destroy() is True


def test_potion_consumed_only_by_character():
    potion = Potion(10, 10, ScriptedRng(1))
    potion.out = io.StringIO()
    assert potion.representation() == "$"
    potion.interact_with(Trap(10, 10, ScriptedRng(1)))
    assert potion.should_destroy() is False
    potion.interact_with(Character(1, 1))
    assert potion.should_destroy() is True
    assert "Potion interacts with O" in potion.out.getvalue()


def test_item_is_abstract():
    with pytest.raises(TypeError):
        Item(3, 3)