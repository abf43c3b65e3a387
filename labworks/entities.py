"""Creatures and items that share the cells of a dungeon grid."""

from __future__ import annotations

import random
import sys
from abc import ABC, abstractmethod

_default_rng = random.Random()


def random_value(low, high, rng=None):
    """A uniformly drawn integer between ``low`` and ``high``, both included."""
    generator = rng if rng is not None else _default_rng
    return generator.randint(low, high)


def random_move(x, y, rng=None):
    """Return the position after one random step, or staying put.

    The five outcomes are equally likely: no move, left, right, down, up.
    """
    generator = rng if rng is not None else _default_rng
    direction = generator.randint(0, 4)
    if direction == 1:
        return x - 1, y
    if direction == 2:
        return x + 1, y
    if direction == 3:
        return x, y + 1
    if direction == 4:
        return x, y - 1
    return x, y


class Entity(ABC):
    """Something standing at a grid position.

    Messages an entity emits go to ``out``, or to standard output when
    ``out`` is None.
    """

    out = None

    def __init__(self, x=0, y=0, rng=None):
        self.x = x
        self.y = y
        self.rng = rng if rng is not None else _default_rng

    def _say(self, text):
        print(text, file=self.out if self.out is not None else sys.stdout)

    def _on_removed(self):
        """Called once when the entity is taken out of the dungeon."""

    @abstractmethod
    def representation(self):
        """The character drawn for this entity."""

    def update(self):
        """Take one random step."""
        self.x, self.y = random_move(self.x, self.y, self.rng)

    @abstractmethod
    def interact_with(self, other):
        """React to sharing a cell with ``other``."""

    def should_destroy(self):
        """True when the entity is to be removed from the dungeon."""
        return False

    def __repr__(self):
        return f"{type(self).__name__}(x={self.x}, y={self.y})"


class Item(Entity):
    """A stationary object dropped at a random spot of a ``width`` by ``height`` area."""

    def __init__(self, width, height, rng=None):
        generator = rng if rng is not None else _default_rng
        super().__init__(
            random_value(0, width - 1, generator),
            random_value(0, height - 1, generator),
            generator,
        )
        self.consumed = False

    def update(self):
        """Items do not move."""

    def consume(self):
        """Use the item up; it will be removed."""
        self.consumed = True

    def should_destroy(self):
        return self.consumed


class Trap(Item):
    """A trap that springs on whatever steps on it, and is then gone."""

    def __init__(self, width, height, rng=None):
        super().__init__(width, height, rng)
        self.triggered = False

    def representation(self):
        return "X"

    def interact_with(self, other):
        self.triggered = True

    def should_destroy(self):
        return self.triggered


class Potion(Item):
    """A potion that a character drinks on contact."""

    def representation(self):
        return "$"

    def interact_with(self, other):
        if isinstance(other, Character):
            self.consume()
            self._say(f"Potion interacts with {other.representation()}")


class Character(Entity):
    """A wandering character that gets hurt by traps and healed by potions."""

    def __init__(self, x=0, y=0, rng=None):
        super().__init__(x, y, rng)
        self._rep = "O"

    def representation(self):
        return self._rep

    def interact_with(self, other):
        if isinstance(other, Trap):
            if self._rep == "O":
                self._rep = "o"
            if self._rep == "o":
                self._rep = "."
            self._say(f"Character stepped on a trap {self._rep}")
        if isinstance(other, Potion):
            if self._rep == "o":
                self._rep = "O"
            self._say(f"Character healed thanks to a potion {self._rep}")

    def should_destroy(self):
        return self._rep == "."

    def _on_removed(self):
        self._say(f"A character died at position ({self.x}, {self.y})")