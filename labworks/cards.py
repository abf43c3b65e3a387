"""Playing cards for a 32-card French deck."""

from __future__ import annotations

from dataclasses import dataclass

_FACE_NAMES = {11: "Valet", 12: "Dame", 13: "Roi", 14: "As"}


@dataclass(frozen=True, eq=False)
class Card:
    """A card with a rank (7 to 14, the ace being 14) and a suit."""

    value: int
    color: str

    def __str__(self):
        rank = _FACE_NAMES.get(self.value, str(self.value))
        return f"{rank} de {self.color}"

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.value == other.value and self.color == other.color

    def __hash__(self):
        return hash((self.value, self.color))

    def __lt__(self, other):
        """Cards are ordered by rank alone; the suit plays no part."""
        if not isinstance(other, Card):
            return NotImplemented
        return self.value < other.value