"""A creature with a name, a type and a power rating, keyed and ordered by name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Creature:
    """A named creature; equality and ordering consider the name only."""

    name: str = " "
    type: str = " "
    power: int = 0

    @property
    def key(self) -> str:
        """The creature's name."""
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Creature):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Creature):
            return NotImplemented
        return self.name < other.name

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Creature):
            return NotImplemented
        return self.name > other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"({self.name}, {self.type}, {self.power})"