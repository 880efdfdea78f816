"""Running count and total power for one creature type, keyed by type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class CreatureTypeStats:
    """Statistics for a creature type; equality and ordering consider the type only."""

    type: str = " "
    count: int = 0
    total_power: int = 0

    @property
    def key(self) -> str:
        """The creature type."""
        return self.type

    def increment_count(self) -> None:
        """Add one to the count."""
        self.count += 1

    def decrement_count(self) -> None:
        """Subtract one from the count."""
        self.count -= 1

    def add_power(self, amount: int) -> None:
        """Add ``amount`` to the total power."""
        self.total_power += amount

    def subtract_power(self, amount: int) -> None:
        """Subtract ``amount`` from the total power."""
        self.total_power -= amount

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreatureTypeStats):
            return NotImplemented
        return self.type == other.type

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CreatureTypeStats):
            return NotImplemented
        return self.type < other.type

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CreatureTypeStats):
            return NotImplemented
        return self.type > other.type

    def __str__(self) -> str:
        return f"({self.type}, {self.count}, {self.total_power})"