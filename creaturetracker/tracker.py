"""Keeps creatures in a search tree and per-type statistics in a hash table."""

from __future__ import annotations

from typing import Optional

from creaturetracker.bs_tree import BSTree
from creaturetracker.creature import Creature
from creaturetracker.creature_type_stats import CreatureTypeStats
from creaturetracker.hash_table import HashTable

STATS_CAPACITY = 101


class CreatureTracker:
    """Tracks creatures by name and keeps running statistics for each type."""

    def __init__(self) -> None:
        self._creatures: BSTree[Creature] = BSTree()
        self._stats: HashTable[CreatureTypeStats] = HashTable(STATS_CAPACITY)

    def add_creature(self, name: str, type_: str, power: int) -> None:
        """Add a creature and count it towards the statistics for its type.

        A creature with an existing name replaces the stored one, but the
        type statistics still count the new addition.
        """
        self._creatures.insert(Creature(name, type_, power))
        stats = self._stats.get(type_)
        if stats is None:
            stats = CreatureTypeStats(type_)
            self._stats.insert(stats)
        stats.increment_count()
        stats.add_power(power)

    def remove_creature(self, name: str) -> None:
        """Remove the named creature, if present, and update its type's statistics.

        Statistics whose count drops to zero are discarded.
        """
        creature = self.get_creature(name)
        if creature is None:
            return
        self._creatures.remove(creature.key)
        stats = self._stats.get(creature.type)
        if stats is not None:
            stats.decrement_count()
            stats.subtract_power(creature.power)
            if stats.count == 0:
                self._stats.remove(creature.type)

    def creature_exists(self, name: str) -> bool:
        """Whether a creature with ``name`` is tracked."""
        return name in self._creatures

    def get_creature(self, name: str) -> Optional[Creature]:
        """The creature with ``name``, or None."""
        return self._creatures.find(name)

    def type_count(self, type_: str) -> int:
        """The number of creatures counted for ``type_``."""
        stats = self._stats.get(type_)
        return stats.count if stats is not None else 0

    def type_power(self, type_: str) -> int:
        """The total power counted for ``type_``."""
        stats = self._stats.get(type_)
        return stats.total_power if stats is not None else 0

    def get_stats(self, type_: str) -> CreatureTypeStats:
        """The statistics for ``type_``, creating empty ones if there are none yet."""
        stats = self._stats.get(type_)
        if stats is None:
            stats = CreatureTypeStats(type_)
            self._stats.insert(stats)
        return stats

    def clear(self) -> None:
        """Forget every creature and every type's statistics."""
        self._creatures.clear()
        self._stats.clear()

    def __str__(self) -> str:
        return (
            "Creatures: \n"
            + self._creatures.format_inorder()
            + "\nType stats: \n"
            + str(self._stats)
        )