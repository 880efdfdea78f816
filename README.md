# creaturetracker

Keep a record of creatures and of summary statistics for each creature type.

Creatures are held in a binary search tree ordered by name. Per-type statistics
(how many creatures of a type have been counted and their combined power) are
held in a hash table with separate chaining. Both containers can be used on
their own.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
creaturetracker [FILE]
```

`FILE` defaults to `creatures.txt` in the current directory. Each line of the
file describes one creature as `name,type,power`, for example:

```
Blazefox,Fire,55
Swarmstrike,Bug,40
Tidecaller,Water,62
```

The power field is read as a leading integer (leading whitespace and a sign are
allowed; anything after the digits is ignored). A line that does not have
exactly three comma-separated fields, or whose power has no digits, stops the
run: the command prints `error: ...` to standard error and exits with status 1.
A missing or unreadable file is reported the same way.

After loading the file the command prints, with `true`/`false` for yes/no:

- whether `Swarmstrike` exists, and whether `Random` exists;
- the `Swarmstrike` creature (or `(not found)`);
- the statistics for each of the standard types Fire, Water, Electric, Grass,
  Ice, Fighting, Poison, Ground, Flying, Psychic, Bug, Rock, Ghost, Dragon,
  Dark, Steel and Fairy (an empty entry is created for any type not yet seen);
- after removing `Swarmstrike`, whether it still exists;
- the whole tracker.

The functions behind the command are in `creaturetracker.cli`: `tokenise(line)`
splits a line on commas, `populate_tracker(tracker, path)` loads a file into a
tracker (raising `CreatureFileError` on a malformed line), and `main(argv=None)`
runs the report and returns the exit status.

## Library use

```python
from creaturetracker.tracker import CreatureTracker

tracker = CreatureTracker()
tracker.add_creature("Blazefox", "Fire", 55)
tracker.add_creature("Emberling", "Fire", 30)
tracker.add_creature("Tidecaller", "Water", 62)

tracker.creature_exists("Blazefox")      # True
print(tracker.get_creature("Blazefox"))  # (Blazefox, Fire, 55)

tracker.type_count("Fire")   # 2
tracker.type_power("Fire")   # 85
print(tracker.get_stats("Fire"))  # (Fire, 2, 85)

tracker.remove_creature("Emberling")
tracker.type_count("Fire")   # 1

print(tracker)
```

`get_creature` returns `None` for an unknown name, and `type_count` and
`type_power` return 0 for an unknown type. `get_stats` returns the statistics
for a type, creating an empty entry for a type that has not been seen. Adding a
creature whose name is already tracked replaces the stored creature, but the
new addition is still counted in its type's statistics. When a type's count
drops to zero on removal, its statistics entry is dropped. `clear()` empties
the tracker.

Printing a tracker gives `Creatures: `, the creatures in name order, then
`Type stats: ` and every cell of the statistics table, one line per cell as
`index: items`.

### Records

`creaturetracker.creature.Creature` is a frozen record with `name`, `type` and
`power`; its `key` is the name, and equality and ordering consider the name
only. It prints as `(name, type, power)`.

`creaturetracker.creature_type_stats.CreatureTypeStats` holds `type`, `count`
and `total_power`, with `increment_count`, `decrement_count`, `add_power` and
`subtract_power`. Its `key` is the type, and it prints as
`(type, count, total_power)`.

### The containers

`creaturetracker.bs_tree.BSTree` is an unbalanced binary search tree for any
items that have a string `key` and compare consistently with it:

```python
from creaturetracker.bs_tree import BSTree, EmptyCollectionError
from creaturetracker.creature import Creature

tree = BSTree()
tree.insert(Creature("Mossback", "Grass", 20))
tree.insert(Creature("Aquafin", "Water", 35))

"Mossback" in tree        # True
len(tree)                 # 2
tree.find("Aquafin")      # the Aquafin creature, or None when absent
tree.find_min().key       # "Aquafin"
list(tree)                # items in order
tree.format_preorder()    # items in pre-order, each followed by a space
tree.remove("Mossback")
```

Inserting an item equal to one already present replaces the stored item.
Removing an absent key does nothing. `find_min` and `find_max` raise
`EmptyCollectionError` on an empty tree. `inorder`, `preorder` and `postorder`
yield the items in the matching traversal order, and `format_inorder`,
`format_preorder` and `format_postorder` give them as text. `str(tree)` is the
in-order text, or `Empty tree` followed by a newline when the tree is empty.

`creaturetracker.hash_table.HashTable` is a chained hash table with a fixed
number of cells (101 by default), keyed by each item's `key`:

```python
from creaturetracker.hash_table import HashTable
from creaturetracker.creature_type_stats import CreatureTypeStats

table = HashTable(101)
table.insert(CreatureTypeStats("Fire"))
"Fire" in table           # True
table.get("Fire")         # the stored statistics, or None when absent
table.bucket_index("Fire")  # the cell the key hashes to
table.remove("Fire")
len(table)                # 0
```

`insert` appends to the end of the key's cell without checking for duplicates;
`get` and `remove` act on the first item with the key. Cell indices come from a
fixed 64-bit FNV-1a hash of the key's UTF-8 bytes, so they are the same from run
to run. Iterating a table yields items cell by cell, and `str(table)` prints
every cell on its own line as `index: items`. A capacity below 1 raises
`ValueError`.

## What it does not do

Nothing is saved: the tracker lives only in memory, and the command reads its
input file but never writes one. The tree is not rebalanced, and the hash table
never grows beyond the capacity it was created with.