"""Track creatures and per-type statistics with a search tree and a hash table."""

__version__ = "1.0.0"
__all__ = ["bs_tree", "hash_table", "creature", "creature_type_stats", "tracker", "cli"]