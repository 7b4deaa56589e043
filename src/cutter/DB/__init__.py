"""Table stores for the cutter partitions."""
from .api import TableStore, make_store
from .cache import PartitionCache

__all__ = ["TableStore", "make_store", "PartitionCache"]
