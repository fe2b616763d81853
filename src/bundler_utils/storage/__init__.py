"""
Storage maps collected during simulation.
"""

from bundler_utils.storage.storage_map import merge_storage_map
from bundler_utils.storage.types import SlotMap, StorageMap

__all__ = [
    "SlotMap",
    "StorageMap",
    "merge_storage_map",
]
