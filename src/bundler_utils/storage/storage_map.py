"""
Storage map merging across simulation passes.
"""

from __future__ import annotations

from bundler_utils.storage.types import SlotMap, StorageMap


def merge_storage_map(merged: StorageMap, incoming: StorageMap) -> StorageMap:
    """
    Merge ``incoming`` into the ``merged`` accumulator.

    - A root (string) entry is always preferred over a slot map: it
      replaces whatever ``merged`` holds for that address, and later
      slot maps for the address are ignored.
    - Slot maps for the same address are merged key by key.

    Slot values are the values before the transaction started, so the
    same address/slot seen by different validations carries the same
    value; the last one written wins without any divergence check.

    Mutates and returns ``merged``. Callers sharing one accumulator
    between tasks must serialize the calls.

    Args:
        merged: Accumulator, updated in place
        incoming: Storage map of one simulation pass

    Returns:
        ``merged``
    """
    for addr, entry in incoming.items():
        if isinstance(entry, str):
            merged[addr] = entry
            continue

        existing = merged.get(addr)
        if isinstance(existing, str):
            # root already known, slot detail is redundant
            continue

        slots: SlotMap
        if existing is None:
            slots = merged[addr] = {}
        else:
            slots = existing
        slots.update(entry)

    return merged
