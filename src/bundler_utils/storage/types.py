"""
Storage map types collected during UserOperation simulation.

A storage map records, per contract address, either the storage root of
the whole account or the individual slots that were read.
"""

from __future__ import annotations

from typing import Dict, Union

SlotMap = Dict[str, str]
"""Storage slot key to the slot's value before the transaction."""

StorageMap = Dict[str, Union[str, SlotMap]]
"""Address to a storage root hash or a SlotMap."""
