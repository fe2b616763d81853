"""
Small conversion helpers.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, TypeVar, Union

T = TypeVar("T")


def map_of(
    keys: Iterable[str],
    mapper: Callable[[str], T],
    filter: Optional[Callable[[str], bool]] = None,
) -> Dict[str, T]:
    """
    Build a dictionary from a list of keys.

    Args:
        keys: Keys of the returned dictionary
        mapper: Maps a key to its value
        filter: If given, only keys it accepts are added

    Example:
        >>> map_of(["a", "bb"], len)
        {'a': 1, 'bb': 2}
    """
    return {key: mapper(key) for key in keys if filter is None or filter(key)}


def to_int(value: Union[int, str, bytes]) -> int:
    """Integer from an int, a decimal string, a 0x hex string or big-endian bytes."""
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric value")
    if isinstance(value, int):
        return value
    if isinstance(value, (bytes, bytearray)):
        return int.from_bytes(value, "big")
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith("0x"):
            return int(text, 16)
        return int(text, 10)
    raise TypeError(f"Cannot convert {type(value).__name__} to int")


def to_str(value: Union[int, str, bytes]) -> str:
    """Decimal string of a numeric value."""
    return str(to_int(value))
