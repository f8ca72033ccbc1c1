"""Deterministic string hashing shared by the engine and companions.

The rolling hash matches the one used by the browser build of the game, so a
reality id computed here selects the same dialogue line there. Characters are
consumed as UTF-16 code units to keep that property for text outside the
Basic Multilingual Plane, and lone surrogates hash as their code unit.
"""

from __future__ import annotations

from collections.abc import Iterable

from quantum_hotel.errors import InvalidArgumentError

BASE_REALITY = "0x0000"
REALITY_SEPARATOR = "|"

_MASK = 0xFFFFFFFF


def _utf16_units(text: str) -> Iterable[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def reality_hash(text: str) -> int:
    """Hash text to a signed 32-bit integer (h = h * 31 + unit)."""
    h = 0
    for unit in _utf16_units(text):
        h = (h * 31 + unit) & _MASK
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def deterministic_index(seed: str, length: int) -> int:
    """Pick an index in [0, length) keyed by seed."""
    if length <= 0:
        raise InvalidArgumentError(f"Cannot select from {length} items")
    return abs(reality_hash(seed)) % length


def format_reality_id(hash_value: int) -> str:
    """Format a hash as 0x followed by up to 8 uppercase hex digits."""
    return "0x" + format(abs(hash_value), "x")[:8].upper()


def reality_id_for(state_ids: Iterable[str]) -> str:
    """Reality id for a set of collapsed state ids, independent of order."""
    ordered = sorted(state_ids)
    if not ordered:
        return BASE_REALITY
    return format_reality_id(reality_hash(REALITY_SEPARATOR.join(ordered)))
