"""Tests for the reality hash."""

import pytest
from quantum_hotel import InvalidArgumentError
from quantum_hotel.hashing import (
    BASE_REALITY,
    deterministic_index,
    format_reality_id,
    reality_hash,
    reality_id_for,
)


def test_empty_string_hashes_to_zero():
    assert reality_hash("") == 0


def test_rolling_hash_small_inputs():
    assert reality_hash("a") == 97
    assert reality_hash("ab") == 97 * 31 + 98


def test_hash_wraps_to_signed_32_bit():
    """Known values of the same rolling hash used by Java's String.hashCode."""
    assert reality_hash("hello") == 99162322
    assert reality_hash("Hello World") == -862545276
    assert reality_hash("polygenelubricants") == -(2**31)


def test_hash_uses_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00
    assert reality_hash("\U0001F600") == 0xD83D * 31 + 0xDE00


def test_format_reality_id_uses_absolute_value():
    assert format_reality_id(255) == "0xFF"
    assert format_reality_id(-255) == "0xFF"
    assert format_reality_id(-(2**31)) == "0x80000000"


def test_reality_id_is_order_independent():
    forward = reality_id_for(["room-state-1", "key-state-0"])
    backward = reality_id_for(["key-state-0", "room-state-1"])
    assert forward == backward


def test_reality_id_for_nothing_is_base():
    assert reality_id_for([]) == BASE_REALITY == "0x0000"


def test_deterministic_index_is_stable_and_in_range():
    for seed in ["", "0x0000", "0xABCDEF", "polygenelubricants"]:
        index = deterministic_index(seed, 4)
        assert 0 <= index < 4
        assert deterministic_index(seed, 4) == index


def test_deterministic_index_rejects_empty_range():
    with pytest.raises(InvalidArgumentError):
        deterministic_index("0x0000", 0)


def test_lone_surrogate_hashes_as_its_code_unit():
    assert reality_hash("\ud800") == 0xD800
    assert reality_hash("a\udfff") == 97 * 31 + 0xDFFF
