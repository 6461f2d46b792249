from __future__ import annotations

import dataclasses

import pytest

from trytes.constants import TRYTE_ALPHABET, MAX_ORDINAL
from trytes.conversion import SymbolTable, get_symbol_table


def test_alphabet_has_27_distinct_symbols():
    assert len(TRYTE_ALPHABET) == 27
    assert len(set(TRYTE_ALPHABET)) == 27
    assert TRYTE_ALPHABET[0] == "9" and TRYTE_ALPHABET[26] == "Z"


def test_table_covers_newline_and_printable_ascii():
    table = get_symbol_table()
    assert len(table.char_to_ordinal) == 96
    assert table.ordinal_of("\n") == 10
    assert table.ordinal_of(" ") == 32
    assert table.ordinal_of("~") == 126
    assert table.ordinal_of("Z") == ord("Z")
    assert table.ordinal_of("\t") is None


def test_reverse_map_is_exact_inverse():
    table = get_symbol_table()
    assert len(table.ordinal_to_char) == len(table.char_to_ordinal)
    for c, o in table.char_to_ordinal.items():
        assert table.char_of(o) == c
        assert 0 <= o <= MAX_ORDINAL
    assert table.char_of(0) is None
    assert table.char_of(31) is None
    assert table.char_of(127) is None


def test_table_is_shared_and_read_only():
    table = get_symbol_table()
    assert get_symbol_table() is table
    with pytest.raises(TypeError):
        table.char_to_ordinal["\t"] = 9  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        table.char_to_ordinal = {}  # type: ignore[misc]


def test_build_is_deterministic():
    a = SymbolTable.build()
    b = SymbolTable.build()
    assert dict(a.char_to_ordinal) == dict(b.char_to_ordinal)
    assert dict(a.ordinal_to_char) == dict(b.ordinal_to_char)
