"""
Trytes core package.

Exports the tryte alphabet, the character symbol table and text <-> trytes
conversion.
"""
from .constants import TRYTE_ALPHABET
from .conversion import (
    to_trytes,
    to_string,
    SymbolTable,
    get_symbol_table,
    TryteConverterError,
    NotEncodableError,
    NotTrytesError,
)

__all__ = [
    "TRYTE_ALPHABET",
    "to_trytes",
    "to_string",
    "SymbolTable",
    "get_symbol_table",
    "TryteConverterError",
    "NotEncodableError",
    "NotTrytesError",
]
