"""Tryte conversion: symbol table plus encode/decode."""
from .converter import (
    to_trytes,
    to_string,
    split_ordinal,
    TryteConverterError,
    NotEncodableError,
    NotTrytesError,
)
from .symbols import SymbolTable, get_symbol_table

__all__ = [
    "to_trytes",
    "to_string",
    "split_ordinal",
    "TryteConverterError",
    "NotEncodableError",
    "NotTrytesError",
    "SymbolTable",
    "get_symbol_table",
]
