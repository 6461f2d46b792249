"""Text <-> trytes conversion.

Each supported character becomes two alphabet symbols:
  ordinal = first + second * 27
  output  = ALPHABET[first] + ALPHABET[second]   (low digit first)

Decoding is lenient by default:
  - a trailing odd symbol is dropped
  - pairs whose value has no character are skipped
Pass strict=True to reject both instead.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from ..constants import (
    MAX_ORDINAL,
    RADIX,
    SPACE_ORDINAL,
    TRYTE_ALPHABET,
)
from .symbols import get_symbol_table

log = logging.getLogger("trytes.conversion")

_SYMBOL_INDEX = {s: i for i, s in enumerate(TRYTE_ALPHABET)}


class TryteConverterError(ValueError):
    """Base error for conversion failures; carries the offending input string."""

    def __init__(self, message: str, string: str):
        super().__init__(message)
        self.message = message
        self.string = string


class NotEncodableError(TryteConverterError):
    def __init__(self, string: str, char: Optional[str] = None, index: Optional[int] = None):
        super().__init__(f"String [{string}] is not valid ascii", string)
        self.char = char
        self.index = index


class NotTrytesError(TryteConverterError):
    def __init__(self, string: str, symbol: Optional[str] = None, index: Optional[int] = None):
        super().__init__(f"String [{string}] is not valid trytes", string)
        self.symbol = symbol
        self.index = index


def split_ordinal(ordinal: int) -> tuple[int, int]:
    """Split an ordinal into (low, high) base-27 digits."""
    first = ordinal % RADIX
    second = (ordinal - first) // RADIX
    return first, second


def to_trytes(text: str) -> str:
    """Convert a string of newline/printable ASCII characters into trytes."""
    if not isinstance(text, str):
        raise TypeError("text must be str")
    table = get_symbol_table()
    ordinals: List[int] = []
    for i, c in enumerate(text):
        ordinal = table.ordinal_of(c)
        if ordinal is None:
            raise NotEncodableError(text, char=c, index=i)
        ordinals.append(ordinal)

    out: List[str] = []
    for ordinal in ordinals:
        if ordinal > MAX_ORDINAL:
            log.warning("ordinal %s exceeds byte range; substituting space", ordinal)
            ordinal = SPACE_ORDINAL
        first, second = split_ordinal(ordinal)
        out.append(TRYTE_ALPHABET[first])
        out.append(TRYTE_ALPHABET[second])
    return "".join(out)


def to_string(trytes: str, *, strict: bool = False) -> str:
    """Convert trytes back into a string."""
    if not isinstance(trytes, str):
        raise TypeError("trytes must be str")
    table = get_symbol_table()

    body = trytes
    if len(body) % 2 != 0:
        if strict:
            raise NotTrytesError(trytes, symbol=body[-1], index=len(body) - 1)
        log.debug("dropping trailing odd symbol %r", body[-1])
        body = body[:-1]

    out: List[str] = []
    for i in range(0, len(body), 2):
        first = _SYMBOL_INDEX.get(body[i])
        if first is None:
            raise NotTrytesError(trytes, symbol=body[i], index=i)
        second = _SYMBOL_INDEX.get(body[i + 1])
        if second is None:
            raise NotTrytesError(trytes, symbol=body[i + 1], index=i + 1)

        c = table.char_of(first + second * RADIX)
        if c is None:
            if strict:
                raise NotTrytesError(trytes, symbol=body[i : i + 2], index=i)
            log.debug("skipping unassigned pair %s at %s", body[i : i + 2], i)
            continue
        out.append(c)
    return "".join(out)
