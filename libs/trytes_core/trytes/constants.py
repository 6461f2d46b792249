from __future__ import annotations

from typing import Final, Tuple

# Tryte alphabet: index i is the symbol for trit-triple value i (0..26)
TRYTE_ALPHABET: Final[Tuple[str, ...]] = tuple("9ABCDEFGHIJKLMNOPQRSTUVWXYZ")
RADIX: Final[int] = len(TRYTE_ALPHABET)  # 27

# Ordinals above one byte are encoded as a space
MAX_ORDINAL: Final[int] = 255
SPACE_ORDINAL: Final[int] = 32
NEWLINE_ORDINAL: Final[int] = 10

__all__ = [
    "TRYTE_ALPHABET",
    "RADIX",
    "MAX_ORDINAL",
    "SPACE_ORDINAL",
    "NEWLINE_ORDINAL",
]
