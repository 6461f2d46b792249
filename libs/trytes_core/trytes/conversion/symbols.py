"""Character <-> ordinal symbol table for tryte conversion.

- Newline is assigned ordinal 10.
- Printable ASCII (space through '~') keeps its code point, 32..126.
- The table is built once at import and exposed through read-only mappings.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..constants import NEWLINE_ORDINAL, SPACE_ORDINAL

PRINTABLE_CHARS = "".join(chr(c) for c in range(SPACE_ORDINAL, 127))


@dataclass(frozen=True)
class SymbolTable:
    char_to_ordinal: Mapping[str, int]
    ordinal_to_char: Mapping[int, str]

    @staticmethod
    def build() -> "SymbolTable":
        forward: Dict[str, int] = {"\n": NEWLINE_ORDINAL}
        for i, c in enumerate(PRINTABLE_CHARS):
            forward[c] = SPACE_ORDINAL + i
        reverse = {v: k for k, v in forward.items()}
        return SymbolTable(
            char_to_ordinal=MappingProxyType(forward),
            ordinal_to_char=MappingProxyType(reverse),
        )

    def ordinal_of(self, char: str) -> Optional[int]:
        return self.char_to_ordinal.get(char)

    def char_of(self, ordinal: int) -> Optional[str]:
        return self.ordinal_to_char.get(ordinal)


# Module import is serialized by the import lock, so this is built exactly once.
_DEFAULT_TABLE = SymbolTable.build()


def get_symbol_table() -> SymbolTable:
    """Return the process-wide symbol table."""
    return _DEFAULT_TABLE
