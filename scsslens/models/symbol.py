"""Symbol data model."""

from enum import Enum
from typing import Optional

import msgspec


class SymbolKind(str, Enum):
    """Kind of a declared SCSS symbol."""

    VARIABLE = "variable"
    FUNCTION = "function"
    MIXIN = "mixin"


class RangeSpec(msgspec.Struct, frozen=True):
    """Zero-based range inside a document."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int


class Symbol(msgspec.Struct, frozen=True):
    """A variable, function or mixin declared in one document.

    Identity is (name, kind, uri). The same name and kind may be declared in
    any number of documents.
    """

    name: str
    kind: SymbolKind
    uri: str
    range: RangeSpec


class ImportLink(msgspec.Struct, frozen=True):
    """Import/use/forward reference as written in a document."""

    source: str
    target: Optional[str] = None  # Resolved document URI, None if unresolvable

    @property
    def resolved(self) -> bool:
        return self.target is not None
