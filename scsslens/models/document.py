"""Document data models."""

from dataclasses import dataclass, field
from typing import Iterator

from .symbol import ImportLink, Symbol, SymbolKind


@dataclass
class DocumentRecord:
    """Indexed snapshot of one document: declared symbols and written imports.

    `imports` holds only the links written in this document, never the
    transitive closure.
    """

    variables: list[Symbol] = field(default_factory=list)
    functions: list[Symbol] = field(default_factory=list)
    mixins: list[Symbol] = field(default_factory=list)
    imports: list[ImportLink] = field(default_factory=list)

    def symbols_of(self, kind: SymbolKind) -> list[Symbol]:
        if kind == SymbolKind.VARIABLE:
            return self.variables
        if kind == SymbolKind.FUNCTION:
            return self.functions
        return self.mixins

    def all_symbols(self) -> Iterator[Symbol]:
        """Yield symbols in declaration-group order: variables, functions, mixins."""
        for kind in SymbolKind:
            yield from self.symbols_of(kind)

    @property
    def symbol_count(self) -> int:
        return len(self.variables) + len(self.functions) + len(self.mixins)


@dataclass
class TextDocument:
    """An open editor document: URI plus its current (possibly unsaved) text."""

    uri: str
    text: str
