"""Data models for scss-lens."""

from .symbol import SymbolKind, RangeSpec, Symbol, ImportLink
from .document import DocumentRecord, TextDocument
from .results import SymbolReference, CompletionContext, ResolveResult

__all__ = [
    "SymbolKind",
    "RangeSpec",
    "Symbol",
    "ImportLink",
    "DocumentRecord",
    "TextDocument",
    "SymbolReference",
    "CompletionContext",
    "ResolveResult",
]
