"""Query result types."""

from dataclasses import dataclass, field
from typing import Optional

from .symbol import ImportLink, Symbol, SymbolKind


@dataclass
class SymbolReference:
    """A symbol usage found under the cursor."""

    name: str
    kind: SymbolKind


@dataclass
class CompletionContext:
    """Where the cursor sits when completion is requested.

    `kinds` lists the symbol kinds that fit the position: variables and
    functions inside a property value, mixins after `@include`.
    """

    kinds: tuple[SymbolKind, ...]
    partial: str = ""


@dataclass
class ResolveResult:
    """Result of resolving a symbol reference against the workspace store."""

    name: str
    kind: SymbolKind
    candidates: list[Symbol] = field(default_factory=list)
    # Import link that selected the single candidate, if any
    via: Optional[ImportLink] = None

    @property
    def found(self) -> bool:
        return len(self.candidates) > 0

    @property
    def unique(self) -> bool:
        return len(self.candidates) == 1

    @property
    def explicit(self) -> bool:
        return self.via is not None
