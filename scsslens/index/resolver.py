"""Symbol resolution shared by every query provider."""

from typing import Optional

from ..models import ImportLink, ResolveResult, Symbol, SymbolKind
from .store import SymbolStore


class SymbolResolver:
    """Finds the declarations a symbol reference may refer to.

    The search is global over the workspace store. Import links of the
    querying document only narrow the result when one of them points at a
    candidate's document.
    """

    def __init__(self, store: SymbolStore):
        self.store = store

    def candidates(self, name: str, kind: SymbolKind) -> list[Symbol]:
        """Every symbol of `kind` named exactly `name`, in store order."""
        return [
            symbol
            for record in self.store.get_all()
            for symbol in record.symbols_of(kind)
            if symbol.name == name
        ]

    def resolve(self, name: str, kind: SymbolKind, imports: list[ImportLink]) -> ResolveResult:
        """Resolve a reference written in a document with the given imports.

        - no imports: every candidate;
        - an import whose target contains a candidate's URI: that candidate
          alone (first match in store order wins);
        - imports but no match: every candidate.
        """
        result = ResolveResult(name=name, kind=kind)
        candidates = self.candidates(name, kind)

        symbol, link = pick_imported(candidates, imports)
        if symbol is not None:
            result.candidates = [symbol]
            result.via = link
        else:
            result.candidates = candidates
        return result

    def resolve_by_prefix(self, partial_name: str, kind: Optional[SymbolKind] = None) -> list[Symbol]:
        """Symbols whose name starts with `partial_name`.

        With `kind=None` every kind is returned, in file-then-declaration
        order (variables, functions, mixins per file). An empty prefix
        matches everything.
        """
        found = []
        for record in self.store.get_all():
            symbols = record.all_symbols() if kind is None else record.symbols_of(kind)
            found.extend(symbol for symbol in symbols if symbol.name.startswith(partial_name))
        return found


def pick_imported(symbols: list[Symbol], imports: list[ImportLink]) -> tuple[Optional[Symbol], Optional[ImportLink]]:
    """Return the first symbol explicitly imported through one of `imports`.

    Matching is substring containment of the symbol URI in the link
    target, not equality: a target of `file:///a/b.scss.css` also selects
    a symbol from `file:///a/b.scss`. Links without a resolved target
    never match.
    """
    for symbol in symbols:
        for link in imports:
            if link.target is not None and symbol.uri in link.target:
                return symbol, link
    return None, None


def find_link(uri: str, imports: list[ImportLink]) -> Optional[ImportLink]:
    """Import link whose target is exactly `uri` (used for provenance labels)."""
    for link in imports:
        if link.target == uri:
            return link
    return None
