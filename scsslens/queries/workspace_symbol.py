"""Workspace symbol search."""

from lsprotocol import types as lsp

from .base import LSP_SYMBOL_KINDS, Query, to_location


class WorkspaceSymbolQuery(Query[list[lsp.SymbolInformation]]):
    """List symbols whose name starts with the query string."""

    def execute(self, query: str = "") -> list[lsp.SymbolInformation]:
        """Execute the search.

        Args:
            query: Name prefix; empty returns every symbol in the workspace.

        Returns:
            Symbols in file order, variables then functions then mixins
            within each file.
        """
        return [
            lsp.SymbolInformation(
                name=symbol.name,
                kind=LSP_SYMBOL_KINDS[symbol.kind],
                location=to_location(symbol),
            )
            for symbol in self.resolver.resolve_by_prefix(query)
        ]
