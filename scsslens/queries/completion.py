"""Completion of variables, functions and mixins."""

import logging

from lsprotocol import types as lsp

from ..models import SymbolKind, TextDocument
from ..stylesheet import find_completion_context
from ..uris import normalize_uri
from .base import Query

logger = logging.getLogger(__name__)

COMPLETION_KINDS = {
    SymbolKind.VARIABLE: lsp.CompletionItemKind.Variable,
    SymbolKind.FUNCTION: lsp.CompletionItemKind.Function,
    SymbolKind.MIXIN: lsp.CompletionItemKind.Method,
}


class CompletionQuery(Query[lsp.CompletionList]):
    """Suggest symbols declared anywhere in the workspace."""

    def execute(self, document: TextDocument, position: lsp.Position) -> lsp.CompletionList:
        """Execute completion at a cursor position.

        Symbols declared in the document itself are left out; the editor
        already offers those. Outside a property value or `@include` the
        list is empty.
        """
        offset = _character_offset(document.text, position)
        context = find_completion_context(document.text, offset)
        if context is None:
            return lsp.CompletionList(is_incomplete=False, items=[])

        document_uri = normalize_uri(document.uri)
        imports = self.document_links(document)
        items = []
        for kind in context.kinds:
            for symbol in self.resolver.resolve_by_prefix(context.partial, kind):
                if symbol.uri == document_uri:
                    continue
                items.append(
                    lsp.CompletionItem(
                        label=symbol.name,
                        kind=COMPLETION_KINDS[kind],
                        documentation=lsp.MarkupContent(
                            kind=lsp.MarkupKind.Markdown,
                            value=self.provenance(symbol, imports),
                        ),
                    )
                )

        logger.debug(f"Completion for '{context.partial}' in {document_uri}: {len(items)} items")
        return lsp.CompletionList(is_incomplete=False, items=items)


def _character_offset(text: str, position: lsp.Position) -> int:
    lines = text.split("\n")
    if position.line >= len(lines):
        return len(text)
    preceding = sum(len(line) + 1 for line in lines[:position.line])
    return preceding + min(position.character, len(lines[position.line]))
