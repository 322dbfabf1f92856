"""Hover information."""

from typing import Optional

from lsprotocol import types as lsp

from ..models import TextDocument
from .base import Query


class HoverQuery(Query[Optional[lsp.Hover]]):
    """Show where the symbol under the cursor is declared.

    None when the cursor is not on a symbol reference. A reference that
    resolves to nothing still gets a Hover, with empty Markdown.
    """

    def execute(self, document: TextDocument, position: lsp.Position) -> Optional[lsp.Hover]:
        reference = self.reference_at(document, position)
        if reference is None:
            return None

        imports = self.document_links(document)
        result = self.resolver.resolve(reference.name, reference.kind, imports)

        value = "".join(self.provenance(symbol, imports) + "\n" for symbol in result.candidates)
        return lsp.Hover(contents=lsp.MarkupContent(kind=lsp.MarkupKind.Markdown, value=value))
