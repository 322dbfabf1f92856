"""Go to definition."""

from typing import Optional

from lsprotocol import types as lsp

from ..models import TextDocument
from .base import Query, to_location


class DefinitionQuery(Query[Optional[list[lsp.Location]]]):
    """Locate the declarations a reference under the cursor may point to."""

    def execute(self, document: TextDocument, position: lsp.Position) -> Optional[list[lsp.Location]]:
        """Execute definition lookup.

        Returns:
            Every matching declaration (a single one when the document
            imports its file), or None when the cursor is not on a
            variable, function or mixin reference.
        """
        reference = self.reference_at(document, position)
        if reference is None:
            return None

        result = self.resolver.resolve(reference.name, reference.kind, self.document_links(document))
        return [to_location(symbol) for symbol in result.candidates]
