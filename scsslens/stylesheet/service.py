"""Stylesheet service: the single entry point the index uses for parsing."""

import logging
from typing import Optional

from ..models import DocumentRecord, ImportLink, SymbolKind
from .links import resolve_links
from .parser import ParsedStylesheet, find_import_references, find_symbols, parse

logger = logging.getLogger(__name__)


class StylesheetService:
    """Parses SCSS documents into Document Records and resolved import links.

    Holds no per-document state; one instance can be shared by every
    workspace.
    """

    def parse(self, text: str) -> ParsedStylesheet:
        return parse(text)

    def get_record(self, uri: str, text: str, root_uri: Optional[str] = None) -> DocumentRecord:
        """Build the Document Record for one document.

        Args:
            uri: Canonical URI of the document.
            text: Document contents.
            root_uri: Workspace root, used for absolute import references.
        """
        parsed = self.parse(text)
        symbols = find_symbols(uri, parsed)
        return DocumentRecord(
            variables=symbols[SymbolKind.VARIABLE],
            functions=symbols[SymbolKind.FUNCTION],
            mixins=symbols[SymbolKind.MIXIN],
            imports=self._links(parsed, uri, root_uri),
        )

    def resolve_document_links(self, uri: str, text: str, root_uri: Optional[str] = None) -> list[ImportLink]:
        """Return the import links written in a document, resolved against disk."""
        return self._links(self.parse(text), uri, root_uri)

    def _links(self, parsed: ParsedStylesheet, uri: str, root_uri: Optional[str]) -> list[ImportLink]:
        links = resolve_links(find_import_references(parsed), uri, root_uri)
        unresolved = [link.source for link in links if link.target is None]
        if unresolved:
            logger.debug(f"Unresolved imports in {uri}: {unresolved}")
        return links
