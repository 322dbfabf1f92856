"""Base query interface."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar, TYPE_CHECKING

from lsprotocol import types as lsp

from ..index.resolver import SymbolResolver, find_link
from ..models import ImportLink, RangeSpec, Symbol, SymbolKind, SymbolReference, TextDocument
from ..stylesheet import find_call_reference, find_symbol_reference, offset_at
from ..uris import normalize_uri

if TYPE_CHECKING:
    from ..index.workspace import Workspace

T = TypeVar("T")

LSP_SYMBOL_KINDS = {
    SymbolKind.VARIABLE: lsp.SymbolKind.Variable,
    SymbolKind.FUNCTION: lsp.SymbolKind.Function,
    SymbolKind.MIXIN: lsp.SymbolKind.Method,
}


class Query(ABC, Generic[T]):
    """Base query interface.

    All queries take the workspace they run against; the manager decides
    which one that is.
    """

    def __init__(self, workspace: "Workspace"):
        self.workspace = workspace
        self.resolver = SymbolResolver(workspace.store)

    @abstractmethod
    def execute(self, *args, **params) -> T:
        """Execute the query and return typed result."""
        pass

    def document_links(self, document: TextDocument) -> list[ImportLink]:
        """Import links written in the (possibly unsaved) document text."""
        return self.workspace.stylesheets.resolve_document_links(
            normalize_uri(document.uri), document.text, self.workspace.uri
        )

    def reference_at(self, document: TextDocument, position: lsp.Position) -> Optional[SymbolReference]:
        parsed = self.workspace.stylesheets.parse(document.text)
        return find_symbol_reference(parsed, offset_at(document.text, position.line, position.character))

    def call_at(self, document: TextDocument, position: lsp.Position) -> Optional[SymbolReference]:
        parsed = self.workspace.stylesheets.parse(document.text)
        return find_call_reference(parsed, offset_at(document.text, position.line, position.character))

    def provenance(self, symbol: Symbol, imports: list[ImportLink]) -> str:
        """Markdown block telling where a symbol comes from.

        `// Symbol from module` with the import as written when the document
        imports the symbol's file, `// Implicitly` with the root-relative
        path otherwise.
        """
        link = find_link(symbol.uri, imports)
        if link is not None:
            return f"```scss\n// Symbol from module\n{link.source}\n```"
        return f"```scss\n// Implicitly\n{self.workspace.relative(symbol.uri)}\n```"


def to_lsp_range(range_spec: RangeSpec) -> lsp.Range:
    return lsp.Range(
        start=lsp.Position(line=range_spec.start_line, character=range_spec.start_col),
        end=lsp.Position(line=range_spec.end_line, character=range_spec.end_col),
    )


def to_location(symbol: Symbol) -> lsp.Location:
    return lsp.Location(uri=symbol.uri, range=to_lsp_range(symbol.range))
