"""scss-lens - Workspace symbol index and code intelligence for SCSS."""

__version__ = "0.1.0"

from .config import Settings, load_settings
from .models import Symbol, SymbolKind, ImportLink, DocumentRecord, TextDocument
from .index import SymbolStore, FrontierScanner, SymbolResolver, Workspace, WorkspaceManager
from .queries import (
    WorkspaceSymbolQuery,
    CompletionQuery,
    DefinitionQuery,
    HoverQuery,
    SignatureHelpQuery,
)

__all__ = [
    "Settings",
    "load_settings",
    "Symbol",
    "SymbolKind",
    "ImportLink",
    "DocumentRecord",
    "TextDocument",
    "SymbolStore",
    "FrontierScanner",
    "SymbolResolver",
    "Workspace",
    "WorkspaceManager",
    "WorkspaceSymbolQuery",
    "CompletionQuery",
    "DefinitionQuery",
    "HoverQuery",
    "SignatureHelpQuery",
]
