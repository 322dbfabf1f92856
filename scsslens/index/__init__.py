"""Workspace symbol index."""

from .store import SymbolStore
from .scanner import FrontierScanner
from .resolver import SymbolResolver, pick_imported, find_link
from .workspace import Workspace, WorkspaceManager

__all__ = [
    "SymbolStore",
    "FrontierScanner",
    "SymbolResolver",
    "pick_imported",
    "find_link",
    "Workspace",
    "WorkspaceManager",
]
