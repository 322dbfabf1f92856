"""Query classes for scss-lens."""

from .base import Query
from .workspace_symbol import WorkspaceSymbolQuery
from .completion import CompletionQuery
from .definition import DefinitionQuery
from .hover import HoverQuery
from .signature_help import SignatureHelpQuery

__all__ = [
    "Query",
    "WorkspaceSymbolQuery",
    "CompletionQuery",
    "DefinitionQuery",
    "HoverQuery",
    "SignatureHelpQuery",
]
