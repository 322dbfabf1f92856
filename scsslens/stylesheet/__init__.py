"""Stylesheet parsing: symbols, import links, cursor lookups."""

from .parser import ParsedStylesheet, parse, find_symbols, find_import_references, find_node_at_offset, offset_at
from .links import resolve_reference, resolve_links
from .completion import find_completion_context
from .references import find_symbol_reference, find_call_reference
from .service import StylesheetService

__all__ = [
    "ParsedStylesheet",
    "parse",
    "find_symbols",
    "find_import_references",
    "find_node_at_offset",
    "offset_at",
    "resolve_reference",
    "resolve_links",
    "find_completion_context",
    "find_symbol_reference",
    "find_call_reference",
    "StylesheetService",
]
