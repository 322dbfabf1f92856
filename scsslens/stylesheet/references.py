"""Classification of the symbol reference under the cursor."""

import re
from typing import Optional, TYPE_CHECKING

from ..models import SymbolKind, SymbolReference
from .parser import ParsedStylesheet, find_node_at_offset

if TYPE_CHECKING:
    from tree_sitter import Node

_RE_VARIABLE = re.compile(rb"\$[\w-]+")
_RE_INCLUDE_NAME = re.compile(r"@include\s+([\w-]+)")

CALL_NODES = frozenset({"call_expression"})
INCLUDE_NODES = frozenset({"include_statement"})
NAME_NODES = frozenset({"identifier", "function_name"})


def find_symbol_reference(parsed: ParsedStylesheet, offset: int) -> Optional[SymbolReference]:
    """Return the variable, function or mixin reference at a byte offset.

    When nothing is found at the offset itself, the byte to the left is
    tried as well, so a cursor placed right after `$primary` still hits it.
    """
    for at in (offset, offset - 1):
        if at < 0:
            continue
        node = find_node_at_offset(parsed, at)
        if node is None:
            continue
        reference = _classify(parsed, node, at)
        if reference is not None:
            return reference
    return None


def find_call_reference(parsed: ParsedStylesheet, offset: int) -> Optional[SymbolReference]:
    """Return the function call or `@include` enclosing a byte offset."""
    node = find_node_at_offset(parsed, offset)
    while node is not None:
        if node.type in INCLUDE_NODES:
            name = _include_name(parsed, node)
            if name is not None:
                return SymbolReference(name=name, kind=SymbolKind.MIXIN)
        elif node.type in CALL_NODES and not _within(node, INCLUDE_NODES, 1):
            name_node = _call_name(node)
            if name_node is not None:
                return SymbolReference(name=parsed.text_of(name_node), kind=SymbolKind.FUNCTION)
        node = node.parent
    return None


def _classify(parsed: ParsedStylesheet, node: "Node", offset: int) -> Optional[SymbolReference]:
    name = _variable_at(parsed, node, offset)
    if name is not None:
        return SymbolReference(name=name, kind=SymbolKind.VARIABLE)

    if node.type not in NAME_NODES or node.parent is None:
        return None
    text = parsed.text_of(node)

    # `@include name(...)` may come out as a call inside the include
    include = _within(node, INCLUDE_NODES, 2)
    if include is not None and _include_name(parsed, include) == text:
        return SymbolReference(name=text, kind=SymbolKind.MIXIN)
    if node.type == "function_name" or node.parent.type in CALL_NODES:
        return SymbolReference(name=text, kind=SymbolKind.FUNCTION)
    return None


def _variable_at(parsed: ParsedStylesheet, node: "Node", offset: int) -> Optional[str]:
    """Find a `$name` token in the node's text that spans the offset."""
    text = parsed.source[node.start_byte:node.end_byte]
    relative = offset - node.start_byte
    for match in _RE_VARIABLE.finditer(text):
        if match.start() <= relative < match.end():
            return match.group(0).decode("utf-8")
    return None


def _within(node: "Node", types: frozenset, depth: int) -> Optional["Node"]:
    """Closest ancestor of one of `types`, at most `depth` levels up."""
    current = node.parent
    for _ in range(depth):
        if current is None:
            return None
        if current.type in types:
            return current
        current = current.parent
    return None


def _include_name(parsed: ParsedStylesheet, node: "Node") -> Optional[str]:
    match = _RE_INCLUDE_NAME.match(parsed.text_of(node))
    return match.group(1) if match else None


def _call_name(node: "Node") -> Optional["Node"]:
    for child in node.children:
        if child.type in NAME_NODES:
            return child
    return None
