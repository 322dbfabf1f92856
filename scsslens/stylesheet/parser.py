"""SCSS parsing on top of tree-sitter.

Uses the `scss` grammar from tree-sitter-language-pack for cursor lookups.
Declarations and imports are read from the statement text instead (see
`statements`): the grammar has no Sass maps, and the ERROR nodes it
produces for them can cover the statements that follow.
"""

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Optional, TYPE_CHECKING

from tree_sitter_language_pack import get_parser

from ..models import RangeSpec, Symbol, SymbolKind
from .statements import BlockClose, LineIndex, Statement, iter_statements

if TYPE_CHECKING:
    from tree_sitter import Node, Parser, Tree

GRAMMAR = "scss"

_RE_VARIABLE_DECLARATION = re.compile(r"(\$[\w-]+)\s*:")
_RE_MIXIN_DECLARATION = re.compile(r"@mixin\s+([\w-]+)")
_RE_FUNCTION_DECLARATION = re.compile(r"@function\s+([\w-]+)")
_RE_IMPORT = re.compile(r"@import\s")
_RE_MODULE = re.compile(r"""@(?:use|forward)\s+(['"])(.*?)\1""")
_RE_QUOTED = re.compile(r"""(?<!url\()(['"])(.*?)\1""")

_parser: Optional["Parser"] = None


def _get_parser() -> "Parser":
    """Return the process-wide SCSS parser (lazy-loaded)."""
    global _parser
    if _parser is None:
        _parser = get_parser(GRAMMAR)
    return _parser


@dataclass
class ParsedStylesheet:
    """A parse tree together with the exact bytes it was built from."""

    source: bytes
    tree: "Tree"

    @property
    def root(self) -> "Node":
        return self.tree.root_node

    @cached_property
    def text(self) -> str:
        return self.source.decode("utf-8", errors="replace")

    def text_of(self, node: "Node") -> str:
        return self.source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    def range_of(self, node: "Node") -> RangeSpec:
        """Convert a node's byte span to a zero-based line/character range."""
        return RangeSpec(
            start_line=node.start_point[0],
            start_col=self._character_at(node.start_byte, node.start_point),
            end_line=node.end_point[0],
            end_col=self._character_at(node.end_byte, node.end_point),
        )

    def _character_at(self, byte_offset: int, point: tuple[int, int]) -> int:
        line_start = byte_offset - point[1]
        return len(self.source[line_start:byte_offset].decode("utf-8", errors="replace"))


def parse(text: str) -> ParsedStylesheet:
    """Parse SCSS text. Malformed input still yields a tree (with ERROR nodes)."""
    source = text.encode("utf-8")
    return ParsedStylesheet(source=source, tree=_get_parser().parse(source))


def find_symbols(uri: str, parsed: ParsedStylesheet) -> dict[SymbolKind, list[Symbol]]:
    """Collect variable, function and mixin declarations of one document.

    Variables are found at any nesting level, map values included.
    `@function` and `@mixin` ranges run to the closing brace of their body.
    Returns a dict keyed by kind; every kind is present, possibly empty.
    """
    found: dict[SymbolKind, list[Symbol]] = {kind: [] for kind in SymbolKind}
    lines = LineIndex(parsed.text)
    # One entry per open block: (kind, name, start) or None
    blocks: list[Optional[tuple[SymbolKind, str, int]]] = []

    def add(kind: SymbolKind, name: str, start: int, end: int):
        start_line, start_col = lines.position(start)
        end_line, end_col = lines.position(end)
        found[kind].append(Symbol(name=name, kind=kind, uri=uri, range=RangeSpec(start_line, start_col, end_line, end_col)))

    for item in iter_statements(parsed.text):
        if isinstance(item, BlockClose):
            opened = blocks.pop() if blocks else None
            if opened is not None:
                kind, name, start = opened
                add(kind, name, start, item.offset + 1)
            continue

        if item.terminator == "{":
            blocks.append(_block_declaration(item))
            continue

        match = _RE_VARIABLE_DECLARATION.match(item.text)
        if match:
            end = item.end + 1 if item.terminator == ";" else len(item.text.rstrip()) + item.start
            add(SymbolKind.VARIABLE, match.group(1), item.start, end)

    return found


def _block_declaration(statement: Statement) -> Optional[tuple[SymbolKind, str, int]]:
    match = _RE_MIXIN_DECLARATION.match(statement.text)
    if match:
        return SymbolKind.MIXIN, match.group(1), statement.start
    match = _RE_FUNCTION_DECLARATION.match(statement.text)
    if match:
        return SymbolKind.FUNCTION, match.group(1), statement.start
    return None


def find_import_references(parsed: ParsedStylesheet) -> list[str]:
    """Return import/use/forward references as written, quotes stripped.

    `@import` may list several comma-separated strings; `url(...)` entries
    are skipped. `@use` and `@forward` take only their module string, not
    the strings of a `with (...)` configuration.
    """
    references = []
    for item in iter_statements(parsed.text):
        if not isinstance(item, Statement):
            continue
        if _RE_IMPORT.match(item.text):
            references.extend(reference for _, reference in _RE_QUOTED.findall(item.text) if reference)
            continue
        match = _RE_MODULE.match(item.text)
        if match and match.group(2):
            references.append(match.group(2))
    return references


def find_node_at_offset(parsed: ParsedStylesheet, offset: int) -> Optional["Node"]:
    """Return the smallest named node spanning the byte offset."""
    if offset < 0 or offset > len(parsed.source):
        return None
    node = parsed.root.named_descendant_for_byte_range(offset, offset)
    if node is None or node == parsed.root:
        return None
    return node


def offset_at(text: str, line: int, character: int) -> int:
    """Convert a zero-based line/character position into a UTF-8 byte offset."""
    lines = text.split("\n")
    if line >= len(lines):
        return len(text.encode("utf-8"))
    preceding = sum(len(value.encode("utf-8")) + 1 for value in lines[:line])
    return preceding + len(lines[line][:character].encode("utf-8"))
