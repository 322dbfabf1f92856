"""Completion context detection.

Works on the raw text of the statement in front of the cursor: the
statement being typed is almost never complete, and tree-sitter turns it
into ERROR nodes that carry no usable structure.
"""

import re
from typing import Optional

from ..models import CompletionContext, SymbolKind
from .statements import Statement, iter_statements

_RE_INCLUDE = re.compile(r"@include\s+([\w-]*)$")
_RE_PROPERTY_VALUE = re.compile(r"[\w$-]+\s*:(?!:)(.*)$", re.DOTALL)
_RE_PARTIAL = re.compile(r"[\w$-]*$")

_STATEMENT_BOUNDARIES = "{};"

PROPERTY_VALUE_KINDS = (SymbolKind.VARIABLE, SymbolKind.FUNCTION)
MIXIN_REFERENCE_KINDS = (SymbolKind.MIXIN,)


def find_completion_context(text: str, offset: int) -> Optional[CompletionContext]:
    """Classify the cursor position for completion.

    Args:
        text: Full document text.
        offset: Character offset of the cursor inside `text`.

    Returns:
        A CompletionContext for a mixin reference (`@include na|`) or a
        property value (`color: $pri|`), or None anywhere else.
    """
    current = _current_statement(text[:offset])
    if current is None:
        return None
    statement = current.text

    match = _RE_INCLUDE.match(statement)
    if match:
        return CompletionContext(kinds=MIXIN_REFERENCE_KINDS, partial=match.group(1))

    match = _RE_PROPERTY_VALUE.match(statement)
    if match is None or _opens_block(text, offset):
        return None
    # Outside any block only `$name: value` is a declaration; `a:hov` is a selector
    if current.depth == 0 and not statement.startswith("$"):
        return None

    partial = _RE_PARTIAL.search(match.group(1)).group(0)
    return CompletionContext(kinds=PROPERTY_VALUE_KINDS, partial=partial)


def _opens_block(text: str, offset: int) -> bool:
    """True when the statement under the cursor is a selector (`a:hov|er {`)."""
    for char in text[offset:]:
        if char in _STATEMENT_BOUNDARIES:
            return char == "{"
    return False


def _current_statement(before: str) -> Optional[Statement]:
    """The unfinished statement at the end of `before`, if any."""
    current = None
    for item in iter_statements(before):
        current = item if isinstance(item, Statement) and item.terminator == "" else None
    return current
