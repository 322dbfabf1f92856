"""Statement splitting on raw SCSS text.

tree-sitter-scss has no rule for Sass maps, and its error recovery around
one can swallow the statements that follow. Declarations and imports are
therefore read from the text split at `;`, `{` and `}`, skipping strings,
comments and anything nested in parentheses, brackets or `#{...}`.
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterator, Optional

OPENERS = {"(": ")", "[": "]"}


@dataclass
class Statement:
    """One statement: `text[start:end]`, ended by `terminator`.

    `terminator` is `;`, `{`, `}` or "" at end of input. `depth` counts the
    blocks enclosing the statement.
    """

    start: int
    end: int
    terminator: str
    depth: int
    text: str


@dataclass
class BlockClose:
    """A `}` at `offset` closing a block opened at `depth`."""

    offset: int
    depth: int


def iter_statements(text: str) -> Iterator[Statement | BlockClose]:
    """Yield statements in order, plus a BlockClose after each block ends.

    Empty statements are not yielded. An unbalanced `(` is dropped at the
    next `;`, `{` or `}` so one typo does not hide the rest of the file.
    """
    depth = 0
    nesting: list[str] = []
    start: Optional[int] = None
    i = 0
    n = len(text)

    while i < n:
        char = text[i]

        if char in "\"'":
            if start is None:
                start = i
            i = _skip_string(text, i)
            continue
        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = n if end < 0 else end + 2
            continue
        if text.startswith("//", i) and not nesting:
            end = text.find("\n", i)
            i = n if end < 0 else end
            continue

        if text.startswith("#{", i):
            if start is None:
                start = i
            nesting.append("}")
            i += 2
            continue
        if nesting and char == nesting[-1]:
            nesting.pop()
            i += 1
            continue
        if char in OPENERS:
            if start is None:
                start = i
            nesting.append(OPENERS[char])
            i += 1
            continue

        if char in ";{}":
            nesting.clear()
            if start is not None:
                yield Statement(start, i, char, depth, text[start:i])
                start = None
            if char == "{":
                depth += 1
            elif char == "}" and depth > 0:
                depth -= 1
                yield BlockClose(i, depth)
            i += 1
            continue

        if start is None and not char.isspace():
            start = i
        i += 1

    if start is not None:
        yield Statement(start, n, "", depth, text[start:n])


def _skip_string(text: str, i: int) -> int:
    quote = text[i]
    i += 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == quote or text[i] == "\n":
            return i + 1
        i += 1
    return i


class LineIndex:
    """Maps character offsets of a text to zero-based (line, character)."""

    def __init__(self, text: str):
        self._starts = [0]
        for index, char in enumerate(text):
            if char == "\n":
                self._starts.append(index + 1)

    def position(self, offset: int) -> tuple[int, int]:
        line = bisect_right(self._starts, offset) - 1
        return line, offset - self._starts[line]
