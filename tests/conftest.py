"""Shared fixtures for scss-lens tests."""

from pathlib import Path

import pytest

from scsslens.models import DocumentRecord, ImportLink, RangeSpec, Symbol, SymbolKind


def make_symbol(name: str, kind: SymbolKind = SymbolKind.VARIABLE, uri: str = "file:///project/a.scss", line: int = 0) -> Symbol:
    return Symbol(name=name, kind=kind, uri=uri, range=RangeSpec(line, 0, line, len(name)))


def make_record(uri: str, variables=(), functions=(), mixins=(), imports=()) -> DocumentRecord:
    """Build a record from bare names; imports are (source, target) pairs."""
    return DocumentRecord(
        variables=[make_symbol(n, SymbolKind.VARIABLE, uri, i) for i, n in enumerate(variables)],
        functions=[make_symbol(n, SymbolKind.FUNCTION, uri, i) for i, n in enumerate(functions)],
        mixins=[make_symbol(n, SymbolKind.MIXIN, uri, i) for i, n in enumerate(mixins)],
        imports=[ImportLink(source=s, target=t) for s, t in imports],
    )


@pytest.fixture
def write_files(tmp_path):
    """Write {relative path: content} under tmp_path and return the root."""

    def _write(files: dict[str, str]) -> Path:
        for name, content in files.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _write
