"""Import reference resolution.

Follows the css-loader / sass-loader conventions:

- `/x` resolves against the workspace root;
- `~pkg/x` (but not `~/x`) resolves through `node_modules` directories,
  searched from the importing document upward;
- anything else resolves relative to the importing document.

Each base path is tried with the Sass file conventions (extension,
partial underscore, index files). A reference resolves only when one of
the candidates exists on disk.
"""

import re
from pathlib import Path
from typing import Iterator, Optional

from ..models import ImportLink
from ..uris import path_to_uri, uri_to_path

# sass:math, http://, data: and friends
_RE_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")

EXTENSIONS = (".scss", ".css")


def resolve_reference(reference: str, document_uri: str, root_uri: Optional[str] = None) -> Optional[str]:
    """Resolve an import reference to a document URI.

    Args:
        reference: Reference as written in the import statement.
        document_uri: URI of the importing document.
        root_uri: Workspace root URI, needed for absolute references.

    Returns:
        URI of the first existing candidate file, or None.
    """
    if not reference or reference.startswith("//") or _RE_SCHEME.match(reference):
        return None

    document_path = uri_to_path(document_uri)
    if document_path is None:
        return None

    for base in _base_paths(reference, Path(document_path).parent, root_uri):
        for candidate in _candidates(base):
            if candidate.is_file():
                return path_to_uri(candidate)

    return None


def resolve_links(references: list[str], document_uri: str, root_uri: Optional[str] = None) -> list[ImportLink]:
    """Build ImportLinks for references written in one document."""
    return [
        ImportLink(source=reference, target=resolve_reference(reference, document_uri, root_uri))
        for reference in references
    ]


def _base_paths(reference: str, directory: Path, root_uri: Optional[str]) -> Iterator[Path]:
    if reference.startswith("/"):
        root_path = uri_to_path(root_uri) if root_uri else None
        if root_path is not None:
            yield Path(root_path) / reference.lstrip("/")
        return

    if reference.startswith("~") and not reference.startswith("~/"):
        module = reference[1:]
        for folder in (directory, *directory.parents):
            yield folder / "node_modules" / module
        return

    yield directory / reference


def _candidates(base: Path) -> Iterator[Path]:
    if not base.name:
        return
    if base.suffix in EXTENSIONS:
        yield base
        yield base.with_name("_" + base.name)
        return

    yield base.with_name(base.name + ".scss")
    yield base.with_name("_" + base.name + ".scss")
    yield base / "index.scss"
    yield base / "_index.scss"
    yield base.with_name(base.name + ".css")
