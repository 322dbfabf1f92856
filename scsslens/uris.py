"""Conversions between file system paths and document URIs.

Every URI stored in the index goes through `path_to_uri`, so two spellings
of the same file always map to the same key.
"""

import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote

from pygls import uris


def path_to_uri(path: str | Path) -> str:
    """Return the canonical file:// URI for a local path."""
    normalized = os.path.normpath(os.path.abspath(str(path)))
    return uris.from_fs_path(normalized)


def uri_to_path(uri: str) -> Optional[str]:
    """Return the local path for a file:// URI, or None for other schemes."""
    if not uri.startswith("file:"):
        return None
    path = uris.to_fs_path(uri)
    return unquote(path) if path else None


def normalize_uri(uri_or_path: str) -> str:
    """Canonicalize a file URI or a bare path; other URIs pass through."""
    if "://" not in uri_or_path:
        return path_to_uri(uri_or_path)
    path = uri_to_path(uri_or_path)
    if path is None:
        return uri_or_path
    return path_to_uri(path)
