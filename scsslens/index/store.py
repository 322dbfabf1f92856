"""Per-workspace symbol store."""

import threading
from typing import Iterator, Optional

from ..models import DocumentRecord


class SymbolStore:
    """Document URI -> DocumentRecord mapping.

    `set` replaces a record wholesale, so readers see either the old record
    or the new one, never a mix. Iteration order is insertion order; a
    re-set keeps the document's original position.
    """

    def __init__(self):
        self._records: dict[str, DocumentRecord] = {}
        self._lock = threading.Lock()

    def set(self, uri: str, record: DocumentRecord) -> None:
        with self._lock:
            self._records[uri] = record

    def delete(self, uri: str) -> bool:
        """Remove a record. Returns True if it existed."""
        with self._lock:
            return self._records.pop(uri, None) is not None

    def get(self, uri: str) -> Optional[DocumentRecord]:
        return self._records.get(uri)

    def get_all(self) -> list[DocumentRecord]:
        """Snapshot of all records."""
        with self._lock:
            return list(self._records.values())

    def items(self) -> list[tuple[str, DocumentRecord]]:
        with self._lock:
            return list(self._records.items())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __contains__(self, uri: str) -> bool:
        return uri in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self.uris())

    def uris(self) -> list[str]:
        with self._lock:
            return list(self._records)
