"""Frontier scanner: discovers and (re)indexes SCSS files.

The frontier starts with the glob matches (or the changed files) and grows
with every resolved import target found while parsing. Each path is
processed at most once per walk, one file at a time.
"""

import logging
from collections import deque
from pathlib import Path
from typing import Optional

from ..config import Settings
from ..models import DocumentRecord
from ..stylesheet import StylesheetService
from ..uris import path_to_uri, uri_to_path
from .store import SymbolStore

logger = logging.getLogger(__name__)


class FrontierScanner:
    """Populates a SymbolStore by walking files and their imports."""

    def __init__(
        self,
        store: SymbolStore,
        stylesheets: StylesheetService,
        settings: Optional[Settings] = None,
        root_uri: Optional[str] = None,
    ):
        """Initialize the scanner.

        Args:
            store: Store receiving the Document Records.
            stylesheets: Parser used to build records.
            settings: Include glob and excluded directory names.
            root_uri: Workspace root, used for absolute import references.
        """
        self.store = store
        self.stylesheets = stylesheets
        self.settings = settings or Settings()
        self.root_uri = root_uri

    def scan(self, root_path: str | Path) -> list[str]:
        """Index every source file under a root, plus everything they import.

        Returns:
            Paths processed by the walk, in processing order.
        """
        entries = self.find_files(root_path)
        logger.debug(f"Found {len(entries)} entries under {root_path}")
        return self._walk(entries)

    def update(self, entries: list[str]) -> list[str]:
        """Re-index specific files (and any newly reachable imports)."""
        return self._walk(entries)

    def find_files(self, root_path: str | Path) -> list[str]:
        """Glob source files under a root, skipping excluded directories."""
        root = Path(root_path)
        excluded = set(self.settings.exclude)
        files = []
        for path in root.glob(self.settings.include):
            relative = path.relative_to(root)
            if excluded.intersection(relative.parts[:-1]):
                continue
            if path.is_file():
                files.append(str(path.absolute()))
        return sorted(files)

    def _walk(self, entries: list[str]) -> list[str]:
        frontier: deque[str] = deque()
        seen: set[str] = set()
        processed: list[str] = []

        def enqueue(path: str):
            key = path_to_uri(path)
            if key not in seen:
                seen.add(key)
                frontier.append(path)

        for entry in entries:
            enqueue(entry)

        while frontier:
            path = frontier.popleft()
            processed.append(path)
            for target in self._index_file(path):
                target_path = uri_to_path(target)
                if target_path is not None:
                    enqueue(target_path)

        return processed

    def _index_file(self, path: str) -> list[str]:
        """Index one file and return its resolved import targets."""
        uri = path_to_uri(path)
        logger.debug(f"Trying to find symbols for file {path}")

        if Path(path).is_dir():
            return []

        try:
            content = Path(path).read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            logger.debug(f"Deleting a non-existent file {path}")
            self.store.delete(uri)
            return []
        except OSError as e:
            logger.warning(f"Cannot read {path}: {e}")
            self.store.set(uri, DocumentRecord())
            return []

        record = self.stylesheets.get_record(uri, content, self.root_uri)
        logger.debug(
            f"Found symbols for {path}: {len(record.variables)} variables, "
            f"{len(record.functions)} functions, {len(record.mixins)} mixins, "
            f"{len(record.imports)} imports"
        )
        self.store.set(uri, record)

        return [link.target for link in record.imports if link.target is not None]
