"""Workspaces and the manager that routes queries to the current one."""

import logging
import threading
from collections import defaultdict
from typing import Optional

from lsprotocol import types as lsp

from ..config import Settings
from ..models import TextDocument
from ..stylesheet import StylesheetService
from ..uris import normalize_uri, uri_to_path
from .scanner import FrontierScanner
from .store import SymbolStore

logger = logging.getLogger(__name__)


class Workspace:
    """One project root: its store, its scanner, and a writer lock.

    `init` and `update` hold the lock for the whole walk, so an update that
    arrives during the initial scan runs after it instead of interleaving.
    """

    def __init__(
        self,
        uri: str,
        settings: Optional[Settings] = None,
        stylesheets: Optional[StylesheetService] = None,
    ):
        self.uri = uri
        self.fs_path = uri_to_path(uri)
        self.settings = settings or Settings()
        self.stylesheets = stylesheets or StylesheetService()
        self.store = SymbolStore()
        self.scanner = FrontierScanner(self.store, self.stylesheets, self.settings, root_uri=uri)
        self._lock = threading.Lock()

    def init(self) -> list[str]:
        if self.fs_path is None:
            logger.warning(f"Workspace {self.uri} is not a local folder, nothing to scan")
            return []
        with self._lock:
            return self.scanner.scan(self.fs_path)

    def update(self, files: list[str]) -> list[str]:
        with self._lock:
            return self.scanner.update(files)

    def owns(self, uri: str) -> bool:
        return uri.startswith(self.uri)

    def relative(self, uri: str) -> str:
        """Path of a document relative to the root, `./` prefixed."""
        return uri.replace(self.uri, ".", 1)


class WorkspaceManager:
    """Owns every open workspace and tracks the current one.

    The current workspace is None until the first active-document
    notification, and again whenever the focused document lies outside
    every root. While it is None every query returns an empty result.
    """

    def __init__(self, settings: Optional[Settings] = None, stylesheets: Optional[StylesheetService] = None):
        self.settings = settings or Settings()
        self.stylesheets = stylesheets or StylesheetService()
        self._workspaces: dict[str, Workspace] = {}
        self.current: Optional[Workspace] = None

    @property
    def workspaces(self) -> list[Workspace]:
        return list(self._workspaces.values())

    def get_workspace(self, uri: str) -> Optional[Workspace]:
        return self._workspaces.get(normalize_uri(uri))

    def init_workspace(self, uri: str) -> Workspace:
        """Register a workspace root and run the full scan."""
        uri = normalize_uri(uri)
        logger.debug(f"Trying to create workspace {uri}")
        workspace = Workspace(uri, self.settings, self.stylesheets)
        self._workspaces[uri] = workspace
        workspace.init()
        logger.info(f"Indexed {len(workspace.store)} documents in {uri}")
        return workspace

    def remove_workspace(self, uri: str) -> bool:
        """Drop a workspace and its store. Returns True if it existed."""
        uri = normalize_uri(uri)
        logger.debug(f"Trying to delete workspace {uri}")
        workspace = self._workspaces.pop(uri, None)
        if workspace is None:
            return False
        if self.current is workspace:
            self.current = None
        workspace.store.clear()
        return True

    def update_by_changed_files(self, files: list[str]) -> None:
        """Re-index changed files, grouped by the workspace that owns them.

        Files outside every workspace root are ignored.
        """
        actions: dict[str, list[str]] = defaultdict(list)
        for file in files:
            uri = normalize_uri(file)
            workspace = self._find_owner(uri)
            path = uri_to_path(uri)
            if workspace is not None and path is not None:
                actions[workspace.uri].append(path)

        for workspace_uri, paths in actions.items():
            logger.debug(f"Trying to update workspace files {workspace_uri}: {paths}")
            workspace = self._workspaces.get(workspace_uri)
            if workspace is not None:
                workspace.update(paths)

    def set_active_document(self, uri: str) -> Optional[Workspace]:
        """Make the workspace owning `uri` current (None if no root matches)."""
        self.current = self._find_owner(normalize_uri(uri))
        return self.current

    def _find_owner(self, uri: str) -> Optional[Workspace]:
        for workspace in self._workspaces.values():
            if workspace.owns(uri):
                return workspace
        return None

    # Queries against the current workspace

    def resolve_workspace_symbol(self, query: str) -> list[lsp.SymbolInformation]:
        from ..queries import WorkspaceSymbolQuery

        if self.current is None:
            return []
        return WorkspaceSymbolQuery(self.current).execute(query)

    def on_completion(self, document: TextDocument, position: lsp.Position) -> Optional[lsp.CompletionList]:
        from ..queries import CompletionQuery

        if self.current is None:
            return None
        return CompletionQuery(self.current).execute(document, position)

    def on_definition(self, document: TextDocument, position: lsp.Position) -> Optional[list[lsp.Location]]:
        from ..queries import DefinitionQuery

        if self.current is None:
            return None
        return DefinitionQuery(self.current).execute(document, position)

    def on_hover(self, document: TextDocument, position: lsp.Position) -> Optional[lsp.Hover]:
        from ..queries import HoverQuery

        if self.current is None:
            return None
        return HoverQuery(self.current).execute(document, position)

    def on_signature_help(self, document: TextDocument, position: lsp.Position) -> Optional[lsp.SignatureHelp]:
        from ..queries import SignatureHelpQuery

        if self.current is None:
            return None
        return SignatureHelpQuery(self.current).execute(document, position)
