"""Language server for SCSS workspaces (stdio transport).

Usage:
    scss-lens serve

Initialization options (all optional):
    {
        "activeDocumentUri": "file:///project/src/app.scss",
        "logLevel": "debug",
        "include": "**/*.scss",
        "exclude": [".git", "node_modules"]
    }
"""

import asyncio
import logging
from typing import Any, Callable, Optional, TypeVar

import msgspec
from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer

from .. import __version__
from ..config import Settings, configure_logging
from ..index import WorkspaceManager
from ..models import TextDocument

logger = logging.getLogger(__name__)

T = TypeVar("T")

SIGNATURE_TRIGGER_CHARACTERS = ["(", ",", ";"]


def run_safe(func: Callable[..., T], *args, context: str = "") -> Optional[T]:
    """Run a handler body; log any failure and return None instead of raising."""
    try:
        return func(*args)
    except Exception:
        logger.exception(f"Error while {context or getattr(func, '__name__', 'handling request')}")
        return None


class ScssLensServer(LanguageServer):
    """pygls server owning a WorkspaceManager."""

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__("scss-lens", __version__, text_document_sync_kind=lsp.TextDocumentSyncKind.Full)
        self.settings = settings or Settings()
        self.manager = WorkspaceManager(self.settings)
        self.folder_uris: list[str] = []
        self.active_document_uri: Optional[str] = None

    def text_document(self, uri: str) -> TextDocument:
        """Current editor contents of a document (falls back to disk)."""
        return TextDocument(uri=uri, text=self.workspace.get_text_document(uri).source)

    def apply_initialization_options(self, options: Any) -> None:
        if not isinstance(options, dict):
            return
        self.active_document_uri = options.get("activeDocumentUri")

        level = options.get("logLevel")
        if level:
            configure_logging(level)

        overrides = {key: options[key] for key in ("include", "exclude") if options.get(key) is not None}
        if overrides:
            try:
                self.settings = msgspec.convert({**msgspec.structs.asdict(self.settings), **overrides}, Settings)
            except msgspec.ValidationError as e:
                logger.warning(f"Ignoring invalid initialization options: {e}")
                return
            self.manager = WorkspaceManager(self.settings)

    def init_workspaces(self) -> None:
        """Index every folder of the session one after another."""
        for uri in self.folder_uris:
            run_safe(self.manager.init_workspace, uri, context=f"indexing workspace {uri}")
        if self.active_document_uri:
            self.manager.set_active_document(self.active_document_uri)


def create_server(settings: Optional[Settings] = None) -> ScssLensServer:
    """Build a server with every feature registered."""
    server = ScssLensServer(settings)

    @server.feature(lsp.INITIALIZE)
    def on_initialize(ls: ScssLensServer, params: lsp.InitializeParams):
        if params.workspace_folders:
            ls.folder_uris = [folder.uri for folder in params.workspace_folders]
        elif params.root_uri:
            ls.folder_uris = [params.root_uri]
        ls.apply_initialization_options(params.initialization_options)

    @server.feature(lsp.INITIALIZED)
    async def on_initialized(ls: ScssLensServer, params: lsp.InitializedParams):
        await asyncio.get_running_loop().run_in_executor(None, ls.init_workspaces)

    @server.feature(lsp.WORKSPACE_DID_CHANGE_WORKSPACE_FOLDERS)
    async def did_change_workspace_folders(ls: ScssLensServer, params: lsp.DidChangeWorkspaceFoldersParams):
        for folder in params.event.removed:
            run_safe(ls.manager.remove_workspace, folder.uri, context=f"removing workspace {folder.uri}")
        loop = asyncio.get_running_loop()
        for folder in params.event.added:
            await loop.run_in_executor(
                None,
                lambda uri=folder.uri: run_safe(ls.manager.init_workspace, uri, context=f"indexing workspace {uri}"),
            )

    @server.feature(lsp.WORKSPACE_DID_CHANGE_WATCHED_FILES)
    async def did_change_watched_files(ls: ScssLensServer, params: lsp.DidChangeWatchedFilesParams):
        uris = [change.uri for change in params.changes]
        await asyncio.get_running_loop().run_in_executor(
            None,
            lambda: run_safe(ls.manager.update_by_changed_files, uris, context="updating changed files"),
        )

    @server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
    def did_open(ls: ScssLensServer, params: lsp.DidOpenTextDocumentParams):
        run_safe(ls.manager.set_active_document, params.text_document.uri, context="switching active document")

    @server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
    def did_change(ls: ScssLensServer, params: lsp.DidChangeTextDocumentParams):
        run_safe(ls.manager.set_active_document, params.text_document.uri, context="switching active document")

    @server.feature(lsp.WORKSPACE_SYMBOL)
    def workspace_symbol(ls: ScssLensServer, params: lsp.WorkspaceSymbolParams):
        return run_safe(ls.manager.resolve_workspace_symbol, params.query, context="searching workspace symbols")

    @server.feature(lsp.TEXT_DOCUMENT_COMPLETION, lsp.CompletionOptions(trigger_characters=["$", "@"]))
    def completion(ls: ScssLensServer, params: lsp.CompletionParams):
        return run_safe(
            lambda: ls.manager.on_completion(ls.text_document(params.text_document.uri), params.position),
            context=f"completing in {params.text_document.uri}",
        )

    @server.feature(lsp.TEXT_DOCUMENT_DEFINITION)
    def definition(ls: ScssLensServer, params: lsp.DefinitionParams):
        return run_safe(
            lambda: ls.manager.on_definition(ls.text_document(params.text_document.uri), params.position),
            context=f"finding definition in {params.text_document.uri}",
        )

    @server.feature(lsp.TEXT_DOCUMENT_HOVER)
    def hover(ls: ScssLensServer, params: lsp.HoverParams):
        return run_safe(
            lambda: ls.manager.on_hover(ls.text_document(params.text_document.uri), params.position),
            context=f"hovering in {params.text_document.uri}",
        )

    @server.feature(
        lsp.TEXT_DOCUMENT_SIGNATURE_HELP,
        lsp.SignatureHelpOptions(trigger_characters=SIGNATURE_TRIGGER_CHARACTERS),
    )
    def signature_help(ls: ScssLensServer, params: lsp.SignatureHelpParams):
        return run_safe(
            lambda: ls.manager.on_signature_help(ls.text_document(params.text_document.uri), params.position),
            context=f"computing signature help in {params.text_document.uri}",
        )

    return server


def run_lsp_server(settings: Optional[Settings] = None):
    """Run the language server over stdio until the client disconnects."""
    server = create_server(settings)
    logger.info(f"scss-lens {__version__} listening on stdio")
    server.start_io()
