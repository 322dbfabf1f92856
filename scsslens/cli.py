"""Main CLI application."""

from pathlib import Path
from typing import Optional

import typer
from lsprotocol import types as lsp
from rich.console import Console

from .config import Settings, configure_logging, load_settings
from .index import Workspace, WorkspaceManager
from .models import TextDocument
from .output import print_hover, print_json, print_locations, print_scan_summary, print_symbols
from .uris import path_to_uri

app = typer.Typer(
    name="scss-lens",
    help="Index SCSS workspaces and answer symbol queries",
    add_completion=False,
)
console = Console()

ConfigOption = typer.Option(None, "--config", "-c", help="Path to settings JSON")
LogLevelOption = typer.Option(None, "--log-level", "-l", help="Logging level (DEBUG, INFO, WARNING, ...)")
JsonOption = typer.Option(False, "--json", "-j", help="Output as JSON")


def get_settings(config: Optional[Path], log_level: Optional[str]) -> Settings:
    """Load settings and set up logging, exiting on a bad config file."""
    if config is not None and not config.exists():
        console.print(f"[red]Error: Config file not found: {config}[/red]")
        raise typer.Exit(1)
    try:
        settings = load_settings(config, log_level=log_level)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    configure_logging(settings.log_level)
    return settings


def open_workspace(root: Path, settings: Settings) -> tuple[WorkspaceManager, Workspace]:
    """Index a root folder and make it the current workspace."""
    if not root.is_dir():
        console.print(f"[red]Error: Not a directory: {root}[/red]")
        raise typer.Exit(1)
    manager = WorkspaceManager(settings)
    workspace = manager.init_workspace(path_to_uri(root))
    manager.set_active_document(workspace.uri)
    return manager, workspace


def open_document(manager: WorkspaceManager, file: Path) -> TextDocument:
    """Read a document from disk and make its workspace current."""
    if not file.is_file():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)
    uri = path_to_uri(file)
    if manager.set_active_document(uri) is None:
        console.print(f"[red]Error: {file} is outside the workspace[/red]")
        raise typer.Exit(1)
    return TextDocument(uri=uri, text=file.read_text(encoding="utf-8", errors="replace"))


def to_position(line: int, column: int) -> lsp.Position:
    """Convert 1-based CLI coordinates to a zero-based LSP position."""
    if line < 1 or column < 1:
        console.print("[red]Error: LINE and COLUMN are 1-based[/red]")
        raise typer.Exit(1)
    return lsp.Position(line=line - 1, character=column - 1)


# =============================================================================
# Language Server Command
# =============================================================================


@app.command()
def serve(
    config: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
):
    """Start the language server (LSP over stdio).

    Logs go to stderr; stdout carries the protocol.
    """
    settings = get_settings(config, log_level)

    from .server import run_lsp_server
    run_lsp_server(settings)


# =============================================================================
# Query Commands
# =============================================================================


@app.command()
def scan(
    root: Path = typer.Argument(..., help="Workspace root folder"),
    config: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
    json_output: bool = JsonOption,
):
    """Index a workspace and print per-document symbol counts."""
    settings = get_settings(config, log_level)
    _, workspace = open_workspace(root, settings)
    print_scan_summary(workspace, as_json=json_output)


@app.command()
def symbols(
    root: Path = typer.Argument(..., help="Workspace root folder"),
    query: str = typer.Argument("", help="Symbol name prefix"),
    config: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
    json_output: bool = JsonOption,
):
    """Search workspace symbols by name prefix."""
    settings = get_settings(config, log_level)
    manager, _ = open_workspace(root, settings)
    print_symbols(manager.resolve_workspace_symbol(query), as_json=json_output)


@app.command()
def definition(
    root: Path = typer.Argument(..., help="Workspace root folder"),
    file: Path = typer.Argument(..., help="Document containing the reference"),
    line: int = typer.Argument(..., help="Line (1-based)"),
    column: int = typer.Argument(..., help="Column (1-based)"),
    config: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
    json_output: bool = JsonOption,
):
    """Find the declarations of the symbol at a position."""
    settings = get_settings(config, log_level)
    manager, _ = open_workspace(root, settings)
    document = open_document(manager, file)
    locations = manager.on_definition(document, to_position(line, column))

    print_locations(locations, as_json=json_output)
    if not locations:
        raise typer.Exit(1)


@app.command()
def hover(
    root: Path = typer.Argument(..., help="Workspace root folder"),
    file: Path = typer.Argument(..., help="Document containing the reference"),
    line: int = typer.Argument(..., help="Line (1-based)"),
    column: int = typer.Argument(..., help="Column (1-based)"),
    config: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
    json_output: bool = JsonOption,
):
    """Show where the symbol at a position is declared."""
    settings = get_settings(config, log_level)
    manager, _ = open_workspace(root, settings)
    document = open_document(manager, file)
    result = manager.on_hover(document, to_position(line, column))

    print_hover(result, as_json=json_output)
    if result is None or not result.contents.value:
        raise typer.Exit(1)


@app.command("settings")
def show_settings(
    config: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
):
    """Print the effective settings as JSON."""
    print_json(get_settings(config, log_level))


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
