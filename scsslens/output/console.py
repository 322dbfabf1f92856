"""Console output formatters using Rich."""

from typing import Optional

from lsprotocol import types as lsp
from rich.console import Console
from rich.table import Table

from .json_formatter import print_json
from ..index import Workspace
from ..uris import uri_to_path

console = Console()


def _display_path(uri: str) -> str:
    return uri_to_path(uri) or uri


def location_to_dict(location: lsp.Location) -> dict:
    return {
        "file": _display_path(location.uri),
        "line": location.range.start.line + 1,
        "column": location.range.start.character + 1,
    }


def print_scan_summary(workspace: Workspace, as_json: bool = False):
    """Print per-document symbol counts of an indexed workspace."""
    rows = [
        {
            "file": _display_path(uri),
            "variables": len(record.variables),
            "functions": len(record.functions),
            "mixins": len(record.mixins),
            "imports": len(record.imports),
            "unresolved": sum(1 for link in record.imports if not link.resolved),
        }
        for uri, record in workspace.store.items()
    ]
    if as_json:
        print_json(rows)
        return

    table = Table(title=f"{len(rows)} documents indexed")
    for column in ("file", "variables", "functions", "mixins", "imports", "unresolved"):
        table.add_column(column, justify="left" if column == "file" else "right")
    for row in rows:
        table.add_row(
            row["file"],
            str(row["variables"]),
            str(row["functions"]),
            str(row["mixins"]),
            str(row["imports"]),
            str(row["unresolved"]),
        )
    console.print(table)


def print_symbols(symbols: list[lsp.SymbolInformation], as_json: bool = False):
    """Print workspace symbol search results."""
    if as_json:
        print_json([
            {"name": s.name, "kind": s.kind.name.lower(), **location_to_dict(s.location)}
            for s in symbols
        ])
        return

    if not symbols:
        console.print("[dim]No symbols found[/dim]")
        return
    for s in symbols:
        loc = location_to_dict(s.location)
        console.print(f"[bold]{s.name}[/bold] [dim]({s.kind.name.lower()})[/dim]  {loc['file']}:{loc['line']}")


def print_locations(locations: Optional[list[lsp.Location]], as_json: bool = False):
    """Print definition results."""
    if as_json:
        print_json(None if locations is None else [location_to_dict(loc) for loc in locations])
        return

    if locations is None:
        console.print("[dim]No symbol reference at this position[/dim]")
        return
    if not locations:
        console.print("[yellow]No declarations found[/yellow]")
        return
    if len(locations) > 1:
        console.print(f"[yellow]Found {len(locations)} candidates:[/yellow]")
    for i, loc in enumerate(locations, 1):
        info = location_to_dict(loc)
        console.print(f"  [{i}] {info['file']}:{info['line']}:{info['column']}")


def print_hover(hover: Optional[lsp.Hover], as_json: bool = False):
    """Print hover contents as raw Markdown."""
    value = hover.contents.value if hover is not None else None
    if as_json:
        print_json({"contents": value})
        return

    if not value:
        console.print("[dim]Nothing to show at this position[/dim]")
        return
    console.print(value, markup=False, highlight=False)
