"""Server module for LSP integration."""

from .lsp import ScssLensServer, create_server, run_lsp_server, run_safe

__all__ = [
    "ScssLensServer",
    "create_server",
    "run_lsp_server",
    "run_safe",
]
