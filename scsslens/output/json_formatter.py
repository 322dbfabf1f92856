"""JSON output formatter."""

from typing import Any

import msgspec


def print_json(data: Any):
    """Print data as formatted JSON to stdout."""
    print(msgspec.json.format(msgspec.json.encode(data), indent=2).decode("utf-8"))
