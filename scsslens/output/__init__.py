"""Output formatting module."""

from .json_formatter import print_json
from .console import (
    location_to_dict,
    print_scan_summary,
    print_symbols,
    print_locations,
    print_hover,
)

__all__ = [
    "print_json",
    "location_to_dict",
    "print_scan_summary",
    "print_symbols",
    "print_locations",
    "print_hover",
]
