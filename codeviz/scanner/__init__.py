"""File discovery."""

from __future__ import annotations

from codeviz.scanner.discovery import discover_files
from codeviz.scanner.language_map import EXT_TO_DIALECT, dialect_for

__all__ = [
    "EXT_TO_DIALECT",
    "dialect_for",
    "discover_files",
]
