"""Shared extension-to-dialect mapping for the scanner and extractor."""

from __future__ import annotations

from codeviz.models import Dialect

# Maps file extension -> (Dialect, tree-sitter grammar name)
EXT_TO_DIALECT: dict[str, tuple[Dialect, str]] = {
    ".js": (Dialect.JAVASCRIPT, "javascript"),
    ".jsx": (Dialect.JAVASCRIPT, "javascript"),
    ".mjs": (Dialect.JAVASCRIPT, "javascript"),
    ".cjs": (Dialect.JAVASCRIPT, "javascript"),
    ".ts": (Dialect.TYPESCRIPT, "typescript"),
    ".mts": (Dialect.TYPESCRIPT, "typescript"),
    ".cts": (Dialect.TYPESCRIPT, "typescript"),
    ".tsx": (Dialect.TSX, "tsx"),
}

GRAMMAR_FOR_DIALECT: dict[Dialect, str] = {
    dialect: grammar for dialect, grammar in EXT_TO_DIALECT.values()
}


def dialect_for(suffix: str) -> Dialect | None:
    entry = EXT_TO_DIALECT.get(suffix)
    return entry[0] if entry else None
