"""Tree-sitter-based import extractor for JavaScript, TypeScript and TSX."""

from __future__ import annotations

import threading

from codeviz.extractor.base import BaseImportExtractor
from codeviz.models import Dialect, ExtractionResult, ExtractionStatus
from codeviz.scanner.language_map import GRAMMAR_FOR_DIALECT

try:
    from tree_sitter_language_pack import get_parser
except ImportError as _err:
    raise ImportError(
        "tree-sitter-language-pack is required. Install with: "
        "pip install tree-sitter-language-pack"
    ) from _err

# tree-sitter parsers are not safe to share across threads
_local = threading.local()


def _get_parser(grammar_name: str):
    cache = getattr(_local, "parsers", None)
    if cache is None:
        cache = _local.parsers = {}
    if grammar_name not in cache:
        cache[grammar_name] = get_parser(grammar_name)
    return cache[grammar_name]


_SIMPLE_ESCAPES = {
    "n": "\n", "t": "\t", "r": "\r", "b": "\b",
    "f": "\f", "v": "\v", "0": "\0",
}


def _cook_escape(seq: str) -> str:
    """Decode one JS string escape such as ``\\u0062``, ``\\u{1F600}`` or ``\\x41``."""
    body = seq[1:]
    if not body or body[0] in "\r\n\u2028\u2029":
        # line continuation
        return ""
    head = body[0]
    if head == "u":
        digits = body[2:-1] if body.startswith("u{") else body[1:]
        return chr(int(digits, 16))
    if head == "x":
        return chr(int(body[1:], 16))
    return _SIMPLE_ESCAPES.get(head, head)


class TreeSitterImportExtractor(BaseImportExtractor):
    """Collects ``import ... from '<specifier>'`` declarations.

    Only module-level import declarations whose source is a plain string
    literal count. Re-exports, ``require()`` and ``import()`` are ignored.
    A tree containing any syntax error yields PARSE_FAILED so that a
    half-parsed file never contributes guessed edges.
    """

    def __init__(self, dialect: Dialect):
        self.dialect = dialect
        self.grammar_name = GRAMMAR_FOR_DIALECT[dialect]

    def extract_source(self, source: bytes) -> ExtractionResult:
        tree = _get_parser(self.grammar_name).parse(source)
        root = tree.root_node
        if root.has_error:
            return ExtractionResult.failed(ExtractionStatus.PARSE_FAILED)

        specifiers: list[str] = []
        for child in root.children:
            if child.type != "import_statement":
                continue
            spec = self._literal_source(child)
            if spec is not None:
                specifiers.append(spec)
        return ExtractionResult.parsed(specifiers)

    @staticmethod
    def _literal_source(node) -> str | None:
        source_node = node.child_by_field_name("source")
        if source_node is None or source_node.type != "string":
            return None
        parts: list[str] = []
        for child in source_node.children:
            text = child.text.decode("utf-8", errors="replace")
            if child.type == "string_fragment":
                parts.append(text)
            elif child.type == "escape_sequence":
                parts.append(_cook_escape(text))
        return "".join(parts)
