"""Import extractor registry, keyed by dialect."""

from __future__ import annotations

from codeviz.models import Dialect, ExtractionResult, ExtractionStatus, ProjectFile
from codeviz.extractor.base import BaseImportExtractor
from codeviz.extractor.treesitter_extractor import TreeSitterImportExtractor

_EXTRACTORS: dict[Dialect, BaseImportExtractor] = {
    dialect: TreeSitterImportExtractor(dialect) for dialect in Dialect
}


def get_extractor(dialect: Dialect) -> BaseImportExtractor:
    return _EXTRACTORS[dialect]


def extract_imports(file: ProjectFile, *, source: bytes | None = None) -> ExtractionResult:
    """Extract the static import specifiers of one project file.

    Never raises for per-file problems; the returned status tells a parse
    failure or an unreadable file apart from a clean parse.
    """
    if file.dialect is None:
        return ExtractionResult.failed(ExtractionStatus.UNSUPPORTED)
    return _EXTRACTORS[file.dialect].extract(file.path, source=source)


__all__ = [
    "BaseImportExtractor",
    "TreeSitterImportExtractor",
    "extract_imports",
    "get_extractor",
]
