"""Data models for the codeviz analysis pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path, PurePosixPath


class Dialect(enum.Enum):
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    TSX = "tsx"


class ExtractionStatus(enum.Enum):
    PARSED = "parsed"
    PARSE_FAILED = "parse_failed"
    UNREADABLE = "unreadable"
    UNSUPPORTED = "unsupported"


class CycleMode(enum.Enum):
    BACK_EDGE = "back_edge"
    SCC = "scc"


class AnalysisError(Exception):
    """Fatal failure for a whole analysis run (e.g. unreadable root)."""


@dataclass(frozen=True)
class ProjectFile:
    """A discovered source file, keyed by its root-relative posix path."""
    key: str
    path: Path
    dialect: Dialect | None = None

    @property
    def label(self) -> str:
        return PurePosixPath(self.key).name


@dataclass(frozen=True)
class ExtractionResult:
    """Result from the extractor stage."""
    status: ExtractionStatus
    specifiers: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is ExtractionStatus.PARSED

    @classmethod
    def parsed(cls, specifiers) -> ExtractionResult:
        # dict preserves first-seen order while dropping repeats
        return cls(ExtractionStatus.PARSED, tuple(dict.fromkeys(specifiers)))

    @classmethod
    def failed(cls, status: ExtractionStatus) -> ExtractionResult:
        return cls(status)


@dataclass
class AnalysisConfig:
    """Configuration for one analysis run.

    Extension and index-name order is significant: the resolver tries
    candidates in exactly this order.
    """
    source_extensions: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")
    index_base_names: tuple[str, ...] = ("index",)
    excluded_dir_names: tuple[str, ...] = ("node_modules",)
    max_depth: int = 64
    workers: int | None = None  # None -> os.cpu_count()
    cycle_mode: CycleMode = CycleMode.BACK_EDGE

    def __post_init__(self):
        self.source_extensions = tuple(_normalize_ext(e) for e in self.source_extensions)
        self.index_base_names = tuple(self.index_base_names)
        self.excluded_dir_names = tuple(self.excluded_dir_names)
        if isinstance(self.cycle_mode, str):
            self.cycle_mode = CycleMode(self.cycle_mode)
        if self.max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be >= 1")


def _normalize_ext(ext: str) -> str:
    ext = ext.strip()
    return ext if ext.startswith(".") else f".{ext}"
