"""File discovery: walk a project tree and collect recognized source files."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path

from codeviz.models import AnalysisConfig, AnalysisError, ProjectFile
from codeviz.scanner.language_map import dialect_for

logger = logging.getLogger(__name__)


def discover_files(root: Path, config: AnalysisConfig | None = None) -> list[ProjectFile]:
    """Return every recognized source file under ``root``, sorted by key.

    Symlinked directories are never entered and descent stops at
    ``config.max_depth`` levels below the root, so the walk always
    terminates. Raises AnalysisError if the root itself cannot be read.
    """
    config = config or AnalysisConfig()
    root = Path(root).resolve()
    _check_root(root)

    extensions = set(config.source_extensions)
    files: list[ProjectFile] = []

    def _on_error(err: OSError) -> None:
        logger.debug("skipping unreadable directory %s: %s", err.filename, err)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error, followlinks=False):
        rel_dir = Path(dirpath).relative_to(root)
        depth = len(rel_dir.parts)

        # Prune in place so os.walk never descends into these
        if depth >= config.max_depth:
            if dirnames:
                logger.debug("max depth %d reached at %s", config.max_depth, dirpath)
            dirnames[:] = []
        else:
            dirnames[:] = sorted(
                d for d in dirnames if not _is_excluded(d, config.excluded_dir_names)
            )

        for name in filenames:
            suffix = os.path.splitext(name)[1]
            if suffix not in extensions:
                continue
            full = Path(dirpath) / name
            if not full.is_file():
                continue
            key = (rel_dir / name).as_posix()
            files.append(ProjectFile(key=key, path=full, dialect=dialect_for(suffix)))

    files.sort(key=lambda f: f.key)
    logger.debug("discovered %d source file(s) under %s", len(files), root)
    return files


def _check_root(root: Path) -> None:
    if not root.exists():
        raise AnalysisError(f"Project root not found: {root}")
    if not root.is_dir():
        raise AnalysisError(f"Project root is not a directory: {root}")
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise AnalysisError(f"Project root is not readable: {root}") from e


def _is_excluded(name: str, patterns: tuple[str, ...]) -> bool:
    return any(fnmatch.fnmatch(name, pattern) for pattern in patterns)
