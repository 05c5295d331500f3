"""Analysis pipeline: discover -> extract -> build -> detect cycles -> present."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from codeviz.models import AnalysisConfig, ExtractionResult, ProjectFile
from codeviz.scanner import discover_files
from codeviz.extractor import extract_imports
from codeviz.analysis.cycles import cycle_members
from codeviz.analysis.dependency_graph import DependencyGraphBuilder
from codeviz.analysis.graph_models import DependencyGraph
from codeviz.analysis.presenter import PresentationGraph, present_graph

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


@dataclass
class AnalysisResult:
    root: Path
    files: list[ProjectFile] = field(default_factory=list)
    extractions: dict[str, ExtractionResult] = field(default_factory=dict)
    graph: DependencyGraph = field(default_factory=DependencyGraph)
    cycles: frozenset[str] = frozenset()
    presentation: PresentationGraph = field(default_factory=PresentationGraph)

    def to_dict(self) -> dict:
        return self.presentation.to_dict()


def run_extraction(
    files: list[ProjectFile],
    workers: int | None = None,
) -> dict[str, ExtractionResult]:
    """Extract imports for every file, keyed by file key in input order."""
    workers = workers or os.cpu_count() or 1
    workers = min(workers, max(len(files), 1))

    if workers == 1:
        results = [extract_imports(f) for f in files]
    else:
        # map() yields in submission order, so concurrency never reorders output
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(extract_imports, files))

    return {f.key: r for f, r in zip(files, results)}


def run_analysis(
    root: Path | str,
    config: AnalysisConfig | None = None,
    progress: ProgressCallback | None = None,
) -> AnalysisResult:
    """Run the full analysis over an already-materialized project directory.

    Raises AnalysisError only when the root itself cannot be read; every
    per-file problem degrades to a node without outgoing edges.
    """
    config = config or AnalysisConfig()
    root = Path(root)
    result = AnalysisResult(root=root)

    # Stage 1: Discover
    if progress:
        progress("Discovering", 0, 1)
    result.files = discover_files(root, config)
    if progress:
        progress("Discovering", 1, 1)

    # Stage 2: Extract
    if progress:
        progress("Extracting", 0, len(result.files))
    result.extractions = run_extraction(result.files, config.workers)
    if progress:
        progress("Extracting", len(result.files), len(result.files))

    failed = [k for k, r in result.extractions.items() if not r.ok]
    if failed:
        logger.info("%d file(s) skipped during import extraction", len(failed))

    # Stage 3: Resolve + build
    result.graph = DependencyGraphBuilder(config).build(result.files, result.extractions)

    # Stage 4: Cycles
    result.cycles = cycle_members(result.graph, config.cycle_mode)

    # Stage 5: Present
    result.presentation = present_graph(result.graph, result.cycles)

    logger.info(
        "analyzed %s: %d file(s), %d edge(s), %d in cycles",
        root, len(result.graph), len(result.graph.edges), len(result.cycles),
    )
    return result
