"""Dependency graph builder: folds per-file specifiers into a file graph."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from codeviz.models import AnalysisConfig, ExtractionResult, ProjectFile
from codeviz.analysis.graph_models import DependencyGraph, ResolvedEdge
from codeviz.analysis.resolver import ModuleResolver

logger = logging.getLogger(__name__)


class DependencyGraphBuilder:
    """Build a dependency graph from discovered files and their extractions."""

    def __init__(self, config: AnalysisConfig | None = None):
        self.config = config or AnalysisConfig()

    def build(
        self,
        files: Iterable[ProjectFile],
        extractions: dict[str, ExtractionResult],
    ) -> DependencyGraph:
        graph = DependencyGraph()

        # Step 1: register every file before resolving anything
        for file in files:
            graph.nodes[file.key] = file
            graph.dependencies[file.key] = []
            graph.dependents[file.key] = []

        resolver = ModuleResolver(graph.nodes, self.config)

        # Step 2: resolve specifiers in registration order
        seen_edges: set[ResolvedEdge] = set()
        for key in graph.nodes:
            result = extractions.get(key)
            if result is None or not result.ok:
                continue
            for specifier in result.specifiers:
                target = resolver.resolve(key, specifier)
                if target is None:
                    continue
                self._add_edge(graph, key, target, seen_edges)

        logger.debug(
            "built graph: %d node(s), %d edge(s)", len(graph.nodes), len(graph.edges),
        )
        return graph

    @staticmethod
    def _add_edge(
        graph: DependencyGraph,
        source: str,
        target: str,
        seen_edges: set[ResolvedEdge],
    ) -> None:
        # Lists keep one entry per resolved specifier; edges stay distinct
        graph.dependencies[source].append(target)
        graph.dependents[target].append(source)
        edge = ResolvedEdge(source=source, target=target)
        if edge not in seen_edges:
            seen_edges.add(edge)
            graph.edges.append(edge)
