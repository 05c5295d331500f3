"""Graph construction, cycle detection and presentation."""

from __future__ import annotations

from codeviz.analysis.cycles import (
    cycle_members,
    detect_cycle_members,
    find_cycle_paths,
    strongly_connected_members,
)
from codeviz.analysis.dependency_graph import DependencyGraphBuilder
from codeviz.analysis.graph_models import DependencyGraph, ResolvedEdge
from codeviz.analysis.presenter import PresentationGraph, present_graph
from codeviz.analysis.resolver import ModuleResolver, is_relative

__all__ = [
    "DependencyGraph",
    "DependencyGraphBuilder",
    "ModuleResolver",
    "PresentationGraph",
    "ResolvedEdge",
    "cycle_members",
    "detect_cycle_members",
    "find_cycle_paths",
    "is_relative",
    "present_graph",
    "strongly_connected_members",
]
