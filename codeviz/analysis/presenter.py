"""Graph presenter: turns a DependencyGraph into React Flow node/edge data."""

from __future__ import annotations

from dataclasses import dataclass, field

from codeviz.analysis.graph_models import DependencyGraph

GRID_COLUMNS = 6
CELL_WIDTH = 180
CELL_HEIGHT = 100
CYCLE_CLASS = "cycle-node"


@dataclass
class PresentedNode:
    id: str
    label: str
    dependencies: list[str]
    dependents: list[str]
    x: int
    y: int
    in_cycle: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "dependencies": list(self.dependencies),
            "dependents": list(self.dependents),
            "position": {"x": self.x, "y": self.y},
            "inCycle": self.in_cycle,
            "className": CYCLE_CLASS if self.in_cycle else "",
        }


@dataclass
class PresentedEdge:
    id: str
    source: str
    target: str
    animated: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "animated": self.animated,
        }


@dataclass
class PresentationGraph:
    nodes: list[PresentedNode] = field(default_factory=list)
    edges: list[PresentedEdge] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.nodes)

    @property
    def message(self) -> str:
        return f"Project analyzed successfully. Found {self.file_count} files."

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "fileCount": self.file_count,
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


def grid_position(index: int) -> tuple[int, int]:
    return (index % GRID_COLUMNS) * CELL_WIDTH, (index // GRID_COLUMNS) * CELL_HEIGHT


def present_graph(graph: DependencyGraph, cycles: frozenset[str] | set[str]) -> PresentationGraph:
    """Lay out nodes on a fixed grid in registration order and flag cycles.

    An edge is animated only when both of its endpoints are cycle members.
    """
    result = PresentationGraph()

    for i, (key, file) in enumerate(graph.nodes.items()):
        x, y = grid_position(i)
        result.nodes.append(PresentedNode(
            id=key,
            label=file.label,
            dependencies=list(graph.dependencies.get(key, [])),
            dependents=list(graph.dependents.get(key, [])),
            x=x,
            y=y,
            in_cycle=key in cycles,
        ))

    for edge in graph.edges:
        result.edges.append(PresentedEdge(
            id=edge.edge_id,
            source=edge.source,
            target=edge.target,
            animated=edge.source in cycles and edge.target in cycles,
        ))

    return result
