"""Data models for the file dependency graph."""

from __future__ import annotations

from dataclasses import dataclass, field

from codeviz.models import ProjectFile


@dataclass(frozen=True)
class ResolvedEdge:
    source: str
    target: str

    @property
    def edge_id(self) -> str:
        return f"e-{self.source}-{self.target}"


@dataclass
class DependencyGraph:
    nodes: dict[str, ProjectFile] = field(default_factory=dict)  # key -> file, registration order
    dependencies: dict[str, list[str]] = field(default_factory=dict)  # source -> [targets]
    dependents: dict[str, list[str]] = field(default_factory=dict)  # target -> [sources]
    edges: list[ResolvedEdge] = field(default_factory=list)  # distinct pairs, first-seen order

    @property
    def forward(self) -> dict[str, set[str]]:
        return {key: set(targets) for key, targets in self.dependencies.items()}

    def __len__(self) -> int:
        return len(self.nodes)
