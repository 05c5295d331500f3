"""Import-cycle detection over a built DependencyGraph.

All traversals are iterative and keep their per-node state in a local map,
so deep import chains cannot exhaust the interpreter's recursion limit.
"""

from __future__ import annotations

import enum

from codeviz.models import CycleMode
from codeviz.analysis.graph_models import DependencyGraph


class _Mark(enum.Enum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


def detect_cycle_members(graph: DependencyGraph) -> frozenset[str]:
    """Flag files that close a back edge during a depth-first traversal.

    Whenever an edge leads into a node still on the active path, both ends
    of that edge are flagged. Self-imports and two-file cycles are flagged
    completely; in longer cycles only the two files on the closing edge
    are. Use ``strongly_connected_members`` for exact membership.
    """
    deps = graph.dependencies
    marks = {key: _Mark.UNVISITED for key in graph.nodes}
    members: set[str] = set()

    for start in graph.nodes:
        if marks[start] is not _Mark.UNVISITED:
            continue
        marks[start] = _Mark.IN_PROGRESS
        stack = [(start, iter(deps[start]))]

        while stack:
            node, neighbors = stack[-1]
            for neighbor in neighbors:
                mark = marks.get(neighbor)
                if mark is _Mark.IN_PROGRESS:
                    members.add(neighbor)
                    members.add(node)
                elif mark is _Mark.UNVISITED:
                    marks[neighbor] = _Mark.IN_PROGRESS
                    stack.append((neighbor, iter(deps[neighbor])))
                    break
            else:
                marks[node] = _Mark.DONE
                stack.pop()

    return frozenset(members)


def strongly_connected_members(graph: DependencyGraph) -> frozenset[str]:
    """Flag every file in a non-trivial strongly connected component (Tarjan).

    A single file counts only when it imports itself.
    """
    deps = graph.dependencies
    index: dict[str, int] = {}
    low: dict[str, int] = {}
    on_stack: set[str] = set()
    scc_stack: list[str] = []
    members: set[str] = set()
    counter = 0

    def _visit(node: str) -> None:
        nonlocal counter
        index[node] = low[node] = counter
        counter += 1
        scc_stack.append(node)
        on_stack.add(node)

    for start in graph.nodes:
        if start in index:
            continue
        _visit(start)
        work = [(start, iter(deps[start]))]

        while work:
            node, neighbors = work[-1]
            descended = False
            for neighbor in neighbors:
                if neighbor not in graph.nodes:
                    continue
                if neighbor not in index:
                    _visit(neighbor)
                    work.append((neighbor, iter(deps[neighbor])))
                    descended = True
                    break
                if neighbor in on_stack:
                    low[node] = min(low[node], index[neighbor])
            if descended:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[node])

            if low[node] == index[node]:
                component: list[str] = []
                while True:
                    member = scc_stack.pop()
                    on_stack.discard(member)
                    component.append(member)
                    if member == node:
                        break
                if len(component) > 1 or node in deps[node]:
                    members.update(component)

    return frozenset(members)


def find_cycle_paths(graph: DependencyGraph) -> list[list[str]]:
    """List concrete cycle chains such as ``[a, b, a]``, one per back edge."""
    deps = graph.dependencies
    cycles: list[list[str]] = []
    seen: set[tuple[str, ...]] = set()
    visited: set[str] = set()

    for start in graph.nodes:
        if start in visited:
            continue
        visited.add(start)
        path = [start]
        on_path = {start}
        stack = [iter(deps[start])]

        while stack:
            node = path[-1]
            for neighbor in stack[-1]:
                if neighbor in on_path:
                    chain = path[path.index(neighbor):] + [neighbor]
                    if tuple(chain) not in seen:
                        seen.add(tuple(chain))
                        cycles.append(chain)
                elif neighbor not in visited and neighbor in graph.nodes:
                    visited.add(neighbor)
                    path.append(neighbor)
                    on_path.add(neighbor)
                    stack.append(iter(deps[neighbor]))
                    break
            else:
                stack.pop()
                on_path.discard(node)
                path.pop()

    return cycles


def cycle_members(graph: DependencyGraph, mode: CycleMode = CycleMode.BACK_EDGE) -> frozenset[str]:
    if mode is CycleMode.SCC:
        return strongly_connected_members(graph)
    return detect_cycle_members(graph)
