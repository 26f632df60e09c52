"""Level assignment (primary-axis position) by breadth-first traversal.

Levels are shortest-hop distances from the start nodes, so a cycle never
pushes a node deeper than the first frontier that reaches it. Nodes the
traversal cannot reach get levels from their own component.
"""

from __future__ import annotations

__all__ = ["assign_levels"]

from collections import deque
from collections.abc import Iterable

import networkx as nx

from flowlayout.layout.analysis import GraphAnalysis
from flowlayout.parser.model import Node


def _bfs(
    seeds: Iterable[str],
    outgoing: dict[str, list[str]],
    levels: dict[str, int],
    visited: set[str],
    allowed: set[str] | None = None,
) -> None:
    """Level every node reachable from ``seeds``, seeds at level 0.

    Each node is expanded at most once. A neighbour takes the smallest
    level proposed for it before it is expanded.
    """
    queue: deque[str] = deque()
    for sid in seeds:
        levels[sid] = 0
        queue.append(sid)

    while queue:
        node_id = queue.popleft()
        if node_id in visited:
            continue
        visited.add(node_id)
        level = levels[node_id]

        for child in outgoing.get(node_id, ()):
            if child in visited:
                continue
            if allowed is not None and child not in allowed:
                continue
            proposed = level + 1
            current = levels.get(child)
            if current is None or proposed < current:
                levels[child] = proposed
                queue.append(child)


def assign_levels(analysis: GraphAnalysis, nodes: list[Node]) -> dict[str, int]:
    """Assign each node an integer level (0-based).

    Returns a dict mapping node_id -> level covering every node in
    ``nodes``.
    """
    order = {node.id: i for i, node in enumerate(nodes)}
    levels: dict[str, int] = {}
    visited: set[str] = set()

    _bfs([n.id for n in analysis.start_nodes], analysis.outgoing, levels, visited)

    unreached = [node.id for node in nodes if node.id not in visited]
    if not unreached:
        return levels

    # Each leftover component is laid out as its own hierarchy starting
    # at level 0, entered at its busiest node.
    leftover = analysis.digraph.subgraph(unreached)
    for component in nx.weakly_connected_components(leftover):
        members = sorted(component, key=order.__getitem__)
        allowed = set(members)
        while True:
            pending = [sid for sid in members if sid not in visited]
            if not pending:
                break
            seed = max(
                pending,
                key=lambda sid: sum(
                    1 for t in analysis.outgoing[sid] if t in allowed and t not in visited
                ),
            )
            _bfs([seed], analysis.outgoing, levels, visited, allowed)

    return levels
