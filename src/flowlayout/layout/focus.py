"""Focus mode: split a graph into the neighbourhood of one node and the rest."""

from __future__ import annotations

__all__ = ["FocusSet", "compute_focus", "has_multiple_connections"]

from dataclasses import dataclass, field

from flowlayout.parser.model import Edge, Graph


@dataclass
class FocusSet:
    """Ids to highlight and ids to dim around a selected node."""

    selected: str
    focused_nodes: set[str] = field(default_factory=set)
    focused_edges: set[str] = field(default_factory=set)
    dimmed_nodes: set[str] = field(default_factory=set)
    dimmed_edges: set[str] = field(default_factory=set)


def compute_focus(graph: Graph, node_id: str) -> FocusSet:
    """Focus the selected node, its incident edges and their other endpoints."""
    incident = graph.node_edges(node_id)
    focused_nodes = {node_id}
    for edge in incident:
        focused_nodes.add(edge.source)
        focused_nodes.add(edge.target)
    focused_edges = {edge.id for edge in incident}

    return FocusSet(
        selected=node_id,
        focused_nodes={nid for nid in graph.node_ids() if nid in focused_nodes},
        focused_edges=focused_edges,
        dimmed_nodes={nid for nid in graph.node_ids() if nid not in focused_nodes},
        dimmed_edges={e.id for e in graph.edges if e.id not in focused_edges},
    )


def has_multiple_connections(node_id: str, edges: list[Edge]) -> bool:
    """True if more than one edge touches the node."""
    count = sum(1 for e in edges if e.source == node_id or e.target == node_id)
    return count > 1
