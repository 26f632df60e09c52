"""Graph analysis: adjacency lists and root/leaf/start node classification."""

from __future__ import annotations

__all__ = ["GraphAnalysis", "analyze_graph"]

import logging
from dataclasses import dataclass, field

import networkx as nx

from flowlayout.parser.model import Edge, Graph, Node

logger = logging.getLogger(__name__)


@dataclass
class GraphAnalysis:
    """Adjacency structure and entry points of a graph."""

    outgoing: dict[str, list[str]]
    incoming: dict[str, list[str]]
    root_nodes: list[Node]
    leaf_nodes: list[Node]
    start_nodes: list[Node]
    digraph: nx.MultiDiGraph
    skipped_edges: list[Edge] = field(default_factory=list)


def analyze_graph(graph: Graph) -> GraphAnalysis:
    """Build adjacency lists and find the nodes traversal starts from.

    Every node gets an (possibly empty) adjacency entry. Edges whose
    source or target is not among ``graph.nodes`` are skipped. Start
    nodes are the roots (no incoming edges); a graph without roots is
    entered at the node with the most outgoing edges, the first one in
    input order on ties.
    """
    outgoing: dict[str, list[str]] = {node.id: [] for node in graph.nodes}
    incoming: dict[str, list[str]] = {node.id: [] for node in graph.nodes}

    G = nx.MultiDiGraph()
    G.add_nodes_from(outgoing)

    skipped: list[Edge] = []
    for edge in graph.edges:
        if edge.source not in outgoing or edge.target not in incoming:
            skipped.append(edge)
            continue
        outgoing[edge.source].append(edge.target)
        incoming[edge.target].append(edge.source)
        G.add_edge(edge.source, edge.target, key=edge.id)

    if skipped:
        logger.debug(
            "Ignoring %d edge(s) with missing endpoints: %s",
            len(skipped), ", ".join(e.id for e in skipped),
        )

    root_nodes = [node for node in graph.nodes if not incoming[node.id]]
    leaf_nodes = [node for node in graph.nodes if not outgoing[node.id]]

    if root_nodes:
        start_nodes = list(root_nodes)
    elif graph.nodes:
        # max() keeps the first of equal candidates
        start_nodes = [max(graph.nodes, key=lambda n: len(outgoing[n.id]))]
    else:
        start_nodes = []

    return GraphAnalysis(
        outgoing=outgoing,
        incoming=incoming,
        root_nodes=root_nodes,
        leaf_nodes=leaf_nodes,
        start_nodes=start_nodes,
        digraph=G,
        skipped_edges=skipped,
    )
