"""Data model for workflow graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(Enum):
    """Kind tag of a workflow node.

    The layout engine only uses it to look up a node's box size.
    """

    STATE = "state"
    EVENT = "event"
    STAGE = "stage"
    WORKFLOW = "workflow"


@dataclass(frozen=True)
class Node:
    """A state or event in a workflow."""

    id: str
    kind: NodeKind = NodeKind.EVENT
    label: str = ""


@dataclass(frozen=True)
class Edge:
    """A directed transition between two nodes."""

    id: str
    source: str
    target: str
    label: str = ""

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


@dataclass
class Graph:
    """Engine input: nodes and edges in caller order."""

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    def get_node(self, node_id: str) -> Node | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def has_node(self, node_id: str) -> bool:
        return self.get_node(node_id) is not None

    def node_edges(self, node_id: str) -> list[Edge]:
        """Return edges touching a node, in edge order."""
        return [
            edge for edge in self.edges
            if edge.source == node_id or edge.target == node_id
        ]


@dataclass
class Workflow:
    """A normalized workflow definition: metadata plus its graph."""

    id: str = "workflow"
    name: str = "Unnamed Workflow"
    description: str = "No description available"
    graph: Graph = field(default_factory=Graph)
