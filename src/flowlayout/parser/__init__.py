"""Workflow model and payload normalization."""

from flowlayout.parser.adapter import (
    load_workflow,
    normalize_workflow,
    parse_node_kind,
    validate_workflow,
)
from flowlayout.parser.model import Edge, Graph, Node, NodeKind, Workflow

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "NodeKind",
    "Workflow",
    "load_workflow",
    "normalize_workflow",
    "parse_node_kind",
    "validate_workflow",
]
