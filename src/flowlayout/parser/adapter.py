"""Normalization of backend workflow payloads into the canonical model.

Backends name the same fields in different ways (``id`` / ``nodeId`` /
``node_id``, ``edges`` / ``transitions`` / ``links`` ...). Each lookup below
walks a fixed priority list of known field names; the layout engine only
ever sees the canonical :class:`Node` / :class:`Edge` shape.
"""

from __future__ import annotations

__all__ = [
    "load_workflow",
    "normalize_workflow",
    "parse_node_kind",
    "validate_workflow",
]

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from flowlayout.parser.model import Edge, Graph, Node, NodeKind, Workflow

logger = logging.getLogger(__name__)

CONTAINER_FIELDS = ("workflow", "data")
WORKFLOW_ID_FIELDS = ("id", "workflowId", "workflow_id", "uuid")
WORKFLOW_NAME_FIELDS = ("name", "title", "workflow_name", "workflowName")
WORKFLOW_DESCRIPTION_FIELDS = ("description", "desc", "summary")

NODE_LIST_FIELDS = ("nodes", "vertices", "states", "steps")
EDGE_LIST_FIELDS = ("edges", "connections", "transitions", "links")

NODE_ID_FIELDS = ("id", "nodeId", "node_id")
NODE_KIND_FIELDS = ("type", "nodeType", "node_type")
LABEL_FIELDS = ("label", "name", "title", "text")

EDGE_ID_FIELDS = ("id", "edgeId", "edge_id")
EDGE_SOURCE_FIELDS = ("source", "from", "sourceId", "source_id")
EDGE_TARGET_FIELDS = ("target", "to", "targetId", "target_id")

_KIND_ALIASES = {
    "status": NodeKind.STATE,
    "state": NodeKind.STATE,
    "event": NodeKind.EVENT,
    "stage": NodeKind.STAGE,
    "workflow": NodeKind.WORKFLOW,
}


def _first(record: Mapping[str, Any], fields: tuple[str, ...], default: Any = None) -> Any:
    """Return the first truthy value among ``fields``, else ``default``."""
    for name in fields:
        value = record.get(name)
        if value:
            return value
    return default


def parse_node_kind(value: Any) -> NodeKind:
    """Map a raw kind tag to a NodeKind. Unknown tags become events."""
    if isinstance(value, NodeKind):
        return value
    if isinstance(value, str):
        return _KIND_ALIASES.get(value.strip().lower(), NodeKind.EVENT)
    return NodeKind.EVENT


def _normalize_nodes(raw_nodes: Any) -> list[Node]:
    if not isinstance(raw_nodes, list):
        logger.warning("Node data is not a list (%s); ignoring", type(raw_nodes).__name__)
        return []

    nodes: list[Node] = []
    for i, raw in enumerate(raw_nodes):
        if not isinstance(raw, Mapping):
            logger.warning("Skipping node %d: not an object", i)
            continue
        nodes.append(Node(
            id=str(_first(raw, NODE_ID_FIELDS, f"node-{i}")),
            kind=parse_node_kind(_first(raw, NODE_KIND_FIELDS)),
            label=str(_first(raw, LABEL_FIELDS, f"Node {i + 1}")),
        ))
    return nodes


def _normalize_edges(raw_edges: Any) -> list[Edge]:
    if not isinstance(raw_edges, list):
        logger.warning("Edge data is not a list (%s); ignoring", type(raw_edges).__name__)
        return []

    edges: list[Edge] = []
    for i, raw in enumerate(raw_edges):
        if not isinstance(raw, Mapping):
            logger.warning("Skipping edge %d: not an object", i)
            continue
        edges.append(Edge(
            id=str(_first(raw, EDGE_ID_FIELDS, f"edge-{i}")),
            source=str(_first(raw, EDGE_SOURCE_FIELDS, "")),
            target=str(_first(raw, EDGE_TARGET_FIELDS, "")),
            label=str(_first(raw, LABEL_FIELDS, "")),
        ))
    return edges


def normalize_workflow(raw: Mapping[str, Any]) -> Workflow:
    """Translate a raw backend payload into a :class:`Workflow`.

    Raises ValueError if the payload is not a JSON object.
    """
    if not isinstance(raw, Mapping):
        raise ValueError(
            f"Workflow payload must be a JSON object, got {type(raw).__name__}"
        )

    data: Mapping[str, Any] = raw
    for name in CONTAINER_FIELDS:
        inner = raw.get(name)
        if isinstance(inner, Mapping):
            data = inner
            break

    nodes: list[Node] = []
    for name in NODE_LIST_FIELDS:
        if data.get(name) is not None:
            nodes = _normalize_nodes(data[name])
            break
    else:
        logger.warning("No node data found in any of %s", ", ".join(NODE_LIST_FIELDS))

    edges: list[Edge] = []
    for name in EDGE_LIST_FIELDS:
        if data.get(name) is not None:
            edges = _normalize_edges(data[name])
            break
    else:
        logger.debug("No edge data found in any of %s", ", ".join(EDGE_LIST_FIELDS))

    return Workflow(
        id=str(_first(data, WORKFLOW_ID_FIELDS, "workflow")),
        name=str(_first(data, WORKFLOW_NAME_FIELDS, "Unnamed Workflow")),
        description=str(
            _first(data, WORKFLOW_DESCRIPTION_FIELDS, "No description available")
        ),
        graph=Graph(nodes=nodes, edges=edges),
    )


def validate_workflow(workflow: Workflow) -> Workflow:
    """Return a repaired copy of a workflow that the layout engine can draw.

    Duplicate node ids keep their first occurrence, edges pointing at
    unknown nodes are removed, and an empty workflow gets a default
    Start -> End pair of states.
    """
    nodes: list[Node] = []
    seen: set[str] = set()
    for node in workflow.graph.nodes:
        if node.id in seen:
            logger.warning("Dropping duplicate node id %r", node.id)
            continue
        seen.add(node.id)
        nodes.append(node)

    if not nodes:
        logger.warning("Workflow %r has no nodes; using default Start/End", workflow.id)
        nodes = [
            Node(id="default-start", kind=NodeKind.STATE, label="Start"),
            Node(id="default-end", kind=NodeKind.STATE, label="End"),
        ]
        seen = {node.id for node in nodes}

    edges: list[Edge] = []
    for edge in workflow.graph.edges:
        if edge.source in seen and edge.target in seen:
            edges.append(edge)
        else:
            logger.warning(
                "Removing edge %s (%s -> %s): unknown endpoint",
                edge.id, edge.source, edge.target,
            )

    removed = len(workflow.graph.edges) - len(edges)
    if removed:
        logger.warning("Removed %d invalid edge(s)", removed)

    return Workflow(
        id=workflow.id,
        name=workflow.name,
        description=workflow.description,
        graph=Graph(nodes=nodes, edges=edges),
    )


def load_workflow(path: str | Path, validate: bool = True) -> Workflow:
    """Read a workflow JSON file and normalize it."""
    text = Path(path).read_text()
    workflow = normalize_workflow(json.loads(text))
    if validate:
        workflow = validate_workflow(workflow)
    return workflow
