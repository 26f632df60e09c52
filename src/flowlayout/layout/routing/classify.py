"""Edge classification (forward/backward) and parallel-edge grouping."""

from __future__ import annotations

__all__ = ["ClassifiedEdge", "classify_edges", "is_backward_edge"]

from collections import defaultdict
from dataclasses import dataclass

from flowlayout.parser.model import Edge


@dataclass(frozen=True)
class ClassifiedEdge:
    """An edge annotated with its flow direction and group slot."""

    edge: Edge
    is_backward: bool
    group_index: int
    group_size: int

    @property
    def group_key(self) -> tuple[str, str]:
        return (self.edge.source, self.edge.target)


def is_backward_edge(source_level: int, target_level: int) -> bool:
    """True if the edge flows to the same or a shallower level.

    Edges leaving level 0 always count as forward: there is nothing
    above the roots to flow back to.
    """
    return source_level > 0 and target_level <= source_level


def classify_edges(edges: list[Edge], levels: dict[str, int]) -> list[ClassifiedEdge]:
    """Annotate each edge with direction and (source, target) group slot.

    Group indices follow input order. Missing levels read as 0.
    Returns one ClassifiedEdge per input edge, in input order.
    """
    groups: dict[tuple[str, str], list[int]] = defaultdict(list)
    for i, edge in enumerate(edges):
        groups[(edge.source, edge.target)].append(i)

    slot: dict[int, tuple[int, int]] = {}
    for members in groups.values():
        for index, i in enumerate(members):
            slot[i] = (index, len(members))

    result: list[ClassifiedEdge] = []
    for i, edge in enumerate(edges):
        index, size = slot[i]
        result.append(ClassifiedEdge(
            edge=edge,
            is_backward=is_backward_edge(
                levels.get(edge.source, 0), levels.get(edge.target, 0)
            ),
            group_index=index,
            group_size=size,
        ))
    return result
