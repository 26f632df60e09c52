"""Layout coordinator: combines analysis, levelling, placement and routing.

Every call recomputes the whole layout from its inputs; nothing is
cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from flowlayout.layout.analysis import GraphAnalysis, analyze_graph
from flowlayout.layout.config import LayoutConfig
from flowlayout.layout.levels import assign_levels
from flowlayout.layout.positions import compute_positions
from flowlayout.layout.routing import EdgeRoute, classify_edges, route_edges
from flowlayout.parser.model import Graph


@dataclass
class LayoutResult:
    """Geometry for a graph: levels, node centers and edge routes."""

    levels: dict[str, int] = field(default_factory=dict)
    positions: dict[str, tuple[float, float]] = field(default_factory=dict)
    routes: list[EdgeRoute] = field(default_factory=list)
    config: LayoutConfig = field(default_factory=LayoutConfig)
    analysis: GraphAnalysis | None = None

    @property
    def max_level(self) -> int:
        return max(self.levels.values(), default=0)

    def route_for(self, edge_id: str) -> EdgeRoute | None:
        for route in self.routes:
            if route.edge_id == edge_id:
                return route
        return None

    def backward_routes(self) -> list[EdgeRoute]:
        return [r for r in self.routes if r.is_backward]


def compute_layout(graph: Graph, config: LayoutConfig | None = None) -> LayoutResult:
    """Compute levels, positions and edge routes for a graph.

    Never raises for a structurally valid graph: dangling edges are
    ignored, cycles and disconnected parts are levelled, and an empty
    graph yields an empty result.
    """
    config = config or LayoutConfig()
    if not graph.nodes:
        return LayoutResult(config=config)

    analysis = analyze_graph(graph)
    levels = assign_levels(analysis, graph.nodes)
    positions = compute_positions(graph, levels, config)
    classified = classify_edges(graph.edges, levels)
    routes = route_edges(graph, positions, classified, config)

    return LayoutResult(
        levels=levels,
        positions=positions,
        routes=routes,
        config=config,
        analysis=analysis,
    )
