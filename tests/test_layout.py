"""Tests for graph analysis, level assignment and node placement."""

from flowlayout.layout.analysis import analyze_graph
from flowlayout.layout.config import LayoutConfig, Orientation, RoutingStyle
from flowlayout.layout.levels import assign_levels
from flowlayout.layout.positions import compute_positions, group_by_level
from flowlayout.parser.model import Edge, Graph, Node, NodeKind


def _graph(*pairs, isolated=(), states=()):
    """Build a graph from (source, target) pairs; nodes in first-seen order."""
    ids: list[str] = []
    for pair in pairs:
        for node_id in pair:
            if node_id not in ids:
                ids.append(node_id)
    ids.extend(isolated)
    nodes = [
        Node(n, NodeKind.STATE if n in states else NodeKind.EVENT) for n in ids
    ]
    edges = [Edge(f"e{i}", s, t) for i, (s, t) in enumerate(pairs)]
    return Graph(nodes=nodes, edges=edges)


def _levels(graph):
    return assign_levels(analyze_graph(graph), graph.nodes)


# --- Analysis ---------------------------------------------------------------


def test_analysis_roots_and_leaves():
    graph = _graph(("a", "b"), ("b", "c"), ("a", "c"), isolated=("z",))
    analysis = analyze_graph(graph)
    assert [n.id for n in analysis.root_nodes] == ["a", "z"]
    assert [n.id for n in analysis.leaf_nodes] == ["c", "z"]
    assert [n.id for n in analysis.start_nodes] == ["a", "z"]
    assert analysis.outgoing["a"] == ["b", "c"]
    assert analysis.incoming["c"] == ["b", "a"]
    assert analysis.outgoing["z"] == []


def test_analysis_no_roots_picks_busiest_node():
    graph = _graph(("a", "b"), ("b", "c"), ("b", "a"), ("c", "a"))
    analysis = analyze_graph(graph)
    assert analysis.root_nodes == []
    assert [n.id for n in analysis.start_nodes] == ["b"]


def test_analysis_no_roots_tie_keeps_first():
    graph = _graph(("a", "b"), ("b", "c"), ("c", "a"))
    assert [n.id for n in analyze_graph(graph).start_nodes] == ["a"]


def test_analysis_skips_dangling_edges():
    graph = Graph(
        nodes=[Node("a"), Node("b")],
        edges=[Edge("ok", "a", "b"), Edge("bad", "a", "ghost")],
    )
    analysis = analyze_graph(graph)
    assert analysis.outgoing["a"] == ["b"]
    assert "ghost" not in analysis.incoming
    assert [e.id for e in analysis.skipped_edges] == ["bad"]
    assert analysis.digraph.number_of_edges() == 1


def test_analysis_empty_graph():
    analysis = analyze_graph(Graph())
    assert analysis.start_nodes == []
    assert analysis.outgoing == {}


# --- Levels -----------------------------------------------------------------


def test_levels_chain():
    assert _levels(_graph(("a", "b"), ("b", "c"))) == {"a": 0, "b": 1, "c": 2}


def test_levels_shortest_path_wins():
    """A node reachable by a short and a long path sits at the short depth."""
    levels = _levels(_graph(("a", "b"), ("b", "c"), ("c", "d"), ("a", "d")))
    assert levels["d"] == 1


def test_levels_cycle_terminates():
    levels = _levels(_graph(("s1", "ev1"), ("ev1", "s2"), ("s2", "s1")))
    assert levels == {"s1": 0, "ev1": 1, "s2": 2}


def test_levels_self_loop():
    assert _levels(_graph(("a", "a"))) == {"a": 0}


def test_levels_isolated_nodes_are_roots():
    levels = _levels(_graph(("a", "b"), isolated=("c",)))
    assert levels == {"a": 0, "b": 1, "c": 0}


def test_levels_unreachable_cycle_gets_own_hierarchy():
    """A rootless component not reachable from the roots starts at level 0."""
    levels = _levels(_graph(("r", "x"), ("p", "q"), ("q", "p")))
    assert levels == {"r": 0, "x": 1, "p": 0, "q": 1}


def test_levels_cover_every_node():
    graph = _graph(
        ("a", "b"), ("b", "a"), ("c", "d"), ("d", "e"), ("e", "c"), ("f", "f"),
        isolated=("g",),
    )
    levels = _levels(graph)
    assert set(levels) == set(graph.node_ids())
    assert all(level >= 0 for level in levels.values())


# --- Positions --------------------------------------------------------------


def test_group_by_level_keeps_input_order():
    graph = _graph(("a", "c"), ("a", "b"))
    buckets = group_by_level(graph, _levels(graph))
    assert buckets == {0: ["a"], 1: ["c", "b"]}


def test_positions_default_chain():
    graph = _graph(("a", "b"), ("b", "c"))
    positions = compute_positions(graph, _levels(graph))
    # spacing capped at 200, single nodes on the canvas midline
    assert positions == {"a": (100, 400), "b": (300, 400), "c": (500, 400)}


def test_positions_fill_small_canvas():
    graph = _graph(("a", "b"), ("b", "c"))
    config = LayoutConfig(canvas_width=400)
    positions = compute_positions(graph, _levels(graph), config)
    assert positions["b"][0] == 200
    assert positions["c"][0] == 300


def test_positions_spread_level_symmetrically():
    graph = _graph(("a", "b"), ("a", "c"), ("a", "d"))
    positions = compute_positions(graph, _levels(graph))
    ys = [positions[n][1] for n in ("b", "c", "d")]
    assert ys == [100, 400, 700]
    assert {positions[n][0] for n in ("b", "c", "d")} == {300}


def test_positions_respect_min_node_spacing():
    graph = _graph(*[("root", f"n{i}") for i in range(10)])
    positions = compute_positions(graph, _levels(graph))
    ys = sorted(positions[f"n{i}"][1] for i in range(10))
    gaps = [b - a for a, b in zip(ys, ys[1:])]
    assert min(gaps) >= 100
    # still centered on the midline
    assert (ys[0] + ys[-1]) / 2 == 400


def test_positions_vertical_orientation():
    graph = _graph(("a", "b"), ("b", "c"))
    config = LayoutConfig(orientation=Orientation.VERTICAL)
    positions = compute_positions(graph, _levels(graph), config)
    assert positions == {"a": (600, 100), "b": (600, 300), "c": (600, 500)}


def test_positions_unlevelled_node_gets_fallback():
    graph = _graph(("a", "b"))
    positions = compute_positions(graph, {"a": 0})
    assert positions["b"] == (100, 100)


# --- Config -----------------------------------------------------------------


def test_config_defaults():
    config = LayoutConfig()
    assert config.is_horizontal
    assert config.routing_style is RoutingStyle.CURVED
    assert config.node_box(NodeKind.STATE) == (60, 60)
    assert config.node_box(NodeKind.EVENT) == (120, 80)
    assert config.node_box(None) == (120, 80)


def test_config_from_mapping_accepts_camel_case():
    config = LayoutConfig.from_mapping({
        "canvasWidth": 900,
        "isHorizontal": False,
        "routingStyle": "orthogonal",
        "spacing": None,
        "somethingElse": 3,
    })
    assert config.canvas_width == 900.0
    assert config.orientation is Orientation.VERTICAL
    assert config.routing_style is RoutingStyle.ORTHOGONAL
    assert config.spacing == 200
    assert config.primary_extent() == config.canvas_height


def test_config_from_mapping_empty():
    assert LayoutConfig.from_mapping(None) == LayoutConfig()
    assert LayoutConfig.from_mapping({}) == LayoutConfig()
