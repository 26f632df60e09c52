"""CLI for flowlayout."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from flowlayout import __version__
from flowlayout.layout import LayoutConfig, Orientation, RoutingStyle, compute_layout
from flowlayout.layout.focus import compute_focus
from flowlayout.parser import load_workflow, normalize_workflow
from flowlayout.render import render_svg
from flowlayout.themes import THEMES


def _read_raw(input_file: Path) -> dict:
    """Load a workflow JSON file, exiting with status 1 on parse errors."""
    try:
        return json.loads(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout details to stderr")
def cli(verbose: bool) -> None:
    """flowlayout: Lay out workflow graphs and render SVG previews."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
@click.option("--vertical", is_flag=True, help="Flow top to bottom instead of left to right")
@click.option("--routing", type=click.Choice([s.value for s in RoutingStyle]),
              default=RoutingStyle.CURVED.value, help="Edge routing style (default: curved)")
@click.option("--canvas-width", type=float, default=None, help="Layout canvas width")
@click.option("--canvas-height", type=float, default=None, help="Layout canvas height")
@click.option("--spacing", type=float, default=None,
              help="Maximum spacing between levels (default: 200)")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
@click.option("--height", type=int, default=None, help="SVG height in pixels")
@click.option("--focus", "focus_node", default=None,
              help="Highlight one node and its connections, dimming the rest")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    vertical: bool,
    routing: str,
    canvas_width: float | None,
    canvas_height: float | None,
    spacing: float | None,
    width: int | None,
    height: int | None,
    focus_node: str | None,
) -> None:
    """Lay out a workflow JSON file and render it to SVG."""
    try:
        workflow = load_workflow(input_file)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)

    config = LayoutConfig.from_mapping({
        "orientation": Orientation.VERTICAL if vertical else Orientation.HORIZONTAL,
        "routing_style": routing,
        "canvas_width": canvas_width,
        "canvas_height": canvas_height,
        "spacing": spacing,
    })
    layout = compute_layout(workflow.graph, config)

    focus = None
    if focus_node is not None:
        if not workflow.graph.has_node(focus_node):
            click.echo(f"Unknown focus node '{focus_node}'", err=True)
            raise SystemExit(1)
        focus = compute_focus(workflow.graph, focus_node)

    svg = render_svg(workflow.graph, layout, THEMES[theme], title=workflow.name,
                     width=width, height=height, focus=focus)

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(workflow.graph.nodes)} nodes, "
               f"{len(layout.routes)} edges, "
               f"{layout.max_level + 1} levels -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a workflow JSON file."""
    raw = _read_raw(input_file)
    try:
        workflow = normalize_workflow(raw)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)

    graph = workflow.graph
    errors = []

    if not graph.nodes:
        errors.append("Workflow has no nodes")

    seen: set[str] = set()
    for node in graph.nodes:
        if node.id in seen:
            errors.append(f"Duplicate node id '{node.id}'")
        seen.add(node.id)

    for edge in graph.edges:
        if edge.source not in seen:
            errors.append(f"Edge {edge.id} references unknown source '{edge.source}'")
        if edge.target not in seen:
            errors.append(f"Edge {edge.id} references unknown target '{edge.target}'")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(graph.nodes)} nodes, {len(graph.edges)} edges")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a workflow JSON file."""
    try:
        workflow = load_workflow(input_file)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)

    graph = workflow.graph
    layout = compute_layout(graph)

    click.echo(f"Workflow: {workflow.name} ({workflow.id})")
    click.echo(f"Description: {workflow.description}")
    click.echo(f"Nodes: {len(graph.nodes)}")
    for kind in sorted({n.kind for n in graph.nodes}, key=lambda k: k.value):
        count = sum(1 for n in graph.nodes if n.kind is kind)
        click.echo(f"  {kind.value}: {count}")
    click.echo(f"Edges: {len(graph.edges)}")
    click.echo(f"Backward edges: {len(layout.backward_routes())}")
    click.echo(f"Levels: {layout.max_level + 1}")
    if layout.analysis is not None:
        roots = ", ".join(n.id for n in layout.analysis.start_nodes)
        click.echo(f"Start nodes: {roots or '(none)'}")
