"""Tests for the CLI entry points."""

import json
from pathlib import Path

from click.testing import CliRunner

from flowlayout.cli import cli

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
COMPLEX_JSON = EXAMPLES_DIR / "complex_routing.json"
ORDER_JSON = EXAMPLES_DIR / "order_lifecycle.json"


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(COMPLEX_JSON), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "Rendered 14 nodes, 20 edges, 8 levels" in result.output
    assert out.exists()
    assert "<svg" in out.read_text()


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    wf = tmp_path / "test.json"
    wf.write_text(ORDER_JSON.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(wf)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "test.svg").exists()


def test_render_options(tmp_path):
    out = tmp_path / "out.svg"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(ORDER_JSON), "-o", str(out),
        "--vertical", "--routing", "orthogonal", "--theme", "dark",
        "--spacing", "150", "--width", "900", "--focus", "review",
    ])
    assert result.exit_code == 0, result.output
    assert 'width="900"' in out.read_text()


def test_render_unknown_focus_node(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(ORDER_JSON), "-o", str(tmp_path / "x.svg"), "--focus", "nope",
    ])
    assert result.exit_code == 1
    assert "Unknown focus node" in result.output


def test_render_bad_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{oops")
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_validate_success():
    """validate command succeeds on valid input."""
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(COMPLEX_JSON)])
    assert result.exit_code == 0
    assert "Valid: 14 nodes, 20 edges" in result.output


def test_validate_reports_problems(tmp_path):
    wf = tmp_path / "broken.json"
    wf.write_text(json.dumps({
        "nodes": [{"id": "a"}, {"id": "a"}, {"id": "b"}],
        "edges": [{"id": "e1", "source": "a", "target": "ghost"}],
    }))
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(wf)])
    assert result.exit_code == 1
    assert "Duplicate node id 'a'" in result.output
    assert "unknown target 'ghost'" in result.output


def test_validate_empty_workflow(tmp_path):
    wf = tmp_path / "empty.json"
    wf.write_text("{}")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(wf)])
    assert result.exit_code == 1
    assert "no nodes" in result.output


def test_validate_not_an_object(tmp_path):
    wf = tmp_path / "list.json"
    wf.write_text("[1, 2]")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(wf)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_info_command():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(COMPLEX_JSON)])
    assert result.exit_code == 0, result.output
    assert "Workflow: Complex Edge Routing Demo (complex-routing-demo)" in result.output
    assert "Nodes: 14" in result.output
    assert "state: 8" in result.output
    assert "event: 6" in result.output
    assert "Backward edges: 1" in result.output
    assert "Levels: 8" in result.output
    assert "Start nodes: start" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
