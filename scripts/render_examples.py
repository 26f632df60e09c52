#!/usr/bin/env python3
"""Batch render every example workflow in each orientation and routing style.

Outputs go to /tmp/flowlayout_renders/.

Usage:
    python scripts/render_examples.py
    python scripts/render_examples.py --theme dark
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from flowlayout.layout import (  # noqa: E402
    LayoutConfig,
    Orientation,
    RoutingStyle,
    compute_layout,
)
from flowlayout.parser import load_workflow  # noqa: E402
from flowlayout.render import render_svg  # noqa: E402
from flowlayout.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/flowlayout_renders")
EXAMPLES_DIR = project_root / "examples"

EXAMPLE_FILES = sorted(EXAMPLES_DIR.glob("*.json"))


def render_file(
    json_path: Path, output_dir: Path, theme_name: str
) -> tuple[str, list[str]]:
    """Load, lay out and render one workflow file in every variant.

    Returns (name, list_of_issues).
    """
    name = json_path.stem
    issues: list[str] = []

    try:
        workflow = load_workflow(json_path)
    except (OSError, ValueError) as e:
        return name, [f"PARSE ERROR: {e}"]

    theme = THEMES[theme_name]
    for orientation in Orientation:
        for style in RoutingStyle:
            variant = f"{name}_{orientation.value}_{style.value}"
            config = LayoutConfig(orientation=orientation, routing_style=style)
            layout = compute_layout(workflow.graph, config)

            drawn = len(layout.routes)
            if drawn != len(workflow.graph.edges):
                issues.append(
                    f"{variant}: {len(workflow.graph.edges) - drawn} edge(s) not routed"
                )

            svg_str = render_svg(workflow.graph, layout, theme, title=workflow.name)
            (output_dir / f"{variant}.svg").write_text(svg_str)

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render example workflows")
    parser.add_argument(
        "--theme", choices=sorted(THEMES), default="light", help="Visual theme"
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    if not EXAMPLE_FILES:
        print(f"No example files in {EXAMPLES_DIR}/")
        sys.exit(1)

    print(f"Rendering {len(EXAMPLE_FILES)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in EXAMPLE_FILES)
    any_errors = False

    for json_path in EXAMPLE_FILES:
        name, issues = render_file(json_path, OUTPUT_DIR, args.theme)
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
