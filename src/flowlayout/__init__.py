"""flowlayout: hierarchical layout and edge routing for workflow diagrams."""

__version__ = "0.1.0"

from flowlayout.layout import LayoutConfig, LayoutResult, compute_layout  # noqa: E402
from flowlayout.parser.model import Edge, Graph, Node, NodeKind  # noqa: E402

__all__ = [
    "Edge",
    "Graph",
    "LayoutConfig",
    "LayoutResult",
    "Node",
    "NodeKind",
    "__version__",
    "compute_layout",
]
