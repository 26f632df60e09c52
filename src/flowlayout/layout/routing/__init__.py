"""Edge routing subpackage for workflow layout.

Public API:
- classify_edges: Forward/backward classification and parallel grouping
- route_edges: Main edge routing dispatcher
- EdgeRoute: Routed path dataclass
- spacing_unit / lateral_offset: Parallel-edge separation
"""

from flowlayout.layout.routing.classify import ClassifiedEdge, classify_edges
from flowlayout.layout.routing.common import Anchor, EdgeRoute
from flowlayout.layout.routing.core import route_edges
from flowlayout.layout.routing.offsets import lateral_offset, spacing_unit

__all__ = [
    "Anchor",
    "ClassifiedEdge",
    "EdgeRoute",
    "classify_edges",
    "lateral_offset",
    "route_edges",
    "spacing_unit",
]
