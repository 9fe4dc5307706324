"""Contract with the force-directed render engine.

The engine itself (layout simulation, drawing, camera animation) lives
outside this package. It receives the graph in its own node/link format plus
three styling callbacks, and exposes camera and bounding-box operations that
the navigator drives.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Optional, Protocol
from urllib.parse import quote

from portfoliograph.viz import styles

if TYPE_CHECKING:
    from portfoliograph.graph.core import GraphModel, VisualEdge, VisualNode
    from portfoliograph.navigation.selection import SelectionState

DEFAULT_BBL_URL = "https://whoownswhat.justfix.org/bbl/{bbl}"

NodePredicate = Callable[[Mapping[str, Any]], bool]
NodeColorFn = Callable[[Mapping[str, Any]], str]
LinkDashFn = Callable[[Mapping[str, Any]], Optional[list]]
LinkClickFn = Callable[[Mapping[str, Any]], None]


class RenderEngine(Protocol):
    """Capabilities consumed from the render engine.

    Nodes and links passed to callbacks are the mappings produced by
    ``to_graph_data``; the engine may add layout keys such as ``x``/``y``.
    """

    def set_graph_data(self, data: dict[str, Any]) -> None: ...

    def set_node_color(self, fn: NodeColorFn) -> None: ...

    def set_link_dash(self, fn: LinkDashFn) -> None: ...

    def on_link_click(self, fn: LinkClickFn) -> None: ...

    def zoom_to_fit(self, duration_ms: int, padding_px: int, predicate: NodePredicate) -> None: ...

    def center_at(self, x: float, y: float, duration_ms: int) -> None: ...

    def get_bounding_box(self, predicate: NodePredicate) -> Mapping[str, Any]: ...


# =============================================================================
# Graph data
# =============================================================================


def node_data(node: VisualNode) -> dict[str, Any]:
    return {"id": node.id, "name": node.label, "color": node.base_color, "val": node.weight}


def link_data(edge: VisualEdge) -> dict[str, Any]:
    link: dict[str, Any] = {
        "source": edge.source_id,
        "target": edge.target_id,
        "name": edge.label,
        "color": edge.color,
    }
    if edge.dashed:
        link["lineDash"] = list(styles.DASH_PATTERN)
    if edge.bbl:
        link["bbl"] = edge.bbl
    return link


def to_graph_data(model: GraphModel) -> dict[str, Any]:
    """Convert a graph model into the engine's ``{"nodes", "links"}`` input.

    Example:
        >>> data = to_graph_data(model)  # doctest: +SKIP
        >>> data["nodes"][0]
        {'id': 1, 'name': 'Jane Doe', 'color': 'pink', 'val': 10}
    """
    return {
        "nodes": [node_data(n) for n in model.nodes],
        "links": [link_data(e) for e in model.edges],
    }


# =============================================================================
# Styling callbacks
# =============================================================================


def node_color(node: Mapping[str, Any], selection: SelectionState) -> str:
    """Highlight color for selected nodes, base color otherwise.

    A lookup at draw time; the node record itself is left untouched.
    """
    if node["id"] in selection:
        return styles.HIGHLIGHT_COLOR
    return node["color"]


def link_dash(link: Mapping[str, Any]) -> list[int] | None:
    return link.get("lineDash")


def bbl_url(bbl: str, template: str = DEFAULT_BBL_URL) -> str:
    """External property-lookup URL for a building identifier."""
    return template.format(bbl=quote(bbl, safe=""))
