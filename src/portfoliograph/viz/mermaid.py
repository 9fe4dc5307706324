"""Mermaid flowchart exporter for portfolio graphs.

Usage:
    to_mermaid(model)                 # Renders in notebooks
    print(to_mermaid(model))          # Raw Mermaid source
    to_mermaid(model).source          # Access source directly
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from portfoliograph.viz import styles

if TYPE_CHECKING:
    from portfoliograph.graph.core import GraphModel, VisualEdge, VisualNode

# =============================================================================
# Constants
# =============================================================================

_VALID_DIRECTIONS = {"TD", "TB", "BT", "LR", "RL"}

DEFAULT_COLORS: dict[str, dict[str, str]] = {
    styles.NAME.css_class: {"fill": styles.NAME.color, "stroke": "#333", "color": "#000"},
    styles.BIZADDR.css_class: {"fill": styles.BIZADDR.color, "stroke": "#333", "color": "#fff"},
}

# =============================================================================
# MermaidDiagram (notebook-renderable result)
# =============================================================================


class MermaidDiagram:
    """A Mermaid diagram that renders in Jupyter notebooks.

    Example:
        >>> diagram = to_mermaid(model)  # doctest: +SKIP
        >>> print(diagram)               # prints raw Mermaid source
        >>> diagram.source               # raw string
    """

    def __init__(self, source: str) -> None:
        self.source = source

    def __str__(self) -> str:
        return self.source

    def __repr__(self) -> str:
        lines = self.source.split("\n")
        preview = lines[0] if lines else ""
        return f"MermaidDiagram({preview!r}, {len(lines)} lines)"

    def __contains__(self, item: str) -> bool:
        return item in self.source

    def _repr_mimebundle_(self, **kwargs: Any) -> dict[str, str]:
        """JupyterLab 4.1+ renders text/vnd.mermaid natively."""
        return {
            "text/vnd.mermaid": self.source,
            "text/plain": str(self),
        }


# =============================================================================
# Formatting
# =============================================================================


def _node_id(node_id: int) -> str:
    # Mermaid IDs cannot start with a digit or a minus sign
    return f"n_{node_id}".replace("-", "m")


def _escape_label(text: str) -> str:
    """Escape characters that have special meaning in Mermaid labels."""
    return text.replace('"', "&quot;").replace("<", "&lt;").replace(">", "&gt;").replace("|", "&#124;")


def _format_node(node: VisualNode) -> str:
    style = styles.NAME if node.is_name else styles.BIZADDR
    open_delim, close_delim = style.shape
    return f"    {_node_id(node.id)}{open_delim}{_escape_label(node.label)}{close_delim}"


def _format_edge(edge: VisualEdge) -> str:
    arrow = "-.-" if edge.dashed else "---"
    label = _escape_label(edge.label)
    return f'    {_node_id(edge.source_id)} {arrow}|"{label}"| {_node_id(edge.target_id)}'


def _build_style_section(
    model: GraphModel,
    colors: dict[str, dict[str, str]] | None,
) -> list[str]:
    """Build classDef, class assignments, and linkStyle lines."""
    effective = {cls: props.copy() for cls, props in DEFAULT_COLORS.items()}
    if colors:
        for key, val in colors.items():
            effective.setdefault(key, {}).update(val)

    class_to_ids: dict[str, list[str]] = {}
    for node in model.nodes:
        cls = styles.NAME.css_class if node.is_name else styles.BIZADDR.css_class
        class_to_ids.setdefault(cls, []).append(_node_id(node.id))

    lines: list[str] = []
    for cls_name, props in effective.items():
        if cls_name not in class_to_ids:
            continue
        prop_str = ",".join(f"{k}:{v}" for k, v in props.items())
        lines.append(f"    classDef {cls_name} {prop_str}")

    for cls_name, ids in sorted(class_to_ids.items()):
        lines.append(f"    class {','.join(ids)} {cls_name}")

    # Links are numbered in declaration order
    for index, edge in enumerate(model.edges):
        lines.append(f"    linkStyle {index} stroke:{edge.color}")

    return lines


# =============================================================================
# Public API
# =============================================================================


def to_mermaid(
    model: GraphModel,
    *,
    direction: str = "LR",
    colors: dict[str, dict[str, str]] | None = None,
) -> MermaidDiagram:
    """Convert a graph model to a Mermaid flowchart diagram.

    Names render as rounded nodes and business addresses as boxes. Dashed
    edges render as dotted links, and each link is stroked in its tier color.

    Args:
        model: Graph model to export
        direction: Flowchart direction: "TD", "TB", "LR", "RL" or "BT"
        colors: Custom color overrides per node class, e.g.
            {"name": {"fill": "#fff", "stroke": "#000"}}

    Raises:
        ValueError: If direction is not a Mermaid flowchart direction
    """
    if direction not in _VALID_DIRECTIONS:
        msg = f"Invalid direction {direction!r}. Must be one of {sorted(_VALID_DIRECTIONS)}"
        raise ValueError(msg)

    lines: list[str] = [
        "---",
        f"title: {_escape_label(model.title)}",
        "---",
        f"flowchart {direction}",
    ]

    if model.nodes:
        lines.append("    %% Nodes")
    lines.extend(_format_node(n) for n in model.nodes)

    if model.edges:
        lines.append("    %% Edges")
    lines.extend(_format_edge(e) for e in model.edges)

    lines.extend(_build_style_section(model, colors))
    return MermaidDiagram("\n".join(lines))
