"""Visual styling for portfolio graphs.

Colors are CSS color names understood by the force-graph renderer. To
restyle the graph, change the values here; the builder, the HTML page and
the Mermaid exporter all read from this module.
"""

from __future__ import annotations

from dataclasses import dataclass

from portfoliograph.portfolio import BusinessAddress, Name, NodeValue


@dataclass(frozen=True)
class NodeStyle:
    """Style configuration for a node variant."""

    color: str
    # Mermaid shape delimiters
    shape: tuple[str, str]
    css_class: str


@dataclass(frozen=True)
class EdgeTier:
    """Edge color for a range of registration contact counts.

    ``upper`` is exclusive; ``None`` means unbounded.
    """

    lower: int
    upper: int | None
    color: str

    def contains(self, reg_contacts: int) -> bool:
        if reg_contacts < self.lower:
            return False
        return self.upper is None or reg_contacts < self.upper


# ============================================================
# NODE VARIANTS
# ============================================================

NAME = NodeStyle(color="pink", shape=('("', '")'), css_class="name")

BIZADDR = NodeStyle(color="gray", shape=('["', '"]'), css_class="bizaddr")

HIGHLIGHT_COLOR = "red"

NODE_WEIGHT = 10


# ============================================================
# EDGE TIERS (ordered, first match wins)
# ============================================================

EDGE_TIERS: tuple[EdgeTier, ...] = (
    EdgeTier(lower=1, upper=2, color="lightgray"),
    EdgeTier(lower=2, upper=10, color="orange"),
    EdgeTier(lower=10, upper=None, color="crimson"),
)

DASH_PATTERN: tuple[int, ...] = (2, 2)


def node_style(value: NodeValue) -> NodeStyle:
    """Get the style for a node variant."""
    if isinstance(value, Name):
        return NAME
    if isinstance(value, BusinessAddress):
        return BIZADDR
    raise TypeError(f"Unknown node variant: {type(value).__name__}")


def edge_color(reg_contacts: int) -> str:
    for tier in EDGE_TIERS:
        if tier.contains(reg_contacts):
            return tier.color
    raise ValueError(f"reg_contacts must be at least 1, got {reg_contacts}")


def is_dashed(reg_contacts: int, is_bridge: bool) -> bool:
    """Dashed only for single-registration local bridges.

    A bridge carrying many registrations is drawn solid.
    """
    return is_bridge and reg_contacts == 1


def edge_label(reg_contacts: int, *, bbl: str | None = None, is_bridge: bool = False) -> str:
    """Human-readable label, e.g. ``"3 registrations (BBL 1000010001) (local bridge)"``."""
    noun = "registration" if reg_contacts == 1 else "registrations"
    label = f"{reg_contacts} {noun}"
    if bbl:
        label += f" (BBL {bbl})"
    if is_bridge:
        label += " (local bridge)"
    return label
