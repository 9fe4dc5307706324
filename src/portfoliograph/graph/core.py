"""Graph model for portfolio rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import networkx as nx

from portfoliograph.graph.validation import validate_portfolio
from portfoliograph.portfolio import Name, Portfolio, PortfolioEdge, PortfolioNode
from portfoliograph.viz import styles

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisualNode:
    """A renderable node.

    ``base_color`` is fixed by the node variant. Search highlighting is
    applied by the renderer at draw time and never changes this record.
    """

    id: int
    label: str
    base_color: str
    weight: int
    is_name: bool


@dataclass(frozen=True)
class VisualEdge:
    """A renderable edge.

    ``color`` and ``dashed`` are derived from ``reg_contacts`` and
    ``is_bridge``; ``bbl`` is carried through for click navigation.
    """

    source_id: int
    target_id: int
    label: str
    color: str
    dashed: bool
    reg_contacts: int
    is_bridge: bool = False
    bbl: str | None = None


def build_node(node: PortfolioNode) -> VisualNode:
    style = styles.node_style(node.value)
    return VisualNode(
        id=node.id,
        label=node.label,
        base_color=style.color,
        weight=styles.NODE_WEIGHT,
        is_name=isinstance(node.value, Name),
    )


def build_edge(edge: PortfolioEdge) -> VisualEdge:
    return VisualEdge(
        source_id=edge.from_id,
        target_id=edge.to_id,
        label=styles.edge_label(edge.reg_contacts, bbl=edge.bbl, is_bridge=edge.is_bridge),
        color=styles.edge_color(edge.reg_contacts),
        dashed=styles.is_dashed(edge.reg_contacts, edge.is_bridge),
        reg_contacts=edge.reg_contacts,
        is_bridge=edge.is_bridge,
        bbl=edge.bbl,
    )


class GraphModel:
    """Renderable nodes and edges derived from a portfolio.

    Built once and never mutated. Node and edge order follow the portfolio
    document.

    Attributes:
        title: Portfolio title, used for the page title
        nodes: Visual nodes in document order
        edges: Visual edges in document order

    Example:
        >>> portfolio = parse_portfolio({
        ...     "title": "Example",
        ...     "nodes": [{"id": 1, "value": {"Name": "Jane Doe"}},
        ...               {"id": 2, "value": {"BizAddr": "1 Main St"}}],
        ...     "edges": [{"from": 1, "to": 2, "reg_contacts": 1}],
        ... })
        >>> model = build(portfolio)
        >>> [n.base_color for n in model.nodes]
        ['pink', 'gray']
        >>> model.edges[0].label
        '1 registration'
    """

    def __init__(
        self,
        title: str,
        nodes: tuple[VisualNode, ...],
        edges: tuple[VisualEdge, ...],
    ) -> None:
        self.title = title
        self.nodes = nodes
        self.edges = edges
        self._by_id = {n.id: n for n in nodes}
        self._nx_graph = self._build_graph()

    def _build_graph(self) -> nx.MultiGraph:
        g = nx.MultiGraph()
        for n in self.nodes:
            g.add_node(n.id, label=n.label, is_name=n.is_name)
        for e in self.edges:
            g.add_edge(
                e.source_id,
                e.target_id,
                reg_contacts=e.reg_contacts,
                is_bridge=e.is_bridge,
            )
        return g

    @property
    def nx_graph(self) -> nx.MultiGraph:
        """Undirected NetworkX view, keyed by node id."""
        return self._nx_graph

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def node(self, node_id: int) -> VisualNode:
        """Get a node by id.

        Raises:
            KeyError: If no node has this id
        """
        return self._by_id[node_id]

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._by_id

    def __iter__(self) -> Iterator[VisualNode]:
        return iter(self.nodes)

    def to_graph_data(self) -> dict[str, Any]:
        """Node and link lists in the renderer's input format."""
        from portfoliograph.viz.engine import to_graph_data

        return to_graph_data(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphModel):
            return NotImplemented
        return (self.title, self.nodes, self.edges) == (other.title, other.nodes, other.edges)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"GraphModel({self.title!r}, nodes={self.node_count}, edges={self.edge_count})"


def build(portfolio: Portfolio) -> GraphModel:
    """Derive the renderable graph model from a portfolio.

    Pure and deterministic: the same portfolio always yields an equal model.

    Raises:
        MalformedPortfolio: If an edge references an unknown node id
    """
    validate_portfolio(portfolio)
    nodes = tuple(build_node(n) for n in portfolio.nodes)
    edges = tuple(build_edge(e) for e in portfolio.edges)
    logger.debug("Built graph model %r: %d nodes, %d edges", portfolio.title, len(nodes), len(edges))
    return GraphModel(portfolio.title, nodes, edges)
