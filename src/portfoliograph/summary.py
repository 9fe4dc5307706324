"""Portfolio summaries for the command line.

Rankings only add up the precomputed ``reg_contacts`` of each node's edges;
no graph topology is derived here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import networkx as nx

from portfoliograph.graph.core import GraphModel


@dataclass(frozen=True)
class RankedNode:
    id: int
    label: str
    reg_contacts: int


@dataclass(frozen=True)
class PortfolioSummary:
    """Headline numbers for a portfolio.

    Attributes:
        title: Portfolio title
        node_count: Total nodes
        edge_count: Total edges
        name_count: Nodes that are names
        bizaddr_count: Nodes that are business addresses
        bridge_count: Edges flagged as local bridges
        top_business_addresses: Business addresses by registration contacts
        top_names: Names by registration contacts
    """

    title: str
    node_count: int
    edge_count: int
    name_count: int
    bizaddr_count: int
    bridge_count: int
    top_business_addresses: list[RankedNode] = field(default_factory=list)
    top_names: list[RankedNode] = field(default_factory=list)


def _contacts(g: nx.MultiGraph, node_id: int) -> int:
    total = g.degree(node_id, weight="reg_contacts")
    # degree() counts each self-loop at both of its ends
    loops = g.get_edge_data(node_id, node_id) or {}
    return int(total - sum(d["reg_contacts"] for d in loops.values()))


def _rank(model: GraphModel, *, names: bool, limit: int | None) -> list[RankedNode]:
    g = model.nx_graph
    ranked = [RankedNode(n.id, n.label, _contacts(g, n.id)) for n in model.nodes if n.is_name == names]
    ranked.sort(key=lambda r: (-r.reg_contacts, r.label))
    return ranked if limit is None else ranked[:limit]


def rank_business_addresses(model: GraphModel, limit: int | None = None) -> list[RankedNode]:
    """Business addresses, most registration contacts first (ties by label)."""
    return _rank(model, names=False, limit=limit)


def rank_names(model: GraphModel, limit: int | None = None) -> list[RankedNode]:
    """Names, most registration contacts first (ties by label)."""
    return _rank(model, names=True, limit=limit)


def summarize(model: GraphModel, top: int = 5) -> PortfolioSummary:
    name_count = sum(1 for n in model.nodes if n.is_name)
    return PortfolioSummary(
        title=model.title,
        node_count=model.node_count,
        edge_count=model.edge_count,
        name_count=name_count,
        bizaddr_count=model.node_count - name_count,
        bridge_count=sum(1 for e in model.edges if e.is_bridge),
        top_business_addresses=rank_business_addresses(model, top),
        top_names=rank_names(model, top),
    )
