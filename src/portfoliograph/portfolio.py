"""Portfolio records: names and business addresses linked by registrations.

A portfolio document looks like::

    {
      "title": "Jane Doe's portfolio",
      "nodes": [{"id": 1, "value": {"Name": "Jane Doe"}},
                {"id": 2, "value": {"BizAddr": "1 Main St"}}],
      "edges": [{"from": 1, "to": 2, "reg_contacts": 1,
                 "is_bridge": true, "bbl": "1000010001"}]
    }

``parse_portfolio`` turns the decoded document into immutable records once,
so nothing downstream has to inspect ``value`` keys again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from portfoliograph.exceptions import ParseFailure

NAME_KEY = "Name"
BIZADDR_KEY = "BizAddr"


@dataclass(frozen=True)
class Name:
    """A person or entity named in a registration."""

    label: str


@dataclass(frozen=True)
class BusinessAddress:
    """A business address listed in a registration."""

    label: str


NodeValue = Union[Name, BusinessAddress]


@dataclass(frozen=True)
class PortfolioNode:
    id: int
    value: NodeValue

    @property
    def label(self) -> str:
        return self.value.label


@dataclass(frozen=True)
class PortfolioEdge:
    """A link between two nodes, weighted by shared registration contacts.

    Attributes:
        from_id: Id of one endpoint
        to_id: Id of the other endpoint
        reg_contacts: Number of registration contacts linking the endpoints
        is_bridge: True if the edge is a local bridge
        bbl: Building identifier used for external navigation
    """

    from_id: int
    to_id: int
    reg_contacts: int
    is_bridge: bool = False
    bbl: str | None = None


@dataclass(frozen=True)
class Portfolio:
    title: str
    nodes: tuple[PortfolioNode, ...]
    edges: tuple[PortfolioEdge, ...]

    @property
    def node_ids(self) -> frozenset[int]:
        return frozenset(n.id for n in self.nodes)


# =============================================================================
# Parsing
# =============================================================================


def _require_int(value: Any, path: str) -> int:
    # bool is an int subclass, but true/false are never valid ids or counts
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseFailure(f"expected an integer, got {type(value).__name__}", path=path)
    return value


def _require_str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise ParseFailure(f"expected a string, got {type(value).__name__}", path=path)
    return value


def _require_key(obj: dict[str, Any], key: str, path: str) -> Any:
    if key not in obj:
        raise ParseFailure(f"missing required key '{key}'", path=path)
    return obj[key]


def _require_object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ParseFailure(f"expected an object, got {type(value).__name__}", path=path)
    return value


def _require_list(value: Any, path: str) -> list[Any]:
    if not isinstance(value, list):
        raise ParseFailure(f"expected an array, got {type(value).__name__}", path=path)
    return value


def parse_node_value(value: Any, path: str) -> NodeValue:
    """Build the node variant from a ``{"Name": ...}`` / ``{"BizAddr": ...}`` object.

    Exactly one of the two keys must be present.
    """
    obj = _require_object(value, path)
    has_name = NAME_KEY in obj
    has_bizaddr = BIZADDR_KEY in obj
    if has_name and has_bizaddr:
        raise ParseFailure(f"has both '{NAME_KEY}' and '{BIZADDR_KEY}'", path=path)
    if has_name:
        return Name(_require_str(obj[NAME_KEY], f"{path}.{NAME_KEY}"))
    if has_bizaddr:
        return BusinessAddress(_require_str(obj[BIZADDR_KEY], f"{path}.{BIZADDR_KEY}"))
    raise ParseFailure(f"expected '{NAME_KEY}' or '{BIZADDR_KEY}'", path=path)


def parse_node(raw: Any, path: str) -> PortfolioNode:
    obj = _require_object(raw, path)
    node_id = _require_int(_require_key(obj, "id", path), f"{path}.id")
    value = parse_node_value(_require_key(obj, "value", path), f"{path}.value")
    return PortfolioNode(id=node_id, value=value)


def parse_edge(raw: Any, path: str) -> PortfolioEdge:
    obj = _require_object(raw, path)
    from_id = _require_int(_require_key(obj, "from", path), f"{path}.from")
    to_id = _require_int(_require_key(obj, "to", path), f"{path}.to")
    reg_contacts = _require_int(_require_key(obj, "reg_contacts", path), f"{path}.reg_contacts")
    if reg_contacts < 1:
        raise ParseFailure(f"must be at least 1, got {reg_contacts}", path=f"{path}.reg_contacts")

    is_bridge = obj.get("is_bridge")
    if is_bridge is None:
        is_bridge = False
    if not isinstance(is_bridge, bool):
        raise ParseFailure(
            f"expected a boolean, got {type(is_bridge).__name__}", path=f"{path}.is_bridge"
        )

    bbl = obj.get("bbl")
    if bbl is not None:
        bbl = _require_str(bbl, f"{path}.bbl")

    return PortfolioEdge(
        from_id=from_id,
        to_id=to_id,
        reg_contacts=reg_contacts,
        is_bridge=is_bridge,
        bbl=bbl,
    )


def parse_portfolio(document: Any) -> Portfolio:
    """Convert a decoded portfolio document into a ``Portfolio``.

    Edge endpoints are not checked here; see
    ``portfoliograph.graph.validation.validate_portfolio``.

    Raises:
        ParseFailure: If the document does not match the portfolio schema
    """
    obj = _require_object(document, "")
    title = _require_str(_require_key(obj, "title", ""), "title")
    raw_nodes = _require_list(_require_key(obj, "nodes", ""), "nodes")
    raw_edges = _require_list(_require_key(obj, "edges", ""), "edges")

    nodes = tuple(parse_node(raw, f"nodes[{i}]") for i, raw in enumerate(raw_nodes))
    seen: set[int] = set()
    for i, node in enumerate(nodes):
        if node.id in seen:
            raise ParseFailure(f"duplicate node id {node.id}", path=f"nodes[{i}].id")
        seen.add(node.id)

    edges = tuple(parse_edge(raw, f"edges[{i}]") for i, raw in enumerate(raw_edges))
    return Portfolio(title=title, nodes=nodes, edges=edges)
