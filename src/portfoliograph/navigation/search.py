"""Node label search.

Matching is a case-insensitive substring test against each node's display
label. There is no fuzzy matching and no ranking.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from portfoliograph.graph.core import VisualNode


def normalize_query(query: str) -> str:
    """Trim surrounding whitespace and uppercase."""
    return query.strip().upper()


def is_reset_query(query: str) -> bool:
    """True for an empty or whitespace-only query.

    Such a query means "show everything", which is a different outcome from
    a query that matches nothing.
    """
    return not query.strip()


def match(query: str, nodes: Iterable[VisualNode]) -> frozenset[int]:
    """Ids of nodes whose label contains the query, ignoring case.

    Total over all strings: a reset query yields the empty set.

    Example:
        >>> match("jane", model.nodes)  # doctest: +SKIP
        frozenset({1})
    """
    if is_reset_query(query):
        return frozenset()
    needle = normalize_query(query)
    return frozenset(n.id for n in nodes if needle in n.label.upper())
