"""Portfolio validation.

Runs before the graph model is built so that a bad edge never reaches the
renderer.
"""

from __future__ import annotations

from portfoliograph.exceptions import MalformedPortfolio
from portfoliograph.portfolio import Portfolio


def validate_portfolio(portfolio: Portfolio) -> None:
    """Check that every edge endpoint names an existing node.

    Raises:
        MalformedPortfolio: On the first edge with an unknown endpoint
    """
    node_ids = portfolio.node_ids
    for index, edge in enumerate(portfolio.edges):
        missing = [i for i in (edge.from_id, edge.to_id) if i not in node_ids]
        if missing:
            # self-loops on an unknown id report it once
            raise MalformedPortfolio(index, list(dict.fromkeys(missing)))
