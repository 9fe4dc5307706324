"""Graph package - graph model construction and validation."""

from portfoliograph.graph.core import GraphModel, VisualEdge, VisualNode, build
from portfoliograph.graph.validation import validate_portfolio

__all__ = [
    "GraphModel",
    "VisualEdge",
    "VisualNode",
    "build",
    "validate_portfolio",
]
