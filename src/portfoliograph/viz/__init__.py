"""Visualization module for portfolio graphs.

Usage:
    visualize(model)                          # Returns a Jupyter widget
    visualize(model, filepath="graph.html")   # Writes a standalone page
    to_mermaid(model)                         # Mermaid flowchart
"""

from portfoliograph.viz.engine import RenderEngine, bbl_url, link_dash, node_color, to_graph_data
from portfoliograph.viz.html_generator import generate_portfolio_html
from portfoliograph.viz.mermaid import MermaidDiagram, to_mermaid
from portfoliograph.viz.widget import PortfolioWidget, visualize

__all__ = [
    "MermaidDiagram",
    "PortfolioWidget",
    "RenderEngine",
    "bbl_url",
    "generate_portfolio_html",
    "link_dash",
    "node_color",
    "to_graph_data",
    "to_mermaid",
    "visualize",
]
