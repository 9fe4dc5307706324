"""Notebook widget and file output for portfolio graphs."""

from __future__ import annotations

import html as html_module
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from portfoliograph.navigation.navigator import ViewConfig
from portfoliograph.viz.engine import DEFAULT_BBL_URL
from portfoliograph.viz.html_generator import generate_portfolio_html

if TYPE_CHECKING:
    from portfoliograph.graph.core import GraphModel
    from portfoliograph.portfolio import Portfolio

logger = logging.getLogger(__name__)


class PortfolioWidget:
    """Widget for showing a portfolio graph in Jupyter/VSCode notebooks."""

    def __init__(self, html_content: str, width: int = 960, height: int = 640):
        """Create a widget.

        Args:
            html_content: Complete HTML document for the visualization
            width: Widget width in pixels
            height: Widget height in pixels
        """
        self.html_content = html_content
        self.width = width
        self.height = height

    def _repr_html_(self) -> str:
        """Return HTML representation for Jupyter display."""
        escaped_html = html_module.escape(self.html_content, quote=True)
        return (
            f'<iframe srcdoc="{escaped_html}" '
            f'width="{self.width}" height="{self.height}" frameborder="0" '
            f'style="border: none; width: {self.width}px; max-width: 100%; '
            f'height: {self.height}px; display: block;" '
            f'sandbox="allow-scripts allow-popups allow-forms">'
            f'</iframe>'
        )


def visualize(
    graph: GraphModel | Portfolio,
    *,
    view: ViewConfig | None = None,
    bbl_url: str = DEFAULT_BBL_URL,
    width: int = 960,
    height: int = 640,
    filepath: str | Path | None = None,
) -> PortfolioWidget | None:
    """Render a portfolio graph in a notebook or to an HTML file.

    Args:
        graph: A built GraphModel, or a Portfolio to build first
        view: Camera animation settings
        bbl_url: Edge click link template containing ``{bbl}``
        width: Widget width in pixels
        height: Widget height in pixels
        filepath: Path to save HTML file (default: None, display in notebook)

    Returns:
        PortfolioWidget if filepath is None, otherwise None (saves to file)

    Raises:
        MalformedPortfolio: If a Portfolio is given and an edge references an
            unknown node id
    """
    from portfoliograph.graph.core import GraphModel, build

    model = graph if isinstance(graph, GraphModel) else build(graph)
    html_content = generate_portfolio_html(model, view=view, bbl_url=bbl_url)

    if filepath is not None:
        path = Path(filepath)
        if path.suffix != ".html":
            path = path.with_name(path.name + ".html")
        path.write_text(html_content, encoding="utf-8")
        logger.debug("Wrote %s", path)
        return None

    return PortfolioWidget(html_content, width, height)
