"""portfoliograph - interactive graphs of property-ownership portfolios."""

from portfoliograph.exceptions import (
    LoadFailure,
    MalformedPortfolio,
    ParseFailure,
    PortfolioError,
)
from portfoliograph.graph import GraphModel, VisualEdge, VisualNode, build, validate_portfolio
from portfoliograph.navigation import (
    BoundingBox,
    CenterOnPoint,
    FitToBounds,
    NoCameraMove,
    Point,
    ResetToFitAll,
    SearchOutcome,
    SearchStatus,
    SelectionState,
    ViewAction,
    ViewConfig,
    ViewNavigator,
    match,
    submit_query,
)
from portfoliograph.portfolio import (
    BusinessAddress,
    Name,
    Portfolio,
    PortfolioEdge,
    PortfolioNode,
    parse_portfolio,
)
from portfoliograph.session import PortfolioSession, start_session, status_line
from portfoliograph.source import load_portfolio
from portfoliograph.summary import PortfolioSummary, summarize
from portfoliograph.viz import generate_portfolio_html, to_mermaid, visualize

__all__ = [
    # Portfolio records
    "Name",
    "BusinessAddress",
    "PortfolioNode",
    "PortfolioEdge",
    "Portfolio",
    "parse_portfolio",
    "load_portfolio",
    # Graph model
    "GraphModel",
    "VisualNode",
    "VisualEdge",
    "build",
    "validate_portfolio",
    # Search and navigation
    "match",
    "submit_query",
    "SearchOutcome",
    "SearchStatus",
    "SelectionState",
    "ViewAction",
    "ViewConfig",
    "ViewNavigator",
    "ResetToFitAll",
    "CenterOnPoint",
    "FitToBounds",
    "NoCameraMove",
    "Point",
    "BoundingBox",
    # Session
    "PortfolioSession",
    "start_session",
    "status_line",
    # Output
    "generate_portfolio_html",
    "to_mermaid",
    "visualize",
    "PortfolioSummary",
    "summarize",
    # Errors
    "PortfolioError",
    "LoadFailure",
    "ParseFailure",
    "MalformedPortfolio",
]
