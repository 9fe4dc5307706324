"""Interactive portfolio session.

Wires a loaded graph model to a render engine, a page and a search form.
All work after the initial load happens synchronously inside one submit
handler, so the selection never needs locking.
"""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from portfoliograph.exceptions import PortfolioError
from portfoliograph.graph.core import GraphModel, build
from portfoliograph.navigation.navigator import ViewCommand, ViewConfig, ViewNavigator
from portfoliograph.navigation.selection import (
    EMPTY_SELECTION,
    SearchOutcome,
    SelectionState,
    submit_query,
)
from portfoliograph.portfolio import Portfolio
from portfoliograph.source import load_portfolio
from portfoliograph.viz.engine import DEFAULT_BBL_URL, RenderEngine, bbl_url, link_dash, node_color

logger = logging.getLogger(__name__)


class Page(Protocol):
    """The page hosting the graph: a title and a one-line status message."""

    def set_title(self, title: str) -> None: ...

    def set_status(self, message: str) -> None: ...


class SearchForm(Protocol):
    """A one-field search form that reports each submitted query."""

    def on_submit(self, callback: Callable[[str], None]) -> None: ...


def pluralize(count: int, noun: str, plural: str | None = None) -> str:
    """``"1 node"``, ``"2 nodes"``; pass ``plural`` for irregular nouns."""
    return f"{count} {noun}" if count == 1 else f"{count} {plural or noun + 's'}"


def status_line(model: GraphModel) -> str:
    """Status shown after a successful load, e.g. ``"Loaded 2 nodes and 1 edge."``."""
    return f"Loaded {pluralize(model.node_count, 'node')} and {pluralize(model.edge_count, 'edge')}."


@dataclass(frozen=True)
class SubmitResult:
    outcome: SearchOutcome
    command: ViewCommand


class PortfolioSession:
    """Owns the selection for one rendered portfolio.

    Args:
        model: The graph model being displayed
        engine: Render engine drawing the model
        page: Where status messages go
        config: Camera animation settings
        bbl_url_template: Template for edge click links, containing ``{bbl}``
        open_url: Opens a URL in a new browsing context
    """

    def __init__(
        self,
        model: GraphModel,
        engine: RenderEngine,
        page: Page,
        *,
        config: ViewConfig | None = None,
        bbl_url_template: str = DEFAULT_BBL_URL,
        open_url: Callable[[str], Any] = webbrowser.open_new_tab,
    ) -> None:
        self.model = model
        self._engine = engine
        self._page = page
        self._navigator = ViewNavigator(engine, config)
        self._bbl_url_template = bbl_url_template
        self._open_url = open_url
        self._selection: SelectionState = EMPTY_SELECTION

        engine.set_graph_data(model.to_graph_data())
        engine.set_node_color(self.node_color)
        engine.set_link_dash(link_dash)
        engine.on_link_click(self.open_link)

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def navigator(self) -> ViewNavigator:
        return self._navigator

    def node_color(self, node: Mapping[str, Any]) -> str:
        return node_color(node, self._selection)

    def open_link(self, link: Mapping[str, Any]) -> None:
        """Open the external property page for a clicked edge, if it has a BBL."""
        bbl = link.get("bbl")
        if bbl:
            self._open_url(bbl_url(bbl, self._bbl_url_template))

    def submit(self, query: str) -> SubmitResult:
        """Handle one search form submission.

        Replaces the selection, updates the status message, and issues the
        matching camera command.
        """
        outcome = submit_query(query, self.model.nodes)
        self._selection = outcome.selection
        self._page.set_status(outcome.message)
        command = self._navigator.navigate(outcome)
        logger.debug("Search %r -> %s (%d selected)", query, outcome.status.value, len(outcome.selection))
        return SubmitResult(outcome, command)


def start_session(
    source: str | Callable[[], Portfolio],
    engine: RenderEngine,
    page: Page,
    form: SearchForm,
    **session_kwargs: Any,
) -> PortfolioSession | None:
    """Load a portfolio, draw it, and start listening for searches.

    Any load, parse or integrity failure is shown on the page's status line
    and setup stops: nothing is drawn and no search handler is registered.

    Args:
        source: Path or URL of the portfolio document, or a loader callable
        engine: Render engine to draw into
        page: Page for the title and status line
        form: Search form to listen on
        **session_kwargs: Forwarded to ``PortfolioSession``

    Returns:
        The running session, or None if setup halted on an error
    """
    try:
        portfolio = load_portfolio(source) if isinstance(source, str) else source()
        model = build(portfolio)
    except PortfolioError as e:
        logger.warning("Portfolio setup halted: %s", e.message)
        page.set_status(e.message)
        return None

    page.set_title(model.title)
    session = PortfolioSession(model, engine, page, **session_kwargs)
    page.set_status(status_line(model))
    form.on_submit(session.submit)
    return session
