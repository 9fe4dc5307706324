"""Shared fixtures for portfolio graph tests.

Provides:
1. Portfolio documents and models shared across test modules
2. Recording fakes for the render engine, page and search form
"""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, Mapping
from typing import Any

import pytest

from portfoliograph import build, parse_portfolio

# =============================================================================
# Portfolio documents
# =============================================================================

DOE_DOCUMENT: dict[str, Any] = {
    "title": "Jane Doe's portfolio",
    "nodes": [
        {"id": 1, "value": {"Name": "Jane Doe"}},
        {"id": 2, "value": {"BizAddr": "1 Main St"}},
    ],
    "edges": [
        {"from": 1, "to": 2, "reg_contacts": 1, "is_bridge": True},
    ],
}

STREETS_DOCUMENT: dict[str, Any] = {
    "title": "Streets",
    "nodes": [
        {"id": 1, "value": {"BizAddr": "1 Main St"}},
        {"id": 2, "value": {"BizAddr": "20 Elm St"}},
        {"id": 3, "value": {"BizAddr": "300 Oak St"}},
        {"id": 4, "value": {"Name": "John Smith"}},
    ],
    "edges": [
        {"from": 4, "to": 1, "reg_contacts": 15, "is_bridge": True, "bbl": "1000010001"},
        {"from": 4, "to": 2, "reg_contacts": 3},
        {"from": 4, "to": 3, "reg_contacts": 1, "bbl": "3000020002"},
    ],
}


@pytest.fixture
def doe_document() -> dict[str, Any]:
    return copy.deepcopy(DOE_DOCUMENT)


@pytest.fixture
def streets_document() -> dict[str, Any]:
    return copy.deepcopy(STREETS_DOCUMENT)


@pytest.fixture
def doe_model():
    return build(parse_portfolio(copy.deepcopy(DOE_DOCUMENT)))


@pytest.fixture
def streets_model():
    return build(parse_portfolio(copy.deepcopy(STREETS_DOCUMENT)))


@pytest.fixture
def portfolio_file(tmp_path):
    """Write a portfolio document to disk and return its path."""

    def write(document: Any, name: str = "portfolio.json") -> str:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)

    return write


# =============================================================================
# Fakes
# =============================================================================


class RecordingEngine:
    """Render engine that records every call and lays nodes out from a table.

    Args:
        positions: node id -> (x, y) used for bounding boxes
    """

    def __init__(self, positions: dict[int, tuple[float, float]] | None = None) -> None:
        self.positions = positions or {}
        self.calls: list[tuple[Any, ...]] = []
        self.graph_data: dict[str, Any] | None = None
        self.node_color_fn: Callable[[Mapping[str, Any]], str] | None = None
        self.link_dash_fn: Callable[[Mapping[str, Any]], Any] | None = None
        self.link_click_fn: Callable[[Mapping[str, Any]], None] | None = None

    def set_graph_data(self, data: dict[str, Any]) -> None:
        self.graph_data = data

    def set_node_color(self, fn) -> None:
        self.node_color_fn = fn

    def set_link_dash(self, fn) -> None:
        self.link_dash_fn = fn

    def on_link_click(self, fn) -> None:
        self.link_click_fn = fn

    def _nodes(self, predicate) -> list[dict[str, Any]]:
        return [{"id": i, "x": x, "y": y} for i, (x, y) in self.positions.items() if predicate({"id": i})]

    def zoom_to_fit(self, duration_ms, padding_px, predicate) -> None:
        ids = frozenset(n["id"] for n in self._nodes(predicate))
        self.calls.append(("zoom_to_fit", duration_ms, padding_px, ids))

    def center_at(self, x, y, duration_ms) -> None:
        self.calls.append(("center_at", x, y, duration_ms))

    def get_bounding_box(self, predicate) -> dict[str, list[float]]:
        nodes = self._nodes(predicate)
        xs = [n["x"] for n in nodes]
        ys = [n["y"] for n in nodes]
        return {"x": [min(xs), max(xs)], "y": [min(ys), max(ys)]}

    @property
    def camera_calls(self) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] in ("zoom_to_fit", "center_at")]


class RecordingPage:
    def __init__(self) -> None:
        self.title: str | None = None
        self.statuses: list[str] = []

    def set_title(self, title: str) -> None:
        self.title = title

    def set_status(self, message: str) -> None:
        self.statuses.append(message)

    @property
    def status(self) -> str | None:
        return self.statuses[-1] if self.statuses else None


class RecordingForm:
    def __init__(self) -> None:
        self.callback: Callable[[str], Any] | None = None

    def on_submit(self, callback: Callable[[str], Any]) -> None:
        self.callback = callback

    def submit(self, query: str) -> Any:
        assert self.callback is not None, "no submit handler registered"
        return self.callback(query)


@pytest.fixture
def engine() -> RecordingEngine:
    return RecordingEngine({1: (10.0, 20.0), 2: (30.0, 40.0), 3: (-5.0, 0.0), 4: (0.0, 0.0)})


@pytest.fixture
def page() -> RecordingPage:
    return RecordingPage()


@pytest.fixture
def form() -> RecordingForm:
    return RecordingForm()
