"""Camera navigation after a search.

Each search submission maps to exactly one camera action:

=================  =====================
Search status      Camera action
=================  =====================
RESET              reset-to-fit-all
NO_MATCHES         none (view unchanged)
SINGLE_MATCH       center-on-point
MULTIPLE_MATCHES   fit-to-bounds
=================  =====================

The navigator asks the render engine for node positions at the moment the
command is issued, because the force layout keeps moving nodes around.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from portfoliograph.navigation.geometry import BoundingBox, Point
from portfoliograph.navigation.selection import SearchOutcome, SearchStatus, SelectionState

if TYPE_CHECKING:
    from portfoliograph.viz.engine import NodePredicate, RenderEngine

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MS = 1000
DEFAULT_PADDING_PX = 50


@dataclass(frozen=True)
class ViewConfig:
    """Fixed animation and padding settings for camera moves."""

    zoom_duration_ms: int = DEFAULT_DURATION_MS
    zoom_padding_px: int = DEFAULT_PADDING_PX
    center_duration_ms: int = DEFAULT_DURATION_MS


class ViewAction(Enum):
    RESET_TO_FIT_ALL = "reset_to_fit_all"
    CENTER_ON_POINT = "center_on_point"
    FIT_TO_BOUNDS = "fit_to_bounds"
    NONE = "none"


_ACTIONS_BY_STATUS = {
    SearchStatus.RESET: ViewAction.RESET_TO_FIT_ALL,
    SearchStatus.NO_MATCHES: ViewAction.NONE,
    SearchStatus.SINGLE_MATCH: ViewAction.CENTER_ON_POINT,
    SearchStatus.MULTIPLE_MATCHES: ViewAction.FIT_TO_BOUNDS,
}


def plan_view(outcome: SearchOutcome) -> ViewAction:
    """Which camera action a search outcome calls for."""
    return _ACTIONS_BY_STATUS[outcome.status]


def selection_predicate(selection: SelectionState) -> NodePredicate:
    """Renderer node predicate that accepts exactly the selected nodes."""
    ids = selection.node_ids

    def predicate(node: Mapping[str, Any]) -> bool:
        return node["id"] in ids

    return predicate


def _all_nodes(node: Mapping[str, Any]) -> bool:
    return True


# =============================================================================
# Commands
# =============================================================================


@dataclass(frozen=True)
class ResetToFitAll:
    """Zoom so that every node is in view."""

    duration_ms: int
    padding_px: int

    action = ViewAction.RESET_TO_FIT_ALL

    def issue(self, engine: RenderEngine) -> None:
        engine.zoom_to_fit(self.duration_ms, self.padding_px, _all_nodes)


@dataclass(frozen=True)
class CenterOnPoint:
    """Pan to a single node's current position."""

    node_id: int
    point: Point
    duration_ms: int

    action = ViewAction.CENTER_ON_POINT

    def issue(self, engine: RenderEngine) -> None:
        engine.center_at(self.point.x, self.point.y, self.duration_ms)


@dataclass(frozen=True)
class FitToBounds:
    """Zoom to the bounding rectangle of exactly the given nodes."""

    node_ids: frozenset[int]
    duration_ms: int
    padding_px: int

    action = ViewAction.FIT_TO_BOUNDS

    def issue(self, engine: RenderEngine) -> None:
        predicate = selection_predicate(SelectionState(self.node_ids))
        engine.zoom_to_fit(self.duration_ms, self.padding_px, predicate)


@dataclass(frozen=True)
class NoCameraMove:
    """Leave the view where it is."""

    action = ViewAction.NONE

    def issue(self, engine: RenderEngine) -> None:
        pass


ViewCommand = Union[ResetToFitAll, CenterOnPoint, FitToBounds, NoCameraMove]


class ViewNavigator:
    """Turns search outcomes into camera commands on a render engine.

    Args:
        engine: Render engine that owns the camera and node positions
        config: Animation and padding settings
    """

    def __init__(self, engine: RenderEngine, config: ViewConfig | None = None) -> None:
        self._engine = engine
        self._config = config or ViewConfig()

    @property
    def config(self) -> ViewConfig:
        return self._config

    def command_for(self, outcome: SearchOutcome) -> ViewCommand:
        """Resolve the camera command for an outcome without issuing it."""
        action = plan_view(outcome)
        config = self._config

        if action is ViewAction.RESET_TO_FIT_ALL:
            return ResetToFitAll(config.zoom_duration_ms, config.zoom_padding_px)
        if action is ViewAction.NONE:
            return NoCameraMove()
        if action is ViewAction.CENTER_ON_POINT:
            (node_id,) = outcome.selection.node_ids
            return CenterOnPoint(node_id, self.node_position(node_id), config.center_duration_ms)
        return FitToBounds(outcome.selection.node_ids, config.zoom_duration_ms, config.zoom_padding_px)

    def node_position(self, node_id: int) -> Point:
        """Current rendered position of a node.

        Read from the engine's bounding box of that node alone, whose center is
        the node's position.
        """
        box = self._engine.get_bounding_box(selection_predicate(SelectionState(frozenset({node_id}))))
        if not isinstance(box, BoundingBox):
            box = BoundingBox.from_mapping(box)
        return box.center

    def navigate(self, outcome: SearchOutcome) -> ViewCommand:
        """Resolve and issue the camera command for an outcome.

        A command issued while a previous animation is running supersedes it.
        """
        command = self.command_for(outcome)
        logger.debug("Issuing %s for status %s", command.action.value, outcome.status.value)
        command.issue(self._engine)
        return command
