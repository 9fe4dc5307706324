"""Search, selection and camera navigation."""

from portfoliograph.navigation.geometry import BoundingBox, Point
from portfoliograph.navigation.navigator import (
    CenterOnPoint,
    FitToBounds,
    NoCameraMove,
    ResetToFitAll,
    ViewAction,
    ViewCommand,
    ViewConfig,
    ViewNavigator,
    plan_view,
    selection_predicate,
)
from portfoliograph.navigation.search import is_reset_query, match, normalize_query
from portfoliograph.navigation.selection import (
    EMPTY_SELECTION,
    SearchOutcome,
    SearchStatus,
    SelectionState,
    submit_query,
)

__all__ = [
    "BoundingBox",
    "CenterOnPoint",
    "EMPTY_SELECTION",
    "FitToBounds",
    "NoCameraMove",
    "Point",
    "ResetToFitAll",
    "SearchOutcome",
    "SearchStatus",
    "SelectionState",
    "ViewAction",
    "ViewCommand",
    "ViewConfig",
    "ViewNavigator",
    "is_reset_query",
    "match",
    "normalize_query",
    "plan_view",
    "selection_predicate",
    "submit_query",
]
