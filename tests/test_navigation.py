"""Tests for camera navigation after a search."""

import pytest

from portfoliograph.navigation import (
    BoundingBox,
    CenterOnPoint,
    FitToBounds,
    NoCameraMove,
    Point,
    ResetToFitAll,
    ViewAction,
    ViewConfig,
    ViewNavigator,
    plan_view,
    selection_predicate,
    submit_query,
    SelectionState,
)


class TestPlanView:
    @pytest.mark.parametrize(
        ("query", "action"),
        [
            ("", ViewAction.RESET_TO_FIT_ALL),
            ("zzz", ViewAction.NONE),
            ("john", ViewAction.CENTER_ON_POINT),
            ("st", ViewAction.FIT_TO_BOUNDS),
        ],
    )
    def test_action_per_outcome(self, streets_model, query, action):
        assert plan_view(submit_query(query, streets_model.nodes)) is action


class TestViewNavigator:
    def test_reset_fits_all_nodes(self, streets_model, engine):
        navigator = ViewNavigator(engine)
        command = navigator.navigate(submit_query("", streets_model.nodes))

        config = ViewConfig()
        assert command == ResetToFitAll(config.zoom_duration_ms, config.zoom_padding_px)
        assert engine.camera_calls == [
            ("zoom_to_fit", config.zoom_duration_ms, config.zoom_padding_px, frozenset({1, 2, 3, 4}))
        ]

    def test_single_match_centers_on_node(self, doe_model, engine):
        navigator = ViewNavigator(engine)
        command = navigator.navigate(submit_query("jane", doe_model.nodes))

        assert command == CenterOnPoint(1, Point(10.0, 20.0), ViewConfig().center_duration_ms)
        assert engine.camera_calls == [("center_at", 10.0, 20.0, ViewConfig().center_duration_ms)]

    def test_no_matches_leave_camera(self, doe_model, engine):
        navigator = ViewNavigator(engine)
        command = navigator.navigate(submit_query("zzz", doe_model.nodes))

        assert command == NoCameraMove()
        assert engine.camera_calls == []

    def test_multiple_matches_fit_exactly_matched_nodes(self, streets_model, engine):
        navigator = ViewNavigator(engine)
        command = navigator.navigate(submit_query("st", streets_model.nodes))

        assert isinstance(command, FitToBounds)
        assert command.node_ids == {1, 2, 3}
        ((name, _, _, ids),) = engine.camera_calls
        assert name == "zoom_to_fit"
        assert ids == {1, 2, 3}

    def test_custom_config(self, streets_model, engine):
        config = ViewConfig(zoom_duration_ms=250, zoom_padding_px=10, center_duration_ms=400)
        navigator = ViewNavigator(engine, config)

        navigator.navigate(submit_query("st", streets_model.nodes))
        navigator.navigate(submit_query("john", streets_model.nodes))

        assert engine.camera_calls[0][1:3] == (250, 10)
        assert engine.camera_calls[1][3] == 400

    def test_idempotent(self, streets_model, engine):
        navigator = ViewNavigator(engine)
        first = navigator.navigate(submit_query("st", streets_model.nodes))
        second = navigator.navigate(submit_query("st", streets_model.nodes))
        assert first == second
        assert engine.camera_calls[0] == engine.camera_calls[1]

    def test_command_for_does_not_issue(self, streets_model, engine):
        navigator = ViewNavigator(engine)
        navigator.command_for(submit_query("st", streets_model.nodes))
        assert engine.camera_calls == []

    def test_node_position_from_bounding_box(self, engine):
        assert ViewNavigator(engine).node_position(2) == Point(30.0, 40.0)


class TestSelectionPredicate:
    def test_accepts_only_selected(self):
        predicate = selection_predicate(SelectionState(frozenset({1, 3})))
        assert predicate({"id": 1})
        assert not predicate({"id": 2})
        assert predicate({"id": 3, "x": 0, "y": 0})


class TestBoundingBox:
    def test_from_mapping(self):
        box = BoundingBox.from_mapping({"x": [0, 10], "y": [-5, 5]})
        assert box.x == (0.0, 10.0)
        assert box.y == (-5.0, 5.0)
        assert box.center == Point(5.0, 0.0)

    def test_single_node_box_center_is_position(self):
        assert BoundingBox.from_mapping({"x": [3, 3], "y": [4, 4]}).center == Point(3.0, 4.0)

    def test_navigator_accepts_box_instances(self, streets_model):
        class BoxEngine:
            def __init__(self):
                self.calls = []

            def get_bounding_box(self, predicate):
                return BoundingBox(x=(2.0, 2.0), y=(6.0, 6.0))

            def center_at(self, x, y, duration_ms):
                self.calls.append((x, y))

        engine = BoxEngine()
        ViewNavigator(engine).navigate(submit_query("john", streets_model.nodes))
        assert engine.calls == [(2.0, 6.0)]
