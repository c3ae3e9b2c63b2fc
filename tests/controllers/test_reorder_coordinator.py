"""
Tests for ReorderCoordinator.

Date: 2026-10-19
"""

import pytest

from crossorder.app.state.drag_session import DragPhase
from crossorder.controllers.reorder_coordinator import ReorderCoordinator
from crossorder.domain.errors import DuplicateItemError, SessionActiveError
from crossorder.domain.interaction import (
    InteractionCancel,
    InteractionEnd,
    InteractionKey,
    InteractionMove,
    InteractionStart,
)
from crossorder.domain.keyboard import DragKey
from crossorder.domain.outcomes import DropOutcome, DropOutsidePolicy
from crossorder.domain.targets import NO_TARGET, ContainerTarget, ItemTarget, Placement


def assert_partition(coordinator, expected_items):
    """Every item is in exactly one container, none missing, none duplicated."""
    items = [item for seq in coordinator.sequences().values() for item in seq]
    assert sorted(items) == sorted(expected_items)
    assert len(items) == len(set(items))


ALL_ITEMS = ["a", "b", "c", "d", "e"]


class TestCoordinatorLifecycle:
    """Test IDLE -> DRAGGING -> IDLE transitions."""

    def test_starts_idle(self, coordinator):
        assert coordinator.phase is DragPhase.IDLE
        assert coordinator.active_id is None
        assert coordinator.last_result is None

    def test_start_enters_dragging(self, coordinator):
        assert coordinator.start_drag("b") is True
        assert coordinator.phase is DragPhase.DRAGGING
        assert coordinator.is_dragging
        assert coordinator.active_id == "b"

    def test_start_untracked_item_stays_idle(self, coordinator):
        assert coordinator.start_drag("ghost") is False
        assert coordinator.phase is DragPhase.IDLE

    def test_second_start_is_ignored(self, coordinator):
        coordinator.start_drag("a")
        assert coordinator.start_drag("d") is False
        assert coordinator.active_id == "a"

    def test_events_while_idle_are_ignored(self, coordinator):
        assert coordinator.move_over(ItemTarget("e")) is False
        assert coordinator.end_drag(ItemTarget("e")) is None
        assert coordinator.cancel_drag() is None
        assert coordinator.handle_key(DragKey.DOWN) is False
        assert coordinator.sequences() == {"A": ("a", "b", "c"), "B": ("d", "e")}

    def test_end_returns_to_idle(self, coordinator):
        coordinator.start_drag("a")
        coordinator.end_drag(ItemTarget("c"))
        assert coordinator.phase is DragPhase.IDLE
        assert coordinator.active_id is None

    def test_policy_from_string(self, two_lists):
        coordinator = ReorderCoordinator(two_lists, drop_outside_policy="revert_to_origin")
        assert coordinator.drop_outside_policy is DropOutsidePolicy.REVERT_TO_ORIGIN

    def test_invalid_policy(self, two_lists):
        with pytest.raises(ValueError):
            ReorderCoordinator(two_lists, drop_outside_policy="teleport")

    def test_duplicate_items_rejected(self):
        with pytest.raises(DuplicateItemError):
            ReorderCoordinator({"A": ["a"], "B": ["a"]})


class TestCommit:
    """Test drops that resolve to a target."""

    def test_same_container_reorder(self, coordinator):
        """A=[a,b,c], drag a onto c -> A=[b,c,a]."""
        coordinator.start_drag("a")
        result = coordinator.end_drag(ItemTarget("c"))

        assert coordinator.sequences()["A"] == ("b", "c", "a")
        assert result.outcome is DropOutcome.COMMITTED
        assert result.final == Placement("A", 2)

    def test_same_container_reorder_with_preview(self, coordinator):
        """Hovering c before releasing on c gives the same result."""
        coordinator.start_drag("a")
        coordinator.move_over(ItemTarget("c"))
        coordinator.move_over(ItemTarget("c"))
        coordinator.end_drag(ItemTarget("c"))

        assert coordinator.sequences()["A"] == ("b", "c", "a")

    def test_same_container_reorder_across_own_padding(self, coordinator):
        """Crossing the gap between cards does not forget the previewed slot."""
        coordinator.start_drag("a")
        coordinator.move_over(ItemTarget("c"))
        coordinator.move_over(ContainerTarget("A"))
        coordinator.end_drag(ItemTarget("c"))

        assert coordinator.sequences()["A"] == ("b", "c", "a")

    def test_cross_container_across_target_padding(self, coordinator):
        coordinator.start_drag("b")
        coordinator.move_over(ItemTarget("e"))
        coordinator.move_over(ContainerTarget("B"))
        coordinator.end_drag(ItemTarget("e"))

        assert coordinator.sequences() == {"A": ("a", "c"), "B": ("d", "b", "e")}

    def test_hover_on_self_keeps_previewed_slot(self, coordinator):
        coordinator.start_drag("a")
        coordinator.move_over(ItemTarget("c"))
        coordinator.move_over(ItemTarget("a"))
        coordinator.end_drag(ItemTarget("c"))

        assert coordinator.sequences()["A"] == ("b", "c", "a")

    def test_cross_container_to_slot(self, coordinator):
        """A=[a,b,c], B=[d,e], drag b onto e -> A=[a,c], B=[d,b,e]."""
        coordinator.start_drag("b")
        result = coordinator.end_drag(ItemTarget("e"))

        assert coordinator.sequences() == {"A": ("a", "c"), "B": ("d", "b", "e")}
        assert result.changed_container
        assert result.origin == Placement("A", 1)
        assert result.final == Placement("B", 1)

    def test_cross_container_with_preview(self, coordinator):
        coordinator.start_drag("b")
        assert coordinator.move_over(ItemTarget("e")) is True
        assert coordinator.sequences() == {"A": ("a", "c"), "B": ("d", "b", "e")}

        coordinator.end_drag(ItemTarget("e"))
        assert coordinator.sequences() == {"A": ("a", "c"), "B": ("d", "b", "e")}

    def test_drop_on_empty_container(self):
        """A=[a], B=[], drop a on container B -> A=[], B=[a]."""
        coordinator = ReorderCoordinator({"A": ["a"], "B": []})
        coordinator.start_drag("a")
        coordinator.end_drag(ContainerTarget("B"))

        assert coordinator.sequences() == {"A": (), "B": ("a",)}

    def test_drop_on_container_appends(self, coordinator):
        coordinator.start_drag("a")
        coordinator.end_drag(ContainerTarget("B"))
        assert coordinator.sequences()["B"] == ("d", "e", "a")

    def test_drop_on_self_is_noop_commit(self, coordinator):
        coordinator.start_drag("b")
        result = coordinator.end_drag(ItemTarget("b"))

        assert result.outcome is DropOutcome.COMMITTED
        assert not result.moved
        assert coordinator.sequences()["A"] == ("a", "b", "c")

    def test_raw_ids_are_classified(self, coordinator):
        """Bare ids from an input toolkit work like typed targets."""
        coordinator.start_drag("b")
        coordinator.move_over("B")
        assert coordinator.over_container == "B"
        coordinator.end_drag("d")
        assert coordinator.sequences() == {"A": ("a", "c"), "B": ("b", "d", "e")}

    def test_back_to_origin_container(self, coordinator):
        coordinator.start_drag("b")
        coordinator.move_over(ItemTarget("e"))
        coordinator.move_over(ItemTarget("a"))
        coordinator.end_drag(ItemTarget("a"))

        assert coordinator.sequences() == {"A": ("b", "a", "c"), "B": ("d", "e")}
        assert_partition(coordinator, ALL_ITEMS)


class TestLivePreview:
    """Test mutations applied during DRAGGING."""

    def test_preview_visible_immediately(self, coordinator, recorder):
        recorder.watch(coordinator, "sequences_changed")
        coordinator.start_drag("b")
        coordinator.move_over(ItemTarget("d"))

        assert recorder.of("sequences_changed") == [({"A": ("a", "c"), "B": ("b", "d", "e")},)]

    def test_unresolved_move_does_not_mutate(self, coordinator):
        coordinator.start_drag("b")
        assert coordinator.move_over(NO_TARGET) is False
        assert coordinator.move_over(ItemTarget("ghost")) is False
        assert coordinator.sequences() == {"A": ("a", "b", "c"), "B": ("d", "e")}

    def test_repeated_hover_does_not_oscillate(self, coordinator):
        coordinator.start_drag("a")
        coordinator.move_over(ItemTarget("c"))
        for _ in range(5):
            assert coordinator.move_over(ItemTarget("c")) is False
        assert coordinator.sequences()["A"] == ("b", "c", "a")

    def test_only_one_item_moves(self, coordinator):
        coordinator.start_drag("c")
        coordinator.move_over(ItemTarget("a"))
        assert coordinator.sequences()["A"] == ("c", "a", "b")

    def test_over_container_tracking(self, coordinator, recorder):
        recorder.watch(coordinator, "over_container_changed")
        coordinator.start_drag("b")
        coordinator.move_over(ItemTarget("a"))
        coordinator.move_over(ItemTarget("e"))
        coordinator.move_over(ItemTarget("d"))
        coordinator.end_drag(NO_TARGET)

        assert recorder.of("over_container_changed") == [("A",), ("B",), (None,)]
        assert coordinator.over_container is None


class TestDropOutside:
    """Test drags released over nothing."""

    def test_keep_live_placement(self, coordinator):
        coordinator.start_drag("b")
        coordinator.move_over(ItemTarget("e"))
        result = coordinator.end_drag(NO_TARGET)

        assert result.outcome is DropOutcome.KEPT
        assert coordinator.sequences() == {"A": ("a", "c"), "B": ("d", "b", "e")}

    def test_keep_without_preview_leaves_origin(self, coordinator):
        coordinator.start_drag("b")
        result = coordinator.end_drag(NO_TARGET)

        assert result.final == result.origin
        assert coordinator.sequences()["A"] == ("a", "b", "c")

    def test_revert_policy(self, two_lists):
        coordinator = ReorderCoordinator(
            two_lists, drop_outside_policy=DropOutsidePolicy.REVERT_TO_ORIGIN
        )
        coordinator.start_drag("b")
        coordinator.move_over(ItemTarget("e"))
        result = coordinator.end_drag(NO_TARGET)

        assert result.outcome is DropOutcome.REVERTED
        assert coordinator.sequences() == {"A": ("a", "b", "c"), "B": ("d", "e")}

    def test_policy_can_change_between_gestures(self, coordinator):
        coordinator.drop_outside_policy = "revert_to_origin"
        coordinator.start_drag("a")
        coordinator.move_over(ContainerTarget("B"))
        coordinator.end_drag(NO_TARGET)
        assert coordinator.sequences()["A"] == ("a", "b", "c")


class TestCancel:
    """Test rollback of live preview mutations."""

    def test_cancel_restores_origin(self, coordinator):
        """Drag b over e, cancel -> A=[a,b,c], B=[d,e]."""
        coordinator.start_drag("b")
        coordinator.move_over(ItemTarget("e"))
        result = coordinator.cancel_drag()

        assert coordinator.sequences() == {"A": ("a", "b", "c"), "B": ("d", "e")}
        assert result.outcome is DropOutcome.CANCELLED
        assert result.final == Placement("A", 1)

    def test_cancel_after_many_moves(self, coordinator):
        coordinator.start_drag("a")
        for target in ("e", "d", "c", "B", "b", "e"):
            coordinator.move_over(target)
        coordinator.cancel_drag()

        assert coordinator.sequences() == {"A": ("a", "b", "c"), "B": ("d", "e")}

    def test_cancel_without_moves_emits_no_sequence_change(self, coordinator, recorder):
        recorder.watch(coordinator, "sequences_changed")
        coordinator.start_drag("a")
        coordinator.cancel_drag()
        assert recorder.of("sequences_changed") == []


class TestReinsertion:
    """The active item is present exactly once after every session."""

    @pytest.mark.parametrize(
        "moves, final",
        [
            ([], ItemTarget("c")),
            (["e"], NO_TARGET),
            (["e", "a"], ItemTarget("ghost")),
            (["B"], ContainerTarget("A")),
            (["d", "c"], ItemTarget("e")),
        ],
    )
    def test_end_keeps_partition(self, coordinator, moves, final):
        coordinator.start_drag("b")
        for target in moves:
            coordinator.move_over(target)
            assert_partition(coordinator, ALL_ITEMS)
        coordinator.end_drag(final)

        assert_partition(coordinator, ALL_ITEMS)
        located = [name for name, seq in coordinator.sequences().items() if "b" in seq]
        assert len(located) == 1


class TestSignals:
    """Test notifications sent to the presentation layer."""

    def test_full_gesture_signal_order(self, coordinator, recorder):
        recorder.watch(
            coordinator,
            "active_changed",
            "drag_started",
            "drag_finished",
            "state_changed",
        )
        coordinator.start_drag("a")
        coordinator.move_over(ItemTarget("c"))
        coordinator.end_drag(ItemTarget("c"))

        assert recorder.names() == [
            "active_changed",
            "drag_started",
            "state_changed",
            "state_changed",
            "active_changed",
            "drag_finished",
            "state_changed",
        ]
        assert recorder.of("active_changed") == [("a",), (None,)]

    def test_finishing_snapshot_is_resolved(self, coordinator, recorder):
        recorder.watch(coordinator, "state_changed")
        coordinator.start_drag("a")
        coordinator.end_drag(ItemTarget("b"))

        first, last = recorder.of("state_changed")[0][0], recorder.of("state_changed")[-1][0]
        assert first.is_dragging and first.active_id == "a"
        assert last.phase is DragPhase.RESOLVED
        assert last.sequences["A"] == ("b", "a", "c")
        assert coordinator.snapshot().phase is DragPhase.IDLE

    def test_failing_subscriber_does_not_break_engine(self, coordinator):
        def broken(_payload):
            raise RuntimeError("renderer crashed")

        coordinator.sequences_changed.connect(broken)
        coordinator.start_drag("b")
        coordinator.move_over(ItemTarget("e"))
        coordinator.end_drag(ItemTarget("e"))

        assert coordinator.sequences()["B"] == ("d", "b", "e")


class TestOrphanedItem:
    """Test a session whose item disappears underneath it."""

    def test_move_aborts_session(self, coordinator):
        coordinator.start_drag("b")
        coordinator.registry.remove("A", "b")

        assert coordinator.move_over(ItemTarget("e")) is False
        assert coordinator.phase is DragPhase.IDLE
        assert coordinator.last_result.outcome is DropOutcome.ABORTED
        assert coordinator.last_result.final is None

    def test_end_aborts_without_mutation(self, coordinator):
        coordinator.start_drag("b")
        coordinator.registry.remove("A", "b")
        result = coordinator.end_drag(ItemTarget("e"))

        assert result.outcome is DropOutcome.ABORTED
        assert coordinator.sequences() == {"A": ("a", "c"), "B": ("d", "e")}


@pytest.mark.keyboard
class TestKeyboardDrag:
    """Test dragging with abstract keys."""

    def test_down_down_drop(self, coordinator):
        coordinator.start_drag("a")
        assert coordinator.handle_key(DragKey.DOWN)
        assert coordinator.sequences()["A"] == ("b", "a", "c")
        assert coordinator.handle_key(DragKey.DOWN)
        assert coordinator.sequences()["A"] == ("b", "c", "a")
        assert coordinator.handle_key(DragKey.DROP)

        assert coordinator.phase is DragPhase.IDLE
        assert coordinator.last_result.outcome is DropOutcome.COMMITTED
        assert coordinator.sequences()["A"] == ("b", "c", "a")

    def test_down_then_up_returns(self, coordinator):
        coordinator.start_drag("a")
        coordinator.handle_key(DragKey.DOWN)
        coordinator.handle_key(DragKey.DOWN)
        coordinator.handle_key(DragKey.UP)
        assert coordinator.sequences()["A"] == ("b", "a", "c")

    def test_right_moves_across(self, coordinator):
        coordinator.start_drag("c")
        coordinator.handle_key(DragKey.RIGHT)
        assert coordinator.sequences() == {"A": ("a", "b"), "B": ("d", "e", "c")}
        coordinator.handle_key("ArrowUp")
        coordinator.handle_key("Enter")
        assert coordinator.sequences() == {"A": ("a", "b"), "B": ("d", "c", "e")}

    def test_edge_key_not_consumed(self, coordinator):
        coordinator.start_drag("a")
        assert coordinator.handle_key(DragKey.UP) is False
        assert coordinator.handle_key("F13") is False

    def test_escape_cancels(self, coordinator):
        coordinator.start_drag("a")
        coordinator.handle_key(DragKey.RIGHT)
        coordinator.handle_key("Escape")
        assert coordinator.sequences() == {"A": ("a", "b", "c"), "B": ("d", "e")}
        assert coordinator.last_result.outcome is DropOutcome.CANCELLED

    def test_drop_after_stale_pointer_hover_commits(self, two_lists):
        """A pointer hover over nothing does not make a keyboard drop revert."""
        coordinator = ReorderCoordinator(two_lists, drop_outside_policy="revert_to_origin")
        coordinator.start_drag("a")
        coordinator.handle_key(DragKey.DOWN)
        coordinator.move_over(NO_TARGET)
        coordinator.handle_key(DragKey.DROP)

        assert coordinator.last_result.outcome is DropOutcome.COMMITTED
        assert coordinator.sequences()["A"] == ("b", "a", "c")

    def test_drop_without_moving(self, coordinator):
        coordinator.start_drag("b")
        coordinator.handle_key(DragKey.DROP)
        assert coordinator.last_result.outcome is DropOutcome.COMMITTED
        assert not coordinator.last_result.moved


class TestDispatchAndReset:
    """Test the event surface and lifecycle helpers."""

    def test_dispatch_events(self, coordinator):
        coordinator.dispatch(InteractionStart("b"))
        coordinator.dispatch(InteractionMove(ItemTarget("e")))
        coordinator.dispatch(InteractionEnd(ItemTarget("e")))
        assert coordinator.sequences() == {"A": ("a", "c"), "B": ("d", "b", "e")}

    def test_dispatch_cancel_and_key(self, coordinator):
        coordinator.dispatch(InteractionStart("a"))
        coordinator.dispatch(InteractionKey(DragKey.DOWN))
        coordinator.dispatch(InteractionCancel())
        assert coordinator.sequences()["A"] == ("a", "b", "c")

    def test_dispatch_unknown_event(self, coordinator):
        with pytest.raises(TypeError):
            coordinator.dispatch("start")

    def test_reset_between_gestures(self, coordinator, recorder):
        recorder.watch(coordinator, "sequences_changed")
        coordinator.reset({"todo": ["x"], "done": []})
        assert coordinator.sequences() == {"todo": ("x",), "done": ()}
        assert len(recorder.of("sequences_changed")) == 1

    def test_reset_refused_while_dragging(self, coordinator):
        coordinator.start_drag("a")
        with pytest.raises(SessionActiveError):
            coordinator.reset({"A": []})
