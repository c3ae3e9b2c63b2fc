"""Module: reorder_coordinator.py

Date: 2026-10-19

Reorder Coordinator - drives one drag gesture at a time across containers.

State machine:
    IDLE --start_drag--> DRAGGING --end_drag/cancel_drag--> (RESOLVED) --> IDLE

While dragging, every move notification is resolved to a placement and
applied to the registry as a live preview so the presentation layer can
render the item in its provisional slot. Ending commits the final slot;
cancelling restores the sequences captured at drag start.

All entry points run synchronously inside the caller's input handler and
never raise for interaction problems: unresolved hovers are skipped and a
vanished active item aborts the session.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from crossorder import config
from crossorder.app.state.drag_session import DragPhase, DragSession
from crossorder.core.container_registry import ContainerRegistry
from crossorder.core.keyboard_navigator import KeyboardNavigator
from crossorder.core.placement_resolver import PlacementResolver
from crossorder.domain.errors import OrphanedItemError, SessionActiveError
from crossorder.domain.interaction import (
    InteractionCancel,
    InteractionEnd,
    InteractionEvent,
    InteractionKey,
    InteractionMove,
    InteractionStart,
)
from crossorder.domain.keyboard import DragKey
from crossorder.domain.outcomes import DropOutcome, DropOutsidePolicy, DropResult
from crossorder.domain.targets import (
    NO_TARGET,
    HoverTarget,
    ItemId,
    ItemTarget,
    Placement,
    classify_hover,
)
from crossorder.utils.events import Observable, Signal
from crossorder.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


@dataclass(frozen=True)
class ReorderSnapshot:
    """What the presentation layer renders after each event."""

    sequences: dict[str, tuple[ItemId, ...]]
    active_id: ItemId | None
    over_container: str | None
    phase: DragPhase

    @property
    def is_dragging(self) -> bool:
        return self.phase is DragPhase.DRAGGING


class ReorderCoordinator(Observable):
    """Owns the container sequences and the drag session lifecycle.

    Signals:
        sequences_changed: Emitted after any mutation (dict of name -> tuple)
        active_changed: Emitted when the lifted item changes (id or None)
        over_container_changed: Emitted when the hovered container changes
        drag_started: Emitted when a session begins (active id)
        drag_finished: Emitted when a session ends (DropResult)
        state_changed: Emitted after every handled event (ReorderSnapshot)
    """

    sequences_changed = Signal(dict)
    active_changed = Signal(object)
    over_container_changed = Signal(object)
    drag_started = Signal(object)
    drag_finished = Signal(object)
    state_changed = Signal(object)

    def __init__(
        self,
        sequences: Mapping[str, Iterable[ItemId]] | None = None,
        *,
        drop_outside_policy: DropOutsidePolicy | str | None = None,
        wrap_containers: bool | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            sequences: Initial container name -> item ids mapping
            drop_outside_policy: Behaviour for drags released over nothing;
                defaults to ``config.DEFAULT_DROP_OUTSIDE_POLICY``
            wrap_containers: Keyboard left/right wrap-around; defaults to
                ``config.KEYBOARD_WRAP_CONTAINERS``

        Raises:
            DuplicateItemError: an item id appears more than once

        """
        super().__init__()
        self._registry = ContainerRegistry(sequences)
        self._resolver = PlacementResolver(self._registry)
        self._navigator = KeyboardNavigator(self._registry, wrap_containers=wrap_containers)
        self._policy = DropOutsidePolicy.coerce(
            drop_outside_policy or config.DEFAULT_DROP_OUTSIDE_POLICY
        )
        self._session: DragSession | None = None
        self._last_result: DropResult | None = None

        logger.debug(
            "[ReorderCoordinator] Initialized with containers %s (policy: %s)",
            ", ".join(self._registry.container_names),
            self._policy.value,
            extra={"dev_only": True},
        )

    # =====================================
    # State access
    # =====================================

    @property
    def registry(self) -> ContainerRegistry:
        return self._registry

    @property
    def resolver(self) -> PlacementResolver:
        return self._resolver

    @property
    def drop_outside_policy(self) -> DropOutsidePolicy:
        return self._policy

    @drop_outside_policy.setter
    def drop_outside_policy(self, value: DropOutsidePolicy | str) -> None:
        self._policy = DropOutsidePolicy.coerce(value)

    @property
    def phase(self) -> DragPhase:
        return DragPhase.IDLE if self._session is None else DragPhase.DRAGGING

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def active_id(self) -> ItemId | None:
        return None if self._session is None else self._session.active_id

    @property
    def over_container(self) -> str | None:
        return None if self._session is None else self._session.over_container

    @property
    def last_result(self) -> DropResult | None:
        """Result of the most recently finished session."""
        return self._last_result

    def sequences(self) -> dict[str, tuple[ItemId, ...]]:
        return self._registry.as_dict()

    def snapshot(self) -> ReorderSnapshot:
        return ReorderSnapshot(
            sequences=self._registry.as_dict(),
            active_id=self.active_id,
            over_container=self.over_container,
            phase=self.phase,
        )

    def reset(self, sequences: Mapping[str, Iterable[ItemId]]) -> None:
        """Replace all sequences between gestures.

        Raises:
            SessionActiveError: a drag is in progress
            DuplicateItemError: an item id appears more than once

        """
        if self._session is not None:
            raise SessionActiveError("cannot reset sequences while an item is being dragged")

        self._registry.restore(sequences)
        self._last_result = None
        self.sequences_changed.emit(self._registry.as_dict())
        self.state_changed.emit(self.snapshot())

    # =====================================
    # Interaction lifecycle
    # =====================================

    def dispatch(self, event: InteractionEvent) -> None:
        """Route one input event from the collaborator."""
        if isinstance(event, InteractionStart):
            self.start_drag(event.active_id)
        elif isinstance(event, InteractionMove):
            self.move_over(event.hover_target)
        elif isinstance(event, InteractionEnd):
            self.end_drag(event.hover_target)
        elif isinstance(event, InteractionCancel):
            self.cancel_drag()
        elif isinstance(event, InteractionKey):
            self.handle_key(event.key)
        else:
            raise TypeError(f"unsupported interaction event: {event!r}")

    def start_drag(self, active_id: ItemId) -> bool:
        """Lift ``active_id`` and enter DRAGGING.

        Returns:
            True if a session started; False if one is already active or
            the item is not tracked (the engine stays IDLE)

        """
        if self._session is not None:
            logger.warning(
                "[ReorderCoordinator] Drag already active for %r, ignoring start for %r",
                self._session.active_id,
                active_id,
            )
            return False

        try:
            origin = self._resolver.current_placement(active_id)
        except OrphanedItemError:
            logger.warning("[ReorderCoordinator] Cannot drag untracked item %r", active_id)
            return False

        self._session = DragSession(
            active_id=active_id,
            origin=origin,
            origin_sequences=self._registry.as_dict(),
        )
        logger.debug(
            "[ReorderCoordinator] Drag started: %r from %s[%d]",
            active_id,
            origin.container,
            origin.index,
        )

        self.active_changed.emit(active_id)
        self.drag_started.emit(active_id)
        self.state_changed.emit(self.snapshot())
        return True

    def move_over(self, hover: HoverTarget | object = NO_TARGET) -> bool:
        """Handle an intermediate move notification.

        Repeated notifications over the target that produced the current
        live placement are skipped, so hovering an item whose slot the
        active item just took does not bounce it back.

        Args:
            hover: Hover target, or a raw item/container id

        Returns:
            True if the live placement changed

        """
        return self._move(hover, force=False)

    def _move(self, hover: HoverTarget | object, *, force: bool) -> bool:
        session = self._session
        if session is None:
            logger.debug(
                "[ReorderCoordinator] Move ignored, no drag active", extra={"dev_only": True}
            )
            return False

        hover = classify_hover(hover, self._registry.container_names)
        moves_before = session.live_moves
        try:
            self._track_hover(session, hover)
            if force or not session.is_applied(hover):
                self._apply_hover(session, hover)
        except OrphanedItemError:
            self._abort(session)
            return False

        self.state_changed.emit(self.snapshot())
        return session.live_moves != moves_before

    def end_drag(self, hover: HoverTarget | object = NO_TARGET) -> DropResult | None:
        """Finish the gesture with the final hover target.

        A resolved target commits the exact final slot. An unresolved one
        follows the drop-outside policy.

        Returns:
            The session result, or None if no drag was active

        """
        session = self._session
        if session is None:
            logger.debug("[ReorderCoordinator] End ignored, no drag active")
            return None

        hover = classify_hover(hover, self._registry.container_names)
        try:
            self._track_hover(session, hover)
            if session.is_applied(hover) or self._apply_hover(session, hover, final=True):
                outcome = DropOutcome.COMMITTED
            elif self._policy is DropOutsidePolicy.REVERT_TO_ORIGIN:
                self._rollback(session)
                outcome = DropOutcome.REVERTED
            else:
                outcome = DropOutcome.KEPT
        except OrphanedItemError:
            return self._abort(session)

        return self._finish(session, outcome)

    def cancel_drag(self) -> DropResult | None:
        """Roll back every live preview mutation and return to IDLE.

        Returns:
            The session result, or None if no drag was active

        """
        session = self._session
        if session is None:
            logger.debug("[ReorderCoordinator] Cancel ignored, no drag active")
            return None

        self._rollback(session)
        return self._finish(session, DropOutcome.CANCELLED)

    def handle_key(self, key: DragKey | str) -> bool:
        """Drive the active drag from the keyboard.

        Arrow keys step the hover target, DROP ends the drag where the item
        currently is, CANCEL rolls it back.

        Returns:
            True if the key was consumed

        """
        if isinstance(key, str):
            parsed = DragKey.from_name(key)
            if parsed is None:
                return False
            key = parsed

        session = self._session
        if session is None:
            return False

        if key is DragKey.CANCEL:
            self.cancel_drag()
            return True
        if key is DragKey.DROP:
            # A stale pointer hover over nothing must not trigger the drop-outside policy
            hover = session.hover
            if self._resolver.hover_container(hover) is None:
                hover = ItemTarget(session.active_id)
            self.end_drag(hover)
            return True

        try:
            target = self._navigator.next_target(session.active_id, key)
        except OrphanedItemError:
            self._abort(session)
            return True

        if target is None:
            return False
        # Targets come from the live order, so they are always fresh
        self._move(target, force=True)
        return True

    # =====================================
    # Internals
    # =====================================

    def _track_hover(self, session: DragSession, hover: HoverTarget) -> None:
        over = self._resolver.hover_container(hover)
        if session.record_hover(hover, over):
            self.over_container_changed.emit(over)

    def _apply_hover(self, session: DragSession, hover: HoverTarget, *, final: bool = False) -> bool:
        """Resolve ``hover`` and move the active item there.

        Only a hover that actually moved the item becomes the applied
        hover; a target resolving to the current slot (own container
        padding, the item itself) leaves the previous one in place.

        Returns:
            True if the hover resolved to a placement (moved or already there)

        """
        placement = self._resolver.resolve(session.active_id, hover)
        if placement is None:
            return False

        if self._place(session, placement, final=final):
            session.applied_hover = hover
        return True

    def _place(self, session: DragSession, placement: Placement, *, final: bool) -> bool:
        current = self._resolver.current_placement(session.active_id)
        if placement == current:
            return False

        if placement.container == current.container:
            self._registry.move_within(current.container, current.index, placement.index)
        else:
            self._registry.remove(current.container, session.active_id)
            self._registry.insert_at(placement.container, session.active_id, placement.index)

        session.live_moves += 1
        logger.debug(
            "[ReorderCoordinator] %s %r: %s[%d] -> %s[%d]",
            "Commit" if final else "Preview",
            session.active_id,
            current.container,
            current.index,
            placement.container,
            placement.index,
            extra={"dev_only": not final},
        )
        self.sequences_changed.emit(self._registry.as_dict())
        return True

    def _rollback(self, session: DragSession) -> None:
        if self._registry.as_dict() == session.origin_sequences:
            return
        self._registry.restore(session.origin_sequences)
        logger.debug(
            "[ReorderCoordinator] Rolled back %d live move(s) of %r",
            session.live_moves,
            session.active_id,
        )
        self.sequences_changed.emit(self._registry.as_dict())

    def _abort(self, session: DragSession) -> DropResult:
        logger.warning(
            "[ReorderCoordinator] Item %r is no longer tracked, aborting drag",
            session.active_id,
        )
        return self._finish(session, DropOutcome.ABORTED)

    def _finish(self, session: DragSession, outcome: DropOutcome) -> DropResult:
        container = self._registry.locate(session.active_id)
        final = None
        if container is not None:
            index = self._registry.index_of(container, session.active_id)
            final = Placement(container, index) if index is not None else None

        result = DropResult(
            outcome=outcome,
            active_id=session.active_id,
            origin=session.origin,
            final=final,
        )
        self._session = None
        self._last_result = result

        logger.debug(
            "[ReorderCoordinator] Drag %s: %r %s -> %s",
            outcome.value,
            session.active_id,
            session.origin,
            final,
        )

        if session.over_container is not None:
            self.over_container_changed.emit(None)
        self.active_changed.emit(None)
        self.drag_finished.emit(result)
        self.state_changed.emit(
            ReorderSnapshot(
                sequences=self._registry.as_dict(),
                active_id=None,
                over_container=None,
                phase=DragPhase.RESOLVED,
            )
        )
        return result
