"""Playback controller: slide navigation plus event dispatch.

All work happens synchronously on the caller's thread. Action lists queued
by one event run first-in first-out, and each list finishes before the next
one starts, including lists queued by a navigation in the middle of another
list.
"""

import logging
from collections import deque
from typing import Callable, Optional

from ..core.config import PlayerSettings
from ..core.project import Project
from ..core.slides import ButtonObject, Slide, Trigger
from ..core.values import dump_opaque
from .errors import (
    DanglingReferenceError,
    RunawayTriggerError,
    StateInvariantViolation,
)
from .executor import ActionExecutor
from .layers import LayerState
from .session import PlaybackSession, PlaybackState
from .timeline import TimelineClock
from .triggers import TriggerEvaluator
from .variables import VariableStore

logger = logging.getLogger("PlayDeck.runtime.player")


class PlaybackController:
    """Plays one validated project at a time.

    The project is deep-copied on load; variable values, layer visibility and
    the current slide live only in this controller.
    """

    def __init__(self, settings: Optional[PlayerSettings] = None):
        self.settings = settings or PlayerSettings()
        self.variables = VariableStore()
        self.layers = LayerState()
        self.clock = TimelineClock()
        self.evaluator = TriggerEvaluator()
        self.executor = ActionExecutor(self, self.variables, self.layers)
        self.executor.on_error(self._report_error)

        self._project: Optional[Project] = None
        self._session = PlaybackSession()
        self._queue: deque[Trigger] = deque()
        self._draining = False
        self._error_listeners: list[Callable[[DanglingReferenceError], None]] = []

    # ── Session lifecycle ───────────────────────────────────────────────

    @property
    def project(self) -> Optional[Project]:
        return self._project

    @property
    def state(self) -> PlaybackState:
        return self._session.state

    @property
    def current_slide(self) -> Optional[Slide]:
        if self._project is None or self._session.current_slide_id is None:
            return None
        return self._project.get_slide(self._session.current_slide_id)

    def load_project(self, project: Project) -> list[DanglingReferenceError]:
        """Start a session on ``project`` and enter its first slide."""
        if project is None:
            raise ValueError("project is required")
        self.stop()
        self._project = project.model_copy(deep=True)
        self._session = PlaybackSession(project_id=self._project.id)
        self.variables.initialize(self._project.variables)
        logger.info(f"Loaded project '{self._project.name}' ({len(self._project.slides)} slide(s))")

        if not self._project.slides:
            logger.warning("Project has no slides; playback stays idle")
            return []
        self._enter_slide(self._project.slides[0].id)
        self._session.state = PlaybackState.SLIDE_ACTIVE
        return self._drain()

    def stop(self):
        """Discard all playback state and return to idle."""
        self._queue.clear()
        self._project = None
        self._session = PlaybackSession()
        self.variables.initialize([])
        self.layers.reset(None)
        self.clock.reset()

    # ── Events from the presentation layer ──────────────────────────────

    def on_object_clicked(self, object_id: str) -> list[DanglingReferenceError]:
        """Fire the OnClick triggers hosted by ``object_id`` on the current slide."""
        slide = self.current_slide
        if slide is None:
            logger.warning(f"Click on '{object_id}' ignored: no slide is active")
            return []
        try:
            triggers = self.evaluator.click_triggers(slide, object_id)
        except DanglingReferenceError as e:
            logger.warning(f"Click ignored: {e}")
            self._report_error(e)
            return [e]
        obj = slide.get_object(object_id)
        if isinstance(obj, ButtonObject) and not obj.enabled:
            logger.info(f"Click on disabled button '{object_id}' ignored")
            return []
        self._queue.extend(triggers)
        return self._drain()

    def on_slide_entered(self, slide_id: str) -> list[DanglingReferenceError]:
        """Fire the OnTimelineStart triggers of the current slide again."""
        slide = self._require_slide()
        if slide.id != slide_id:
            raise StateInvariantViolation(
                f"Slide '{slide_id}' entered while '{slide.id}' is current"
            )
        self._queue.extend(self.evaluator.entry_triggers(slide))
        return self._drain()

    def navigate_to(self, slide_id: str) -> list[DanglingReferenceError]:
        """Switch slides, reset layer visibility and queue the entry triggers."""
        self._require_slide()
        if not self.has_slide(slide_id):
            raise DanglingReferenceError("slide", slide_id)
        logger.info(f"Navigating from '{self._session.current_slide_id}' to '{slide_id}'")
        self._session.state = PlaybackState.NAVIGATING
        self._enter_slide(slide_id)
        return self._drain()

    def navigate_next(self) -> list[DanglingReferenceError]:
        """Go to the following slide in project order; no-op on the last slide."""
        index = self.get_current_slide_index()
        if index < 0 or index >= len(self._project.slides) - 1:
            return []
        return self.navigate_to(self._project.slides[index + 1].id)

    def navigate_previous(self) -> list[DanglingReferenceError]:
        """Go to the preceding slide in project order; no-op on the first slide."""
        index = self.get_current_slide_index()
        if index <= 0:
            return []
        return self.navigate_to(self._project.slides[index - 1].id)

    def advance_time(self, seconds: float) -> float:
        return self.clock.advance(seconds)

    # ── Queries ─────────────────────────────────────────────────────────

    def has_slide(self, slide_id: str) -> bool:
        return self._project is not None and self._project.get_slide(slide_id) is not None

    def get_current_slide_id(self) -> Optional[str]:
        return self._session.current_slide_id

    def get_current_slide_index(self) -> int:
        """Zero-based position of the current slide, or -1 when idle."""
        if self._project is None or self._session.current_slide_id is None:
            return -1
        return self._project.slide_index(self._session.current_slide_id)

    def get_variable(self, variable_id: str):
        return self.variables.get(variable_id)

    def is_layer_visible(self, layer_id: str) -> bool:
        return self.layers.is_visible(layer_id)

    def is_object_visible(self, object_id: str) -> bool:
        """Layer visibility, the object's own flag and its timeline window combined."""
        slide = self.current_slide
        if slide is None:
            return False
        for layer, obj in slide.iter_objects():
            if obj.id == object_id:
                return self.layers.is_visible(layer.id) and self.clock.should_be_visible(obj)
        return False

    def on_error(self, listener: Callable[[DanglingReferenceError], None]):
        self._error_listeners.append(listener)

    def snapshot(self) -> PlaybackSession:
        session = self._session.model_copy(deep=True)
        session.variables = {k: dump_opaque(v) for k, v in self.variables.snapshot().items()}
        session.layers = self.layers.snapshot()
        return session

    # ── Internals ───────────────────────────────────────────────────────

    def _require_slide(self) -> Slide:
        slide = self.current_slide
        if slide is None:
            raise StateInvariantViolation("No slide is active; load a project first")
        return slide

    def _enter_slide(self, slide_id: str):
        slide = self._project.get_slide(slide_id) if self._project else None
        if slide is None:
            raise StateInvariantViolation(f"Cannot enter unknown slide '{slide_id}'")
        self._session.current_slide_id = slide.id
        self._session.record_visit(slide.id, self.settings.history_limit)
        self.layers.reset(slide)
        self.clock.reset()
        self.clock.play()
        self._queue.extend(self.evaluator.entry_triggers(slide))

    def _drain(self) -> list[DanglingReferenceError]:
        # Nested calls (navigation from inside an action list) only enqueue.
        if self._draining:
            return []
        self._draining = True
        errors: list[DanglingReferenceError] = []
        processed = 0
        try:
            while self._queue:
                trigger = self._queue.popleft()
                processed += 1
                if processed > self.settings.max_chain:
                    logger.error(f"Stopped runaway trigger chain after {self.settings.max_chain} lists")
                    raise RunawayTriggerError(self.settings.max_chain)
                errors.extend(self.executor.execute(trigger))
        except Exception:
            self._queue.clear()
            raise
        finally:
            self._draining = False
            if self._project is not None and self._session.current_slide_id is not None:
                self._session.state = PlaybackState.SLIDE_ACTIVE
        return errors

    def _report_error(self, error: DanglingReferenceError):
        for listener in list(self._error_listeners):
            try:
                listener(error)
            except Exception:
                logger.exception("Error listener failed")
