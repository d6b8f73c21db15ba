"""Runs a trigger's action list against the engine-owned playback state."""

import logging
from typing import Callable, Optional, Protocol

from ..core.slides import (
    ActionType,
    HideLayerAction,
    NavigateToSlideAction,
    SetVariableAction,
    ShowLayerAction,
    Trigger,
)
from .errors import DanglingReferenceError, StateInvariantViolation
from .layers import LayerState
from .variables import VariableStore

logger = logging.getLogger("PlayDeck.runtime.executor")

ErrorListener = Callable[[DanglingReferenceError], None]


class Navigator(Protocol):
    def has_slide(self, slide_id: str) -> bool: ...

    def navigate_to(self, slide_id: str) -> None: ...


class ActionExecutor:
    """Executes actions strictly in order, one state change per action.

    A reference that does not resolve is reported and that action is skipped;
    the remaining actions of the list still run.
    """

    def __init__(self, navigator: Navigator, variables: VariableStore, layers: LayerState):
        self.navigator = navigator
        self.variables = variables
        self.layers = layers
        self._error_listeners: list[ErrorListener] = []
        self._handlers = {
            ActionType.NAVIGATE_TO_SLIDE: self._navigate,
            ActionType.SET_VARIABLE: self._set_variable,
            ActionType.SHOW_LAYER: self._show_layer,
            ActionType.HIDE_LAYER: self._hide_layer,
        }
        missing = set(ActionType) - set(self._handlers)
        if missing:
            raise StateInvariantViolation(f"No handler for action kinds: {sorted(m.value for m in missing)}")

    @property
    def handled_kinds(self) -> set[ActionType]:
        return set(self._handlers)

    def on_error(self, listener: ErrorListener):
        self._error_listeners.append(listener)

    def execute(self, trigger: Trigger) -> list[DanglingReferenceError]:
        """Run every action of ``trigger``; returns the errors that were skipped over."""
        errors: list[DanglingReferenceError] = []
        logger.debug(f"Executing trigger '{trigger.id}' ({len(trigger.actions)} action(s))")
        for action in trigger.actions:
            try:
                self.execute_action(action, trigger.id)
            except DanglingReferenceError as e:
                logger.warning(f"Skipping action: {e}")
                errors.append(e)
                for listener in list(self._error_listeners):
                    try:
                        listener(e)
                    except Exception:
                        logger.exception("Error listener failed")
        return errors

    def execute_action(self, action, trigger_id: Optional[str] = None):
        handler = self._handlers.get(action.kind)
        if handler is None:
            raise StateInvariantViolation(f"Unknown action kind: {action.kind!r}")
        handler(action, trigger_id)

    def _navigate(self, action: NavigateToSlideAction, trigger_id: Optional[str]):
        if not self.navigator.has_slide(action.target_slide_id):
            raise DanglingReferenceError("slide", action.target_slide_id, trigger_id)
        self.navigator.navigate_to(action.target_slide_id)

    def _set_variable(self, action: SetVariableAction, trigger_id: Optional[str]):
        if not self.variables.has(action.variable_id):
            raise DanglingReferenceError("variable", action.variable_id, trigger_id)
        self.variables.set(action.variable_id, action.value)

    def _show_layer(self, action: ShowLayerAction, trigger_id: Optional[str]):
        if not self.layers.has(action.layer_id):
            raise DanglingReferenceError("layer", action.layer_id, trigger_id)
        self.layers.show(action.layer_id)

    def _hide_layer(self, action: HideLayerAction, trigger_id: Optional[str]):
        if not self.layers.has(action.layer_id):
            raise DanglingReferenceError("layer", action.layer_id, trigger_id)
        self.layers.hide(action.layer_id)
