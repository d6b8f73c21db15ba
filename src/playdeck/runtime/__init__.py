"""Runtime package: public API re-exports."""

from .errors import (
    PlaybackError,
    DanglingReferenceError,
    StateInvariantViolation,
    RunawayTriggerError,
)
from .variables import VariableStore, CoercionError, coerce
from .layers import LayerState
from .triggers import TriggerEvaluator
from .executor import ActionExecutor
from .timeline import TimelineClock
from .session import PlaybackSession, PlaybackState
from .player import PlaybackController

__all__ = [
    "PlaybackError",
    "DanglingReferenceError",
    "StateInvariantViolation",
    "RunawayTriggerError",
    "VariableStore",
    "CoercionError",
    "coerce",
    "LayerState",
    "TriggerEvaluator",
    "ActionExecutor",
    "TimelineClock",
    "PlaybackSession",
    "PlaybackState",
    "PlaybackController",
]
