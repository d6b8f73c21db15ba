"""Errors raised or reported while a project is playing."""

from typing import Optional


class PlaybackError(Exception):
    """Base class for runtime errors."""


class DanglingReferenceError(PlaybackError):
    """An action or event named an id that the loaded project cannot resolve.

    Recoverable: the offending action is skipped and playback continues.
    """

    def __init__(self, kind: str, ref_id: Optional[str], trigger_id: Optional[str] = None):
        self.kind = kind
        self.ref_id = ref_id
        self.trigger_id = trigger_id
        message = f"Unresolved {kind} reference '{ref_id}'"
        if trigger_id is not None:
            message += f" in trigger '{trigger_id}'"
        super().__init__(message)


class StateInvariantViolation(PlaybackError):
    """The engine reached a state a validated project should never produce."""


class RunawayTriggerError(StateInvariantViolation):
    """One event kept queueing action lists past the configured limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"More than {limit} action lists queued by a single event")
