"""Engine-owned playback state, kept apart from the authored project."""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class PlaybackState(str, Enum):
    IDLE = "idle"
    SLIDE_ACTIVE = "slideActive"
    NAVIGATING = "navigating"


class PlaybackSession(BaseModel):
    """Everything a playback run changes. The project itself is never touched."""
    project_id: Optional[str] = None
    state: PlaybackState = PlaybackState.IDLE
    current_slide_id: Optional[str] = None
    variables: dict[str, Any] = Field(default_factory=dict)
    layers: dict[str, bool] = Field(default_factory=dict)
    history: list[str] = Field(default_factory=list)  # visited slide ids, oldest first

    def record_visit(self, slide_id: str, limit: int):
        """Append a visited slide, keeping at most ``limit`` entries."""
        self.history.append(slide_id)
        if len(self.history) > limit:
            self.history = self.history[-limit:] if limit else []
