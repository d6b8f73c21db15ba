"""Event-to-action bindings hosted by slide objects."""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from .base import DocumentModel, coerce_enum
from .actions import Action


class TriggerType(str, Enum):
    ON_CLICK = "onClick"
    ON_TIMELINE_START = "onTimelineStart"


class Trigger(DocumentModel):
    """Binds an event on the hosting object to an ordered action list.

    ``object_id`` optionally names another object on the same slide that the
    trigger is about. It is a weak reference, distinct from the host.
    """
    id: str = ""
    type: TriggerType = TriggerType.ON_CLICK
    object_id: Optional[str] = None
    actions: list[Action] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value):
        return coerce_enum(TriggerType, value)
