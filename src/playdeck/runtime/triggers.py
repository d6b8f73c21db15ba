"""Resolve which triggers an external event fires."""

from ..core.slides import Slide, SlideObject, Trigger, TriggerType
from .errors import DanglingReferenceError


class TriggerEvaluator:
    """Matches click and slide-entry events to triggers in document order.

    Visibility plays no part here: hidden objects and hidden layers still
    fire their triggers.
    """

    @staticmethod
    def matches(trigger: Trigger, trigger_type: TriggerType) -> bool:
        return trigger.type == trigger_type

    def click_triggers(self, slide: Slide, object_id: str) -> list[Trigger]:
        obj = slide.get_object(object_id)
        if obj is None:
            raise DanglingReferenceError("object", object_id)
        return self._hosted(obj, TriggerType.ON_CLICK)

    def entry_triggers(self, slide: Slide) -> list[Trigger]:
        """OnTimelineStart triggers by layer, then object, then trigger order."""
        triggers: list[Trigger] = []
        for _, obj in slide.iter_objects():
            triggers.extend(self._hosted(obj, TriggerType.ON_TIMELINE_START))
        return triggers

    def _hosted(self, obj: SlideObject, trigger_type: TriggerType) -> list[Trigger]:
        return [t for t in obj.triggers if self.matches(t, trigger_type)]
