"""Action models executed in order when a trigger fires.

Every target field is a weak reference: an id resolved by lookup at
validation or playback time, never a pointer into the project graph.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer

from .base import DocumentModel
from ..values import OpaqueValue


class ActionType(str, Enum):
    NAVIGATE_TO_SLIDE = "navigateToSlide"
    SET_VARIABLE = "setVariable"
    SHOW_LAYER = "showLayer"
    HIDE_LAYER = "hideLayer"


class NavigateToSlideAction(DocumentModel):
    """Jump to another slide in the same project."""
    action_type: Literal["navigateToSlide"] = "navigateToSlide"
    target_slide_id: str = ""

    @property
    def kind(self) -> ActionType:
        return ActionType.NAVIGATE_TO_SLIDE


class SetVariableAction(DocumentModel):
    """Assign a value to a project variable.

    ``value`` follows the opaque value policy. An explicit ``None`` is written
    out as null; a value that was never set is left out of the document.
    """
    action_type: Literal["setVariable"] = "setVariable"
    variable_id: str = ""
    value: OpaqueValue = None

    @property
    def kind(self) -> ActionType:
        return ActionType.SET_VARIABLE

    @model_serializer(mode="wrap")
    def _keep_explicit_null(self, handler: SerializerFunctionWrapHandler):
        data = handler(self)
        if self.value is None and "value" in self.model_fields_set:
            data["value"] = None
        return data


class ShowLayerAction(DocumentModel):
    """Make a layer of the current slide visible."""
    action_type: Literal["showLayer"] = "showLayer"
    layer_id: str = ""

    @property
    def kind(self) -> ActionType:
        return ActionType.SHOW_LAYER


class HideLayerAction(DocumentModel):
    """Hide a layer of the current slide."""
    action_type: Literal["hideLayer"] = "hideLayer"
    layer_id: str = ""

    @property
    def kind(self) -> ActionType:
        return ActionType.HIDE_LAYER


Action = Annotated[
    Union[NavigateToSlideAction, SetVariableAction, ShowLayerAction, HideLayerAction],
    Field(discriminator="action_type"),
]
