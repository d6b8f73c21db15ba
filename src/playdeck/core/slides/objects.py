"""Visual objects placed on a slide layer.

The kind-specific payload lives on the concrete subclass; ``objectType`` in
the document selects which one is rebuilt on load.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from .base import DocumentModel
from .triggers import Trigger


class Timeline(DocumentModel):
    """Visibility window of an object, in seconds from slide entry."""
    start_time: float = 0.0
    duration: float = 0.0

    @property
    def end_time(self) -> float:
        return self.start_time + self.duration


class SlideObject(DocumentModel):
    """Fields shared by every object kind."""
    object_type: str
    id: str = ""
    name: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    visible: bool = True
    timeline: Optional[Timeline] = None
    triggers: list[Trigger] = Field(default_factory=list)


class TextObject(SlideObject):
    object_type: Literal["text"] = "text"
    text: str = ""
    font_family: str = "Arial"
    font_size: float = 12.0
    color: str = "#000000"  # hex, e.g. "#FF0000"


class ImageObject(SlideObject):
    object_type: Literal["image"] = "image"
    source_path: str = ""
    maintain_aspect_ratio: bool = True


class ButtonObject(SlideObject):
    object_type: Literal["button"] = "button"
    label: str = ""
    enabled: bool = True


AnySlideObject = Annotated[
    Union[TextObject, ImageObject, ButtonObject],
    Field(discriminator="object_type"),
]
