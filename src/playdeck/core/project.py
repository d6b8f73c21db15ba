"""Project root aggregate and variable declarations."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Iterator, Optional

from pydantic import (
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)

from .slides import Layer, Slide, SlideObject, Trigger
from .slides.base import DocumentModel, coerce_enum
from .values import OpaqueValue


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VariableType(str, Enum):
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"


class Variable(DocumentModel):
    """A named, typed value that actions can read and write during playback."""
    id: str = ""
    name: str = ""
    type: VariableType = VariableType.STRING
    default_value: OpaqueValue = None

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value):
        return coerce_enum(VariableType, value)

    @model_serializer(mode="wrap")
    def _keep_explicit_null(self, handler: SerializerFunctionWrapHandler,
                            info: SerializationInfo):
        data = handler(self)
        if self.default_value is None and "default_value" in self.model_fields_set:
            data["defaultValue" if info.by_alias else "default_value"] = None
        return data


class Project(DocumentModel):
    """Root of the project graph. Owns slides and variables."""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""
    version: str = "1.0.0"
    author: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)
    modified_at: datetime = Field(default_factory=_utcnow)
    variables: list[Variable] = Field(default_factory=list)
    slides: list[Slide] = Field(default_factory=list)

    def touch(self):
        self.modified_at = _utcnow()

    def add_slide(self, slide: Slide) -> Slide:
        if slide is None:
            raise ValueError("slide is required")
        self.slides.append(slide)
        self.touch()
        return slide

    def add_variable(self, variable: Variable) -> Variable:
        if variable is None:
            raise ValueError("variable is required")
        self.variables.append(variable)
        self.touch()
        return variable

    def get_slide(self, slide_id: str) -> Optional[Slide]:
        for s in self.slides:
            if s.id == slide_id:
                return s
        return None

    def get_variable(self, variable_id: str) -> Optional[Variable]:
        for v in self.variables:
            if v.id == variable_id:
                return v
        return None

    def find_object(self, slide_id: str, object_id: str) -> Optional[SlideObject]:
        """Object lookup scoped to one slide; ids are not unique project-wide."""
        slide = self.get_slide(slide_id)
        if slide is None:
            return None
        return slide.get_object(object_id)

    def slide_index(self, slide_id: str) -> int:
        """Position of a slide in playback order, or -1."""
        for i, s in enumerate(self.slides):
            if s.id == slide_id:
                return i
        return -1

    def iter_triggers(self) -> Iterator[tuple[Slide, Layer, SlideObject, Trigger]]:
        """Walk every trigger in slide, layer, object, trigger order."""
        for slide in self.slides:
            for layer, obj in slide.iter_objects():
                for trigger in obj.triggers:
                    yield slide, layer, obj, trigger

    def to_summary(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "author": self.author,
            "slide_count": len(self.slides),
            "variable_count": len(self.variables),
            "slides": [
                {
                    "id": s.id,
                    "title": s.title or "(untitled)",
                    "layer_count": len(s.layers),
                    "object_count": sum(1 for _ in s.iter_objects()),
                }
                for s in self.slides
            ],
        }
