"""Slide and layer models."""

from typing import Iterator, Optional
from pydantic import Field

from .base import DocumentModel
from .objects import AnySlideObject, SlideObject


class Layer(DocumentModel):
    """A named stack of objects with an authored default visibility."""
    id: str = ""
    name: str = ""
    visible: bool = True
    objects: list[AnySlideObject] = Field(default_factory=list)

    def get_object(self, object_id: str) -> Optional[SlideObject]:
        for obj in self.objects:
            if obj.id == object_id:
                return obj
        return None


class Slide(DocumentModel):
    """A single slide: a canvas size plus an ordered list of layers."""
    id: str = ""
    title: str = ""
    width: float = 1920.0
    height: float = 1080.0
    layers: list[Layer] = Field(default_factory=list)

    def get_layer(self, layer_id: str) -> Optional[Layer]:
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        return None

    def iter_objects(self) -> Iterator[tuple[Layer, SlideObject]]:
        """Yield (layer, object) pairs in document order."""
        for layer in self.layers:
            for obj in layer.objects:
                yield layer, obj

    def get_object(self, object_id: str) -> Optional[SlideObject]:
        """First object with this id across all layers of the slide."""
        for _, obj in self.iter_objects():
            if obj.id == object_id:
                return obj
        return None

    def object_ids(self) -> set[str]:
        return {obj.id for _, obj in self.iter_objects()}

    def layer_ids(self) -> set[str]:
        return {layer.id for layer in self.layers}
