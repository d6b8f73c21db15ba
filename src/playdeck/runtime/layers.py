"""Per-layer visibility for the slide that is currently showing."""

import logging
from typing import Callable, Optional

from ..core.slides import Slide

logger = logging.getLogger("PlayDeck.runtime.layers")

LayerListener = Callable[[str, bool], None]


class LayerState:
    """Runtime visibility of the current slide's layers.

    Only layers of the slide passed to ``reset`` are known; every reset starts
    again from the authored ``Layer.visible`` defaults.
    """

    def __init__(self):
        self._slide_id: Optional[str] = None
        self._visible: dict[str, bool] = {}
        self._listeners: list[LayerListener] = []

    @property
    def slide_id(self) -> Optional[str]:
        return self._slide_id

    def reset(self, slide: Optional[Slide]):
        self._visible.clear()
        self._slide_id = slide.id if slide is not None else None
        if slide is None:
            return
        for layer in slide.layers:
            # First layer wins if ids repeat
            self._visible.setdefault(layer.id, layer.visible)

    def has(self, layer_id: str) -> bool:
        return layer_id in self._visible

    def is_visible(self, layer_id: str) -> bool:
        return self._visible.get(layer_id, False)

    def show(self, layer_id: str) -> bool:
        return self._set(layer_id, True)

    def hide(self, layer_id: str) -> bool:
        return self._set(layer_id, False)

    def _set(self, layer_id: str, visible: bool) -> bool:
        if layer_id not in self._visible:
            logger.warning(f"Layer '{layer_id}' is not on slide '{self._slide_id}'")
            return False
        if self._visible[layer_id] != visible:
            self._visible[layer_id] = visible
            for listener in list(self._listeners):
                try:
                    listener(layer_id, visible)
                except Exception:
                    logger.exception(f"Layer change listener failed for '{layer_id}'")
        return True

    def on_change(self, listener: LayerListener):
        self._listeners.append(listener)

    def snapshot(self) -> dict[str, bool]:
        return dict(self._visible)
