"""Tests for playdeck.runtime.layers."""

from unittest.mock import MagicMock

from playdeck.runtime.layers import LayerState

from project_builders import layer, slide


def _slide():
    return slide("s1", layer("base"), layer("popup", visible=False))


class TestLayerState:
    def test_reset_uses_authored_defaults(self):
        state = LayerState()
        state.reset(_slide())
        assert state.slide_id == "s1"
        assert state.is_visible("base")
        assert not state.is_visible("popup")

    def test_unknown_layer_is_hidden(self):
        state = LayerState()
        state.reset(_slide())
        assert not state.has("elsewhere")
        assert not state.is_visible("elsewhere")

    def test_show_and_hide(self):
        state = LayerState()
        state.reset(_slide())
        assert state.show("popup") is True
        assert state.is_visible("popup")
        assert state.hide("base") is True
        assert not state.is_visible("base")

    def test_unknown_layer_rejected(self):
        state = LayerState()
        state.reset(_slide())
        assert state.show("elsewhere") is False
        assert not state.has("elsewhere")

    def test_reset_restores_defaults(self):
        state = LayerState()
        state.reset(_slide())
        state.show("popup")
        state.reset(_slide())
        assert not state.is_visible("popup")

    def test_reset_only_knows_new_slide(self):
        state = LayerState()
        state.reset(_slide())
        state.reset(slide("s2", layer("other")))
        assert state.snapshot() == {"other": True}

    def test_reset_to_none(self):
        state = LayerState()
        state.reset(_slide())
        state.reset(None)
        assert state.slide_id is None
        assert state.snapshot() == {}

    def test_duplicate_layer_id_first_wins(self):
        state = LayerState()
        state.reset(slide("s1", layer("dup", visible=False), layer("dup", visible=True)))
        assert not state.is_visible("dup")

    def test_listeners_only_on_change(self):
        state = LayerState()
        state.reset(_slide())
        listener = MagicMock()
        state.on_change(listener)
        state.show("base")
        state.show("popup")
        state.show("popup")
        listener.assert_called_once_with("popup", True)

    def test_failing_listener_is_contained(self):
        state = LayerState()
        state.reset(_slide())
        listener = MagicMock()
        state.on_change(MagicMock(side_effect=RuntimeError("boom")))
        state.on_change(listener)
        assert state.show("popup") is True
        listener.assert_called_once_with("popup", True)
