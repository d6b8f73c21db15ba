"""Tests for playdeck.core.values: opaque value decoding policy."""

import pytest

from playdeck.core.values import INT64_MAX, INT64_MIN, OpaqueNode, dump_opaque, normalize_opaque


class TestNormalizeOpaque:
    def test_none_passes_through(self):
        assert normalize_opaque(None) is None

    def test_bool_stays_bool(self):
        assert normalize_opaque(True) is True
        assert normalize_opaque(False) is False

    def test_string_verbatim(self):
        assert normalize_opaque("  text ") == "  text "

    def test_small_int_stays_int(self):
        assert normalize_opaque(42) == 42
        assert isinstance(normalize_opaque(42), int)

    def test_int64_bounds_stay_int(self):
        assert isinstance(normalize_opaque(INT64_MAX), int)
        assert isinstance(normalize_opaque(INT64_MIN), int)

    def test_beyond_int64_becomes_float(self):
        value = normalize_opaque(INT64_MAX + 1)
        assert isinstance(value, float)
        assert value == float(INT64_MAX + 1)

    def test_float_stays_float(self):
        assert normalize_opaque(2.5) == 2.5

    def test_dict_becomes_node(self):
        node = normalize_opaque({"a": [1, 2]})
        assert isinstance(node, OpaqueNode)
        assert node.raw == {"a": [1, 2]}

    def test_list_becomes_node(self):
        assert normalize_opaque([1, "x"]) == OpaqueNode([1, "x"])

    def test_node_passes_through(self):
        node = OpaqueNode({"k": 1})
        assert normalize_opaque(node) is node

    def test_unsupported_type_rejected(self):
        with pytest.raises(TypeError):
            normalize_opaque(object())


class TestOpaqueNode:
    def test_raw_is_a_copy(self):
        source = {"items": [1]}
        node = OpaqueNode(source)
        source["items"].append(2)
        node.raw["items"].append(3)
        assert node.raw == {"items": [1]}

    def test_equality_by_content(self):
        assert OpaqueNode({"a": 1}) == OpaqueNode({"a": 1})
        assert OpaqueNode({"a": 1}) != OpaqueNode({"a": 2})

    def test_hashable(self):
        assert hash(OpaqueNode({"b": 1, "a": 2})) == hash(OpaqueNode({"a": 2, "b": 1}))

    def test_dump_returns_raw(self):
        assert dump_opaque(OpaqueNode([1, 2])) == [1, 2]
        assert dump_opaque(7) == 7
