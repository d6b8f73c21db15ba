"""Opaque value handling for variable defaults and set-variable payloads.

Values are kept as plain Python scalars where possible. Composite JSON
structures (objects, arrays) are wrapped in an OpaqueNode so they survive a
save/load cycle without the runtime ever trying to interpret them.
"""

import copy
import json
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class OpaqueNode:
    """A structured JSON value carried through untouched."""

    __slots__ = ("_raw",)

    def __init__(self, raw: Any):
        self._raw = copy.deepcopy(raw)

    @property
    def raw(self) -> Any:
        return copy.deepcopy(self._raw)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OpaqueNode):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(json.dumps(self._raw, sort_keys=True, default=str))

    def __repr__(self) -> str:
        return f"OpaqueNode({self._raw!r})"


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def normalize_opaque(raw: Any) -> Any:
    """Apply the decoding policy for untyped values.

    None, bools and strings pass through. Integers stay integers while they
    fit a signed 64-bit slot and fall back to float beyond that. Mappings and
    sequences become OpaqueNode instances.
    """
    if raw is None or isinstance(raw, (bool, str, OpaqueNode)):
        return raw
    if isinstance(raw, int):
        if fits_int64(raw):
            return raw
        return float(raw)
    if isinstance(raw, float):
        return raw
    if isinstance(raw, (dict, list, tuple)):
        return OpaqueNode(list(raw) if isinstance(raw, tuple) else raw)
    raise TypeError(f"Unsupported value type: {type(raw).__name__}")


def dump_opaque(value: Any) -> Any:
    if isinstance(value, OpaqueNode):
        return value.raw
    return value


OpaqueValue = Annotated[
    Any,
    BeforeValidator(normalize_opaque),
    PlainSerializer(dump_opaque, return_type=Any),
]
