"""Current variable values for one playback session."""

import logging
from typing import Any, Callable, Iterable, Optional

from ..core.project import Variable, VariableType
from ..core.values import OpaqueNode, normalize_opaque

logger = logging.getLogger("PlayDeck.runtime.variables")

VariableListener = Callable[[str, Any], None]

_TRUE_STRINGS = {"true"}
_FALSE_STRINGS = {"false"}


class CoercionError(ValueError):
    """A value cannot be stored in a variable of the declared type."""


def _parse_number(text: str):
    text = text.strip()
    try:
        return normalize_opaque(int(text))
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise CoercionError(f"'{text}' is not a number") from None


def coerce(value: Any, var_type: VariableType) -> Any:
    """Convert ``value`` to the variable's declared type.

    Numbers are narrowed the same way document values are. None is accepted
    for every type. Opaque structures are only stored as they are.
    """
    value = normalize_opaque(value)
    if value is None or isinstance(value, OpaqueNode):
        return value

    if var_type == VariableType.BOOLEAN:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return value != 0
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise CoercionError(f"'{value}' is not a boolean")

    if var_type == VariableType.NUMBER:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, (int, float)):
            return value
        return _parse_number(value)

    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class VariableStore:
    """Maps variable id to its current value, seeded from the authored defaults."""

    def __init__(self):
        self._values: dict[str, Any] = {}
        self._types: dict[str, VariableType] = {}
        self._listeners: list[VariableListener] = []

    def initialize(self, variables: Iterable[Variable]):
        """Drop all values and seed from the given declarations."""
        self._values.clear()
        self._types.clear()
        for variable in variables:
            self._types[variable.id] = variable.type
            try:
                self._values[variable.id] = coerce(variable.default_value, variable.type)
            except CoercionError as e:
                logger.warning(f"Default for variable '{variable.id}' kept as authored: {e}")
                self._values[variable.id] = variable.default_value

    def has(self, variable_id: str) -> bool:
        return variable_id in self._values

    def get(self, variable_id: str) -> Optional[Any]:
        return self._values.get(variable_id)

    def set(self, variable_id: str, value: Any) -> bool:
        """Store a value. Returns False if the id is unknown or the value is rejected."""
        if variable_id not in self._types:
            logger.warning(f"Ignoring write to unknown variable '{variable_id}'")
            return False
        try:
            coerced = coerce(value, self._types[variable_id])
        except (CoercionError, TypeError) as e:
            logger.warning(f"Rejected value for variable '{variable_id}': {e}")
            return False
        self._values[variable_id] = coerced
        for listener in list(self._listeners):
            try:
                listener(variable_id, coerced)
            except Exception:
                logger.exception(f"Variable change listener failed for '{variable_id}'")
        return True

    def on_change(self, listener: VariableListener):
        self._listeners.append(listener)

    def snapshot(self) -> dict[str, Any]:
        return dict(self._values)

    def __len__(self) -> int:
        return len(self._values)
