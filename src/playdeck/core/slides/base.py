"""Shared pydantic configuration for every document entity."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Base for entities persisted in a project document.

    Attributes are snake_case in Python and lower-camel-case on disk.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )


def coerce_enum(enum_cls: type[Enum], value: Any) -> Any:
    """Accept enum values regardless of their capitalisation ("OnClick" -> "onClick")."""
    if isinstance(value, str):
        for member in enum_cls:
            if member.value.lower() == value.lower():
                return member
    return value
