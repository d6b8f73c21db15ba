"""Canonical JSON encoding of project documents."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .project import Project

logger = logging.getLogger("PlayDeck.core.serializer")

REQUIRED_ROOT_FIELDS = ("id", "name", "slides", "variables")


class FormatError(ValueError):
    """The document could not be turned into a Project."""


def encode(project: Project, indent: int = 2) -> str:
    """Serialize a project to its canonical JSON text.

    Fields keep their declaration order, names are lower-camel-case, enums
    are written as their string values and absent optionals are omitted.
    """
    if not isinstance(project, Project):
        raise TypeError(f"Expected Project, got {type(project).__name__}")
    data = project.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def decode(text: str) -> Project:
    """Parse a JSON document into a Project, or raise FormatError."""
    if text is None:
        raise FormatError("Document is empty")
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise FormatError(f"Document is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise FormatError("Document root must be an object")
    missing = [key for key in REQUIRED_ROOT_FIELDS if key not in data]
    if missing:
        raise FormatError(f"Document root is missing required fields: {', '.join(missing)}")

    try:
        return Project.model_validate(data)
    except ValidationError as e:
        raise FormatError(f"Invalid project structure: {e.error_count()} error(s)\n{e}") from e


def load_project_file(path: str | Path) -> Project:
    """Read and decode a project document from disk."""
    path = Path(path)
    project = decode(path.read_text(encoding="utf-8"))
    logger.info(f"Loaded project '{project.name}' from {path}")
    return project


def save_project_file(project: Project, path: str | Path) -> Path:
    """Stamp ``modified_at`` and write the encoded project to disk."""
    path = Path(path)
    project.touch()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(encode(project), encoding="utf-8")
    logger.info(f"Saved project '{project.name}' to {path}")
    return path
