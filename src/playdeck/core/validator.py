"""Structural and referential checks that decide whether a project can play.

``validate`` never stops at the first problem: every check runs and adds its
diagnostics to one list, in a fixed order, so the same project always yields
the same messages.
"""

import logging
from collections import Counter
from typing import Iterable, Optional

from .project import Project
from .slides import (
    HideLayerAction,
    NavigateToSlideAction,
    SetVariableAction,
    ShowLayerAction,
    Slide,
)

logger = logging.getLogger("PlayDeck.core.validator")


def _duplicates(ids: Iterable[str]) -> list[str]:
    """Ids that occur more than once, each listed once in first-seen order."""
    counts = Counter(ids)
    return [item for item, count in counts.items() if count > 1]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate(project: Optional[Project]) -> list[str]:
    """Return every diagnostic for ``project``. An empty list means playable."""
    if project is None:
        return ["Project cannot be null."]

    errors: list[str] = []

    if _is_blank(project.name):
        errors.append("Project name cannot be empty.")

    for duplicate_id in _duplicates(s.id for s in project.slides):
        errors.append(f"Duplicate slide ID found: {duplicate_id}")

    for duplicate_id in _duplicates(v.id for v in project.variables):
        errors.append(f"Duplicate variable ID found: {duplicate_id}")

    for slide in project.slides:
        _validate_slide(slide, errors)

    _validate_variable_references(project, errors)
    _validate_slide_references(project, errors)
    _validate_layer_references(project, errors)
    _validate_object_references(project, errors)

    logger.debug(f"Validated project '{project.id}': {len(errors)} diagnostic(s)")
    return errors


def is_playable(project: Optional[Project]) -> bool:
    return not validate(project)


def _validate_slide(slide: Slide, errors: list[str]):
    if _is_blank(slide.title):
        errors.append(f"Slide '{slide.id}' has an empty title.")
    if slide.width <= 0:
        errors.append(f"Slide '{slide.id}' has invalid width: {slide.width:g}")
    if slide.height <= 0:
        errors.append(f"Slide '{slide.id}' has invalid height: {slide.height:g}")

    for duplicate_id in _duplicates(layer.id for layer in slide.layers):
        errors.append(f"Duplicate layer ID '{duplicate_id}' found in slide '{slide.id}'")

    for layer in slide.layers:
        for duplicate_id in _duplicates(obj.id for obj in layer.objects):
            errors.append(
                f"Duplicate object ID '{duplicate_id}' found in layer "
                f"'{layer.id}' of slide '{slide.id}'"
            )
        for obj in layer.objects:
            for trigger in obj.triggers:
                if not trigger.actions:
                    errors.append(f"Trigger '{trigger.id}' on object '{obj.id}' has no actions.")


def _validate_variable_references(project: Project, errors: list[str]):
    variable_ids = {v.id for v in project.variables}
    for _, _, _, trigger in project.iter_triggers():
        for action in trigger.actions:
            if isinstance(action, SetVariableAction) and action.variable_id not in variable_ids:
                errors.append(
                    f"SetVariableAction in trigger '{trigger.id}' references "
                    f"non-existent variable '{action.variable_id}'"
                )


def _validate_slide_references(project: Project, errors: list[str]):
    slide_ids = {s.id for s in project.slides}
    for _, _, _, trigger in project.iter_triggers():
        for action in trigger.actions:
            if isinstance(action, NavigateToSlideAction) and action.target_slide_id not in slide_ids:
                errors.append(
                    f"NavigateToSlideAction in trigger '{trigger.id}' references "
                    f"non-existent slide '{action.target_slide_id}'"
                )


def _validate_layer_references(project: Project, errors: list[str]):
    # Layer ids only resolve within the slide that holds the action.
    for slide in project.slides:
        layer_ids = slide.layer_ids()
        for _, obj in slide.iter_objects():
            for trigger in obj.triggers:
                for action in trigger.actions:
                    if not isinstance(action, (ShowLayerAction, HideLayerAction)):
                        continue
                    if action.layer_id not in layer_ids:
                        errors.append(
                            f"Layer action in trigger '{trigger.id}' references "
                            f"non-existent layer '{action.layer_id}' in slide '{slide.id}'"
                        )


def _validate_object_references(project: Project, errors: list[str]):
    for slide in project.slides:
        object_ids = slide.object_ids()
        for _, obj in slide.iter_objects():
            for trigger in obj.triggers:
                if trigger.object_id is not None and trigger.object_id not in object_ids:
                    errors.append(
                        f"Trigger '{trigger.id}' references non-existent object "
                        f"'{trigger.object_id}' in slide '{slide.id}'"
                    )
