"""Slides package: public API re-exports."""

from .base import DocumentModel
from .actions import (
    Action,
    ActionType,
    NavigateToSlideAction,
    SetVariableAction,
    ShowLayerAction,
    HideLayerAction,
)
from .triggers import Trigger, TriggerType
from .objects import Timeline, SlideObject, TextObject, ImageObject, ButtonObject
from .slide import Layer, Slide

__all__ = [
    "DocumentModel",
    "Action",
    "ActionType",
    "NavigateToSlideAction",
    "SetVariableAction",
    "ShowLayerAction",
    "HideLayerAction",
    "Trigger",
    "TriggerType",
    "Timeline",
    "SlideObject",
    "TextObject",
    "ImageObject",
    "ButtonObject",
    "Layer",
    "Slide",
]
