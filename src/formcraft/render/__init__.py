"""Renderer: schema tree + values -> bound field output."""

from .nodes import (
    NodeKind,
    ValueSink,
    ValueBinding,
    RenderNode,
    StepSummary,
    RenderedForm,
)
from .values import as_text, is_visible, read_value, toggle_option
from .renderer import Renderer
from .outline import OutlineNode, BuilderCanvas, outline, outline_component

__all__ = [
    "NodeKind",
    "ValueSink",
    "ValueBinding",
    "RenderNode",
    "StepSummary",
    "RenderedForm",
    "as_text",
    "is_visible",
    "read_value",
    "toggle_option",
    "Renderer",
    "OutlineNode",
    "BuilderCanvas",
    "outline",
    "outline_component",
]
