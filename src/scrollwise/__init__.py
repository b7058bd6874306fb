"""Compute the scroll offsets that bring an element into view across nested scroll containers."""

from .compute import compute_scroll_actions
from .config import Config, ScrollConfigError, ScrollOptions
from .layout import LayoutAccessor, LayoutNode, SceneError, StaticLayout, load_scene
from .models import (
    Alignment,
    Borders,
    Box,
    Overflow,
    ScrollAction,
    ScrollMode,
    ScrollOffset,
    Size,
    ViewportMetrics,
)

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "Borders",
    "Box",
    "Config",
    "LayoutAccessor",
    "LayoutNode",
    "Overflow",
    "SceneError",
    "ScrollAction",
    "ScrollConfigError",
    "ScrollMode",
    "ScrollOffset",
    "ScrollOptions",
    "Size",
    "StaticLayout",
    "ViewportMetrics",
    "compute_scroll_actions",
    "load_scene",
]
