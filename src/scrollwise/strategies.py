"""Per-frame scroll solvers for the viewport and for nested frames."""

from dataclasses import dataclass
from typing import Any, Tuple

from .geometry import align_nearest
from .layout import LayoutAccessor
from .models import Alignment, Borders, Box, ScrollOffset, ViewportMetrics


@dataclass(frozen=True)
class FrameGeometry:
    """Everything read from the layout for one frame, read exactly once."""
    frame: Any
    box: Box
    borders: Borders
    scroll: ScrollOffset
    scrollbar_width: float  # Vertical scrollbar, reserved along the right edge
    scrollbar_height: float  # Horizontal scrollbar, reserved along the bottom edge

    @classmethod
    def read(cls, frame: Any, layout: LayoutAccessor) -> "FrameGeometry":
        borders = layout.borders_of(frame)
        offset = layout.offset_size_of(frame)
        if offset is not None:
            client = layout.client_size_of(frame)
            scrollbar_width = offset.width - client.width - borders.left - borders.right
            scrollbar_height = offset.height - client.height - borders.top - borders.bottom
        else:
            scrollbar_width = scrollbar_height = 0
        return cls(
            frame=frame,
            box=layout.box_of(frame),
            borders=borders,
            scroll=layout.scroll_offset_of(frame),
            scrollbar_width=scrollbar_width,
            scrollbar_height=scrollbar_height,
        )


class FrameScrollStrategy:
    """Solves the new scroll offsets of one kind of frame."""

    def __init__(self, geometry: FrameGeometry):
        self.geometry = geometry

    def is_target_visible(self, target: Box) -> bool:
        """Check whether target already needs no scrolling (if-needed mode)."""
        raise NotImplementedError

    def solve_block(self, reference: float, alignment: Alignment, target: Box) -> float:
        raise NotImplementedError

    def solve_inline(self, reference: float, alignment: Alignment, target: Box) -> float:
        raise NotImplementedError

    def solve(
        self,
        block_reference: float,
        inline_reference: float,
        block: Alignment,
        inline: Alignment,
        target: Box,
    ) -> Tuple[float, float]:
        """Return the (top, left) scroll offsets for this frame."""
        return (
            self.solve_block(block_reference, block, target),
            self.solve_inline(inline_reference, inline, target),
        )


class ViewportScrollStrategy(FrameScrollStrategy):
    """
    Solver for the top-level scrolling surface.

    Offsets are absolute document coordinates derived from the viewport
    size and scroll position; no scrollbar is reserved.
    """

    def __init__(self, geometry: FrameGeometry, metrics: ViewportMetrics):
        super().__init__(geometry)
        self.metrics = metrics

    def is_target_visible(self, target: Box) -> bool:
        # Overflow past the right edge is deliberately not checked
        return (
            target.top >= 0
            and target.bottom <= self.metrics.height
            and target.left >= 0
        )

    def solve_block(self, reference: float, alignment: Alignment, target: Box) -> float:
        height = self.metrics.height
        scroll_y = self.metrics.scroll_y
        if alignment is Alignment.START:
            return scroll_y + reference
        if alignment is Alignment.END:
            return scroll_y + (reference - height)
        if alignment is Alignment.CENTER:
            return scroll_y + reference - height / 2
        borders = self.geometry.borders
        return scroll_y + align_nearest(
            scroll_y,
            scroll_y + height,
            height,
            borders.top,
            borders.bottom,
            scroll_y + reference,
            scroll_y + reference + target.height,
            target.height,
        )

    def solve_inline(self, reference: float, alignment: Alignment, target: Box) -> float:
        width = self.metrics.width
        scroll_x = self.metrics.scroll_x
        if alignment is Alignment.START:
            return scroll_x + reference
        if alignment is Alignment.END:
            return scroll_x + (reference - width)
        if alignment is Alignment.CENTER:
            return scroll_x + reference - width / 2
        borders = self.geometry.borders
        return scroll_x + align_nearest(
            scroll_x,
            scroll_x + width,
            width,
            borders.left,
            borders.right,
            scroll_x + reference,
            scroll_x + reference + target.width,
            target.width,
        )


class NestedFrameScrollStrategy(FrameScrollStrategy):
    """Solver for an ordinary scroll container; offsets build on its own scroll position."""

    def is_target_visible(self, target: Box) -> bool:
        box = self.geometry.box
        return target.top >= box.top and target.bottom <= box.bottom

    def solve_block(self, reference: float, alignment: Alignment, target: Box) -> float:
        g = self.geometry
        if alignment is Alignment.START:
            return g.scroll.top + (reference - g.box.top - g.borders.top)
        if alignment is Alignment.END:
            return (
                g.scroll.top
                - (g.box.bottom - reference)
                + g.borders.bottom
                + g.scrollbar_height
            )
        if alignment is Alignment.CENTER:
            return g.scroll.top - (g.box.top + g.box.height / 2 - reference)
        return g.scroll.top + align_nearest(
            g.box.top,
            g.box.bottom,
            g.box.height,
            g.borders.top,
            g.borders.bottom + g.scrollbar_height,
            reference,
            reference + target.height,
            target.height,
        )

    def solve_inline(self, reference: float, alignment: Alignment, target: Box) -> float:
        g = self.geometry
        if alignment is Alignment.START:
            return g.scroll.left + (reference - g.box.left - g.borders.left)
        if alignment is Alignment.END:
            return (
                g.scroll.left
                - (g.box.right - reference)
                + g.borders.right
                + g.scrollbar_width
            )
        if alignment is Alignment.CENTER:
            return g.scroll.left - (g.box.left + g.box.width / 2 - reference)
        return g.scroll.left + align_nearest(
            g.box.left,
            g.box.right,
            g.box.width,
            g.borders.left,
            g.borders.right + g.scrollbar_width,
            reference,
            reference + target.width,
            target.width,
        )


def strategy_for(frame: Any, layout: LayoutAccessor) -> FrameScrollStrategy:
    """Pick the solver for a frame by asking the layout whether it is the viewport."""
    geometry = FrameGeometry.read(frame, layout)
    if layout.is_viewport(frame):
        return ViewportScrollStrategy(geometry, layout.viewport_metrics())
    return NestedFrameScrollStrategy(geometry)
