"""Projection of the target box onto per-axis reference coordinates."""

from dataclasses import dataclass

from .models import Alignment, Box


@dataclass
class AxisTargets:
    """
    Reference coordinates that must land on the aligned frame edge.

    Mutable: the drift accumulator shifts them after every solved frame.
    """
    block: float
    inline: float

    def drift(self, block_delta: float, inline_delta: float) -> None:
        """Shift both references by how far the last frame moved its content."""
        self.block += block_delta
        self.inline += inline_delta


def _project(start: float, size: float, alignment: Alignment) -> float:
    if alignment is Alignment.CENTER:
        return start + size / 2
    if alignment is Alignment.END:
        return start + size
    # start and nearest both measure from the leading edge
    return start


def project_targets(box: Box, block: Alignment, inline: Alignment) -> AxisTargets:
    """Derive the block (vertical) and inline (horizontal) references for a box."""
    return AxisTargets(
        block=_project(box.top, box.height, block),
        inline=_project(box.left, box.width, inline),
    )
