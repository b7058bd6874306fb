"""Discovery of the scrolling frames between a target and the viewport."""

import logging
from typing import Any, Callable, List, Optional

from .layout import LayoutAccessor
from .models import Overflow

logger = logging.getLogger(__name__)


def can_overflow(overflow: Overflow, skip_overflow_hidden_elements: bool = False) -> bool:
    """Check whether content may be scrolled under this overflow classification."""
    if skip_overflow_hidden_elements and overflow is Overflow.HIDDEN:
        return False
    return overflow not in (Overflow.VISIBLE, Overflow.CLIP)


def is_scrollable(
    node: Any,
    layout: LayoutAccessor,
    skip_overflow_hidden_elements: bool = False,
) -> bool:
    """Check whether a node has overflowing content on an axis that allows scrolling."""
    client = layout.client_size_of(node)
    content = layout.scroll_size_of(node)
    overflow_x, overflow_y = layout.overflow_of(node)
    return (
        (client.height < content.height and can_overflow(overflow_y, skip_overflow_hidden_elements))
        or (client.width < content.width and can_overflow(overflow_x, skip_overflow_hidden_elements))
    )


def collect_scrolling_frames(
    target: Any,
    layout: LayoutAccessor,
    boundary: Optional[Callable[[Any], bool]] = None,
    skip_overflow_hidden_elements: bool = False,
) -> List[Any]:
    """
    Collect the scrollable ancestors of target, nearest first.

    The boundary predicate is asked about the node being left before each
    step up (starting with the target itself); a false answer ends the walk.
    The walk also ends once the viewport has been visited.

    Args:
        target: Node to bring into view
        layout: Accessor used for all node queries
        boundary: Optional predicate allowing ascent past a node
        skip_overflow_hidden_elements: Treat overflow: hidden as not scrollable

    Returns:
        Scrollable ancestors in innermost-to-outermost order
    """
    frames = []
    node = target
    while True:
        parent = layout.parent_or_host_of(node)
        if parent is None:
            break
        if boundary is not None and not boundary(node):
            break

        if is_scrollable(parent, layout, skip_overflow_hidden_elements):
            frames.append(parent)

        if layout.is_viewport(parent):
            break
        node = parent

    logger.debug(f"Collected {len(frames)} scrolling frame(s) for {target!r}")
    return frames
