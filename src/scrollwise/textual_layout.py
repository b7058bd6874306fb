"""Layout accessor over a live Textual widget tree."""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from textual.screen import Screen
from textual.widget import Widget

from .compute import compute_scroll_actions
from .models import Borders, Box, Overflow, ScrollAction, ScrollOffset, Size, ViewportMetrics

logger = logging.getLogger(__name__)


class TextualLayout:
    """
    Answers layout queries from mounted Textual widgets.

    Regions are in screen space, so the active screen plays the viewport.
    Textual scrolls a widget's content region, which sits inside padding as
    well as border, so the whole gutter is reported as the border.
    """

    def __init__(self, screen: Screen):
        self.screen = screen

    def box_of(self, node: Widget) -> Box:
        region = node.region
        return Box(top=region.y, left=region.x, width=region.width, height=region.height)

    def borders_of(self, node: Widget) -> Borders:
        gutter = node.styles.gutter
        return Borders(top=gutter.top, right=gutter.right, bottom=gutter.bottom, left=gutter.left)

    def scroll_offset_of(self, node: Widget) -> ScrollOffset:
        return ScrollOffset(top=node.scroll_y, left=node.scroll_x)

    def overflow_of(self, node: Widget) -> Tuple[Overflow, Overflow]:
        return (
            Overflow.from_css(str(node.styles.overflow_x)),
            Overflow.from_css(str(node.styles.overflow_y)),
        )

    def client_size_of(self, node: Widget) -> Size:
        region = node.scrollable_content_region
        return Size(width=region.width, height=region.height)

    def scroll_size_of(self, node: Widget) -> Size:
        virtual = node.virtual_size
        return Size(width=virtual.width, height=virtual.height)

    def offset_size_of(self, node: Widget) -> Optional[Size]:
        region = node.region
        return Size(width=region.width, height=region.height)

    def parent_or_host_of(self, node: Widget) -> Optional[Widget]:
        parent = node.parent
        # The screen's parent is the App, which is not part of the layout
        return parent if isinstance(parent, Widget) else None

    def is_viewport(self, node: Any) -> bool:
        return node is self.screen

    def viewport_metrics(self) -> ViewportMetrics:
        region = self.screen.scrollable_content_region
        return ViewportMetrics(
            width=region.width,
            height=region.height,
            scroll_x=self.screen.scroll_x,
            scroll_y=self.screen.scroll_y,
        )


def apply_scroll_actions(actions: Iterable[ScrollAction], animate: bool = False) -> None:
    """Scroll each container to the offsets computed for it."""
    for action in actions:
        action.container.scroll_to(x=action.left, y=action.top, animate=animate)


def scroll_into_view(widget: Widget, animate: bool = False, **options: Any) -> List[ScrollAction]:
    """
    Scroll every ancestor of widget so that it becomes visible.

    Args:
        widget: Mounted widget to reveal
        animate: Animate the scroll instead of jumping
        **options: Scroll options (block, inline, scroll_mode, boundary,
            skip_overflow_hidden_elements)

    Returns:
        The actions that were applied
    """
    actions = compute_scroll_actions(widget, TextualLayout(widget.screen), **options)
    logger.debug(f"Applying {len(actions)} scroll action(s) for {widget!r}")
    apply_scroll_actions(actions, animate=animate)
    return actions
