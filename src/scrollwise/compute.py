"""Compute the scroll offsets that bring a target into view."""

import logging
from typing import Any, List

from .collector import collect_scrolling_frames
from .config import ScrollOptions
from .layout import LayoutAccessor
from .models import ScrollAction, ScrollMode
from .projector import project_targets
from .strategies import strategy_for

logger = logging.getLogger(__name__)


def compute_scroll_actions(
    target: Any,
    layout: LayoutAccessor,
    options: Any = None,
    **overrides: Any,
) -> List[ScrollAction]:
    """
    Work out where every scrolling ancestor of target has to be scrolled.

    Nothing is scrolled; the returned actions are applied by the caller.

    Args:
        target: Node to bring into view
        layout: Accessor answering geometry queries for target and its ancestors
        options: ScrollOptions, a mapping of option values, or None for defaults
        **overrides: Individual option values (block, inline, scroll_mode,
            boundary, skip_overflow_hidden_elements)

    Returns:
        One ScrollAction per scrolling frame, innermost first. Empty when
        nothing scrolls, or under if-needed when the target is already visible
        in its nearest frame.

    Raises:
        ScrollConfigError: If an option value is invalid
    """
    opts = ScrollOptions.resolve(options, **overrides)

    frames = collect_scrolling_frames(
        target,
        layout,
        boundary=opts.boundary,
        skip_overflow_hidden_elements=opts.skip_overflow_hidden_elements,
    )
    if not frames:
        return []

    target_box = layout.box_of(target)
    references = project_targets(target_box, opts.block, opts.inline)

    actions = []
    for index, frame in enumerate(frames):
        strategy = strategy_for(frame, layout)

        if (
            index == 0
            and opts.scroll_mode is ScrollMode.IF_NEEDED
            and strategy.is_target_visible(target_box)
        ):
            logger.debug(f"Target {target!r} already visible in {frame!r}, nothing to scroll")
            return []

        block_scroll, inline_scroll = strategy.solve(
            references.block,
            references.inline,
            opts.block,
            opts.inline,
            target_box,
        )

        # Parents see the target where it will be once this frame has scrolled
        scroll = strategy.geometry.scroll
        references.drift(scroll.top - block_scroll, scroll.left - inline_scroll)

        logger.debug(f"Frame {frame!r}: top={block_scroll} left={inline_scroll}")
        actions.append(ScrollAction(container=frame, top=block_scroll, left=inline_scroll))

    return actions
