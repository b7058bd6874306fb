"""Edge alignment geometry shared by both axes."""


def align_nearest(
    frame_start: float,
    frame_end: float,
    frame_size: float,
    border_start: float,
    border_end: float,
    target_start: float,
    target_end: float,
    target_size: float,
) -> float:
    """
    Find the scroll delta for "nearest" alignment on one axis.

    Works like "if-needed": a target that is already acceptable is left
    where it is and 0 is returned. Otherwise the nearer violated edge is
    brought flush with the frame edge. When the target is larger than the
    frame, partial visibility is unavoidable and the aligned edge flips.

    Args:
        frame_start: Frame's visible start coordinate (top or left)
        frame_end: Frame's visible end coordinate (bottom or right)
        frame_size: Frame's visible size on this axis
        border_start: Border thickness at the frame's start edge
        border_end: Border (plus scrollbar) thickness at the frame's end edge
        target_start: Target's projected start coordinate
        target_end: Target's projected end coordinate
        target_size: Target's size on this axis

    Returns:
        Delta to add to the frame's current scroll offset
    """
    # Target spans the whole frame, or sits strictly inside it
    if (
        (target_start < frame_start and target_end > frame_end)
        or (target_start > frame_start and target_end < frame_end)
    ):
        return 0

    # Clipped at the start while smaller than the frame, or overflowing the
    # end while larger: line up the start edges
    if (
        (target_start < frame_start and target_size < frame_size)
        or (target_end > frame_end and target_size > frame_size)
    ):
        return target_start - frame_start - border_start

    # Clipped at the end while smaller, or overflowing the start while larger:
    # line up the end edges
    if (
        (target_end > frame_end and target_size < frame_size)
        or (target_start < frame_start and target_size > frame_size)
    ):
        return target_end - frame_end + border_end

    return 0
