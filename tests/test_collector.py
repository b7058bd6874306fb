"""Tests for scrolling frame discovery."""

import pytest
from scrollwise.collector import can_overflow, collect_scrolling_frames, is_scrollable
from scrollwise.layout import LayoutNode, StaticLayout
from scrollwise.models import Overflow, Size


def _node(node_id, parent=None, overflow="auto", client=(100, 100), scroll=(100, 100), **kwargs):
    return LayoutNode(
        id=node_id,
        parent=parent,
        overflow_x=Overflow.from_css(overflow),
        overflow_y=Overflow.from_css(overflow),
        client=Size(*client),
        scroll=Size(*scroll),
        **kwargs
    )


def _scrolling(node_id, parent=None, overflow="auto", **kwargs):
    return _node(node_id, parent=parent, overflow=overflow, scroll=(100, 400), **kwargs)


@pytest.fixture
def chain_layout():
    """target -> a (scrolls) -> b (static) -> c (scrolls) -> root (static)."""
    return StaticLayout([
        _node("root"),
        _scrolling("c", parent="root"),
        _node("b", parent="c"),
        _scrolling("a", parent="b"),
        _node("target", parent="a"),
    ])


class TestCanOverflow:
    """Test overflow classification."""

    @pytest.mark.parametrize("overflow", [Overflow.AUTO, Overflow.SCROLL, Overflow.HIDDEN])
    def test_scrollable_kinds(self, overflow):
        assert can_overflow(overflow) is True

    @pytest.mark.parametrize("overflow", [Overflow.VISIBLE, Overflow.CLIP])
    def test_never_scrollable(self, overflow):
        assert can_overflow(overflow) is False
        assert can_overflow(overflow, skip_overflow_hidden_elements=True) is False

    def test_hidden_skipped_when_requested(self):
        assert can_overflow(Overflow.HIDDEN, skip_overflow_hidden_elements=True) is False

    def test_auto_kept_when_skipping_hidden(self):
        assert can_overflow(Overflow.AUTO, skip_overflow_hidden_elements=True) is True

    def test_unknown_css_keyword_counts_as_scrollable(self):
        assert Overflow.from_css("overlay") is Overflow.AUTO
        assert Overflow.from_css(" Hidden ") is Overflow.HIDDEN


class TestIsScrollable:
    """Test the content-size and overflow checks."""

    def test_overflowing_auto(self):
        layout = StaticLayout([_scrolling("frame")])
        assert is_scrollable(layout["frame"], layout) is True

    def test_content_fits(self):
        layout = StaticLayout([_node("frame")])
        assert is_scrollable(layout["frame"], layout) is False

    @pytest.mark.parametrize("overflow", ["visible", "clip"])
    def test_overflowing_but_not_scrollable(self, overflow):
        layout = StaticLayout([_scrolling("frame", overflow=overflow)])
        assert is_scrollable(layout["frame"], layout) is False

    def test_hidden_depends_on_flag(self):
        layout = StaticLayout([_scrolling("frame", overflow="hidden")])
        frame = layout["frame"]
        assert is_scrollable(frame, layout) is True
        assert is_scrollable(frame, layout, skip_overflow_hidden_elements=True) is False

    def test_horizontal_overflow_only(self):
        node = LayoutNode(
            id="frame",
            overflow_x=Overflow.SCROLL,
            overflow_y=Overflow.VISIBLE,
            client=Size(100, 100),
            scroll=Size(500, 100),
        )
        layout = StaticLayout([node])
        assert is_scrollable(node, layout) is True

    def test_overflow_on_axis_that_cannot_scroll(self):
        node = LayoutNode(
            id="frame",
            overflow_x=Overflow.AUTO,
            overflow_y=Overflow.HIDDEN,
            client=Size(100, 100),
            scroll=Size(100, 500),
        )
        layout = StaticLayout([node])
        assert is_scrollable(node, layout, skip_overflow_hidden_elements=True) is False


class TestCollectScrollingFrames:
    """Test ancestor walking."""

    def test_keeps_only_scrollable_ancestors_in_order(self, chain_layout):
        frames = collect_scrolling_frames(chain_layout["target"], chain_layout)
        assert [frame.id for frame in frames] == ["a", "c"]

    def test_no_ancestors(self):
        layout = StaticLayout([_node("lonely")])
        assert collect_scrolling_frames(layout["lonely"], layout) == []

    def test_boundary_checked_on_node_being_left(self, chain_layout):
        frames = collect_scrolling_frames(
            chain_layout["target"],
            chain_layout,
            boundary=lambda node: node.id != "b",
        )
        assert [frame.id for frame in frames] == ["a"]

    def test_boundary_rejecting_target(self, chain_layout):
        frames = collect_scrolling_frames(
            chain_layout["target"],
            chain_layout,
            boundary=lambda node: node.id != "target",
        )
        assert frames == []

    def test_boundary_allowing_everything(self, chain_layout):
        visited = []

        def boundary(node):
            visited.append(node.id)
            return True

        frames = collect_scrolling_frames(chain_layout["target"], chain_layout, boundary=boundary)
        assert [frame.id for frame in frames] == ["a", "c"]
        assert visited == ["target", "a", "b", "c"]

    def test_skip_hidden_excludes_hidden_frame(self):
        layout = StaticLayout([
            _scrolling("outer", overflow="auto"),
            _scrolling("inner", parent="outer", overflow="hidden"),
            _node("target", parent="inner"),
        ])
        frames = collect_scrolling_frames(
            layout["target"], layout, skip_overflow_hidden_elements=True
        )
        assert [frame.id for frame in frames] == ["outer"]

    def test_follows_host_links(self):
        layout = StaticLayout([
            _scrolling("host"),
            _node("shadow-root", host="host"),
            _scrolling("panel", parent="shadow-root"),
            _node("target", parent="panel"),
        ])
        frames = collect_scrolling_frames(layout["target"], layout)
        assert [frame.id for frame in frames] == ["panel", "host"]

    def test_stops_after_viewport(self):
        layout = StaticLayout(
            [
                _scrolling("document"),
                _scrolling("html", parent="document"),
                _node("target", parent="html"),
            ],
            viewport_id="html",
        )
        frames = collect_scrolling_frames(layout["target"], layout)
        assert [frame.id for frame in frames] == ["html"]

    def test_deep_nesting(self):
        nodes = [_scrolling("level-0")]
        for depth in range(1, 3000):
            nodes.append(_scrolling(f"level-{depth}", parent=f"level-{depth - 1}"))
        nodes.append(_node("target", parent="level-2999"))
        layout = StaticLayout(nodes)

        frames = collect_scrolling_frames(layout["target"], layout)

        assert len(frames) == 3000
        assert frames[0].id == "level-2999"
        assert frames[-1].id == "level-0"
        assert len({frame.id for frame in frames}) == 3000
