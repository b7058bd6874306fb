"""Layout accessors: the geometry interface the computation reads from."""

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Protocol, Tuple, Union

from .models import Borders, Box, Overflow, ScrollAction, ScrollOffset, Size, ViewportMetrics

logger = logging.getLogger(__name__)


class LayoutAccessor(Protocol):
    """
    Read-only view of a laid-out tree.

    Implementations resolve geometry and style queries against whatever
    environment owns the nodes. All boxes must share one coordinate space.
    """

    def box_of(self, node: Any) -> Box: ...

    def borders_of(self, node: Any) -> Borders: ...

    def scroll_offset_of(self, node: Any) -> ScrollOffset: ...

    def overflow_of(self, node: Any) -> Tuple[Overflow, Overflow]:
        """Return the (x, y) overflow classification."""
        ...

    def client_size_of(self, node: Any) -> Size: ...

    def scroll_size_of(self, node: Any) -> Size: ...

    def offset_size_of(self, node: Any) -> Optional[Size]:
        """Outer size including scrollbars, or None without box-model sizing."""
        ...

    def parent_or_host_of(self, node: Any) -> Optional[Any]: ...

    def is_viewport(self, node: Any) -> bool: ...

    def viewport_metrics(self) -> ViewportMetrics: ...


class SceneError(ValueError):
    """Raised when a scene description is inconsistent."""


def _link_id(value: Any) -> Optional[str]:
    """Node ids in scene JSON may be numbers; links compare as strings."""
    return str(value) if value is not None else None


@dataclass
class LayoutNode:
    """
    A node in a static layout.

    `client` is the visible content size, `scroll` the full content size and
    `offset` the outer size including borders and scrollbars (None when the
    node has no box-model sizing, e.g. an SVG element).
    """
    id: str
    box: Box = field(default_factory=lambda: Box(0, 0, 0, 0))
    parent: Optional[str] = None
    host: Optional[str] = None  # Shadow-root host, used when there is no parent
    borders: Borders = field(default_factory=Borders)
    client: Size = field(default_factory=Size)
    scroll: Size = field(default_factory=Size)
    offset: Optional[Size] = None
    overflow_x: Overflow = Overflow.VISIBLE
    overflow_y: Overflow = Overflow.VISIBLE
    scroll_top: float = 0
    scroll_left: float = 0

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __repr__(self) -> str:
        return f"LayoutNode({self.id!r})"

    @classmethod
    def from_dict(cls, data: dict) -> "LayoutNode":
        """Create from dictionary (scene JSON)."""
        if not isinstance(data, dict):
            raise SceneError(f"Scene node is not an object: {data!r}")
        if "id" not in data:
            raise SceneError(f"Scene node without an id: {data!r}")
        node_id = str(data["id"])
        try:
            overflow = data.get("overflow", "visible")
            if isinstance(overflow, str):
                overflow_x = overflow_y = overflow
            else:
                overflow_x, overflow_y = overflow
            offset = data.get("offset")
            return cls(
                id=node_id,
                box=Box.from_dict(data.get("box", {})),
                parent=_link_id(data.get("parent")),
                host=_link_id(data.get("host")),
                borders=Borders.from_dict(data.get("borders", {})),
                client=Size.from_value(data.get("client", (0, 0))),
                scroll=Size.from_value(data.get("scroll", (0, 0))),
                offset=Size.from_value(offset) if offset is not None else None,
                overflow_x=Overflow.from_css(overflow_x),
                overflow_y=Overflow.from_css(overflow_y),
                scroll_top=data.get("scroll_top", 0),
                scroll_left=data.get("scroll_left", 0),
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise SceneError(f"Invalid scene node {node_id}: {e}") from e


class StaticLayout:
    """
    In-memory layout built from LayoutNode records.

    Boxes are snapshots in viewport space. apply_scroll_actions() moves the
    descendants of each scrolled container, so running a computation again
    afterwards sees the geometry the scroll would have produced.
    """

    def __init__(
        self,
        nodes: Iterable[LayoutNode],
        viewport_id: Optional[str] = None,
        viewport_size: Optional[Size] = None,
    ):
        """
        Initialize the layout.

        Args:
            nodes: All nodes of the tree, including targets
            viewport_id: Id of the node acting as the viewport, if any
            viewport_size: Viewport width/height; defaults to the viewport
                node's client size
        """
        self._nodes: Dict[str, LayoutNode] = {}
        for node in nodes:
            if node.id in self._nodes:
                raise SceneError(f"Duplicate node id: {node.id}")
            self._nodes[node.id] = node

        for node in self._nodes.values():
            for link in (node.parent, node.host):
                if link is not None and link not in self._nodes:
                    raise SceneError(f"Node {node.id} refers to unknown node {link}")

        for node in self._nodes.values():
            seen = {node.id}
            link = node.parent if node.parent is not None else node.host
            while link is not None:
                if link in seen:
                    raise SceneError(f"Cycle in parent links at {node.id}")
                seen.add(link)
                linked = self._nodes[link]
                link = linked.parent if linked.parent is not None else linked.host

        if viewport_id is not None and viewport_id not in self._nodes:
            raise SceneError(f"Unknown viewport node: {viewport_id}")
        self.viewport = self._nodes[viewport_id] if viewport_id is not None else None
        self._viewport_size = viewport_size

    def __getitem__(self, node_id: str) -> LayoutNode:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise SceneError(f"Unknown node id: {node_id}") from None

    def __iter__(self) -> Iterator[LayoutNode]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    # Accessor protocol

    def box_of(self, node: LayoutNode) -> Box:
        return node.box

    def borders_of(self, node: LayoutNode) -> Borders:
        return node.borders

    def scroll_offset_of(self, node: LayoutNode) -> ScrollOffset:
        if node is self.viewport:
            metrics = self.viewport_metrics()
            return ScrollOffset(top=metrics.scroll_y, left=metrics.scroll_x)
        return ScrollOffset(top=node.scroll_top, left=node.scroll_left)

    def overflow_of(self, node: LayoutNode) -> Tuple[Overflow, Overflow]:
        return node.overflow_x, node.overflow_y

    def client_size_of(self, node: LayoutNode) -> Size:
        return node.client

    def scroll_size_of(self, node: LayoutNode) -> Size:
        return node.scroll

    def offset_size_of(self, node: LayoutNode) -> Optional[Size]:
        return node.offset

    def parent_or_host_of(self, node: LayoutNode) -> Optional[LayoutNode]:
        link = node.parent if node.parent is not None else node.host
        return self._nodes[link] if link is not None else None

    def is_viewport(self, node: LayoutNode) -> bool:
        return self.viewport is not None and node is self.viewport

    def viewport_metrics(self) -> ViewportMetrics:
        if self.viewport is None:
            size = self._viewport_size or Size()
            return ViewportMetrics(width=size.width, height=size.height)
        size = self._viewport_size or self.viewport.client
        return ViewportMetrics(
            width=size.width,
            height=size.height,
            scroll_x=self.viewport.scroll_left,
            scroll_y=self.viewport.scroll_top,
        )

    # Simulation

    def descendants_of(self, node: LayoutNode) -> List[LayoutNode]:
        """All nodes whose parent-or-host chain passes through node."""
        result = []
        for candidate in self._nodes.values():
            ancestor = self.parent_or_host_of(candidate)
            while ancestor is not None:
                if ancestor is node:
                    result.append(candidate)
                    break
                ancestor = self.parent_or_host_of(ancestor)
        return result

    def apply_scroll_actions(self, actions: Iterable[ScrollAction]) -> None:
        """
        Apply computed scroll offsets to the layout.

        Every descendant of a scrolled container moves by the negated scroll
        delta, as it would on screen.
        """
        for action in actions:
            container = action.container
            dy = action.top - container.scroll_top
            dx = action.left - container.scroll_left
            container.scroll_top = action.top
            container.scroll_left = action.left
            if not dx and not dy:
                continue
            for descendant in self.descendants_of(container):
                descendant.box = descendant.box.translated(dx=-dx, dy=-dy)
            logger.debug(f"Scrolled {container.id} by ({dx}, {dy})")

    def copy(self) -> "StaticLayout":
        """Independent copy, so a scene can be simulated without mutating it."""
        viewport_id = self.viewport.id if self.viewport is not None else None
        return StaticLayout(
            [replace(node) for node in self._nodes.values()],
            viewport_id=viewport_id,
            viewport_size=self._viewport_size,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "StaticLayout":
        """
        Create a layout from a scene dictionary.

        Expected keys: "nodes" (list of node dicts), optional "viewport"
        (node id) and optional "viewport_size" ({width, height}).
        """
        if "nodes" not in data:
            raise SceneError("Scene has no 'nodes' list")
        if not isinstance(data["nodes"], list):
            raise SceneError("Scene 'nodes' must be a list")
        viewport_size = data.get("viewport_size")
        if viewport_size is not None:
            try:
                viewport_size = Size.from_value(viewport_size)
            except ValueError as e:
                raise SceneError(f"Invalid viewport_size: {e}") from e
        return cls(
            [LayoutNode.from_dict(item) for item in data["nodes"]],
            viewport_id=_link_id(data.get("viewport")),
            viewport_size=viewport_size,
        )


@dataclass
class Scene:
    """A static layout plus the target and options stored alongside it."""
    layout: StaticLayout
    target: LayoutNode
    options: Dict[str, Any] = field(default_factory=dict)

    def simulate(self, actions: List[ScrollAction]) -> Box:
        """
        Apply actions to a copy of the layout and report where the target lands.

        The scene itself is left untouched, so the same actions can be
        rendered afterwards.

        Args:
            actions: Actions computed against this scene's layout

        Returns:
            The target's box after scrolling
        """
        layout = self.layout.copy()
        layout.apply_scroll_actions([
            ScrollAction(container=layout[action.container.id], top=action.top, left=action.left)
            for action in actions
        ])
        return layout.box_of(layout[self.target.id])


def load_scene(source: Union[str, Path, dict]) -> Scene:
    """
    Load a scene from a JSON file path or an already-parsed dictionary.

    Args:
        source: Path to a JSON scene file, or the scene dictionary

    Returns:
        Scene with its layout, target node and raw options
    """
    if isinstance(source, dict):
        data = source
    else:
        try:
            with open(source, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SceneError(f"Invalid scene JSON in {source}: {e}") from e
        except OSError as e:
            raise SceneError(f"Cannot read scene {source}: {e}") from e
        if not isinstance(data, dict):
            raise SceneError(f"Scene in {source} must be a JSON object")

    layout = StaticLayout.from_dict(data)
    if "target" not in data:
        raise SceneError("Scene has no 'target'")
    return Scene(
        layout=layout,
        target=layout[str(data["target"])],
        options=dict(data.get("options", {})),
    )
