"""Data models for scroll-into-view computations."""
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Alignment(Enum):
    """Logical position the target should take inside a frame on one axis."""
    START = "start"
    CENTER = "center"
    END = "end"
    NEAREST = "nearest"  # Minimal scroll, no-op when already visible


class ScrollMode(Enum):
    """Whether scrolling may be skipped when the target is already visible."""
    ALWAYS = "always"
    IF_NEEDED = "if-needed"


class Overflow(Enum):
    """Overflow classification of a container on one axis."""
    VISIBLE = "visible"
    CLIP = "clip"
    HIDDEN = "hidden"
    AUTO = "auto"
    SCROLL = "scroll"

    @classmethod
    def from_css(cls, value: str) -> "Overflow":
        """Map a CSS overflow keyword; unknown keywords count as scrollable."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.AUTO


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle in the caller's coordinate space."""
    top: float
    left: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width

    def translated(self, dx: float = 0, dy: float = 0) -> "Box":
        """Return a copy moved by (dx, dy)."""
        return Box(top=self.top + dy, left=self.left + dx, width=self.width, height=self.height)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "top": self.top,
            "left": self.left,
            "right": self.right,
            "bottom": self.bottom,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Box":
        """
        Create from dictionary.

        Accepts either width/height or right/bottom for the far edges.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a box mapping, got {data!r}")
        top = data.get("top", 0)
        left = data.get("left", 0)
        width = data["width"] if "width" in data else data.get("right", left) - left
        height = data["height"] if "height" in data else data.get("bottom", top) - top
        return cls(top=top, left=left, width=width, height=height)


@dataclass(frozen=True)
class Borders:
    """Border thickness of a container, in the same units as its box."""
    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    @classmethod
    def from_dict(cls, data: dict) -> "Borders":
        return cls(
            top=data.get("top", 0),
            right=data.get("right", 0),
            bottom=data.get("bottom", 0),
            left=data.get("left", 0),
        )


@dataclass(frozen=True)
class Size:
    width: float = 0
    height: float = 0

    @classmethod
    def from_value(cls, value: Any) -> "Size":
        """Create from a {width, height} mapping or a [width, height] pair."""
        if isinstance(value, dict):
            return cls(width=value.get("width", 0), height=value.get("height", 0))
        try:
            width, height = value
        except (TypeError, ValueError):
            raise ValueError(f"Expected a size pair or mapping, got {value!r}") from None
        return cls(width=width, height=height)


@dataclass(frozen=True)
class ScrollOffset:
    """Current scroll position of a container."""
    top: float = 0
    left: float = 0


@dataclass(frozen=True)
class ViewportMetrics:
    """Dimensions and scroll position of the top-level scrolling surface."""
    width: float
    height: float
    scroll_x: float = 0
    scroll_y: float = 0


@dataclass(frozen=True)
class ScrollAction:
    """Absolute scroll offsets a container should be set to."""
    container: Any
    top: float
    left: float

    def to_dict(self, container_id: Any = None) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "container": container_id if container_id is not None else str(self.container),
            "top": self.top,
            "left": self.left,
        }
