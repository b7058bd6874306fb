"""Configuration and option handling for scrollwise."""

import json
import logging
from dataclasses import dataclass, asdict, fields
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Type

from .models import Alignment, ScrollMode

logger = logging.getLogger(__name__)

Boundary = Callable[[Any], bool]

# Keys accepted from callers used to the DOM option names
_OPTION_ALIASES = {
    "scrollMode": "scroll_mode",
    "skipOverflowHiddenElements": "skip_overflow_hidden_elements",
}


class ScrollConfigError(ValueError):
    """Raised when scroll options hold a value the computation cannot use."""


def _coerce_enum(enum_cls: Type[Enum], value: Any, field_name: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        accepted = ", ".join(repr(member.value) for member in enum_cls)
        raise ScrollConfigError(
            f"Invalid value {value!r} for '{field_name}'; expected one of {accepted}"
        ) from None


@dataclass(frozen=True)
class ScrollOptions:
    """
    Validated options for a single scroll computation.

    String values are accepted for the enum fields and converted on
    construction, so a ScrollOptions instance always holds valid enums.
    """

    block: Alignment = Alignment.NEAREST
    inline: Alignment = Alignment.NEAREST
    scroll_mode: ScrollMode = ScrollMode.ALWAYS
    boundary: Optional[Boundary] = None
    skip_overflow_hidden_elements: bool = False

    def __post_init__(self) -> None:
        # Frozen dataclass, so normalised values go through object.__setattr__
        object.__setattr__(self, "block", _coerce_enum(Alignment, self.block, "block"))
        object.__setattr__(self, "inline", _coerce_enum(Alignment, self.inline, "inline"))
        object.__setattr__(
            self, "scroll_mode", _coerce_enum(ScrollMode, self.scroll_mode, "scroll_mode")
        )
        if self.boundary is not None and not callable(self.boundary):
            raise ScrollConfigError(
                f"'boundary' must be a callable or None, got {type(self.boundary).__name__}"
            )
        if not isinstance(self.skip_overflow_hidden_elements, bool):
            raise ScrollConfigError(
                "'skip_overflow_hidden_elements' must be a bool, "
                f"got {self.skip_overflow_hidden_elements!r}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ScrollOptions":
        """Build options from a mapping, accepting snake_case or camelCase keys."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ScrollConfigError(f"Unknown scroll option '{key}'")
            if value is None and name != "boundary":
                # None means "use the default", as with an omitted key
                continue
            values[name] = value
        return cls(**values)

    @classmethod
    def resolve(cls, options: Any = None, **overrides: Any) -> "ScrollOptions":
        """
        Normalise whatever a caller passed as options.

        Args:
            options: A ScrollOptions, a mapping of option values, or None
            **overrides: Individual option values applied on top

        Returns:
            A validated ScrollOptions
        """
        if options is None:
            base: dict = {}
        elif isinstance(options, ScrollOptions):
            if not overrides:
                return options
            base = {f.name: getattr(options, f.name) for f in fields(cls)}
        elif isinstance(options, Mapping):
            base = dict(options)
        else:
            raise ScrollConfigError(
                f"Options must be ScrollOptions, a mapping or None, got {type(options).__name__}"
            )
        base.update(overrides)
        return cls.from_mapping(base)

    def to_dict(self) -> dict:
        """Serializable view of the options (the boundary is omitted)."""
        return {
            "block": self.block.value,
            "inline": self.inline.value,
            "scroll_mode": self.scroll_mode.value,
            "skip_overflow_hidden_elements": self.skip_overflow_hidden_elements,
        }


@dataclass
class Config:
    """User defaults for scroll computations."""

    block: str = Alignment.NEAREST.value
    inline: str = Alignment.NEAREST.value
    scroll_mode: str = ScrollMode.ALWAYS.value
    skip_overflow_hidden_elements: bool = False

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the config file."""
        config_dir = Path.home() / ".config" / "scrollwise"
        return config_dir / "config.json"

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create default."""
        config_path = cls.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    data = json.load(f)
                config = cls(**data)
                # Surface bad values now rather than on first use
                config.to_options()
                return config
            except (json.JSONDecodeError, TypeError, ValueError) as e:
                logger.warning(f"Could not load config from {config_path}: {e}. Using defaults.")
                return cls.default()
        else:
            config = cls.default()
            try:
                config.save()
            except OSError as e:
                logger.warning(f"Could not write default config to {config_path}: {e}")
            return config

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls()

    def save(self) -> None:
        """Save configuration to file."""
        config_path = self.get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w') as f:
            json.dump(asdict(self), f, indent=2)

    def to_options(self, **overrides: Any) -> ScrollOptions:
        """Build validated ScrollOptions from these defaults plus overrides."""
        return ScrollOptions.resolve(asdict(self), **overrides)
