"""Configuration dataclasses for row layout and rendering."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class OverflowPolicy(str, Enum):
    """What the width allocator does when fixed widths exceed the row width."""

    CLAMP = "clamp"
    ERROR = "error"


class TruncationPolicy(str, Enum):
    """How non-wrapping fields longer than their column are shortened."""

    CLIP = "clip"
    ELLIPSIS = "ellipsis"


@dataclass(frozen=True)
class LayoutConfig:
    """Options controlling width allocation."""

    overflow: OverflowPolicy = OverflowPolicy.CLAMP


@dataclass(frozen=True)
class RenderConfig:
    """Options controlling how field values become column text."""

    truncation: TruncationPolicy = TruncationPolicy.CLIP
    ellipsis: str = "…"
    strict_values: bool = False


@dataclass(frozen=True)
class CLIConfig:
    """Defaults for the ``rowfmt`` command line."""

    width: Optional[int] = None
    frame: bool = False


@dataclass(frozen=True)
class AppConfig:
    """Top-level configuration aggregate loaded from TOML."""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    cli: CLIConfig = field(default_factory=CLIConfig)
