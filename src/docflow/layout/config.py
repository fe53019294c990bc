"""
Module: docflow.layout.config

Purpose:
    Configuration for the page geometry model.
    Defines page dimensions, margins, header/footer bands, the safety
    margin, fixed block heights and the typography constants used to
    estimate variable-height blocks.

Key Classes:
    - LayoutConfig: Immutable page geometry configuration
    - TypographyConfig: Text metrics for paragraph estimation
    - DropZoneConfig: Editor drag-and-drop affordance sizing

Key Functions:
    - load_layout_config(): Build a LayoutConfig from a JSON file

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - docflow.layout.geometry: Block heights and usable height
    - docflow.layout.paginator: Page arrangement
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field, fields
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from docflow.core.models.blocks import BlockType, FIXED_HEIGHT_TYPES


# US Letter at the CSS reference DPI
DEFAULT_PAGE_WIDTH_PX = 816
DEFAULT_PAGE_HEIGHT_PX = 1056
DEFAULT_DPI = 96

# Used for any tag outside BlockType
DEFAULT_UNKNOWN_BLOCK_HEIGHT = 50

DEFAULT_FIXED_BLOCK_HEIGHTS: Mapping[str, int] = MappingProxyType({
    BlockType.SECTION.value: 70,
    BlockType.HEADING.value: 50,
    BlockType.SIGNATURE_FIELD.value: 90,
    BlockType.SIGNATURE_BLOCK.value: 65,
    BlockType.INITIALS_FIELD.value: 80,
    BlockType.DATE_FIELD.value: 70,
    BlockType.TEXT_INPUT_FIELD.value: 75,
    BlockType.CHECKBOX_FIELD.value: 45,
    BlockType.ACKNOWLEDGMENT.value: 60,
    BlockType.DROPDOWN_FIELD.value: 75,
    BlockType.DIVIDER.value: 49,
    BlockType.PAGE_BREAK_MARKER.value: 40,
})


@dataclass(frozen=True)
class TypographyConfig:
    """
    Text metrics used to estimate paragraph height.

    Attributes:
        chars_per_line: Average characters that fit on one rendered line
        line_height: Pixel height of one rendered line
        paragraph_base_height: Minimum paragraph height (empty or one short line)
        base_font_size: Body font size in pixels
    """

    chars_per_line: int = 100
    line_height: int = 16
    paragraph_base_height: int = 24
    base_font_size: int = 13

    def __post_init__(self) -> None:
        if self.chars_per_line <= 0:
            raise ValueError(f"chars_per_line must be positive: {self.chars_per_line}")
        if self.line_height <= 0:
            raise ValueError(f"line_height must be positive: {self.line_height}")
        if self.paragraph_base_height < 0:
            raise ValueError(
                f"paragraph_base_height must be >= 0: {self.paragraph_base_height}"
            )


@dataclass(frozen=True)
class DropZoneConfig:
    """Sizes (px) and transition time (ms) of editor drop targets."""

    resting_size: int = 8
    active_size: int = 40
    transition_duration: int = 150


@dataclass(frozen=True)
class LayoutConfig:
    """
    Page geometry configuration (immutable).

    Construct once at startup and pass to every geometry and pagination
    call. Editor and viewer must share the same instance (or equal
    instances) to produce identical page boundaries.

    Attributes:
        page_width: Page width in pixels
        page_height: Page height in pixels
        dpi: Reference dots per inch for the pixel values
        page_margin: Margin applied to top and bottom (and sides) in pixels
        header_height: Band reserved at the top when the template has a header
        footer_height: Band reserved at the bottom when the template has a footer
        safety_margin: Fraction of the raw content height actually filled
        fixed_block_heights: Tag -> height for every fixed-height block type
        typography: Text metrics for paragraph estimation
        drop_zone: Editor drop target sizing
        unknown_block_height: Height used for tags outside BlockType

    Example:
        >>> config = LayoutConfig()
        >>> config.usable_height_default
        734  # floor((1056 - 96 - 56 - 40) * 0.85)
    """

    # Page dimensions
    page_width: int = DEFAULT_PAGE_WIDTH_PX
    page_height: int = DEFAULT_PAGE_HEIGHT_PX
    dpi: int = DEFAULT_DPI

    # Margins and bands
    page_margin: int = 48
    header_height: int = 56
    footer_height: int = 40
    safety_margin: float = 0.85

    # Block sizing
    fixed_block_heights: Mapping[str, int] = field(
        default_factory=lambda: DEFAULT_FIXED_BLOCK_HEIGHTS
    )
    typography: TypographyConfig = field(default_factory=TypographyConfig)
    drop_zone: DropZoneConfig = field(default_factory=DropZoneConfig)
    unknown_block_height: int = DEFAULT_UNKNOWN_BLOCK_HEIGHT

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.page_margin < 0:
            raise ValueError(f"page_margin must be >= 0: {self.page_margin}")
        if self.header_height < 0 or self.footer_height < 0:
            raise ValueError("header_height and footer_height must be >= 0")
        if not 0 < self.safety_margin <= 1:
            raise ValueError(f"safety_margin must be in (0, 1]: {self.safety_margin}")
        if self.content_height <= 0:
            raise ValueError("Margins, header and footer exceed page height")
        if self.unknown_block_height < 0:
            raise ValueError(
                f"unknown_block_height must be >= 0: {self.unknown_block_height}"
            )

        missing = sorted(t.value for t in FIXED_HEIGHT_TYPES if t.value not in self.fixed_block_heights)
        if missing:
            raise ValueError(f"fixed_block_heights missing block types: {missing}")
        negative = sorted(k for k, v in self.fixed_block_heights.items() if v < 0)
        if negative:
            raise ValueError(f"fixed_block_heights must be >= 0: {negative}")

        # Freeze a private copy so callers can't mutate heights after validation
        object.__setattr__(
            self, "fixed_block_heights", MappingProxyType(dict(self.fixed_block_heights))
        )

    @property
    def content_height(self) -> int:
        """Raw content height with header and footer, before the safety margin."""
        return self.page_height - 2 * self.page_margin - self.header_height - self.footer_height

    @property
    def usable_height_default(self) -> int:
        """Usable height for the default template (header and footer present)."""
        return math.floor(self.content_height * self.safety_margin)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LayoutConfig:
        """
        Build a config from a mapping of overrides.

        Keys match the dataclass fields. "typography" and "drop_zone" take
        nested mappings; "fixed_block_heights" is merged over the defaults
        so a file only needs to list the heights it changes.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown layout config keys: {unknown}")

        kwargs = dict(data)
        if "typography" in kwargs:
            kwargs["typography"] = TypographyConfig(**kwargs["typography"])
        if "drop_zone" in kwargs:
            kwargs["drop_zone"] = DropZoneConfig(**kwargs["drop_zone"])
        if "fixed_block_heights" in kwargs:
            kwargs["fixed_block_heights"] = {
                **DEFAULT_FIXED_BLOCK_HEIGHTS,
                **kwargs["fixed_block_heights"],
            }
        return cls(**kwargs)


def load_layout_config(path: Path) -> LayoutConfig:
    """
    Load a LayoutConfig from a JSON file of overrides.

    Args:
        path: Path to a JSON object; see LayoutConfig.from_dict

    Returns:
        Validated LayoutConfig

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file content is not a valid configuration
    """
    if not path.exists():
        raise FileNotFoundError(f"Layout config not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Layout config must be a JSON object: {path}")
    return LayoutConfig.from_dict(data)


DEFAULT_LAYOUT_CONFIG = LayoutConfig()
