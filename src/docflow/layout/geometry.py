"""
Module: docflow.layout.geometry

Purpose:
    Pure sizing functions for the page geometry model. Every height the
    paginator and the editor affordances use comes from here, so the
    editor and the viewer can never disagree about where a page ends.

Key Functions:
    - height_of(): Height of any single block
    - paragraph_height(): Estimated height of paragraph text
    - bullet_list_height(): Height of a bullet list by item count
    - usable_height(): Content capacity of a page for given header/footer flags
    - drop_zone_size(): Editor drop target height

Dependencies:
    - docflow.layout.config: LayoutConfig
    - docflow.core.models: Block variants

Used By:
    - docflow.layout.paginator
    - docflow.layout.stats
    - docflow.layout.visualizer
"""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence, Union

from docflow.core.models.blocks import (
    Block,
    BulletListBlock,
    FixedBlock,
    PageBreakBlock,
    ParagraphBlock,
    UnknownBlock,
    block_from_dict,
)
from .config import DEFAULT_LAYOUT_CONFIG, LayoutConfig

# Paragraph vertical padding added to the line estimate
PARAGRAPH_PADDING_PX = 12

# Bullet list container padding and per-item row height
BULLET_LIST_BASE_PX = 24
BULLET_ITEM_HEIGHT_PX = 28


def paragraph_height(content: Optional[str], config: LayoutConfig = DEFAULT_LAYOUT_CONFIG) -> int:
    """
    Estimate paragraph height from its text length.

    Args:
        content: Paragraph text (None is treated as empty)
        config: Layout configuration

    Returns:
        max(paragraph_base_height, ceil(len / chars_per_line) * line_height + 12)

    Example:
        >>> paragraph_height("x" * 350)
        76  # 4 lines * 16 + 12
    """
    typo = config.typography
    lines = math.ceil(len(content or "") / typo.chars_per_line)
    return max(typo.paragraph_base_height, lines * typo.line_height + PARAGRAPH_PADDING_PX)


def bullet_list_height(items: Optional[Sequence[str]]) -> int:
    """Height of a bullet list: container padding plus one row per item."""
    return BULLET_LIST_BASE_PX + len(items or ()) * BULLET_ITEM_HEIGHT_PX


def height_of(
    block: Union[Block, dict[str, Any]],
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> int:
    """
    Height in pixels of a single block.

    Total over all block variants. Tags outside BlockType get
    config.unknown_block_height instead of raising, so one malformed
    block never aborts pagination.

    Args:
        block: Block variant, or its persisted mapping
        config: Layout configuration

    Returns:
        Height in pixels (0 for page breaks)
    """
    if isinstance(block, dict):
        block = block_from_dict(block)

    if isinstance(block, PageBreakBlock):
        return 0
    if isinstance(block, ParagraphBlock):
        return paragraph_height(block.content, config)
    if isinstance(block, BulletListBlock):
        return bullet_list_height(block.items)
    if isinstance(block, FixedBlock):
        return config.fixed_block_heights.get(block.tag, config.unknown_block_height)
    if isinstance(block, UnknownBlock):
        return config.unknown_block_height
    raise TypeError(f"Not a block: {block!r}")


def usable_height(
    has_header: Optional[bool] = None,
    has_footer: Optional[bool] = None,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> int:
    """
    Vertical space available for blocks on one page.

    floor((page_height - 2*page_margin - header? - footer?) * safety_margin)

    With both flags omitted this is the precomputed default (header and
    footer present). A single omitted flag counts as present.

    Args:
        has_header: Whether the page template reserves a header band
        has_footer: Whether the page template reserves a footer band
        config: Layout configuration

    Returns:
        Usable content height in pixels
    """
    if has_header is None and has_footer is None:
        return config.usable_height_default

    header = config.header_height if has_header is None or has_header else 0
    footer = config.footer_height if has_footer is None or has_footer else 0
    raw = config.page_height - 2 * config.page_margin - header - footer
    return math.floor(raw * config.safety_margin)


def drop_zone_size(active: bool, config: LayoutConfig = DEFAULT_LAYOUT_CONFIG) -> int:
    """Height of an editor drop target, expanded while a drag hovers it."""
    zone = config.drop_zone
    return zone.active_size if active else zone.resting_size
