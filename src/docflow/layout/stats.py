"""
Module: docflow.layout.stats

Purpose:
    Read-only introspection over paginated output: where a block lands,
    how full a page is, and whether a drop would overflow. Everything is
    computed from height_of() and paginate() so editor previews can't
    drift from the pages the viewer renders.

Key Functions:
    - page_start_index(): Global index of a page's first block
    - page_for_block(): Page a global block index lands on
    - used_height() / remaining_height(): Page fill
    - would_overflow(): Drag-and-drop placement preview
    - pagination_stats(): Whole-document diagnostics

Dependencies:
    - docflow.layout.paginator: paginate
    - docflow.layout.geometry: height_of

Used By:
    - Editor drag affordances and progress indicator
    - docflow.layout.visualizer
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from docflow.core.models.blocks import Block
from .config import DEFAULT_LAYOUT_CONFIG, LayoutConfig
from .geometry import height_of
from .models import PageStats, PaginationStats
from .paginator import paginate


def page_start_index(pages: Optional[Sequence[Sequence[Block]]], page_index: int) -> int:
    """
    Global index of the first block on a page.

    Args:
        pages: Output of paginate()
        page_index: Zero-based page index

    Returns:
        Sum of block counts on all earlier pages (0 for a negative index)
    """
    if not pages or page_index < 0:
        return 0
    return sum(len(page) for page in pages[:page_index])


def page_for_block(
    blocks: Optional[Sequence[Block]],
    global_block_index: int,
    usable_height: Optional[int] = None,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> int:
    """
    Page index containing the block at a global index.

    The global index counts placed blocks only (page breaks are not
    counted). Out-of-range indices clamp to the last page.

    Args:
        blocks: Blocks in document order
        global_block_index: Index across all pages
        usable_height: Page capacity (default: config.usable_height_default)
        config: Layout configuration

    Returns:
        Zero-based page index
    """
    pages = paginate(blocks, usable_height, config)
    start = 0
    for index, page in enumerate(pages):
        if global_block_index < start + len(page):
            return index
        start += len(page)
    return len(pages) - 1


def used_height(
    page_blocks: Optional[Sequence[Block]],
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> int:
    """Total height of the blocks on one page."""
    return sum(height_of(block, config) for block in page_blocks or ())


def remaining_height(
    page_blocks: Optional[Sequence[Block]],
    usable_height: Optional[int] = None,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> int:
    """Capacity left on a page, floored at zero."""
    if usable_height is None:
        usable_height = config.usable_height_default
    return max(0, usable_height - used_height(page_blocks, config))


def would_overflow(
    page_blocks: Optional[Sequence[Block]],
    candidate: Block,
    usable_height: Optional[int] = None,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> bool:
    """
    Check whether appending a block would overflow the page.

    Matches the paginator's own break test for a non-empty page, so a
    drop the editor previews as fitting stays on that page after the
    edit is committed.

    Args:
        page_blocks: Blocks currently on the page
        candidate: Block being dragged
        usable_height: Page capacity (default: config.usable_height_default)
        config: Layout configuration

    Returns:
        True if the candidate doesn't fit in the remaining space
    """
    return height_of(candidate, config) > remaining_height(page_blocks, usable_height, config)


def pagination_stats(
    blocks: Optional[Sequence[Block]],
    usable_height: Optional[int] = None,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> PaginationStats:
    """
    Compute per-page and average utilization.

    Args:
        blocks: Blocks in document order
        usable_height: Page capacity (default: config.usable_height_default)
        config: Layout configuration

    Returns:
        PaginationStats (total_blocks counts the input, page breaks included)

    Example:
        >>> stats = pagination_stats([FixedBlock(BlockType.SECTION)] * 11, 734)
        >>> stats.total_pages, stats.pages[0].utilization_percent
        (2, 95)
    """
    if usable_height is None:
        usable_height = config.usable_height_default
    if usable_height <= 0:
        raise ValueError(f"usable_height must be positive: {usable_height}")
    blocks = list(blocks or ())
    pages = paginate(blocks, usable_height, config)

    page_stats = []
    for index, page in enumerate(pages):
        used = used_height(page, config)
        page_stats.append(PageStats(
            page_index=index,
            block_count=len(page),
            used_height=used,
            remaining_height=remaining_height(page, usable_height, config),
            utilization_percent=_round_percent(used / usable_height * 100),
            usable_height=usable_height,
        ))

    average = sum(p.utilization_percent for p in page_stats) / len(page_stats)

    return PaginationStats(
        total_pages=len(pages),
        total_blocks=len(blocks),
        usable_height_per_page=usable_height,
        pages=tuple(page_stats),
        average_utilization=_round_percent(average),
    )


def _round_percent(value: float) -> int:
    """Round half up, so 12.5 -> 13 on every surface."""
    return math.floor(value + 0.5)
