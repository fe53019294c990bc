"""
Module: docflow.layout.models

Purpose:
    Data models for pagination diagnostics.
    Immutable dataclasses describing how full each page is.

Key Classes:
    - PageStats: Usage figures for one page
    - PaginationStats: Usage figures for a whole document

Dependencies:
    - dataclasses (std)

Used By:
    - docflow.layout.stats: pagination_stats()
    - docflow.layout.visualizer: Page map labels
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PageStats:
    """
    Usage of a single page.

    Attributes:
        page_index: Page number (0-indexed)
        block_count: Blocks placed on the page
        used_height: Sum of block heights (px)
        remaining_height: Capacity left, never negative (px)
        utilization_percent: used / usable, rounded to a whole percent
        usable_height: Capacity the page was filled against (px)

    Example:
        >>> stats = PageStats(0, block_count=3, used_height=367,
        ...                   remaining_height=367, utilization_percent=50,
        ...                   usable_height=734)
        >>> stats.is_overflowing
        False
    """

    page_index: int
    block_count: int
    used_height: int
    remaining_height: int
    utilization_percent: int
    usable_height: int

    @property
    def is_overflowing(self) -> bool:
        """True when a single oversized block pushed usage past capacity."""
        return self.used_height > self.usable_height

    def to_dict(self) -> dict[str, Any]:
        return {
            "pageIndex": self.page_index,
            "blockCount": self.block_count,
            "usedHeight": self.used_height,
            "remainingHeight": self.remaining_height,
            "utilization": self.utilization_percent,
        }


@dataclass(frozen=True)
class PaginationStats:
    """
    Read-only usage summary for a paginated document.

    Attributes:
        total_pages: Number of pages
        total_blocks: Blocks in the input, page breaks included
        usable_height_per_page: Capacity each page was filled against
        pages: Per-page figures in page order
        average_utilization: Mean of per-page percentages, rounded
    """

    total_pages: int
    total_blocks: int
    usable_height_per_page: int
    pages: tuple[PageStats, ...]
    average_utilization: int

    @property
    def overflowing_pages(self) -> tuple[int, ...]:
        """Indices of pages whose content exceeds the usable height."""
        return tuple(p.page_index for p in self.pages if p.is_overflowing)

    def to_dict(self) -> dict[str, Any]:
        """Camel-cased shape consumed by the editor's progress indicator."""
        return {
            "totalPages": self.total_pages,
            "totalBlocks": self.total_blocks,
            "usableHeightPerPage": self.usable_height_per_page,
            "pages": [p.to_dict() for p in self.pages],
            "averageUtilization": self.average_utilization,
        }
