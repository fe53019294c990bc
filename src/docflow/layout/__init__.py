"""
Module: docflow.layout

Purpose:
    Page geometry and pagination for document templates.
    Converts an ordered block list into pages that the editor and the
    viewer render identically.

Key Functions:
    - height_of(): Height of a single block
    - usable_height(): Page capacity for header/footer flags
    - paginate(): Arrange blocks onto pages
    - pagination_stats(): Per-page utilization

Key Classes:
    - LayoutConfig: Page geometry configuration
    - PageStats / PaginationStats: Utilization diagnostics

Dependencies:
    - PIL: Page map visualization
    - docflow.core.models: Block variants, DocumentTemplate

Used By:
    - Template editor surface
    - Signing viewer surface
"""

from .config import (
    LayoutConfig,
    TypographyConfig,
    DropZoneConfig,
    DEFAULT_LAYOUT_CONFIG,
    DEFAULT_FIXED_BLOCK_HEIGHTS,
    load_layout_config,
)
from .geometry import (
    height_of,
    paragraph_height,
    bullet_list_height,
    usable_height,
    drop_zone_size,
)
from .models import PageStats, PaginationStats
from .paginator import paginate, page_count, paginate_document
from .stats import (
    page_start_index,
    page_for_block,
    used_height,
    remaining_height,
    would_overflow,
    pagination_stats,
)
from .visualizer import render_page_map, save_page_map

__all__ = [
    # Config
    "LayoutConfig",
    "TypographyConfig",
    "DropZoneConfig",
    "DEFAULT_LAYOUT_CONFIG",
    "DEFAULT_FIXED_BLOCK_HEIGHTS",
    "load_layout_config",
    # Geometry
    "height_of",
    "paragraph_height",
    "bullet_list_height",
    "usable_height",
    "drop_zone_size",
    # Models
    "PageStats",
    "PaginationStats",
    # Pagination
    "paginate",
    "page_count",
    "paginate_document",
    # Introspection
    "page_start_index",
    "page_for_block",
    "used_height",
    "remaining_height",
    "would_overflow",
    "pagination_stats",
    # Debug
    "render_page_map",
    "save_page_map",
]
