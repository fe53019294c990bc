"""
Module: docflow.layout.paginator

Purpose:
    Distribute an ordered block list across fixed-size pages.
    Only rules: a block that doesn't fit starts a new page, and a page
    break always starts a new page.

Key Functions:
    - paginate(): Main pagination function
    - page_count(): Number of pages a block list needs
    - paginate_document(): Resolve usable height from template flags, then paginate

Algorithm:
    Single left-to-right pass:
    1. Page breaks close the current page (even an empty one) and are dropped
    2. Otherwise, if the block doesn't fit and the page already has
       content, close the page
    3. Append the block to the current page
    4. The last page is always kept, so there is at least one page

    An oversized block lands alone on its own page; it is never split.

Dependencies:
    - docflow.layout.geometry: height_of, usable_height
    - docflow.layout.config: LayoutConfig

Used By:
    - docflow.layout.stats: Introspection helpers
    - Editor and viewer surfaces
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Union

from docflow.core.models.blocks import Block, PageBreakBlock, UnknownBlock, block_from_dict
from docflow.core.models.document import DocumentTemplate
from .config import DEFAULT_LAYOUT_CONFIG, LayoutConfig
from .geometry import height_of, usable_height as compute_usable_height

logger = logging.getLogger(__name__)

Page = List[Block]


def paginate(
    blocks: Optional[Iterable[Union[Block, dict[str, Any]]]],
    usable_height: Optional[int] = None,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> List[Page]:
    """
    Arrange blocks onto pages in input order.

    Rules:
    1. A PageBreakBlock closes the current page and opens a new one.
       The break itself is never placed on a page.
    2. A block that would push the page past usable_height starts a new
       page, unless the current page is still empty.
    3. The final page is always emitted, even when empty.

    Args:
        blocks: Blocks or their persisted mappings, in document order
            (None is treated as empty)
        usable_height: Page capacity in pixels (default: config.usable_height_default)
        config: Layout configuration

    Returns:
        List of pages, each a list of blocks. Never empty.

    Example:
        >>> paginate([])
        [[]]
    """
    if usable_height is None:
        usable_height = config.usable_height_default

    pages: List[Page] = []
    current_page: Page = []
    current_height = 0
    block_count = 0
    unknown_types: set[str] = set()

    for block in blocks or ():
        block_count += 1
        # Persisted mappings are sized and routed as their typed variant,
        # but pages keep the caller's original object
        typed = block_from_dict(block) if isinstance(block, dict) else block

        if isinstance(typed, PageBreakBlock):
            pages.append(current_page)
            current_page = []
            current_height = 0
            continue

        if isinstance(typed, UnknownBlock):
            unknown_types.add(typed.tag)

        block_height = height_of(typed, config)

        # The non-empty check keeps an oversized block from opening empty pages forever
        if current_height + block_height > usable_height and current_page:
            pages.append(current_page)
            current_page = []
            current_height = 0

        current_page.append(block)
        current_height += block_height

    pages.append(current_page)

    if unknown_types:
        logger.warning(
            f"Unknown block types {sorted(unknown_types)} paginated with "
            f"fallback height {config.unknown_block_height}px",
            extra={"unknown_block_types": sorted(unknown_types)},
        )
    logger.debug(f"Paginated {block_count} blocks onto {len(pages)} pages")

    return pages


def page_count(
    blocks: Optional[Iterable[Union[Block, dict[str, Any]]]],
    usable_height: Optional[int] = None,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> int:
    """Number of pages paginate() produces for these blocks."""
    return len(paginate(blocks, usable_height, config))


def paginate_document(
    document: DocumentTemplate,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> List[Page]:
    """
    Paginate a template using the capacity its header/footer flags allow.

    This is the exact two-step call both the editor and the viewer make.

    Args:
        document: Block list with template flags
        config: Layout configuration

    Returns:
        List of pages, as paginate()
    """
    capacity = compute_usable_height(document.has_header, document.has_footer, config)
    return paginate(document.blocks, capacity, config)
