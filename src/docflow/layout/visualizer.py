"""
Module: docflow.layout.visualizer

Purpose:
    Debug visualization for pagination. Draws every page side by side
    with one box per block, sized by height_of(), so page breaks can be
    checked by eye when the editor and viewer are suspected to disagree.

Key Functions:
    - render_page_map(): Create page map image
    - save_page_map(): Save page map to disk

Dependencies:
    - PIL: Image drawing
    - docflow.layout.geometry: height_of

Used By:
    - Manual debugging of template layouts
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from docflow.core.models.blocks import (
    Block,
    BulletListBlock,
    FixedBlock,
    ParagraphBlock,
    UnknownBlock,
)
from .config import DEFAULT_LAYOUT_CONFIG, LayoutConfig
from .geometry import height_of
from .stats import used_height

logger = logging.getLogger(__name__)

# Visualization constants
COLORS = {
    "fixed": (59, 130, 246, 160),       # Blue - sections, headings, fields
    "paragraph": (34, 197, 94, 160),    # Green - paragraphs
    "bullet_list": (249, 115, 22, 160), # Orange - bullet lists
    "unknown": (239, 68, 68, 160),      # Red - unknown tags
}

PAGE_BG_COLOR = (255, 255, 255, 255)
PAGE_BORDER_COLOR = (107, 114, 128, 255)
OVERFLOW_BORDER_COLOR = (220, 38, 38, 255)
CAPACITY_LINE_COLOR = (156, 163, 175, 255)
CANVAS_BG_COLOR = (229, 231, 235, 255)
LABEL_TEXT_COLOR = (17, 24, 39, 255)
PAGE_GAP = 24
BOX_LINE_WIDTH = 2
FONT_SIZE = 12


def render_page_map(
    pages: Sequence[Sequence[Block]],
    usable_height: Optional[int] = None,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
    scale: float = 0.25,
) -> Image.Image:
    """
    Create a page map with one column per page.

    Each page is drawn at page_width x page_height (scaled), with blocks
    stacked from the top margin (below the header band). A dashed line
    marks where usable height ends; pages whose content runs past it
    get a red outline.

    Args:
        pages: Output of paginate()
        usable_height: Capacity the pages were built against
        config: Layout configuration
        scale: Pixel scale applied to page geometry

    Returns:
        New RGB image

    Example:
        >>> img = render_page_map(paginate(blocks))
        >>> img.save("page_map.png")
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive: {scale}")
    if usable_height is None:
        usable_height = config.usable_height_default

    page_w = max(1, round(config.page_width * scale))
    page_h = max(1, round(config.page_height * scale))
    gap = round(PAGE_GAP * scale) or 1
    page_count = max(1, len(pages))

    canvas = Image.new(
        "RGBA",
        (gap + page_count * (page_w + gap), page_h + 2 * gap),
        CANVAS_BG_COLOR,
    )
    overlay = Image.new("RGBA", canvas.size, (255, 255, 255, 0))
    draw = ImageDraw.Draw(canvas)
    overlay_draw = ImageDraw.Draw(overlay)

    try:
        font = ImageFont.truetype("Arial.ttf", FONT_SIZE)
    except (IOError, OSError):
        font = ImageFont.load_default()

    content_top = round((config.page_margin + config.header_height) * scale)
    content_left = round(config.page_margin * scale)
    content_right = page_w - content_left

    for page_index, page in enumerate(pages):
        x0 = gap + page_index * (page_w + gap)
        y0 = gap
        overflowing = used_height(page, config) > usable_height
        border = OVERFLOW_BORDER_COLOR if overflowing else PAGE_BORDER_COLOR
        draw.rectangle(
            (x0, y0, x0 + page_w - 1, y0 + page_h - 1),
            fill=PAGE_BG_COLOR,
            outline=border,
            width=BOX_LINE_WIDTH,
        )

        y = y0 + content_top
        for block in page:
            block_h = max(1, round(height_of(block, config) * scale))
            _draw_block_box(
                overlay_draw,
                (x0 + content_left, y, x0 + content_right, y + block_h - 1),
                _block_color(block),
            )
            y += block_h

        capacity_y = y0 + content_top + round(usable_height * scale)
        _draw_dashed_line(draw, x0 + 1, x0 + page_w - 2, capacity_y, CAPACITY_LINE_COLOR)
        draw.text((x0 + 4, y0 + 2), f"p{page_index + 1}", fill=LABEL_TEXT_COLOR, font=font)

    canvas = Image.alpha_composite(canvas, overlay)
    return canvas.convert("RGB")


def _block_color(block: Block) -> Tuple[int, int, int, int]:
    if isinstance(block, ParagraphBlock):
        return COLORS["paragraph"]
    if isinstance(block, BulletListBlock):
        return COLORS["bullet_list"]
    if isinstance(block, UnknownBlock):
        return COLORS["unknown"]
    if isinstance(block, FixedBlock):
        return COLORS["fixed"]
    return COLORS["unknown"]


def _draw_block_box(
    draw: ImageDraw.ImageDraw,
    bbox: Tuple[int, int, int, int],
    color: Tuple[int, int, int, int],
) -> None:
    """Draw a translucent filled box with a solid outline."""
    fill = color[:3] + (60,)
    draw.rectangle(bbox, fill=fill, outline=color, width=1)


def _draw_dashed_line(
    draw: ImageDraw.ImageDraw,
    x_start: int,
    x_end: int,
    y: int,
    color: Tuple[int, int, int, int],
    dash: int = 6,
) -> None:
    x = x_start
    while x < x_end:
        draw.line((x, y, min(x + dash, x_end), y), fill=color, width=1)
        x += dash * 2


def save_page_map(
    pages: Sequence[Sequence[Block]],
    output_dir: Path,
    name: str,
    usable_height: Optional[int] = None,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
    scale: float = 0.25,
) -> Path:
    """
    Create and save a page map PNG.

    Args:
        pages: Output of paginate()
        output_dir: Directory to save the image in
        name: Template name used for the filename
        usable_height: Capacity the pages were built against
        config: Layout configuration
        scale: Pixel scale applied to page geometry

    Returns:
        Path to saved image
    """
    image = render_page_map(pages, usable_height, config, scale)

    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{name}_page_map.png"
    image.save(path, "PNG")

    logger.info(
        f"Saved page map for {name}: {len(pages)} pages, "
        f"{sum(len(p) for p in pages)} blocks -> {path}"
    )
    return path
