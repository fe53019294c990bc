"""
Core Models Package

Immutable data models shared by the editor and viewer code paths.

All models are frozen dataclasses, so a block list handed to the
paginator can never be changed underneath it and pages computed by two
callers from the same input compare equal.
"""

from .blocks import (
    BlockType,
    Block,
    FixedBlock,
    ParagraphBlock,
    BulletListBlock,
    PageBreakBlock,
    UnknownBlock,
    FIXED_HEIGHT_TYPES,
    block_from_dict,
    resolve_block_type,
)
from .document import DocumentTemplate

__all__ = [
    "BlockType",
    "Block",
    "FixedBlock",
    "ParagraphBlock",
    "BulletListBlock",
    "PageBreakBlock",
    "UnknownBlock",
    "FIXED_HEIGHT_TYPES",
    "block_from_dict",
    "resolve_block_type",
    "DocumentTemplate",
]
