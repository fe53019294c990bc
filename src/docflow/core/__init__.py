"""
docflow Core Package

Shared data models, validation and serialization used by both the
template editor and the signing viewer.

1. **Immutable Data Models**
   - Blocks and templates are frozen dataclasses; edits create new lists

2. **Heights Never Stored**
   - Block heights are always computed by docflow.layout.geometry, never
     persisted alongside the block

3. **One Tag Set**
   - BlockType is the single list of known tags; validation and sizing
     both read it
"""

from .models import (
    BlockType,
    Block,
    FixedBlock,
    ParagraphBlock,
    BulletListBlock,
    PageBreakBlock,
    UnknownBlock,
    DocumentTemplate,
    block_from_dict,
)

__all__ = [
    "BlockType",
    "Block",
    "FixedBlock",
    "ParagraphBlock",
    "BulletListBlock",
    "PageBreakBlock",
    "UnknownBlock",
    "DocumentTemplate",
    "block_from_dict",
]
