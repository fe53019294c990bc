"""
Module: document

Purpose:
    Provides the DocumentTemplate dataclass - an ordered block list plus
    the header/footer flags of the page template in effect. This is the
    unit both the editor and the viewer paginate.

Key Classes:
    - DocumentTemplate: Immutable block list with template flags

Dependencies:
    - dataclasses (std)
    - .blocks

Used By:
    - layout.paginator.paginate_document
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .blocks import Block, PageBreakBlock, block_from_dict


@dataclass(frozen=True)
class DocumentTemplate:
    """
    Ordered block list with page template flags (immutable).

    Attributes:
        blocks: Blocks in document order (page breaks included)
        has_header: Whether pages reserve the header band
        has_footer: Whether pages reserve the footer band
        name: Optional display name

    Example:
        >>> doc = DocumentTemplate(blocks=(ParagraphBlock("Hello"),))
        >>> doc.content_block_count
        1
    """

    blocks: tuple[Block, ...] = ()
    has_header: bool = True
    has_footer: bool = True
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "blocks", tuple(self.blocks))

    @property
    def content_block_count(self) -> int:
        """Number of blocks that end up on pages (page breaks excluded)."""
        return sum(1 for b in self.blocks if not isinstance(b, PageBreakBlock))

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "has_header": self.has_header,
            "has_footer": self.has_footer,
            "blocks": [b.to_dict() for b in self.blocks],
        }
        if self.name:
            d["name"] = self.name
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocumentTemplate:
        return cls(
            blocks=tuple(block_from_dict(b) for b in data.get("blocks", [])),
            has_header=data.get("has_header", True),
            has_footer=data.get("has_footer", True),
            name=data.get("name", ""),
        )
