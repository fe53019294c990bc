"""
Module: blocks

Purpose:
    Provides the block variants that make up a document template. Each
    block is one layout-relevant unit with a type tag; paragraphs and
    bullet lists additionally carry the content that determines their
    height.

Key Classes:
    - BlockType: Enum of every known block tag
    - FixedBlock: Any block whose height is a constant per tag
    - ParagraphBlock: Free text, height depends on content length
    - BulletListBlock: Bullet items, height depends on item count
    - PageBreakBlock: Zero-height control marker that forces a new page
    - UnknownBlock: Block with a tag this package does not know

Key Functions:
    - block_from_dict(data): Build the right variant from a JSON mapping

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - layout.geometry: height_of
    - layout.paginator: paginate
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class BlockType(str, Enum):
    """Known block tags, as stored in persisted templates."""
    # Structure
    SECTION = "section"
    HEADING = "heading"
    DIVIDER = "divider"
    PAGE_BREAK = "pageBreak"
    PAGE_BREAK_MARKER = "pageBreakMarker"  # Editor-drawn marker row
    # Content
    PARAGRAPH = "paragraph"
    BULLET_LIST = "bulletList"
    # Signature fields
    SIGNATURE_FIELD = "signatureField"
    INITIALS_FIELD = "initialsField"
    DATE_FIELD = "dateField"
    TEXT_INPUT_FIELD = "textInputField"
    CHECKBOX_FIELD = "checkboxField"
    DROPDOWN_FIELD = "dropdownField"
    # Legacy
    SIGNATURE_BLOCK = "signatureBlock"
    ACKNOWLEDGMENT = "acknowledgment"

    def __str__(self) -> str:
        return self.value


FIXED_HEIGHT_TYPES: frozenset[BlockType] = frozenset({
    BlockType.SECTION,
    BlockType.HEADING,
    BlockType.SIGNATURE_FIELD,
    BlockType.SIGNATURE_BLOCK,
    BlockType.INITIALS_FIELD,
    BlockType.DATE_FIELD,
    BlockType.TEXT_INPUT_FIELD,
    BlockType.CHECKBOX_FIELD,
    BlockType.ACKNOWLEDGMENT,
    BlockType.DROPDOWN_FIELD,
    BlockType.DIVIDER,
    BlockType.PAGE_BREAK_MARKER,
})


def resolve_block_type(tag: Any) -> BlockType | None:
    """
    Map a raw tag to a BlockType.

    Returns:
        The BlockType, or None if the tag is not known
    """
    if isinstance(tag, BlockType):
        return tag
    if not isinstance(tag, str):
        return None
    try:
        return BlockType(tag)
    except ValueError:
        return None


@dataclass(frozen=True)
class FixedBlock:
    """
    Block whose height depends only on its tag.

    Attributes:
        type: One of FIXED_HEIGHT_TYPES
        id: Editor-assigned identifier
        props: Editorial content (title, label, role, ...), not size-relevant

    Example:
        >>> FixedBlock(BlockType.SECTION, props={"title": "Consent"}).tag
        'section'
    """

    type: BlockType
    id: str = ""
    props: dict[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        block_type = resolve_block_type(self.type)
        if block_type not in FIXED_HEIGHT_TYPES:
            raise ValueError(f"{self.type!s} is not a fixed-height block type")
        object.__setattr__(self, "type", block_type)

    @property
    def tag(self) -> str:
        return self.type.value

    def to_dict(self) -> dict[str, Any]:
        return _with_id({**self.props, "type": self.tag}, self.id)


@dataclass(frozen=True)
class ParagraphBlock:
    """Free-text paragraph; height grows with content length."""

    content: str = ""
    id: str = ""

    @property
    def tag(self) -> str:
        return BlockType.PARAGRAPH.value

    def to_dict(self) -> dict[str, Any]:
        return _with_id({"type": self.tag, "content": self.content}, self.id)


@dataclass(frozen=True)
class BulletListBlock:
    """Bullet list; height grows with the number of items."""

    items: tuple[str, ...] = ()
    id: str = ""

    def __post_init__(self) -> None:
        # Accept lists from callers but store immutably
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def tag(self) -> str:
        return BlockType.BULLET_LIST.value

    def to_dict(self) -> dict[str, Any]:
        return _with_id({"type": self.tag, "items": list(self.items)}, self.id)


@dataclass(frozen=True)
class PageBreakBlock:
    """Forced page break. Consumed by pagination, never placed on a page."""

    id: str = ""

    @property
    def tag(self) -> str:
        return BlockType.PAGE_BREAK.value

    def to_dict(self) -> dict[str, Any]:
        return _with_id({"type": self.tag}, self.id)


@dataclass(frozen=True)
class UnknownBlock:
    """
    Block carrying a tag outside BlockType.

    Kept rather than rejected so one malformed block never aborts
    pagination of an otherwise valid document.
    """

    type_name: str
    id: str = ""
    props: dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def tag(self) -> str:
        return self.type_name

    def to_dict(self) -> dict[str, Any]:
        return _with_id({**self.props, "type": self.type_name}, self.id)


Block = Union[FixedBlock, ParagraphBlock, BulletListBlock, PageBreakBlock, UnknownBlock]


def block_from_dict(data: dict[str, Any]) -> Block:
    """
    Build a block from its persisted mapping.

    The "type" key selects the variant. Remaining keys become the block's
    payload: "content" for paragraphs, "items" for bullet lists, and
    props for everything else.

    Args:
        data: Mapping with at least a "type" key

    Returns:
        Block variant (UnknownBlock if the tag is missing or not known)

    Malformed payloads degrade rather than raise: non-string "content"
    reads as empty text and non-list "items" as an empty list.
    """
    raw_tag = data.get("type")
    block_id = str(data.get("id", "") or "")
    props = {k: v for k, v in data.items() if k not in ("type", "id")}
    block_type = resolve_block_type(raw_tag)

    if block_type is None:
        return UnknownBlock(type_name=str(raw_tag or ""), id=block_id, props=props)
    if block_type is BlockType.PAGE_BREAK:
        return PageBreakBlock(id=block_id)
    if block_type is BlockType.PARAGRAPH:
        content = data.get("content")
        if not isinstance(content, str):
            content = ""
        return ParagraphBlock(content=content, id=block_id)
    if block_type is BlockType.BULLET_LIST:
        items = data.get("items")
        if not isinstance(items, (list, tuple)):
            items = ()
        return BulletListBlock(items=tuple(str(item) for item in items), id=block_id)
    return FixedBlock(type=block_type, id=block_id, props=props)


def _with_id(data: dict[str, Any], block_id: str) -> dict[str, Any]:
    if block_id:
        data["id"] = block_id
    return data
