"""
Serialization Utilities

Provides to/from JSON utilities for blocks and document templates.

- `serialize_*` and `deserialize_*` functions wrap the models'
  `to_dict()` / `from_dict()`
- Validation via schemas before deserialization
- Heights are never stored; they are always recomputed on load so the
  stored file can't disagree with the current layout config
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from ..models.blocks import Block, block_from_dict
from ..models.document import DocumentTemplate
from ..schemas.validator import (
    DOCUMENT_SCHEMA_VERSION,
    ValidationError,
    validate_blocks,
    validate_document,
)


# ─────────────────────────────────────────────────────────────────────────────
# Block Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_blocks(blocks: Sequence[Block]) -> list[dict[str, Any]]:
    """
    Serialize blocks to a list of dictionaries.

    Args:
        blocks: Blocks in document order

    Returns:
        List suitable for JSON serialization
    """
    return [block.to_dict() for block in blocks]


def deserialize_blocks(
    data: list[dict[str, Any]],
    *,
    validate: bool = True,
    strict: bool = False,
) -> list[Block]:
    """
    Deserialize blocks from a list of dictionaries.

    Args:
        data: List from JSON
        validate: Whether to validate first
        strict: Reject unknown tags (otherwise they become UnknownBlock)

    Returns:
        Blocks in the same order

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_blocks(data, strict=strict)
    return [block_from_dict(item) for item in data]


# ─────────────────────────────────────────────────────────────────────────────
# Document Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_document(document: DocumentTemplate) -> dict[str, Any]:
    """
    Serialize a DocumentTemplate to a dictionary.

    The output can be written to JSON and will pass validate_document().
    """
    return {"schema_version": DOCUMENT_SCHEMA_VERSION, **document.to_dict()}


def deserialize_document(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> DocumentTemplate:
    """
    Deserialize a DocumentTemplate from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate first
        strict: Reject unknown tags

    Returns:
        DocumentTemplate instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_document(data, strict=strict)
    return DocumentTemplate.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_document_json(path: Path, *, validate: bool = True, strict: bool = False) -> DocumentTemplate:
    """
    Load a document template from a JSON file.

    Args:
        path: Path to the document file
        validate: Whether to validate
        strict: Reject unknown tags

    Returns:
        DocumentTemplate instance

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file isn't JSON or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Document file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Error parsing {path.name}: {e}",
                path=str(path),
                errors=[str(e)],
            )

    try:
        return deserialize_document(data, validate=validate, strict=strict)
    except ValidationError as e:
        raise ValidationError(
            f"Invalid document {path.name}: {e}",
            path=f"{path}:{e.path}" if e.path else str(path),
            errors=e.errors,
        )


def save_document_json(document: DocumentTemplate, path: Path) -> None:
    """
    Save a document template to a JSON file.

    Args:
        document: DocumentTemplate to save
        path: Output path
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    data = serialize_document(document)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
