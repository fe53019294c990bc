"""
Schema Validation Utilities

Validates persisted block lists and document files before they are
turned into typed blocks.

Basic checks (always): structure and required keys, so a file that
can't be read at all fails fast with a path to the problem.

Strict checks (opt-in): every tag must be a known block type and the
list must pass block_list.schema.json. Pagination itself tolerates
unknown tags, so callers that want to reject them must validate
strictly before paginating.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

import jsonschema

from ..models.blocks import Block, UnknownBlock, resolve_block_type


# Schema version constants
DOCUMENT_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_blocks(data: Any, *, strict: bool = False, path: str = "blocks") -> None:
    """
    Validate a persisted block list.

    Args:
        data: Parsed JSON list of block mappings
        strict: If True, reject unknown tags and run the JSON schema
        path: Location prefix used in error paths

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, list):
        raise ValidationError("blocks must be a list", path=path)

    for i, block in enumerate(data):
        if not isinstance(block, dict):
            raise ValidationError(
                f"Block {i} must be an object, got {type(block).__name__}",
                path=f"{path}[{i}]",
            )
        if not isinstance(block.get("type"), str) or not block["type"]:
            raise ValidationError(
                f"Block {i} is missing a type",
                path=f"{path}[{i}].type",
                errors=["Missing field: type"],
            )

    if not strict:
        return

    unknown = [
        f"{path}[{i}]: {block['type']!r}"
        for i, block in enumerate(data)
        if resolve_block_type(block["type"]) is None
    ]
    if unknown:
        raise ValidationError(
            f"Unknown block types: {len(unknown)}",
            path=path,
            errors=unknown,
        )

    schema = _load_schema("block_list")
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        location = "".join(f"[{p}]" if isinstance(p, int) else f".{p}" for p in e.absolute_path)
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=f"{path}{location}",
            errors=[e.message],
        )


def validate_document(data: Any, *, strict: bool = False) -> None:
    """
    Validate a persisted document file.

    Args:
        data: Parsed JSON document
        strict: Passed through to validate_blocks

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Document must be an object")

    required = ["schema_version", "blocks"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    if version != DOCUMENT_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported document schema version: {version} (expected {DOCUMENT_SCHEMA_VERSION})",
            path="schema_version",
        )

    for flag in ("has_header", "has_footer"):
        if flag in data and not isinstance(data[flag], bool):
            raise ValidationError(f"{flag} must be a boolean", path=flag)

    validate_blocks(data["blocks"], strict=strict)


def find_unknown_block_types(blocks: Iterable[Block]) -> list[str]:
    """
    List tags that pagination would size with the fallback height.

    Args:
        blocks: Typed blocks in document order

    Returns:
        Sorted distinct unknown tags (empty when every block is known)
    """
    return sorted({b.tag for b in blocks if isinstance(b, UnknownBlock)})
