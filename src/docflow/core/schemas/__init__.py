"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_blocks,
    validate_document,
    find_unknown_block_types,
    ValidationError,
    DOCUMENT_SCHEMA_VERSION,
)

__all__ = [
    "validate_blocks",
    "validate_document",
    "find_unknown_block_types",
    "ValidationError",
    "DOCUMENT_SCHEMA_VERSION",
]
