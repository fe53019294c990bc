"""
Utils Package

Serialization helpers for blocks and document templates.
"""

from .serialization import (
    serialize_blocks,
    deserialize_blocks,
    serialize_document,
    deserialize_document,
    load_document_json,
    save_document_json,
)

__all__ = [
    "serialize_blocks",
    "deserialize_blocks",
    "serialize_document",
    "deserialize_document",
    "load_document_json",
    "save_document_json",
]
