import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import docflow
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from docflow.core.models.blocks import (  # noqa: E402
    BlockType,
    BulletListBlock,
    FixedBlock,
    PageBreakBlock,
    ParagraphBlock,
)


# Common test fixtures
@pytest.fixture
def section():
    """Factory for section blocks (70px with the default config)."""
    def _create(title: str = "Section", block_id: str = ""):
        return FixedBlock(BlockType.SECTION, id=block_id, props={"title": title})
    return _create


@pytest.fixture
def sample_blocks():
    """A small consent form: heading, text, list, break, signature."""
    return [
        FixedBlock(BlockType.HEADING, id="h1", props={"content": "Consent", "level": 1}),
        ParagraphBlock("x" * 350, id="p1"),
        BulletListBlock(("Attend meetings", "Check in weekly"), id="b1"),
        PageBreakBlock(id="br1"),
        FixedBlock(BlockType.SIGNATURE_FIELD, id="s1", props={"label": "Signature", "role": "pir"}),
    ]
