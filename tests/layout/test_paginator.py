"""
Unit tests for the paginator.

Covers the greedy fill, forced page breaks and the oversized-block rule.
"""

import logging

import pytest

from docflow.core.models.blocks import (
    BlockType,
    BulletListBlock,
    FixedBlock,
    PageBreakBlock,
    ParagraphBlock,
    UnknownBlock,
)
from docflow.core.models.document import DocumentTemplate
from docflow.layout import (
    LayoutConfig,
    paginate,
    page_count,
    paginate_document,
    usable_height,
    used_height,
)


class TestPaginateBasics:
    """Tests for empty input and block preservation."""

    def test_when_no_blocks_then_single_empty_page(self):
        """An empty document still has one page to render."""
        assert paginate([], 734) == [[]]

    def test_when_blocks_none_then_single_empty_page(self):
        assert paginate(None) == [[]]

    def test_when_no_page_breaks_then_concatenation_preserves_input(self, section):
        """Order preserved, nothing dropped or duplicated."""
        # Arrange
        blocks = [section(str(i)) for i in range(25)]
        blocks.insert(7, ParagraphBlock("y" * 1234))
        blocks.insert(15, BulletListBlock(("a",) * 9))

        # Act
        pages = paginate(blocks, 300)

        # Assert
        flattened = [b for page in pages for b in page]
        assert flattened == blocks
        assert all(a is b for a, b in zip(flattened, blocks))

    def test_when_called_twice_then_identical_output(self, sample_blocks):
        """Editor and viewer calls must agree."""
        assert paginate(sample_blocks, 200) == paginate(sample_blocks, 200)

    def test_when_called_then_input_not_mutated(self, sample_blocks):
        before = list(sample_blocks)
        paginate(sample_blocks, 100)
        assert sample_blocks == before

    def test_when_usable_height_omitted_then_uses_default(self, section):
        blocks = [section() for _ in range(11)]
        assert paginate(blocks) == paginate(blocks, LayoutConfig().usable_height_default)


class TestPaginateCapacity:
    """Tests for filling pages up to usable height."""

    def test_when_ten_sections_then_fit_on_one_page(self, section):
        """10 x 70 = 700 <= 734."""
        pages = paginate([section() for _ in range(10)], 734)

        assert len(pages) == 1
        assert len(pages[0]) == 10

    def test_when_eleven_sections_then_eleventh_overflows(self, section):
        """770 > 734, so the last section starts page 2."""
        blocks = [section(str(i)) for i in range(11)]

        pages = paginate(blocks, 734)

        assert len(pages) == 2
        assert pages[0] == blocks[:10]
        assert pages[1] == [blocks[10]]

    def test_when_block_fits_exactly_then_stays_on_page(self, section):
        """The break test is strictly greater-than."""
        pages = paginate([section(), section()], 140)
        assert len(pages) == 1

    @pytest.mark.parametrize("capacity", [100, 250, 500, 734])
    def test_multi_block_pages_never_exceed_capacity(self, sample_blocks, section, capacity):
        blocks = sample_blocks + [section() for _ in range(12)] + sample_blocks

        for page in paginate(blocks, capacity):
            if len(page) > 1:
                assert used_height(page) <= capacity


class TestPaginateOversized:
    """Tests for blocks taller than a whole page."""

    def test_when_block_taller_than_page_then_placed_alone(self):
        """A 900px-equivalent block is never split and never rejected."""
        # Arrange: a paragraph of ~900px
        huge = ParagraphBlock("z" * 5500)  # 55 lines * 16 + 12 = 892

        # Act
        pages = paginate([huge], 734)

        # Assert
        assert pages == [[huge]]
        assert used_height(pages[0]) > 734

    def test_when_oversized_between_blocks_then_gets_own_page(self, section):
        huge = ParagraphBlock("z" * 5500)
        before, after = section("before"), section("after")

        pages = paginate([before, huge, after], 734)

        assert pages == [[before], [huge], [after]]

    def test_when_single_signature_block_then_no_spurious_page(self):
        block = FixedBlock(BlockType.SIGNATURE_BLOCK)
        assert paginate([block], 734) == [[block]]


class TestPaginatePageBreaks:
    """Tests for forced page breaks."""

    def test_when_page_break_then_next_block_starts_new_page(self, section):
        a, b = section("a"), section("b")

        pages = paginate([a, PageBreakBlock(), b], 734)

        assert pages == [[a], [b]]

    def test_page_breaks_never_stored_on_pages(self, sample_blocks):
        for page in paginate(sample_blocks, 734):
            assert not any(isinstance(b, PageBreakBlock) for b in page)

    def test_when_leading_break_then_first_page_empty(self, section):
        a = section()
        assert paginate([PageBreakBlock(), a], 734) == [[], [a]]

    def test_when_trailing_break_then_last_page_empty(self, section):
        a = section()
        assert paginate([a, PageBreakBlock()], 734) == [[a], []]

    def test_when_consecutive_breaks_then_empty_page_between(self, section):
        a, b = section("a"), section("b")
        pages = paginate([a, PageBreakBlock(), PageBreakBlock(), b], 734)
        assert pages == [[a], [], [b]]

    def test_when_break_after_full_page_then_resets_height(self, section):
        """Height resets after the break, so the next page fills from zero."""
        blocks = [section() for _ in range(3)] + [PageBreakBlock()] + [section() for _ in range(10)]
        pages = paginate(blocks, 700)
        assert [len(p) for p in pages] == [3, 10]


class TestPaginateUnknownBlocks:
    """Tests for unknown tags."""

    def test_when_unknown_block_then_uses_fallback_height(self, section):
        config = LayoutConfig(unknown_block_height=100)
        odd = UnknownBlock("mysteryWidget")

        pages = paginate([section(), odd, section()], 200, config)

        # 70 + 100 = 170, + 70 = 240 > 200
        assert pages == [[section(), odd], [section()]]

    def test_when_unknown_block_then_logs_warning_once(self, caplog):
        blocks = [UnknownBlock("mysteryWidget"), UnknownBlock("mysteryWidget"), UnknownBlock("other")]

        with caplog.at_level(logging.WARNING, logger="docflow.layout.paginator"):
            paginate(blocks, 734)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].unknown_block_types == ["mysteryWidget", "other"]

    def test_when_all_blocks_known_then_no_warning(self, sample_blocks, caplog):
        with caplog.at_level(logging.WARNING, logger="docflow.layout.paginator"):
            paginate(sample_blocks, 734)
        assert not caplog.records

    def test_when_legacy_text_field_then_fallback_and_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="docflow.layout.paginator"):
            pages = paginate([{"type": "textField"}], 734)

        assert used_height(pages[0]) == 50
        assert caplog.records[0].unknown_block_types == ["textField"]


class TestPaginatePersistedMappings:
    """Tests for block lists loaded straight from JSON."""

    def test_when_dict_page_break_then_next_block_starts_new_page(self):
        first, brk, second = {"type": "section"}, {"type": "pageBreak"}, {"type": "section"}

        pages = paginate([first, brk, second], 734)

        assert pages == [[first], [second]]
        assert pages[0][0] is first

    def test_dict_and_typed_blocks_paginate_alike(self, sample_blocks):
        raw = [block.to_dict() for block in sample_blocks]
        typed_pages = paginate(sample_blocks, 200)
        raw_pages = paginate(raw, 200)

        assert [[b.to_dict() for b in page] for page in typed_pages] == raw_pages

    def test_when_dict_unknown_tag_then_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="docflow.layout.paginator"):
            paginate([{"type": "videoEmbed"}, {"type": "section"}], 734)

        assert caplog.records[0].unknown_block_types == ["videoEmbed"]

    def test_when_dict_payload_malformed_then_no_error(self):
        pages = paginate([{"type": "bulletList", "items": 5}, {"type": "paragraph", "content": 7}], 734)
        assert used_height(pages[0]) == 24 + 24


class TestPaginateIterables:
    """Tests for one-shot iterables."""

    def test_when_generator_then_paginates_and_logs(self, section, caplog):
        blocks = (section() for _ in range(11))

        with caplog.at_level(logging.DEBUG, logger="docflow.layout.paginator"):
            pages = paginate(blocks, 734)

        assert [len(p) for p in pages] == [10, 1]
        assert "Paginated 11 blocks onto 2 pages" in caplog.text


class TestPageCountAndDocument:
    """Tests for page_count and paginate_document."""

    def test_page_count_matches_paginate(self, sample_blocks):
        assert page_count(sample_blocks, 100) == len(paginate(sample_blocks, 100))

    def test_page_count_when_empty_then_one(self):
        assert page_count([]) == 1

    def test_paginate_document_uses_template_flags(self, section):
        """No header/footer gives more room than the default template."""
        blocks = tuple(section() for _ in range(11))

        with_bands = paginate_document(DocumentTemplate(blocks=blocks))
        without_bands = paginate_document(
            DocumentTemplate(blocks=blocks, has_header=False, has_footer=False)
        )

        assert len(with_bands) == 2  # 770 > 734
        assert len(without_bands) == 1  # 770 <= 816

    def test_paginate_document_equals_two_step_call(self, sample_blocks):
        doc = DocumentTemplate(blocks=tuple(sample_blocks), has_header=True, has_footer=False)
        expected = paginate(sample_blocks, usable_height(True, False))
        assert paginate_document(doc) == expected
