"""
Unit tests for layout configuration.
"""

import json

import pytest

from docflow.layout import (
    DEFAULT_FIXED_BLOCK_HEIGHTS,
    DEFAULT_LAYOUT_CONFIG,
    DropZoneConfig,
    LayoutConfig,
    TypographyConfig,
    load_layout_config,
)


class TestLayoutConfig:
    """Tests for LayoutConfig dataclass."""

    def test_init_when_defaults_then_creates_valid_config(self):
        """Default parameters should create valid config."""
        # Act
        config = LayoutConfig()

        # Assert
        assert config.page_width == 816
        assert config.page_height == 1056
        assert config.content_height == 864  # 1056 - 96 - 56 - 40
        assert config.usable_height_default == 734

    def test_default_instance_equals_fresh_config(self):
        assert DEFAULT_LAYOUT_CONFIG == LayoutConfig()

    def test_is_frozen(self):
        config = LayoutConfig()
        with pytest.raises(AttributeError):
            config.page_height = 2000

    def test_fixed_heights_cannot_be_mutated(self):
        heights = {**DEFAULT_FIXED_BLOCK_HEIGHTS}
        config = LayoutConfig(fixed_block_heights=heights)

        heights["section"] = 999

        assert config.fixed_block_heights["section"] == 70
        with pytest.raises(TypeError):
            config.fixed_block_heights["section"] = 1

    def test_init_when_bands_exceed_page_then_raises_error(self):
        """Content area <= 0 must fail at startup."""
        with pytest.raises(ValueError, match="exceed page height"):
            LayoutConfig(page_height=200, page_margin=50, header_height=60, footer_height=40)

    def test_init_when_content_area_exactly_zero_then_raises_error(self):
        with pytest.raises(ValueError, match="exceed page height"):
            LayoutConfig(page_height=296, page_margin=100, header_height=56, footer_height=40)

    @pytest.mark.parametrize("safety_margin", [0, -0.5, 1.01])
    def test_init_when_safety_margin_out_of_range_then_raises_error(self, safety_margin):
        with pytest.raises(ValueError, match="safety_margin"):
            LayoutConfig(safety_margin=safety_margin)

    def test_safety_margin_of_one_is_allowed(self):
        assert LayoutConfig(safety_margin=1.0).usable_height_default == 864

    def test_init_when_fixed_height_missing_then_raises_error(self):
        heights = {k: v for k, v in DEFAULT_FIXED_BLOCK_HEIGHTS.items() if k != "divider"}
        with pytest.raises(ValueError, match="divider"):
            LayoutConfig(fixed_block_heights=heights)

    def test_init_when_fixed_height_negative_then_raises_error(self):
        heights = {**DEFAULT_FIXED_BLOCK_HEIGHTS, "heading": -1}
        with pytest.raises(ValueError, match="heading"):
            LayoutConfig(fixed_block_heights=heights)

    def test_typography_validation(self):
        with pytest.raises(ValueError, match="chars_per_line"):
            TypographyConfig(chars_per_line=0)


class TestLayoutConfigFromDict:
    """Tests for the configuration surface."""

    def test_from_dict_overrides_fields(self):
        config = LayoutConfig.from_dict({
            "page_margin": 72,
            "typography": {"chars_per_line": 80},
            "drop_zone": {"active_size": 60},
        })

        assert config.page_margin == 72
        assert config.typography == TypographyConfig(chars_per_line=80)
        assert config.drop_zone == DropZoneConfig(active_size=60)

    def test_from_dict_merges_fixed_heights(self):
        config = LayoutConfig.from_dict({"fixed_block_heights": {"section": 80}})

        assert config.fixed_block_heights["section"] == 80
        assert config.fixed_block_heights["heading"] == 50

    def test_from_dict_when_unknown_key_then_raises_error(self):
        with pytest.raises(ValueError, match="page_colour"):
            LayoutConfig.from_dict({"page_colour": "white"})

    def test_load_layout_config_from_file(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({"safety_margin": 0.9}), encoding="utf-8")

        config = load_layout_config(path)

        assert config.usable_height_default == 777  # floor(864 * 0.9)

    def test_load_layout_config_when_missing_then_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_layout_config(tmp_path / "missing.json")

    def test_load_layout_config_when_not_object_then_raises(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="JSON object"):
            load_layout_config(path)
