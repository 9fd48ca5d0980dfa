"""
Unit tests for layout configuration.
"""

import pytest

from simulado_toolkit.exporter.layout import LayoutConfig


class TestLayoutConfig:
    """Tests for LayoutConfig dataclass."""

    def test_init_when_defaults_then_a4_geometry(self):
        """Defaults describe an A4 portrait page in points."""
        # Act
        config = LayoutConfig()
        
        # Assert
        assert config.page_width == pytest.approx(595.2756, abs=1e-3)
        assert config.page_height == pytest.approx(841.8898, abs=1e-3)
        assert config.margin == 36

    def test_derived_values_when_defaults_then_match_engine_constants(self):
        config = LayoutConfig()
        
        assert config.line_height == pytest.approx(12)
        assert config.loose_line_height == pytest.approx(15)
        assert config.min_content_height == pytest.approx(30)
        assert config.footer_height == pytest.approx(30)
        assert config.content_top == 36
        assert config.content_bottom == pytest.approx(841.8898 - 36 - 30, abs=1e-3)

    def test_columns_when_defaults_then_split_content_width(self):
        """Two equal columns separated by the gutter fill the content width."""
        config = LayoutConfig()
        
        assert config.column_width == pytest.approx((595.2756 - 72 - 20) / 2, abs=1e-3)
        assert config.left_column_x == 36
        assert config.right_column_x == pytest.approx(36 + config.column_width + 20)
        assert config.right_column_x + config.column_width == pytest.approx(config.page_width - 36)

    def test_init_when_margins_exceed_width_then_raises_error(self):
        with pytest.raises(ValueError, match="Margins exceed page width"):
            LayoutConfig(page_width=100, margin=60)

    def test_init_when_margins_exceed_height_then_raises_error(self):
        with pytest.raises(ValueError, match="Margins exceed page height"):
            LayoutConfig(page_height=150, margin=50)

    def test_init_when_gutter_too_wide_then_raises_error(self):
        with pytest.raises(ValueError, match="Gutter"):
            LayoutConfig(page_width=200, margin=20, column_gutter=160)

    def test_init_when_font_size_zero_then_raises_error(self):
        with pytest.raises(ValueError, match="font_size"):
            LayoutConfig(font_size=0)
