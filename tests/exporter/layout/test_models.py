"""
Unit tests for layout models.
"""

import pytest

from simulado_toolkit.exporter.layout import (
    Column,
    ContentItem,
    DrawResult,
    ItemKind,
    LayoutCursor,
    LayoutResult,
    LinePlacement,
    PagePlan,
    build_content_items,
)


def _line(text="x", question_index=0, column=Column.LEFT, y=0.0):
    return LinePlacement(
        text=text, x=0, y=y, width=100, font_name="Helvetica", font_size=10,
        question_index=question_index, item_index=0, column=column,
    )


class TestBuildContentItems:
    """Tests for build_content_items."""

    def test_items_when_question_then_statement_then_options(self, make_question):
        """One bold statement followed by one item per option, in order."""
        # Arrange
        q = make_question()
        
        # Act
        items = build_content_items(q, 2)
        
        # Assert
        assert [i.kind for i in items] == [ItemKind.STATEMENT] + [ItemKind.OPTION] * 3
        assert [i.prefix for i in items] == ["3. ", "  a) ", "  b) ", "  c) "]
        assert [i.original_text for i in items[1:]] == list(q.options)
        assert items[0].is_bold and not any(i.is_bold for i in items[1:])

    def test_items_when_built_then_only_last_option_flagged(self, make_question):
        items = build_content_items(make_question(), 0)
        
        assert [i.is_last_option for i in items] == [False, False, False, True]

    def test_items_when_built_then_indices_recorded(self, make_question):
        items = build_content_items(make_question(), 4)
        
        assert {i.question_index for i in items} == {4}
        assert [i.item_index for i in items] == [0, 1, 2, 3]


class TestContentItem:
    """Tests for ContentItem.continuation."""

    def test_continuation_when_statement_then_prefix_dropped(self):
        item = ContentItem("long text", prefix="7. ", is_bold=True, kind=ItemKind.STATEMENT)
        
        cont = item.continuation("text")
        
        assert cont.prefix == ""
        assert cont.original_text == "text"
        assert cont.is_bold and cont.kind is ItemKind.STATEMENT

    def test_continuation_when_option_then_label_dropped_indent_kept(self):
        item = ContentItem("a b c", prefix="  d) ", is_last_option=True, item_index=4)
        
        cont = item.continuation("c")
        
        assert cont.prefix == "  "
        assert cont.text == "  c"
        assert cont.is_last_option is True
        assert cont.item_index == 4


class TestLayoutCursor:
    """Tests for LayoutCursor transitions."""

    def test_switch_when_left_full_then_right_keeps_its_y(self):
        """Moving to the right column does not touch the right cursor."""
        cursor = LayoutCursor(page_index=0, left_y=700, right_y=150)
        
        cursor.switch_to_right()
        
        assert cursor.active is Column.RIGHT
        assert cursor.y == 150
        assert cursor.left_y == 700

    def test_new_page_when_called_then_both_columns_reset(self):
        cursor = LayoutCursor(page_index=2, left_y=700, right_y=720, active=Column.RIGHT)
        
        cursor.new_page(36)
        
        assert cursor == LayoutCursor(page_index=3, left_y=36, right_y=36, active=Column.LEFT)

    def test_advance_when_right_active_then_only_right_moves(self):
        cursor = LayoutCursor.at(100)
        cursor.switch_to_right()
        
        cursor.advance(12)
        
        assert (cursor.left_y, cursor.right_y) == (100, 112)


class TestPagePlan:
    """Tests for PagePlan dataclass."""

    def test_footer_text_when_finalized_then_portuguese_page_label(self):
        page = PagePlan(index=1, placements=(), number=2, total=5)
        
        assert page.footer_text == "Página 2 de 5"

    def test_footer_text_when_not_finalized_then_raises(self):
        with pytest.raises(ValueError, match="not finalized"):
            PagePlan(index=0, placements=()).footer_text

    def test_lines_in_when_mixed_columns_then_filters(self):
        page = PagePlan(0, (_line("l"), _line("r", column=Column.RIGHT), _line("l2")))
        
        assert [p.text for p in page.lines_in(Column.LEFT)] == ["l", "l2"]
        assert page.placement_count == 3


class TestLayoutResult:
    """Tests for LayoutResult dataclass."""

    def test_lines_for_question_when_spanning_pages_then_in_order(self):
        p0 = PagePlan(0, (_line("a", 0), _line("b", 1)))
        p1 = PagePlan(1, (_line("c", 1), _line("d", 2)))
        result = LayoutResult(pages=(p0, p1))
        
        assert [p.text for p in result.lines_for_question(1)] == ["b", "c"]
        assert result.page_count == 2
        assert result.total_placements == 4

    def test_draw_result_when_no_remaining_then_complete(self):
        assert DrawResult(y_after=10).is_complete
        assert not DrawResult(y_after=10, remaining_items=(ContentItem("x"),)).is_complete
