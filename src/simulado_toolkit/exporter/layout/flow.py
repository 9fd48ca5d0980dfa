"""
Module: exporter.layout.flow

Purpose:
    Flow questions down two columns, page after page.
    Greedy and forward-only: a column is filled until a question no longer
    fits, the remainder continues in the right column, then on a new page.
    No backtracking, no column balancing.

Key Functions:
    - flow_questions(): Lay out every question, returning page plans

Algorithm:
    For each question, while it has undrawn items:
    1. If the active column has less than min_content_height left, move on
       (left -> right, right -> new page) without drawing
    2. Otherwise draw into the active column
    3. Nothing left over: add the question block gap, next question
    4. Leftovers: move on (left -> right, right -> new page)

Dependencies:
    - exporter.layout.drawer: draw_partial_content
    - exporter.layout.models: LayoutCursor, PagePlan, LayoutResult

Used By:
    - exporter.controller: Document assembly
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from simulado_toolkit.core.models import Question

from .config import LayoutConfig
from .drawer import draw_partial_content
from .models import (
    Column,
    ContentItem,
    LayoutCursor,
    LayoutResult,
    LinePlacement,
    PagePlan,
    build_content_items,
)
from .text import LineSplitter

logger = logging.getLogger(__name__)


class LayoutError(Exception):
    """Content cannot be placed on a fresh page."""
    pass


def flow_questions(
    questions: Sequence[Question],
    start_y: float,
    *,
    splitter: LineSplitter,
    config: LayoutConfig,
) -> LayoutResult:
    """
    Arrange questions into two columns over as many pages as needed.
    
    Page 0 starts at start_y (below the document header), later pages at
    config.content_top. Every page up to the last one touched is returned,
    even if a page ended up without lines.
    
    Args:
        questions: Questions in document order
        start_y: First baseline on page 0
        splitter: Text wrapper
        config: Layout configuration
        
    Returns:
        LayoutResult with question pages and the question -> pages map
        
    Raises:
        LayoutError: If a single line cannot fit an empty column
    """
    cursor = LayoutCursor.at(start_y)
    pages: List[List[LinePlacement]] = [[]]
    question_page_map: Dict[int, List[int]] = {}
    
    for q_index, question in enumerate(questions):
        items: Sequence[ContentItem] = build_content_items(question, q_index)
        
        while items:
            available = config.content_bottom - cursor.y
            
            if available < config.min_content_height:
                _advance_column(cursor, pages, config)
                continue
            
            x = config.left_column_x if cursor.active is Column.LEFT else config.right_column_x
            result = draw_partial_content(
                items,
                x,
                cursor.y,
                config.column_width,
                available,
                splitter=splitter,
                config=config,
                column=cursor.active,
            )
            
            if result.placements:
                pages[cursor.page_index].extend(result.placements)
                _track_question(question_page_map, q_index, cursor.page_index)
            elif _column_is_fresh(cursor, start_y, config):
                raise LayoutError(
                    f"Question {q_index + 1} does not fit an empty column: "
                    f"line height {config.line_height}pt, {available:.1f}pt available"
                )
            
            cursor.set_y(result.y_after)
            items = result.remaining_items
            
            if result.is_complete:
                cursor.advance(config.space_after_question_block)
            else:
                _advance_column(cursor, pages, config)
        
        logger.debug(
            f"Question {q_index + 1} placed on pages "
            f"{[p + 1 for p in question_page_map.get(q_index, [])]}"
        )
    
    plans = tuple(
        PagePlan(index=i, placements=tuple(placements))
        for i, placements in enumerate(pages)
    )
    
    logger.info(f"Flowed {len(questions)} questions onto {len(plans)} pages")
    
    return LayoutResult(pages=plans, warnings=[], question_page_map=question_page_map)


def _advance_column(
    cursor: LayoutCursor,
    pages: List[List[LinePlacement]],
    config: LayoutConfig,
) -> None:
    """Left column full -> right column; right column full -> new page."""
    if cursor.active is Column.LEFT:
        cursor.switch_to_right()
        return
    cursor.new_page(config.content_top)
    pages.append([])
    logger.debug(f"Starting page {cursor.page_index + 1}")


def _column_is_fresh(cursor: LayoutCursor, start_y: float, config: LayoutConfig) -> bool:
    """True if the active column has nothing drawn in it yet."""
    top = start_y if cursor.page_index == 0 else config.content_top
    return cursor.y <= top


def _track_question(
    question_page_map: Dict[int, List[int]],
    question_index: int,
    page_index: int,
) -> None:
    """Track which pages a question appears on."""
    if question_index not in question_page_map:
        question_page_map[question_index] = []
    if page_index not in question_page_map[question_index]:
        question_page_map[question_index].append(page_index)
