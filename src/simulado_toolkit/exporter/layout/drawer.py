"""
Module: exporter.layout.drawer

Purpose:
    Place as much of a list of content items as fits in a column segment
    and report what did not fit.

Key Functions:
    - draw_partial_content(): Greedy line fitting for one column segment
    - spacing_after(): Gap that follows a fully drawn item

Algorithm:
    1. For each item, wrap prefix + text to the column width
    2. Accept lines while accumulated height + line height fits
    3. Place the accepted lines (justified, except an item's final line)
    4. If lines are left over, turn them into a continuation item, put it
       in front of the unprocessed items and stop: the column is full
    5. Otherwise add the item's trailing gap if it still fits

Dependencies:
    - exporter.layout.models: ContentItem, LinePlacement, DrawResult
    - exporter.layout.text: LineSplitter

Used By:
    - exporter.layout.flow: Two-column page flow
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .config import LayoutConfig
from .models import Column, ContentItem, DrawResult, LinePlacement
from .text import LineSplitter

logger = logging.getLogger(__name__)


def draw_partial_content(
    items: Sequence[ContentItem],
    x: float,
    start_y: float,
    column_width: float,
    available_height: float,
    *,
    splitter: LineSplitter,
    config: LayoutConfig,
    column: Optional[Column] = None,
) -> DrawResult:
    """
    Draw items into a column segment of fixed height.
    
    Args:
        items: Items to draw, in order
        x: Left edge of the column
        start_y: First baseline (top-down)
        column_width: Width to wrap and justify to
        available_height: Room below start_y (content_bottom - start_y)
        splitter: Text wrapper
        config: Layout configuration (line height, spacing)
        column: Column being filled, recorded on placements
        
    Returns:
        DrawResult with the y after the last line or gap, the items left
        over (empty when everything fit) and the placed lines
        
    Example:
        >>> result = draw_partial_content(items, 36, 120, 251.6, 655.9,
        ...                               splitter=splitter, config=config)
        >>> result.is_complete
        True
    """
    line_height = config.line_height
    bottom = start_y + available_height
    current_y = start_y
    placements: List[LinePlacement] = []
    
    for i, item in enumerate(items):
        height_left = bottom - current_y
        
        # Leading whitespace of the prefix is an indent, not wrappable text
        text = item.text
        body = text.lstrip()
        indent = splitter.width_of(text[: len(text) - len(body)], item.is_bold)
        line_width = column_width - indent
        all_lines = splitter.split(body, line_width, item.is_bold)
        
        fitted: List[str] = []
        used = 0.0
        for line in all_lines:
            if used + line_height > height_left:
                break
            fitted.append(line)
            used += line_height
        leftover = all_lines[len(fitted):]
        
        font_name = splitter.font_for(item.is_bold)
        for k, line in enumerate(fitted):
            is_final_line = not leftover and k == len(fitted) - 1
            placements.append(
                LinePlacement(
                    text=line,
                    x=x + indent,
                    y=current_y + k * line_height,
                    width=line_width,
                    font_name=font_name,
                    font_size=config.font_size,
                    justify=not is_final_line,
                    question_index=item.question_index,
                    item_index=item.item_index,
                    column=column,
                )
            )
        current_y += len(fitted) * line_height
        
        if leftover:
            if fitted:
                head = item.continuation(" ".join(leftover))
            else:
                # Nothing of this item fit: hand it back untouched
                head = item
            logger.debug(
                f"Question {item.question_index + 1} item {item.item_index}: "
                f"{len(fitted)}/{len(all_lines)} lines fit, "
                f"{len(items) - i - 1} items pending"
            )
            return DrawResult(
                y_after=current_y,
                remaining_items=(head, *items[i + 1:]),
                placements=tuple(placements),
            )
        
        gap = spacing_after(item, config)
        if gap <= bottom - current_y:
            current_y += gap
    
    return DrawResult(y_after=current_y, remaining_items=(), placements=tuple(placements))


def spacing_after(item: ContentItem, config: LayoutConfig) -> float:
    """Gap after a fully drawn item: statement gap, option gap, or none."""
    if item.is_statement:
        return config.space_after_statement
    if item.is_last_option:
        return 0
    return config.space_between_options
