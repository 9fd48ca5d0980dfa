"""
Module: exporter.layout

Purpose:
    Page layout for the question sheet.
    Converts questions into positioned lines on two-column pages.

Key Functions:
    - flow_questions(): Main entry point for question layout
    - draw_partial_content(): Fill one column segment

Key Classes:
    - LayoutConfig: Configuration for page layout
    - ContentItem: Drawable statement/option unit
    - LayoutCursor: Two-column writing position
    - PagePlan: Single page layout plan
    - LayoutResult: Layout output

Dependencies:
    - reportlab: Font metrics and text wrapping
    - simulado_toolkit.core.models: Question

Used By:
    - exporter.controller: Document assembly
"""

from .config import LayoutConfig
from .models import (
    ItemKind,
    ContentItem,
    Column,
    LayoutCursor,
    LinePlacement,
    DrawResult,
    PagePlan,
    LayoutResult,
    build_content_items,
    QUESTIONS_PAGE,
    ANSWER_KEY_PAGE,
)
from .text import LineSplitter
from .drawer import draw_partial_content
from .flow import flow_questions, LayoutError

__all__ = [
    # Config
    "LayoutConfig",
    # Models
    "ItemKind",
    "ContentItem",
    "Column",
    "LayoutCursor",
    "LinePlacement",
    "DrawResult",
    "PagePlan",
    "LayoutResult",
    "QUESTIONS_PAGE",
    "ANSWER_KEY_PAGE",
    # Functions
    "build_content_items",
    "LineSplitter",
    "draw_partial_content",
    "flow_questions",
    "LayoutError",
]
