"""
Module: exporter.layout.models

Purpose:
    Data models for the question sheet layout.
    Content items are the drawable units of a question; placements record
    every line positioned on a page; page plans and the layout result are
    the hand-off to the PDF renderer.

Key Classes:
    - ItemKind: Statement or option
    - ContentItem: Drawable unit (one statement or one option), splittable
    - Column / LayoutCursor: Two-column writing position
    - LinePlacement: One wrapped line positioned on a page
    - DrawResult: Outcome of one partial draw
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)
    - core.models.Question

Used By:
    - exporter.layout.drawer: Creates LinePlacements and DrawResults
    - exporter.layout.flow: Creates PagePlans
    - exporter.output: Renders PagePlans
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from simulado_toolkit.core.models import Question

# Indent kept on option continuation lines once the "a) " label was drawn
OPTION_CONTINUATION_PREFIX = "  "

QUESTIONS_PAGE = "questions"
ANSWER_KEY_PAGE = "answer_key"


class ItemKind(Enum):
    """What a content item holds."""
    STATEMENT = "statement"
    OPTION = "option"


@dataclass(frozen=True)
class ContentItem:
    """
    Drawable unit of a question (immutable).
    
    A question becomes one STATEMENT item followed by one OPTION item per
    option, in display order. When a draw cannot fit every line of an item
    a continuation item is created holding only the undrawn text.
    
    Attributes:
        original_text: Text not drawn yet (without prefix)
        prefix: Label drawn before the text ("3. ", "  b) ", "  " or "")
        is_bold: Statements are bold, options are not
        kind: STATEMENT or OPTION
        is_last_option: No spacing is added after the last option
        question_index: 0-based position of the question in the document
        item_index: 0 for the statement, 1.. for options
    """
    
    original_text: str
    prefix: str = ""
    is_bold: bool = False
    kind: ItemKind = ItemKind.OPTION
    is_last_option: bool = False
    question_index: int = 0
    item_index: int = 0
    
    @property
    def text(self) -> str:
        """Full text to wrap: prefix followed by the remaining text."""
        return self.prefix + self.original_text
    
    @property
    def is_statement(self) -> bool:
        return self.kind is ItemKind.STATEMENT
    
    def continuation(self, remaining_text: str) -> ContentItem:
        """
        Build the item carrying the undrawn part of this one.
        
        Only called once at least one line was drawn, so the numbering or
        lettering label is dropped. Options keep their indent.
        """
        prefix = OPTION_CONTINUATION_PREFIX if self.prefix.startswith(" ") else ""
        return replace(self, original_text=remaining_text, prefix=prefix)


def build_content_items(question: Question, question_index: int) -> list[ContentItem]:
    """
    Turn a question into its ordered content items.
    
    Args:
        question: Question to lay out
        question_index: 0-based position, numbered from 1 on the page
        
    Returns:
        [statement, option a, option b, ...]
        
    Example:
        >>> items = build_content_items(q, 0)
        >>> [i.prefix for i in items]
        ['1. ', '  a) ', '  b) ']
    """
    items = [
        ContentItem(
            original_text=question.statement,
            prefix=f"{question_index + 1}. ",
            is_bold=True,
            kind=ItemKind.STATEMENT,
            question_index=question_index,
            item_index=0,
        )
    ]
    last = len(question.options) - 1
    for option_index, option in enumerate(question.options):
        items.append(
            ContentItem(
                original_text=option,
                prefix=f"  {chr(ord('a') + option_index)}) ",
                is_bold=False,
                kind=ItemKind.OPTION,
                is_last_option=option_index == last,
                question_index=question_index,
                item_index=option_index + 1,
            )
        )
    return items


class Column(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass
class LayoutCursor:
    """
    Writing position across the document (mutable).
    
    Each column keeps its own y. Switching to the right column leaves the
    right cursor where it was; a new page resets both.
    
    Attributes:
        page_index: 0-based page being filled
        left_y: Next free y in the left column
        right_y: Next free y in the right column
        active: Column being filled
    """
    
    page_index: int
    left_y: float
    right_y: float
    active: Column = Column.LEFT
    
    @classmethod
    def at(cls, y: float, page_index: int = 0) -> LayoutCursor:
        """Cursor with both columns starting at y."""
        return cls(page_index=page_index, left_y=y, right_y=y)
    
    @property
    def y(self) -> float:
        """Y of the active column."""
        return self.left_y if self.active is Column.LEFT else self.right_y
    
    def set_y(self, y: float) -> None:
        if self.active is Column.LEFT:
            self.left_y = y
        else:
            self.right_y = y
    
    def advance(self, dy: float) -> None:
        self.set_y(self.y + dy)
    
    def switch_to_right(self) -> None:
        self.active = Column.RIGHT
    
    def new_page(self, top: float) -> None:
        """Start the next page with both columns at top, left active."""
        self.page_index += 1
        self.left_y = top
        self.right_y = top
        self.active = Column.LEFT


@dataclass(frozen=True)
class LinePlacement:
    """
    One wrapped line positioned on a page.
    
    Attributes:
        text: Line text as wrapped (first line of an item includes its label)
        x: Left edge in points
        y: Baseline, top-down, in points
        width: Width the line is justified to
        font_name: Font used
        font_size: Font size used
        justify: Stretch word spacing to fill width
        question_index: Question the line belongs to (None for chrome)
        item_index: 0 statement, 1.. options (None for chrome)
        column: Column the line sits in (None for chrome)
    """
    
    text: str
    x: float
    y: float
    width: float
    font_name: str
    font_size: float
    justify: bool = False
    question_index: Optional[int] = None
    item_index: Optional[int] = None
    column: Optional[Column] = None
    align: str = "left"


@dataclass(frozen=True)
class DrawResult:
    """
    Outcome of drawing items into one column.
    
    Attributes:
        y_after: Column y after the drawn lines and spacing
        remaining_items: Items (head possibly a continuation) that did not fit
        placements: Lines placed by this draw
    """
    
    y_after: float
    remaining_items: tuple[ContentItem, ...] = ()
    placements: tuple[LinePlacement, ...] = ()
    
    @property
    def is_complete(self) -> bool:
        """True when every item was fully drawn."""
        return not self.remaining_items
    
    @property
    def line_count(self) -> int:
        return len(self.placements)


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.
    
    ``number`` and ``total`` are filled by the finalize phase once every
    page of the document is known.
    
    Attributes:
        index: Page number (0-indexed)
        placements: Lines on this page
        kind: QUESTIONS_PAGE or ANSWER_KEY_PAGE
        number: 1-based page number (0 until finalized)
        total: Document page count (0 until finalized)
    """
    
    index: int
    placements: tuple[LinePlacement, ...]
    kind: str = QUESTIONS_PAGE
    number: int = 0
    total: int = 0
    
    @property
    def placement_count(self) -> int:
        return len(self.placements)
    
    @property
    def is_empty(self) -> bool:
        return len(self.placements) == 0
    
    @property
    def is_finalized(self) -> bool:
        return self.total > 0
    
    @property
    def footer_text(self) -> str:
        """Page number footer, e.g. "Página 2 de 5"."""
        if not self.is_finalized:
            raise ValueError(f"Page {self.index} is not finalized")
        return f"Página {self.number} de {self.total}"
    
    def lines_in(self, column: Column) -> list[LinePlacement]:
        """Question lines placed in a column, top to bottom."""
        return [p for p in self.placements if p.column is column]


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.
    
    Attributes:
        pages: Page plans in document order
        warnings: Warning messages
        question_page_map: Question index -> page indices it appears on
        
    Example:
        >>> result = LayoutResult(pages=(page1, page2))
        >>> result.page_count
        2
    """
    
    pages: tuple[PagePlan, ...]
    warnings: list[str] = field(default_factory=list)
    question_page_map: dict[int, list[int]] = field(default_factory=dict)
    
    @property
    def page_count(self) -> int:
        return len(self.pages)
    
    @property
    def question_pages(self) -> tuple[PagePlan, ...]:
        return tuple(p for p in self.pages if p.kind == QUESTIONS_PAGE)
    
    @property
    def answer_key_pages(self) -> tuple[PagePlan, ...]:
        return tuple(p for p in self.pages if p.kind == ANSWER_KEY_PAGE)
    
    @property
    def total_placements(self) -> int:
        return sum(p.placement_count for p in self.pages)
    
    def lines_for_question(self, question_index: int) -> list[LinePlacement]:
        """Every line of a question in drawing order."""
        return [
            p
            for page in self.pages
            for p in page.placements
            if p.question_index == question_index
        ]
