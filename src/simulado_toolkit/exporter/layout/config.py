"""
Module: exporter.layout.config

Purpose:
    Configuration for the question sheet layout engine.
    Defines page dimensions, margins, fonts and vertical spacing, all in
    PDF points (1/72 inch), with top-down y coordinates.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - reportlab: A4 page size
    - dataclasses (std)

Used By:
    - exporter.layout.drawer: Line fitting
    - exporter.layout.flow: Column and page transitions
    - exporter.output: Header, answer key and footer rendering
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import A4

# Standard A4 portrait in points
DEFAULT_PAGE_WIDTH_PT, DEFAULT_PAGE_HEIGHT_PT = A4

# Ratio between font size and line height for question text
LINE_HEIGHT_FACTOR = 1.2
# Ratio used for header fields and answer key entries
LOOSE_LINE_HEIGHT_FACTOR = 1.5


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).
    
    Attributes:
        page_width: Page width in points
        page_height: Page height in points
        margin: Uniform page margin in points
        column_gutter: Horizontal gap between the two question columns
        font_name: Regular font for options and body text
        bold_font_name: Bold font for statements, labels and titles
        font_size: Body font size
        title_font_size: Title font size (topic title, answer key title)
        footer_font_size: Page number font size
        space_after_statement: Gap after a fully drawn statement
        space_between_options: Gap after every option but the last
        space_after_question_block: Gap after a fully drawn question
        
    Example:
        >>> config = LayoutConfig()
        >>> config.line_height
        12.0
        >>> config.min_content_height
        30.0
    """
    
    # Page dimensions
    page_width: float = DEFAULT_PAGE_WIDTH_PT
    page_height: float = DEFAULT_PAGE_HEIGHT_PT
    
    # Margins
    margin: float = 36
    column_gutter: float = 20
    
    # Fonts
    font_name: str = "Helvetica"
    bold_font_name: str = "Helvetica-Bold"
    font_size: float = 10
    title_font_size: float = 18
    footer_font_size: float = 8
    
    # Spacing
    space_after_statement: float = 5
    space_between_options: float = 2
    space_after_question_block: float = 12
    
    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive: {self.font_size}")
        if self.margin < 0 or self.column_gutter < 0:
            raise ValueError("margin and column_gutter must be non-negative")
        if self.content_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.column_width <= 0:
            raise ValueError("Gutter leaves no room for columns")
        if self.content_bottom - self.content_top < self.min_content_height:
            raise ValueError("Margins exceed page height")
    
    @property
    def line_height(self) -> float:
        """Line advance for wrapped question text."""
        return self.font_size * LINE_HEIGHT_FACTOR
    
    @property
    def loose_line_height(self) -> float:
        """Line advance for header fields and answer key entries."""
        return self.font_size * LOOSE_LINE_HEIGHT_FACTOR
    
    @property
    def min_content_height(self) -> float:
        """Below this much room a column is treated as full without drawing."""
        return self.loose_line_height * 2
    
    @property
    def footer_height(self) -> float:
        """Space reserved above the bottom margin for the page number."""
        return self.font_size * 3
    
    @property
    def content_top(self) -> float:
        """Y where content starts on every page after the first."""
        return self.margin
    
    @property
    def content_bottom(self) -> float:
        """Lowest y question text may reach."""
        return self.page_height - self.margin - self.footer_height
    
    @property
    def content_width(self) -> float:
        """Width available for content (excluding margins)."""
        return self.page_width - 2 * self.margin
    
    @property
    def column_width(self) -> float:
        """Width of each of the two question columns."""
        return (self.content_width - self.column_gutter) / 2
    
    @property
    def left_column_x(self) -> float:
        return self.margin
    
    @property
    def right_column_x(self) -> float:
        return self.margin + self.column_width + self.column_gutter
    
    @property
    def footer_y(self) -> float:
        """Baseline of the page number footer."""
        return self.page_height - self.margin
