"""
Module: exporter.layout.text

Purpose:
    Text measurement and line splitting on top of ReportLab font metrics.
    Wrapping is whitespace based: words are never hyphenated, and a single
    word wider than the column stays on its own (over-width) line.

Key Classes:
    - LineSplitter: Wrap text to a width in the regular or bold font

Dependencies:
    - reportlab: stringWidth, simpleSplit

Used By:
    - exporter.layout.drawer: Wrapping content items
    - exporter.output.header: Measuring labels and titles
"""

from __future__ import annotations

from typing import Optional

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

from .config import LayoutConfig


class LineSplitter:
    """
    Wraps text for a font pair at a fixed size.
    
    Example:
        >>> splitter = LineSplitter.from_config(LayoutConfig())
        >>> splitter.split("uma frase curta", 200)
        ['uma frase curta']
    """
    
    def __init__(self, font_name: str, bold_font_name: str, font_size: float):
        self.font_name = font_name
        self.bold_font_name = bold_font_name
        self.font_size = font_size
    
    @classmethod
    def from_config(cls, config: LayoutConfig) -> LineSplitter:
        return cls(config.font_name, config.bold_font_name, config.font_size)
    
    def font_for(self, bold: bool) -> str:
        return self.bold_font_name if bold else self.font_name
    
    def width_of(self, text: str, bold: bool = False, size: Optional[float] = None) -> float:
        """Rendered width of text in points."""
        return stringWidth(text, self.font_for(bold), size or self.font_size)
    
    def split(self, text: str, width: float, bold: bool = False) -> list[str]:
        """
        Wrap text into lines no wider than width.
        
        Runs of whitespace collapse to single spaces; explicit newlines start
        a new line. Blank text gives one empty line so it still takes a row.
        
        Args:
            text: Text to wrap
            width: Maximum line width in points
            bold: Measure with the bold font
            
        Returns:
            Lines in reading order
        """
        lines = simpleSplit(text, self.font_for(bold), self.font_size, width)
        return lines or [""]
