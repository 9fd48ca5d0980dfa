"""
Module: exporter.config

Purpose:
    Configuration dataclass for question sheet export. Immutable
    configuration with validation on construction.

Key Classes:
    - ExportConfig: Options for generating a question sheet PDF

Dependencies:
    - dataclasses (std)
    - exporter.layout.config: LayoutConfig

Used By:
    - exporter.controller: Document assembly
    - cli: Command line options
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .layout.config import LayoutConfig

# Logo used by the web application's printed sheets
DEFAULT_LOGO_URL = "https://i.ibb.co/B5mR4PG0/ppuw.png"


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for exporting questions (immutable).
    
    Attributes:
        layout: Page geometry, fonts and spacing
        logo_source: Header logo path or URL; None leaves the logo box empty
        include_answer_key: Append the "Gabarito Oficial" page(s)
        document_title: PDF title metadata; defaults to the topic name
    
    Example:
        >>> config = ExportConfig(logo_source=DEFAULT_LOGO_URL)
    """
    
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    logo_source: Optional[str] = None
    include_answer_key: bool = True
    document_title: Optional[str] = None
    
    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.layout, LayoutConfig):
            raise ValueError(f"layout must be a LayoutConfig: {self.layout!r}")
        if self.logo_source is not None and not str(self.logo_source).strip():
            raise ValueError("logo_source must not be blank")
