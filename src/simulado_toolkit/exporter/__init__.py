"""
Module: exporter

Purpose:
    Question sheet export: renders multiple-choice questions into a
    two-column printable PDF with a header, page numbers and an answer key.

Key Functions:
    - build_questions_pdf(): Main entry point, returns ExportResult
    - generate_questions_pdf(): Data URI for download links

Key Classes:
    - ExportConfig: Configuration for export
    - LayoutConfig: Page geometry, fonts and spacing
    - ExportResult / ExportError

Dependencies:
    - reportlab: Font metrics and PDF generation
    - PIL: Logo loading
    - simulado_toolkit.core: Question model

Used By:
    - simulado_toolkit.cli
"""

from .config import ExportConfig, DEFAULT_LOGO_URL
from .layout import LayoutConfig
from .controller import (
    build_questions_pdf,
    generate_questions_pdf,
    ExportResult,
    ExportError,
    EMPTY_QUESTIONS_NOTICE,
)

__all__ = [
    # Config
    "ExportConfig",
    "LayoutConfig",
    "DEFAULT_LOGO_URL",
    # Controller
    "build_questions_pdf",
    "generate_questions_pdf",
    "ExportResult",
    "ExportError",
    "EMPTY_QUESTIONS_NOTICE",
]
