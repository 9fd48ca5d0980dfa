"""
Module: exporter.output.renderer

Purpose:
    Render finalized page plans to PDF using ReportLab.
    Plans use top-down coordinates; ReportLab's origin is bottom-left, so
    every y is flipped against the page height here and nowhere else.

Key Functions:
    - finalize_pages(): Number every page once the page count is known
    - render_to_bytes(): Draw all pages, return the PDF bytes
    - to_data_uri(): Encode PDF bytes as a data URI
    - load_logo(): Open the header logo from a path or URL

Dependencies:
    - reportlab: PDF generation
    - PIL: Local logo images
    - exporter.layout.models: PagePlan, LinePlacement

Used By:
    - exporter.controller: Document assembly
"""

from __future__ import annotations

import base64
import io
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from simulado_toolkit.exporter.layout import LayoutConfig, LinePlacement, PagePlan

from .header import HeaderPlan, plan_footer

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:application/pdf;filename=generated.pdf;base64,"


def finalize_pages(pages: Sequence[PagePlan]) -> tuple[PagePlan, ...]:
    """
    Number pages in document order.
    
    Runs after every question and answer key page exists, since each
    footer needs the total page count.
    
    Args:
        pages: Question pages followed by answer key pages
        
    Returns:
        New PagePlans with index, number and total set
    """
    total = len(pages)
    return tuple(
        replace(page, index=i, number=i + 1, total=total)
        for i, page in enumerate(pages)
    )


def render_to_bytes(
    pages: Sequence[PagePlan],
    header: Optional[HeaderPlan],
    *,
    config: LayoutConfig,
    logo: Optional[ImageReader] = None,
    title: str = "",
) -> bytes:
    """
    Render finalized pages to a PDF document.
    
    Args:
        pages: Finalized page plans (see finalize_pages)
        header: First-page header, drawn on page 0
        config: Layout configuration (page size, footer font)
        logo: Header logo; the logo box stays empty when None
        title: PDF document title metadata
        
    Returns:
        PDF file contents
        
    Raises:
        ValueError: If a page was not finalized
    """
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(config.page_width, config.page_height))
    if title:
        c.setTitle(title)
    
    for page in pages:
        if page.index == 0 and header is not None:
            _draw_header(c, header, logo, config)
        for placement in page.placements:
            _draw_line(c, placement, config.page_height)
        _draw_line(c, plan_footer(page, config=config), config.page_height)
        c.showPage()
    
    c.save()
    
    pdf_bytes = buf.getvalue()
    logger.info(f"Rendered {len(pages)} pages ({len(pdf_bytes)} bytes)")
    return pdf_bytes


def to_data_uri(pdf_bytes: bytes) -> str:
    """Base64 data URI suitable for a download link."""
    return DATA_URI_PREFIX + base64.b64encode(pdf_bytes).decode("ascii")


def load_logo(source: Optional[str]) -> Optional[ImageReader]:
    """
    Open the header logo.
    
    Args:
        source: Local file path or http(s) URL; None for no logo
        
    Returns:
        ImageReader, or None when there is no logo or it cannot be loaded
    """
    if not source:
        return None
    
    try:
        if "://" not in str(source):
            img = Image.open(Path(source))
            img.load()
            reader = ImageReader(img)
        else:
            reader = ImageReader(str(source))
        reader.getSize()
    except Exception as e:
        logger.warning(f"Logo could not be loaded from {source}: {e}")
        return None
    
    return reader


def _draw_header(
    c: canvas.Canvas,
    header: HeaderPlan,
    logo: Optional[ImageReader],
    config: LayoutConfig,
) -> None:
    """Draw logo, header text and rules on the current page."""
    page_height = config.page_height
    
    if logo is not None:
        x, top, width, height = header.logo_box
        c.drawImage(
            logo,
            x,
            page_height - top - height,
            width=width,
            height=height,
            preserveAspectRatio=True,
            mask="auto",
        )
    
    for placement in header.placements:
        _draw_line(c, placement, page_height)
    
    c.saveState()
    for rule in header.rules:
        c.setLineWidth(rule.line_width)
        c.line(rule.x1, page_height - rule.y, rule.x2, page_height - rule.y)
    c.restoreState()


def _draw_line(c: canvas.Canvas, placement: LinePlacement, page_height: float) -> None:
    """
    Draw one placed line.
    
    Justified lines get extra word spacing so they end at the placement
    width; lines without spaces or already over-width are drawn as is.
    """
    baseline = page_height - placement.y
    c.setFont(placement.font_name, placement.font_size)
    
    if placement.align == "center":
        c.drawCentredString(placement.x, baseline, placement.text)
        return
    if placement.align == "right":
        c.drawRightString(placement.x, baseline, placement.text)
        return
    
    gaps = placement.text.count(" ")
    natural = stringWidth(placement.text, placement.font_name, placement.font_size)
    if placement.justify and gaps and natural < placement.width:
        text = c.beginText(placement.x, baseline)
        text.setFont(placement.font_name, placement.font_size)
        text.setWordSpace((placement.width - natural) / gaps)
        text.textOut(placement.text)
        c.drawText(text)
    else:
        c.drawString(placement.x, baseline, placement.text)
