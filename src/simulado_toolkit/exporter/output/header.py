"""
Module: exporter.output.header

Purpose:
    Document chrome: the first-page header (logo, student name field,
    discipline, question count, title, separator) and the per-page
    "Página i de N" footer.

Key Functions:
    - plan_header(): Position every header element, returns HeaderPlan
    - plan_footer(): Position the footer of a finalized page
    - count_label(): "1 questão" / "N questões"

Dependencies:
    - exporter.layout: LayoutConfig, LineSplitter, LinePlacement, PagePlan

Used By:
    - exporter.controller: Document assembly
    - exporter.output.renderer: Drawing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from simulado_toolkit.exporter.layout import (
    LayoutConfig,
    LinePlacement,
    LineSplitter,
    PagePlan,
)

logger = logging.getLogger(__name__)

# Logo box, top-left of the first page
LOGO_WIDTH_PT = 70
LOGO_HEIGHT_PT = 34
LOGO_TO_INFO_GAP_PT = 20
# First info baseline sits this far below the top margin
INFO_BASELINE_OFFSET_PT = 8
# Gap between a bold field label and its value or rule
LABEL_GAP_PT = 5
STUDENT_RULE_WIDTH_PT = 0.5
SEPARATOR_WIDTH_PT = 1
TITLE_GAP_PT = 30
SEPARATOR_GAP_PT = 15
# Rendered height of a title line relative to its font size
TITLE_HEIGHT_FACTOR = 1.15

STUDENT_LABEL = "Aluno(a):"
SUBJECT_LABEL = "Disciplina:"
COUNT_LABEL = "Total de questões:"


@dataclass(frozen=True)
class Rule:
    """Horizontal line segment (top-down y)."""
    x1: float
    x2: float
    y: float
    line_width: float


@dataclass(frozen=True)
class HeaderPlan:
    """
    Positioned header elements (immutable).
    
    Attributes:
        logo_box: (x, top, width, height) of the logo
        placements: Text elements
        rules: Student name rule and separator
        end_y: First baseline available to question content
    """
    logo_box: tuple[float, float, float, float]
    placements: tuple[LinePlacement, ...]
    rules: tuple[Rule, ...]
    end_y: float


def count_label(count: int) -> str:
    """Question count with the singular/plural noun."""
    return f"{count} {'questão' if count == 1 else 'questões'}"


def plan_header(
    topic_name: str,
    subject_name: Optional[str],
    question_count: int,
    *,
    splitter: LineSplitter,
    config: LayoutConfig,
) -> HeaderPlan:
    """
    Position the first-page header.
    
    Layout (top-down):
        [logo]  Aluno(a): ____________________________
                Disciplina: <subject>          (only if given)
                Total de questões: N questões
                        <centred title>
        ──────────────────────────────────────────────
    
    Args:
        topic_name: Title, wrapped to the content width when too long
        subject_name: Discipline shown under the student field, if any
        question_count: Number of questions in the document
        splitter: Text measurer
        config: Layout configuration
        
    Returns:
        HeaderPlan whose end_y is where question columns start
    """
    margin = config.margin
    right_edge = config.page_width - margin
    bold = config.bold_font_name
    regular = config.font_name
    size = config.font_size
    
    placements: List[LinePlacement] = []
    rules: List[Rule] = []
    
    info_x = margin + LOGO_WIDTH_PT + LOGO_TO_INFO_GAP_PT
    info_y = margin + INFO_BASELINE_OFFSET_PT
    
    def field(label: str, y: float) -> float:
        placements.append(_chrome(label, info_x, y, bold, size))
        return info_x + splitter.width_of(label, bold=True) + LABEL_GAP_PT
    
    value_x = field(STUDENT_LABEL, info_y)
    rules.append(Rule(value_x, right_edge, info_y, STUDENT_RULE_WIDTH_PT))
    info_y += config.loose_line_height
    
    if subject_name:
        value_x = field(SUBJECT_LABEL, info_y)
        placements.append(_chrome(subject_name, value_x, info_y, regular, size))
        info_y += config.loose_line_height
    
    value_x = field(COUNT_LABEL, info_y)
    placements.append(_chrome(count_label(question_count), value_x, info_y, regular, size))
    
    header_end = max(margin + LOGO_HEIGHT_PT, info_y)
    
    # Title, centred, one line per wrapped segment
    title_size = config.title_font_size
    title_height = title_size * TITLE_HEIGHT_FACTOR
    title_lines = LineSplitter(regular, bold, title_size).split(
        topic_name, config.content_width, bold=True
    )
    y = header_end + TITLE_GAP_PT
    for k, line in enumerate(title_lines):
        if k:
            y += title_height
        placements.append(
            _chrome(line, config.page_width / 2, y, bold, title_size, align="center")
        )
    y += title_height + SEPARATOR_GAP_PT
    
    rules.append(Rule(margin, right_edge, y, SEPARATOR_WIDTH_PT))
    y += SEPARATOR_GAP_PT
    
    logger.debug(f"Header ends at y={y:.1f} ({len(title_lines)} title lines)")
    
    return HeaderPlan(
        logo_box=(margin, margin, LOGO_WIDTH_PT, LOGO_HEIGHT_PT),
        placements=tuple(placements),
        rules=tuple(rules),
        end_y=y,
    )


def plan_footer(page: PagePlan, *, config: LayoutConfig) -> LinePlacement:
    """
    Right-aligned page number for a finalized page.
    
    Raises:
        ValueError: If the page has not been numbered yet
    """
    return _chrome(
        page.footer_text,
        config.page_width - config.margin,
        config.footer_y,
        config.font_name,
        config.footer_font_size,
        align="right",
    )


def _chrome(
    text: str,
    x: float,
    y: float,
    font_name: str,
    font_size: float,
    align: str = "left",
) -> LinePlacement:
    """Placement for document chrome (not part of any question)."""
    return LinePlacement(
        text=text,
        x=x,
        y=y,
        width=0,
        font_name=font_name,
        font_size=font_size,
        align=align,
    )
