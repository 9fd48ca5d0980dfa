"""
Module: exporter.output.answer_key

Purpose:
    Plan the answer key ("Gabarito Oficial") appended after the questions.
    Single column, fixed line advance, one entry per question in input
    order. A correct answer missing from the options shows as "?".

Key Functions:
    - plan_answer_key(): Build answer key page plans
    - answer_key_entries(): "Questão i: X" strings

Dependencies:
    - simulado_toolkit.core.models: Question
    - exporter.layout: LayoutConfig, LinePlacement, PagePlan

Used By:
    - exporter.controller: Document assembly
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from simulado_toolkit.core.models import Question, UNKNOWN_ANSWER_LETTER
from simulado_toolkit.exporter.layout import (
    ANSWER_KEY_PAGE,
    LayoutConfig,
    LinePlacement,
    PagePlan,
)

from .header import TITLE_HEIGHT_FACTOR

logger = logging.getLogger(__name__)

ANSWER_KEY_TITLE = "Gabarito Oficial"


def answer_key_entries(questions: Sequence[Question]) -> list[str]:
    """
    One "Questão i: LETTER" line per question.
    
    Logs a warning for every question whose correct answer is not one of
    its options; the entry shows "?" instead of failing the export.
    """
    entries = []
    for index, question in enumerate(questions):
        letter = question.answer_letter
        if letter == UNKNOWN_ANSWER_LETTER:
            logger.warning(
                f"Question {index + 1}: correct answer {question.correct_answer!r} "
                f"not found among options"
            )
        entries.append(f"Questão {index + 1}: {letter}")
    return entries


def plan_answer_key(
    questions: Sequence[Question],
    first_page_index: int,
    *,
    config: LayoutConfig,
) -> list[PagePlan]:
    """
    Lay out the answer key starting on a new page.
    
    Args:
        questions: Questions in document order
        first_page_index: Index the first answer key page will take
        config: Layout configuration
        
    Returns:
        One or more answer key PagePlans
    """
    margin = config.margin
    page_limit = config.page_height - margin
    
    pages: List[List[LinePlacement]] = [[]]
    y = margin
    
    pages[0].append(
        LinePlacement(
            text=ANSWER_KEY_TITLE,
            x=config.page_width / 2,
            y=y,
            width=0,
            font_name=config.bold_font_name,
            font_size=config.title_font_size,
            align="center",
        )
    )
    y += config.title_font_size * TITLE_HEIGHT_FACTOR * 2
    
    for entry in answer_key_entries(questions):
        if y > page_limit:
            pages.append([])
            y = margin
        pages[-1].append(
            LinePlacement(
                text=entry,
                x=margin,
                y=y,
                width=0,
                font_name=config.font_name,
                font_size=config.font_size,
            )
        )
        y += config.loose_line_height
    
    logger.debug(f"Answer key for {len(questions)} questions spans {len(pages)} pages")
    
    return [
        PagePlan(index=first_page_index + i, placements=tuple(lines), kind=ANSWER_KEY_PAGE)
        for i, lines in enumerate(pages)
    ]
