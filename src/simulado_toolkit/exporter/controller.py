"""
Module: exporter.controller

Purpose:
    Assemble the question sheet PDF.
    Header → Two-column flow → Answer key → Page numbering → Render

Key Functions:
    - build_questions_pdf(): Full export, returns ExportResult
    - generate_questions_pdf(): Data URI entry point used by the web views

Key Classes:
    - ExportResult: PDF bytes plus layout diagnostics
    - ExportError: Exception for export failures

Dependencies:
    - exporter.layout: Question flow
    - exporter.output: Header, answer key, rendering
    - core.utils.serialization: Raw payload conversion

Used By:
    - cli: Command line export
    - Practice area "download PDF" action
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from simulado_toolkit.core.models import Question
from simulado_toolkit.core.schemas import ValidationError
from simulado_toolkit.core.utils import deserialize_question

from .config import ExportConfig
from .layout import LayoutError, LayoutResult, LineSplitter, flow_questions
from .output import (
    finalize_pages,
    load_logo,
    plan_answer_key,
    plan_header,
    render_to_bytes,
    to_data_uri,
)

logger = logging.getLogger(__name__)

EMPTY_QUESTIONS_NOTICE = "Não há questões para gerar o PDF."

QuestionLike = Union[Question, Mapping[str, Any]]


class ExportError(Exception):
    """Error during question sheet export."""
    pass


@dataclass(frozen=True)
class ExportResult:
    """
    Complete export result (immutable).
    
    Attributes:
        pdf_bytes: Rendered PDF document
        layout: Finalized pages (question pages then answer key pages)
        question_page_count: Pages holding questions
        answer_key_page_count: Pages holding the answer key
        warnings: Data issues found during export
        
    Example:
        >>> result = build_questions_pdf(questions, "Frações")
        >>> print(f"Generated {result.page_count} pages")
    """
    pdf_bytes: bytes
    layout: LayoutResult
    question_page_count: int
    answer_key_page_count: int
    warnings: tuple[str, ...] = ()
    
    @property
    def page_count(self) -> int:
        return self.layout.page_count
    
    @property
    def data_uri(self) -> str:
        return to_data_uri(self.pdf_bytes)


def build_questions_pdf(
    questions: Sequence[QuestionLike],
    topic_name: str,
    subject_name: Optional[str] = None,
    *,
    config: Optional[ExportConfig] = None,
) -> ExportResult:
    """
    Build the question sheet from start to finish.
    
    Pipeline:
    1. Normalise input to Question models
    2. Plan the first-page header
    3. Flow questions into two columns from the header's end
    4. Plan the answer key pages (optional)
    5. Number every page
    6. Render to PDF
    
    Args:
        questions: Question models or raw application payloads
        topic_name: Document title
        subject_name: Discipline shown in the header, if any
        config: Export configuration (defaults to ExportConfig())
        
    Returns:
        ExportResult with PDF bytes and finalized layout
        
    Raises:
        ExportError: If there are no questions, a payload is invalid, or
            the layout cannot place the content
    """
    config = config or ExportConfig()
    layout_config = config.layout
    start_time = time.perf_counter()
    
    if not questions:
        raise ExportError(EMPTY_QUESTIONS_NOTICE)
    
    models = _to_questions(questions)
    logger.info(f"Exporting {len(models)} questions for {topic_name!r}")
    
    splitter = LineSplitter.from_config(layout_config)
    
    # 1. Header (first page only)
    header = plan_header(
        topic_name,
        subject_name,
        len(models),
        splitter=splitter,
        config=layout_config,
    )
    
    # 2. Questions
    try:
        flow = flow_questions(models, header.end_y, splitter=splitter, config=layout_config)
    except LayoutError as e:
        raise ExportError(f"Failed to lay out questions: {e}") from e
    
    warnings: List[str] = list(flow.warnings)
    pages = list(flow.pages)
    
    # 3. Answer key
    answer_pages = []
    if config.include_answer_key:
        answer_pages = plan_answer_key(models, len(pages), config=layout_config)
        missing = [i + 1 for i, q in enumerate(models) if q.answer_index is None]
        if missing:
            warnings.append(f"Correct answer not among options for questions {missing}")
        pages.extend(answer_pages)
    
    # 4. Page numbers need the final page count
    finalized = finalize_pages(pages)
    layout = LayoutResult(
        pages=finalized,
        warnings=warnings,
        question_page_map=flow.question_page_map,
    )
    
    # 5. Render
    pdf_bytes = render_to_bytes(
        finalized,
        header,
        config=layout_config,
        logo=load_logo(config.logo_source),
        title=config.document_title or topic_name,
    )
    
    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Question sheet completed in {elapsed:.2f}s: "
        f"{flow.page_count} question pages, {len(answer_pages)} answer key pages"
    )
    
    return ExportResult(
        pdf_bytes=pdf_bytes,
        layout=layout,
        question_page_count=flow.page_count,
        answer_key_page_count=len(answer_pages),
        warnings=tuple(warnings),
    )


def generate_questions_pdf(
    questions: Sequence[QuestionLike],
    topic_name: str,
    subject_name: Optional[str] = None,
    *,
    config: Optional[ExportConfig] = None,
    notify: Optional[Callable[[str], None]] = None,
) -> str:
    """
    Generate the question sheet as a data URI.
    
    Empty input is a precondition failure, not an error: the user is
    notified and an empty string is returned without rendering anything.
    
    Args:
        questions: Question models or raw application payloads
        topic_name: Document title
        subject_name: Discipline shown in the header, if any
        config: Export configuration
        notify: Receives user-facing notices (default: log a warning)
        
    Returns:
        "data:application/pdf;...;base64,..." or "" for empty input
        
    Raises:
        ExportError: If a payload is invalid or the layout fails
    """
    if not questions:
        (notify or logger.warning)(EMPTY_QUESTIONS_NOTICE)
        return ""
    
    return build_questions_pdf(
        questions,
        topic_name,
        subject_name,
        config=config,
    ).data_uri


def _to_questions(questions: Sequence[QuestionLike]) -> list[Question]:
    """Accept Question models or application dicts."""
    models = []
    for index, item in enumerate(questions):
        if isinstance(item, Question):
            models.append(item)
            continue
        try:
            models.append(deserialize_question(dict(item)))
        except (ValidationError, ValueError, KeyError, TypeError) as e:
            raise ExportError(f"Invalid question at index {index}: {e}") from e
    return models
