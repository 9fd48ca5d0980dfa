"""
Module: exporter.output

Purpose:
    Header/footer and answer key planning, and PDF rendering of page plans
    with ReportLab.

Key Functions:
    - plan_header(): First-page header
    - plan_answer_key(): Answer key pages
    - finalize_pages(): Page numbering pass
    - render_to_bytes(): PDF rendering

Dependencies:
    - reportlab: PDF generation
    - PIL: Logo loading
    - exporter.layout: Page plans

Used By:
    - exporter.controller: Document assembly
"""

from .header import HeaderPlan, Rule, plan_header, plan_footer, count_label
from .answer_key import plan_answer_key, answer_key_entries, ANSWER_KEY_TITLE
from .renderer import (
    finalize_pages,
    render_to_bytes,
    to_data_uri,
    load_logo,
    DATA_URI_PREFIX,
)

__all__ = [
    "HeaderPlan",
    "Rule",
    "plan_header",
    "plan_footer",
    "count_label",
    "plan_answer_key",
    "answer_key_entries",
    "ANSWER_KEY_TITLE",
    "finalize_pages",
    "render_to_bytes",
    "to_data_uri",
    "load_logo",
    "DATA_URI_PREFIX",
]
