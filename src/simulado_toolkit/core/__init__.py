"""
Simulado Toolkit Core Package

Shared data models and utilities consumed by the exporter.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Question records are frozen dataclasses; the exporter never mutates them.

2. **Lenient Answer Lookup**
   - `Question.answer_letter` falls back to "?" when the correct answer is
     not one of the options, so a usable answer key is always produced.

3. **Application Key Names**
   - Payloads use the camelCase keys of the web application
     (`correctAnswer`, `optionJustifications`), mapped to snake_case fields.
"""

from .models import Question

__all__ = [
    "Question",
]
