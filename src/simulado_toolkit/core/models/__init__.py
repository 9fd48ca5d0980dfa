"""
Core Models Package

Immutable, validated data models that serve as the single source of truth
for question data entering the exporter.
"""

from .questions import Question, UNKNOWN_ANSWER_LETTER

__all__ = [
    "Question",
    "UNKNOWN_ANSWER_LETTER",
]
