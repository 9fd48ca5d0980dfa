"""
Schemas Package

JSON schema definitions and validation utilities for question payloads.
"""

from .validator import (
    validate_question,
    validate_question_list,
    ValidationError,
)

__all__ = [
    "validate_question",
    "validate_question_list",
    "ValidationError",
]
