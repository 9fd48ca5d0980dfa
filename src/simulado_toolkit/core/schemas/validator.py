"""
Schema Validation Utilities

Validates question payloads before they are turned into Question models.

Two levels:
- Basic checks (always): required keys and their types, with a dotted path
  to the offending field.
- Strict mode: full JSON Schema validation (question.schema.json) via
  jsonschema.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""
    
    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question(data: Any, *, strict: bool = False, path: str = "") -> None:
    """
    Validate a question payload.
    
    Args:
        data: Question dictionary to validate
        strict: If True, also validate against the JSON schema
        path: Prefix for error paths (e.g. "questions[3]")
        
    Raises:
        ValidationError: If data is invalid
    """
    prefix = f"{path}." if path else ""
    
    if not isinstance(data, dict):
        raise ValidationError(
            f"Question must be an object, got {type(data).__name__}",
            path=path,
        )
    
    required = ["statement", "options", "correctAnswer"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )
    
    statement = data["statement"]
    if not isinstance(statement, str) or not statement.strip():
        raise ValidationError(
            f"Invalid statement: {statement!r} (must be a non-empty string)",
            path=f"{prefix}statement"
        )
    
    options = data["options"]
    if not isinstance(options, list) or not options:
        raise ValidationError(
            f"Invalid options: {options!r} (must be a non-empty list)",
            path=f"{prefix}options"
        )
    for i, option in enumerate(options):
        if not isinstance(option, str):
            raise ValidationError(
                f"Invalid option: {option!r} (must be a string)",
                path=f"{prefix}options[{i}]"
            )
    
    if not isinstance(data["correctAnswer"], str):
        raise ValidationError(
            f"Invalid correctAnswer: {data['correctAnswer']!r} (must be a string)",
            path=f"{prefix}correctAnswer"
        )
    
    if strict:
        schema = _load_schema("question")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            field_path = ".".join(str(p) for p in e.absolute_path)
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=f"{prefix}{field_path}" if field_path else path,
                errors=[e.message]
            ) from e


def validate_question_list(data: Any, *, strict: bool = False) -> None:
    """
    Validate a list of question payloads.
    
    Raises:
        ValidationError: On the first invalid question (path names its index)
    """
    if not isinstance(data, list):
        raise ValidationError(
            f"Questions must be a list, got {type(data).__name__}",
            path="questions",
        )
    for i, item in enumerate(data):
        validate_question(item, strict=strict, path=f"questions[{i}]")
