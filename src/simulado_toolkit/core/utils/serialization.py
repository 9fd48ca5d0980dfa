"""
Serialization Utilities

Provides to/from JSON utilities for question payloads.

Supported files:
- ``.json`` holding a list of questions
- ``.json`` holding an object with a ``questions`` list (a saved simulado
  or quiz, other keys ignored)
- ``.jsonl`` with one question object per line
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.questions import Question
from ..schemas.validator import validate_question, ValidationError


class LoaderError(Exception):
    """Error loading questions from a file."""
    pass


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """
    Serialize a Question to a dictionary.
    
    The output can be written to JSON and will pass schema validation.
    """
    return question.to_dict()


def deserialize_question(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> Question:
    """
    Deserialize a Question from a dictionary.
    
    Args:
        data: Dictionary from JSON
        validate: Whether to validate the payload first
        strict: Use full JSON schema validation
        
    Returns:
        Question instance
        
    Raises:
        ValidationError: If validation is enabled and data is invalid
    """
    if validate:
        validate_question(data, strict=strict)
    return Question.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_questions(
    path: Path,
    *,
    validate: bool = True,
    strict: bool = False,
) -> list[Question]:
    """
    Load questions from a JSON or JSONL file.
    
    Args:
        path: Path to the questions file
        validate: Whether to validate each question
        strict: Use full JSON schema validation
        
    Returns:
        List of Question instances in file order
        
    Raises:
        LoaderError: If the file is missing, unreadable, or any question is invalid
    """
    path = Path(path)
    if not path.exists():
        raise LoaderError(f"Questions file not found: {path}")
    
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"Cannot read {path}: {e}") from e
    
    if path.suffix.lower() == ".jsonl":
        return _parse_jsonl(text, path, validate=validate, strict=strict)
    
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoaderError(f"Malformed JSON in {path}: {e}") from e
    
    if isinstance(payload, dict) and "questions" in payload:
        payload = payload["questions"]
    if not isinstance(payload, list):
        raise LoaderError(
            f"Expected a list of questions or an object with 'questions' in {path}"
        )
    
    questions = []
    for index, item in enumerate(payload):
        try:
            questions.append(deserialize_question(item, validate=validate, strict=strict))
        except (ValidationError, ValueError, KeyError, TypeError) as e:
            raise LoaderError(f"Invalid question at index {index} in {path}: {e}") from e
    
    return questions


def _parse_jsonl(text: str, path: Path, *, validate: bool, strict: bool) -> list[Question]:
    """Parse one question per non-blank line."""
    questions = []
    for line_no, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        
        try:
            data = json.loads(line)
            questions.append(deserialize_question(data, validate=validate, strict=strict))
        except (json.JSONDecodeError, ValidationError, ValueError, KeyError, TypeError) as e:
            raise LoaderError(f"Error parsing line {line_no} of {path}: {e}") from e
    
    return questions


def save_questions(questions: list[Question], path: Path) -> None:
    """
    Save questions to a JSON (list) or JSONL file, chosen by suffix.
    
    Args:
        questions: List of Question instances to save
        path: Output path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() == ".jsonl":
            for question in questions:
                f.write(json.dumps(serialize_question(question), ensure_ascii=False))
                f.write("\n")
        else:
            json.dump(
                [serialize_question(q) for q in questions],
                f,
                ensure_ascii=False,
                indent=2,
            )
