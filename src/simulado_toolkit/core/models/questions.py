"""
Module: questions

Purpose:
    Provides the Question dataclass - the multiple-choice record produced by
    the question generator / editor and consumed by the PDF exporter.
    Immutable, with the answer position calculated on demand.

Key Functions:
    - Question.answer_index: Position of the correct answer in options
    - Question.answer_letter: Answer key letter ("A", "B", ... or "?")
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - core.utils.serialization
    - exporter.layout.models (content item construction)
    - exporter.output.answer_key
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

# Letter rendered in the answer key when correct_answer matches no option
UNKNOWN_ANSWER_LETTER = "?"


@dataclass(frozen=True)
class Question:
    """
    Multiple-choice question (immutable).
    
    Attributes:
        statement: Question text, required and non-empty
        options: Candidate answers in display order (already shuffled upstream)
        correct_answer: Text of the correct option (exact match expected)
        justification: Explanation of the answer (not rendered)
        option_justifications: Per-option explanations (not rendered)
        id: Identifier from the surrounding application
        subject_name: Optional subject the question belongs to
        topic_name: Optional topic the question belongs to
    
    Invariants:
        - statement is non-empty
        - options has at least one entry, all strings
        - correct_answer is NOT required to be in options
    
    Example:
        >>> q = Question(
        ...     statement="Quanto é 2 + 2?",
        ...     options=("3", "4", "5"),
        ...     correct_answer="4",
        ... )
        >>> q.answer_letter
        'B'
    """
    
    statement: str
    options: tuple[str, ...]
    correct_answer: str
    justification: str = ""
    option_justifications: Dict[str, str] = field(default_factory=dict)
    id: str = ""
    subject_name: Optional[str] = None
    topic_name: Optional[str] = None
    
    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not isinstance(self.statement, str) or not self.statement.strip():
            raise ValueError(f"statement must be a non-empty string: {self.statement!r}")
        if not isinstance(self.options, tuple):
            # Accept any sequence, store as tuple to keep the record hashable-ish
            object.__setattr__(self, "options", tuple(self.options))
        if not self.options:
            raise ValueError("options must contain at least one entry")
        for i, option in enumerate(self.options):
            if not isinstance(option, str):
                raise ValueError(f"option {i} must be a string: {option!r}")
        if not isinstance(self.correct_answer, str):
            raise ValueError(f"correct_answer must be a string: {self.correct_answer!r}")
    
    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────
    
    @property
    def answer_index(self) -> Optional[int]:
        """
        Index of the correct answer within options.
        
        Returns:
            First index whose option equals correct_answer exactly, or None
        """
        try:
            return self.options.index(self.correct_answer)
        except ValueError:
            return None
    
    @property
    def answer_letter(self) -> str:
        """Upper-case option letter for the answer key, "?" when not found."""
        index = self.answer_index
        if index is None:
            return UNKNOWN_ANSWER_LETTER
        return chr(ord("A") + index)
    
    @property
    def option_count(self) -> int:
        return len(self.options)
    
    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────
    
    def to_dict(self) -> dict:
        """
        Serialize to dictionary using the application's key names.
        
        Returns:
            Dict representation
        """
        d = {
            "id": self.id,
            "statement": self.statement,
            "options": list(self.options),
            "correctAnswer": self.correct_answer,
            "justification": self.justification,
        }
        if self.option_justifications:
            d["optionJustifications"] = dict(self.option_justifications)
        if self.subject_name is not None:
            d["subjectName"] = self.subject_name
        if self.topic_name is not None:
            d["topicName"] = self.topic_name
        return d
    
    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Deserialize from dictionary.
        
        Args:
            data: Dict representation (camelCase keys)
            
        Returns:
            Question instance
        """
        return cls(
            statement=data["statement"],
            options=tuple(data["options"]),
            correct_answer=data["correctAnswer"],
            justification=data.get("justification", ""),
            option_justifications=dict(data.get("optionJustifications") or {}),
            id=data.get("id", ""),
            subject_name=data.get("subjectName"),
            topic_name=data.get("topicName"),
        )
    
    def __repr__(self) -> str:
        """Concise representation for debugging."""
        statement = self.statement if len(self.statement) <= 40 else self.statement[:37] + "..."
        return (
            f"Question({self.id!r}, {statement!r}, "
            f"options={self.option_count}, answer={self.answer_letter})"
        )
