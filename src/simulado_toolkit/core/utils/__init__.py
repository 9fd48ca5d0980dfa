"""
Utils Package

Serialization and loading of question payloads.
"""

from .serialization import (
    LoaderError,
    serialize_question,
    deserialize_question,
    load_questions,
    save_questions,
)

__all__ = [
    "LoaderError",
    "serialize_question",
    "deserialize_question",
    "load_questions",
    "save_questions",
]
