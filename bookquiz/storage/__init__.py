from .schema import COLUMNS, QuestionRow
from .store import (
    validate_records,
    load_records,
    load_questions,
)

__all__ = [
    "COLUMNS",
    "QuestionRow",
    "validate_records",
    "load_records",
    "load_questions",
]
