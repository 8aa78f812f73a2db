"""Question records, the shared queue engine and the quiz mode states."""

from .errors import NoCurrentQuestion
from .question import Question
from .queue import QuestionQueue
from .question_state import QuestionState
from .states import ReviewState, StandardState

__all__ = [
    "NoCurrentQuestion",
    "Question",
    "QuestionQueue",
    "QuestionState",
    "ReviewState",
    "StandardState",
]
