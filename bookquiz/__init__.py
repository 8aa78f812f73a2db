"""BookQuiz package initialization.

Exposes the question engine and the quiz modes so applications can simply
`import bookquiz` and start driving a quiz.
"""

from __future__ import annotations

from .question.errors import NoCurrentQuestion
from .question.question import Question
from .question.queue import QuestionQueue
from .question.question_state import QuestionState
from .question.states import ReviewState, StandardState

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "NoCurrentQuestion",
    "Question",
    "QuestionQueue",
    "QuestionState",
    "ReviewState",
    "StandardState",
]
