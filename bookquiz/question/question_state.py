from __future__ import annotations

"""Abstract quiz state.

Each concrete state is one quiz mode of the finite-state machine. States only
decide how an answer is processed; the question bookkeeping lives in a
`QuestionQueue` that is wrapped, never re-implemented, so switching modes keeps
the waiting/asked lists and the current question exactly as they were.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, List, Optional, Tuple, Type, TypeVar

from .question import Question
from .queue import QuestionQueue

S = TypeVar("S", bound="QuestionState")


class QuestionState(ABC):
    """Base class for quiz modes."""

    mode_id: ClassVar[str] = ""

    def __init__(
        self,
        questions: Optional[Iterable[Question]] = None,
        *,
        queue: Optional[QuestionQueue] = None,
    ) -> None:
        if queue is not None and questions is not None:
            raise ValueError("Pass either questions or an existing queue, not both")
        self.queue = queue if queue is not None else QuestionQueue(questions)

    @abstractmethod
    def process_answer(self, answer: str) -> str:
        """Process the user's answer to the current question.

        Returns the response to show the user. Raises NoCurrentQuestion when
        there is no current question.
        """

    def switch_to(self, state_cls: Type[S]) -> S:
        """Return a state of another mode sharing this state's queue."""
        return state_cls(queue=self.queue)

    def grade(self, answer: str) -> bool:
        return self.queue.get_current_question().is_answer(answer)

    def has_more_questions(self) -> bool:
        return self.queue.has_more_questions()

    def get_current_question_text(self) -> str:
        return self.queue.get_current_question_text()

    def get_current_question_choices(self) -> Tuple[str, str, str, str]:
        return self.queue.get_current_question_choices()

    def get_current_question_answer(self) -> str:
        return self.queue.get_current_question_answer()

    def get_current_question(self) -> Question:
        return self.queue.get_current_question()

    def advance(self) -> None:
        self.queue.advance()

    def insert(self, question: Question) -> None:
        self.queue.insert(question)

    def get_questions(self) -> List[Question]:
        return self.queue.get_questions()
