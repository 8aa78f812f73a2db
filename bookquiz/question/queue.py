from __future__ import annotations

"""Shared question bookkeeping: waiting queue, asked list and cursor.

The current question stays at the front of the waiting queue while it is
current. It is only removed from the queue by the next call to `advance`,
which is why `get_questions()` lists it among the waiting questions.
"""

from typing import Iterable, List, Optional, Tuple

from ..app.explain import trace as xtrace
from .errors import NoCurrentQuestion
from .question import Question

FRONT = 0


class QuestionQueue:
    """Engine shared by every quiz mode.

    The sequence passed to the constructor is taken over: a list is kept as
    the waiting queue itself, so the caller must not touch it afterwards.
    """

    def __init__(self, questions: Optional[Iterable[Question]] = None) -> None:
        if questions is None:
            questions = []
        self._waiting: List[Question] = questions if isinstance(questions, list) else list(questions)
        self._asked: List[Question] = []
        self._current: Optional[Question] = None
        self.advance()

    @property
    def current(self) -> Optional[Question]:
        return self._current

    @property
    def waiting_count(self) -> int:
        return len(self._waiting)

    @property
    def asked_count(self) -> int:
        return len(self._asked)

    def has_more_questions(self) -> bool:
        return self._current is not None or len(self._waiting) != 0

    def get_current_question(self) -> Question:
        if self._current is None:
            raise NoCurrentQuestion()
        return self._current

    def get_current_question_text(self) -> str:
        return self.get_current_question().text

    def get_current_question_choices(self) -> Tuple[str, str, str, str]:
        return self.get_current_question().choices

    def get_current_question_answer(self) -> str:
        return self.get_current_question().answer

    def advance(self) -> None:
        """Move past the current question.

        The previous current question goes to the end of the asked list and
        leaves the front of the waiting queue. The new front, if any, becomes
        current but stays in the queue until the next advance.
        """
        if self._current is not None:
            self._asked.append(self._current)
            self._waiting.pop(FRONT)
        if not self._waiting:
            self._current = None
        else:
            self._current = self._waiting[FRONT]
        xtrace(
            "question_advanced",
            {"asked": len(self._asked), "waiting": len(self._waiting), "exhausted": self._current is None},
        )

    def insert(self, question: Question) -> None:
        """Append a question to the back of the waiting queue.

        An exhausted queue advances at once so the new question becomes current.
        """
        self._waiting.append(question)
        xtrace("question_inserted", {"waiting": len(self._waiting), "had_current": self._current is not None})
        if self._current is None:
            self.advance()

    def get_questions(self) -> List[Question]:
        """Return asked questions followed by the waiting queue, as a new list."""
        all_questions: List[Question] = []
        all_questions.extend(self._asked)
        all_questions.extend(self._waiting)
        return all_questions
