from __future__ import annotations

"""Concrete quiz modes."""

from .question_state import QuestionState
from ..app.explain import trace as xtrace

CORRECT = "Correct!"
INCORRECT = "Incorrect!"


def _reveal(letter: str) -> str:
    return f"The correct answer is {letter.strip().upper()}."


class StandardState(QuestionState):
    """Every answered question is retired, right or wrong."""

    mode_id = "standard"

    def process_answer(self, answer: str) -> str:
        question = self.get_current_question()
        is_correct = question.is_answer(answer)
        xtrace("answer_graded", {"mode": self.mode_id, "answer": answer, "correct": is_correct})
        self.advance()
        if is_correct:
            return CORRECT
        return f"{INCORRECT} {_reveal(question.answer)}"


class ReviewState(QuestionState):
    """A missed question goes to the back of the queue and is asked again."""

    mode_id = "review"

    def process_answer(self, answer: str) -> str:
        question = self.get_current_question()
        is_correct = question.is_answer(answer)
        xtrace("answer_graded", {"mode": self.mode_id, "answer": answer, "correct": is_correct})
        if is_correct:
            self.advance()
            return CORRECT
        self.insert(question)
        self.advance()
        return f"{INCORRECT} {_reveal(question.answer)} It will be asked again."
