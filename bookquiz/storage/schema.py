from __future__ import annotations

"""Schema constants and Pydantic models for question bank rows."""

from pydantic import BaseModel, Field, field_validator

from ..question.question import CHOICE_LETTERS, Question

# --- Constants ---

COLUMNS = ["question", "a", "b", "c", "d", "answer"]


# --- Pydantic models ---

class QuestionRow(BaseModel):
    question: str = Field(min_length=1)
    a: str = Field(min_length=1)
    b: str = Field(min_length=1)
    c: str = Field(min_length=1)
    d: str = Field(min_length=1)
    answer: str

    @field_validator("question", "a", "b", "c", "d", mode="before")
    @classmethod
    def _strip(cls, v):
        if v is None:
            return v
        return str(v).strip()

    @field_validator("answer", mode="before")
    @classmethod
    def _answer_letter(cls, v):
        letter = str(v or "").strip().lower()
        if letter not in CHOICE_LETTERS:
            raise ValueError("answer must be one of a, b, c, d")
        return letter

    def to_question(self) -> Question:
        return Question(
            text=self.question,
            choice_a=self.a,
            choice_b=self.b,
            choice_c=self.c,
            choice_d=self.d,
            answer=self.answer,
        )
