from __future__ import annotations

"""Immutable multiple-choice question record."""

from dataclasses import dataclass
from typing import Tuple

CHOICE_LETTERS: Tuple[str, str, str, str] = ("a", "b", "c", "d")


@dataclass(frozen=True)
class Question:
    """One question with four choices and the letter of the correct one."""

    text: str
    choice_a: str
    choice_b: str
    choice_c: str
    choice_d: str
    answer: str

    @property
    def choices(self) -> Tuple[str, str, str, str]:
        return (self.choice_a, self.choice_b, self.choice_c, self.choice_d)

    def is_answer(self, letter: str) -> bool:
        return letter.strip().lower() == self.answer.strip().lower()
