from __future__ import annotations

"""Errors raised by the question engine."""


class NoCurrentQuestion(LookupError):
    """Raised when an operation needs the current question but none is left."""

    def __init__(self, message: str = "No current question: the question list is empty.") -> None:
        super().__init__(message)
