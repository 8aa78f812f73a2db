from __future__ import annotations

"""Quiz mode registry and metadata.

Expose metadata for every quiz mode and construct mode states via a simple
factory.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Type

from ..question.question import Question
from ..question.question_state import QuestionState
from ..question.queue import QuestionQueue
from ..question.states import ReviewState, StandardState


@dataclass(frozen=True)
class ModeMeta:
    id: str
    name: str
    description: str
    requeues_incorrect: bool


_STATE_CLASSES: Dict[str, Type[QuestionState]] = {
    StandardState.mode_id: StandardState,
    ReviewState.mode_id: ReviewState,
}


def list_modes() -> List[ModeMeta]:
    return [
        ModeMeta(
            id=StandardState.mode_id,
            name="Standard",
            description="Each question is asked once; a wrong answer reveals the correct letter.",
            requeues_incorrect=False,
        ),
        ModeMeta(
            id=ReviewState.mode_id,
            name="Review",
            description="A wrong answer sends the question to the back of the queue until it is answered correctly.",
            requeues_incorrect=True,
        ),
    ]


def get_mode(mode_id: str) -> ModeMeta:
    for m in list_modes():
        if m.id == mode_id:
            return m
    raise KeyError(f"Unknown quiz mode: {mode_id}")


def state_class(mode_id: str) -> Type[QuestionState]:
    try:
        return _STATE_CLASSES[mode_id]
    except KeyError:
        raise KeyError(f"Unknown quiz mode: {mode_id}") from None


def make_state(
    mode_id: str,
    questions: Optional[Iterable[Question]] = None,
    *,
    queue: Optional[QuestionQueue] = None,
) -> QuestionState:
    """Factory that builds the state for a mode id, on new questions or a shared queue."""
    cls = state_class(mode_id)
    if queue is not None:
        return cls(queue=queue)
    return cls(questions)
