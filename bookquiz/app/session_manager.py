from __future__ import annotations

"""Session Manager: drives a quiz through its mode states.

Holds the active state, feeds answers into it and switches the active mode
when a streak threshold is reached. Switching keeps the question queue as is;
only the rule applied to later answers changes. It is CLI-agnostic: the run
loop talks to the user through `ask`/`inform` callbacks.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, Optional

from ..question.question import CHOICE_LETTERS, Question
from ..question.question_state import QuestionState
from ..question.states import ReviewState, StandardState
from ..util.randomness import shuffled
from .events import EventBus
from .explain import trace as xtrace
from .mode_registry import get_mode, make_state, state_class


@dataclass(frozen=True)
class SessionContext:
    started_at: datetime
    start_mode: str
    params: Dict[str, Any]


@dataclass(frozen=True)
class AnswerOutcome:
    question: Question
    answer: str
    correct: bool
    response: str
    mode: str
    switched_to: Optional[str] = None


@dataclass
class RuntimeState:
    hits: int = 0
    misses: int = 0
    ended_at: Optional[datetime] = None
    history: list = field(default_factory=list)


class SessionManager:
    def __init__(self, cfg: Dict[str, Any], events: Optional[EventBus] = None) -> None:
        self.cfg = cfg
        self.events = events or EventBus()
        self.ctx: Optional[SessionContext] = None
        self.runtime = RuntimeState()
        self._state: Optional[QuestionState] = None

    @property
    def state(self) -> QuestionState:
        if self._state is None:
            raise RuntimeError("No quiz session started")
        return self._state

    @property
    def mode(self) -> str:
        return self.state.mode_id

    def start_session(
        self,
        questions: Iterable[Question],
        mode: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Start a quiz over questions; a list is taken over by the session."""
        # Resolve params: config quiz section -> overrides
        params = {**dict(self.cfg.get("quiz", {})), **(overrides or {})}
        start_mode = mode or params.get("start_mode") or StandardState.mode_id
        get_mode(start_mode)
        if params.get("shuffle"):
            questions = shuffled(list(questions))

        self._state = make_state(start_mode, questions)
        self.runtime = RuntimeState()
        self.ctx = SessionContext(
            started_at=datetime.now(timezone.utc),
            start_mode=start_mode,
            params=params,
        )
        payload = {"mode": start_mode, "questions": len(self._state.get_questions())}
        xtrace("session_started", payload)
        self.events.emit("session_started", payload)
        if not self._state.has_more_questions():
            self._end()

    def has_more_questions(self) -> bool:
        return self.state.has_more_questions()

    def answer(self, text: str) -> AnswerOutcome:
        """Process one answer and apply the streak rules for switching mode."""
        state = self.state
        question = state.get_current_question()
        correct = state.grade(text)
        response = state.process_answer(text)
        mode = state.mode_id

        if correct:
            self.runtime.hits += 1
            self.runtime.misses = 0
        else:
            self.runtime.misses += 1
            self.runtime.hits = 0

        switched_to = self._switch_target()
        outcome = AnswerOutcome(
            question=question,
            answer=text,
            correct=correct,
            response=response,
            mode=mode,
            switched_to=switched_to,
        )
        self.runtime.history.append(outcome)
        self.events.emit("answer_processed", outcome)
        if switched_to is not None:
            self.switch_mode(switched_to)
        if not state.has_more_questions():
            self._end()
        return outcome

    def _switch_target(self) -> Optional[str]:
        """Mode the streak rules call for after the latest answer, if any."""
        params = self.ctx.params if self.ctx else {}
        mode = self.state.mode_id
        if mode == StandardState.mode_id:
            limit = int(params.get("review_after_misses", 0) or 0)
            if limit and self.runtime.misses >= limit:
                return ReviewState.mode_id
        elif mode == ReviewState.mode_id:
            limit = int(params.get("standard_after_hits", 0) or 0)
            if limit and self.runtime.hits >= limit:
                return StandardState.mode_id
        return None

    def switch_mode(self, mode_id: str) -> None:
        previous = self.state.mode_id
        self._state = self.state.switch_to(state_class(mode_id))
        self.runtime.hits = 0
        self.runtime.misses = 0
        payload = {"from": previous, "to": mode_id}
        xtrace("mode_switched", payload)
        self.events.emit("mode_switched", payload)

    def add_question(self, question: Question) -> None:
        was_over = not self.state.has_more_questions()
        self.state.insert(question)
        if was_over:
            self.runtime.ended_at = None
        self.events.emit("question_added", question)

    def _end(self) -> None:
        if self.runtime.ended_at is not None:
            return
        self.runtime.ended_at = datetime.now(timezone.utc)
        payload = {
            "mode": self.state.mode_id,
            "answered": len(self.runtime.history),
            "ended_at": self.runtime.ended_at.isoformat(),
        }
        xtrace("session_ended", payload)
        self.events.emit("session_ended", payload)

    def run(self, ui: Dict[str, Callable[..., Any]]) -> None:
        """Console loop: ask every question until the queue is exhausted."""
        ask = ui["ask"]
        inform = ui["inform"]
        show_choices = bool(self.cfg.get("ui", {}).get("show_choices", True))

        while self.has_more_questions():
            inform(self.state.get_current_question_text())
            if show_choices:
                for letter, choice in zip(CHOICE_LETTERS, self.state.get_current_question_choices()):
                    inform(f"  {letter.upper()}) {choice}")
            outcome = self.answer(ask("Answer (a-d): "))
            inform(outcome.response + "\n")
            if outcome.switched_to:
                inform(f"Switching to {get_mode(outcome.switched_to).name} mode.\n")
        inform("Quiz complete.")
