from __future__ import annotations

"""Tiny pub/sub event bus for quiz session events."""

from typing import Any, Callable, Dict, List

from .explain import trace as xtrace


class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        self._subs.setdefault(event, []).append(handler)

    def emit(self, event: str, payload: Any) -> None:
        for h in list(self._subs.get(event, [])):
            try:
                h(payload)
            except Exception as exc:
                # Best effort; remaining subscribers still run
                xtrace("handler_failed", {"event": event, "error": repr(exc)})
