from __future__ import annotations

"""Minimal tracing helpers (Explain Mode).

Enable with the CLI flag to emit terse, readable lines at quiz milestones.
`capture()` records the same events in memory instead of printing them.
"""

import json
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

_ENABLED = False
_CAPTURED: Optional[List[Tuple[str, Dict[str, Any]]]] = None


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


@contextmanager
def capture() -> Iterator[List[Tuple[str, Dict[str, Any]]]]:
    """Collect (event, payload) pairs traced inside the block."""
    global _CAPTURED
    previous = _CAPTURED
    events: List[Tuple[str, Dict[str, Any]]] = []
    _CAPTURED = events
    try:
        yield events
    finally:
        _CAPTURED = previous


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    data = payload or {}
    if _CAPTURED is not None:
        _CAPTURED.append((event, dict(data)))
    if not _ENABLED:
        return
    try:
        # one line JSON
        print(f"[EXPLAIN] {event} :: {json.dumps(data, separators=(',', ':'), default=str)}")
    except (TypeError, ValueError):
        print(f"[EXPLAIN] {event}")
