from __future__ import annotations

"""CLI for BookQuiz using SessionManager and the mode registry."""

import argparse
import sys
from typing import Any

import yaml

from ..config.config import load_config, validate_config
from ..storage.store import load_questions
from ..util.randomness import seed_if_needed
from . import explain
from .mode_registry import list_modes
from .session_manager import SessionManager


def _build_ui() -> dict[str, Any]:
    def ask(prompt: str) -> str:
        return input(prompt)

    def inform(msg: str) -> None:
        print(msg)

    return {"ask": ask, "inform": inform}


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="bookquiz")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list-modes")

    rp = sub.add_parser("run")
    rp.add_argument("--config", default=None)
    rp.add_argument("--questions", default=None, help="Question bank (.yml, .yaml or .csv)")
    rp.add_argument("--mode", default=None, help="Starting mode id (see list-modes)")
    rp.add_argument("--shuffle", dest="shuffle", action="store_true", help="Shuffle question order")
    rp.add_argument("--no-shuffle", dest="shuffle", action="store_false", help="Keep file order")
    rp.set_defaults(shuffle=None)
    rp.add_argument("--explain", action="store_true")

    args = p.parse_args(argv)

    if args.cmd == "list-modes":
        for m in list_modes():
            print(f"{m.id}: {m.name} - {m.description}")
        return 0

    # run
    cfg = validate_config(load_config(args.config))
    explain.enable(bool(args.explain or cfg["ui"].get("explain", False)))
    seed_if_needed()

    if args.mode is not None and args.mode not in {m.id for m in list_modes()}:
        print(f"ERROR: Unknown mode '{args.mode}'.", file=sys.stderr)
        return 2

    bank = args.questions or cfg["questions"].get("path")
    if not bank:
        print("ERROR: No question bank given. Use --questions or set questions.path.", file=sys.stderr)
        return 2
    try:
        questions = load_questions(bank)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    if not questions:
        print("ERROR: The question bank is empty.", file=sys.stderr)
        return 2

    overrides: dict[str, Any] = {}
    if args.shuffle is not None:
        overrides["shuffle"] = args.shuffle

    sm = SessionManager(cfg)
    sm.start_session(questions, mode=args.mode, overrides=overrides)
    try:
        sm.run(_build_ui())
    except (EOFError, KeyboardInterrupt):
        print("\nQuiz stopped: no more input.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
