from __future__ import annotations

"""Configuration loading and validation for BookQuiz.

This module loads YAML configuration, applies defaults, and validates
that enumerations, thresholds and paths are sane for the console quiz.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import sys

import yaml


ALLOWED_MODES = {"standard", "review"}
DEFAULT_MODE = "standard"


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def _non_negative_int(section: Dict[str, Any], name: str, default: int) -> None:
    value = section.get(name)
    try:
        n = int(value)
    except (TypeError, ValueError):
        print(f"WARNING: Invalid {name} '{value}', using {default}.")
        section[name] = default
        return
    if n < 0:
        print(f"WARNING: Negative {name} '{value}', using {default}.")
        n = default
    section[name] = n


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Performs sanity checks on the start mode and the switch thresholds and
    ensures the question bank exists when a path is configured.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    # Shallow defaults for missing sections
    cfg.setdefault("quiz", {})
    cfg.setdefault("questions", {})
    cfg.setdefault("ui", {})

    quiz = cfg["quiz"]
    questions = cfg["questions"]
    ui = cfg["ui"]

    quiz.setdefault("start_mode", DEFAULT_MODE)
    quiz.setdefault("review_after_misses", 2)
    quiz.setdefault("standard_after_hits", 2)
    quiz.setdefault("shuffle", False)

    questions.setdefault("path", None)

    ui.setdefault("show_choices", True)
    ui.setdefault("explain", False)

    # Enum validations
    start_mode = quiz.get("start_mode")
    if start_mode not in ALLOWED_MODES:
        print(f"WARNING: Unsupported start_mode '{start_mode}', using '{DEFAULT_MODE}'.")
        quiz["start_mode"] = DEFAULT_MODE

    _non_negative_int(quiz, "review_after_misses", 2)
    _non_negative_int(quiz, "standard_after_hits", 2)
    shuffle = quiz.get("shuffle")
    if not isinstance(shuffle, bool):
        print(f"WARNING: Invalid shuffle '{shuffle}', using False.")
        quiz["shuffle"] = False

    # Ensure the question bank exists when configured
    bank = questions.get("path")
    if bank:
        bank_path = Path(str(bank))
        if not bank_path.exists():
            print(f"ERROR: Question bank not found at '{bank_path}'.", file=sys.stderr)
            sys.exit(1)
        questions["path"] = str(bank_path)

    return cfg
