from __future__ import annotations

"""Question bank loading from YAML or CSV files.

YAML banks hold a list of rows, or a mapping with a `questions` list. CSV
banks are read with pandas and must carry the columns in `COLUMNS`.
"""

from pathlib import Path
from typing import Any

import pandas as pd
import yaml

from ..question.question import Question
from .schema import COLUMNS, QuestionRow

YAML_SUFFIXES = {".yml", ".yaml"}
CSV_SUFFIXES = {".csv"}


def validate_records(records: list[Any]) -> list[QuestionRow]:
    """Validate raw rows (dicts or QuestionRow) and return QuestionRow models.

    Raises pydantic.ValidationError on the first invalid row.
    """
    if not isinstance(records, list):
        raise TypeError("records must be a list of question rows")
    return [r if isinstance(r, QuestionRow) else QuestionRow.model_validate(r) for r in records]


def _read_yaml(path: Path) -> list[Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("questions", [])
    if not isinstance(data, list):
        raise ValueError(f"Question bank {path} must contain a list of questions")
    return data


def _read_csv(path: Path) -> list[Any]:
    df = pd.read_csv(path, dtype="string", keep_default_na=False)
    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Question bank {path} is missing columns: {', '.join(missing)}")
    return df[COLUMNS].to_dict(orient="records")


def load_records(path: str | Path) -> list[QuestionRow]:
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix not in YAML_SUFFIXES and suffix not in CSV_SUFFIXES:
        raise ValueError(f"Unsupported question bank format: {p.suffix or p.name}")
    if not p.exists():
        raise FileNotFoundError(f"Question bank not found: {p}")
    raw = _read_yaml(p) if suffix in YAML_SUFFIXES else _read_csv(p)
    return validate_records(raw)


def load_questions(path: str | Path) -> list[Question]:
    """Load a question bank and return its questions in file order."""
    return [row.to_question() for row in load_records(path)]
