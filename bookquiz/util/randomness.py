from __future__ import annotations

"""Randomness helpers for question ordering and seeding."""

import os
import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def seed_if_needed() -> None:
    """Seed the RNG if the SEED env var is set."""
    seed = os.environ.get("SEED")
    if seed is not None:
        try:
            s = int(seed)
        except ValueError:
            return
        random.seed(s)


def shuffled(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a shuffled copy of items; the input is left untouched."""
    out = list(items)
    (rng or random).shuffle(out)
    return out
