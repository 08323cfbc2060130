"""
Design (picker.py)
- Purpose: Draw one term uniformly at random, falling back to the sentinel term when
           there is nothing to draw from.
- Inputs: A sequence of Term; optionally a seeded random.Random.
- Outputs: One Term.
- Side effects: Advances the random generator's state.
- Thread-safety: Each RandomPicker owns its own generator; use from the UI thread only.
"""

import random
from typing import Sequence, TypeVar

from .models import SENTINEL_TERM, Term

T = TypeVar("T")


def choice_or_default(items: Sequence[T], default: T, rng: random.Random) -> T:
    """Uniform choice over `items`; `default` only when `items` is empty."""
    if not items:
        return default
    return rng.choice(items)


class RandomPicker:
    """Single source of randomness for the random-term panel."""

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def pick(self, terms: Sequence[Term]) -> Term:
        return choice_or_default(terms, SENTINEL_TERM, self.rng)


_default_picker = RandomPicker()


def pick_random(terms: Sequence[Term], rng: random.Random | None = None) -> Term:
    """
    Purpose: Draw a random term.
    Inputs: terms; rng (optional generator, otherwise a module-level picker is used).
    Outputs: A uniformly chosen element of `terms`, or SENTINEL_TERM when it is empty.
    """
    if rng is not None:
        return choice_or_default(terms, SENTINEL_TERM, rng)
    return _default_picker.pick(terms)
