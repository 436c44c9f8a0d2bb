"""Uniform shuffling of question sequences."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")

_default_rng = random.Random()


def shuffled(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items`` (Fisher-Yates, last index down to 1).

    The caller's sequence is never reordered.
    """
    generator = rng or _default_rng
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = generator.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
