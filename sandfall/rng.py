"""Uniform random integers used to vary cell colours."""

from __future__ import annotations

import random

_rng = random.Random()


def random_int(max_result: int) -> int:
    """Return a random integer in the closed range [0, max_result]."""
    return _rng.randint(0, max_result)


def random_balanced_int(max_result: int) -> int:
    """Return a random integer in the closed range [-max_result, max_result]."""
    return _rng.randint(-max_result, max_result)