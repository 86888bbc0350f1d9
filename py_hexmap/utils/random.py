"""
Seed utilities.

Every generation run works from one explicit noise seed. There is no
module-level generator: callers either pass a seed or get a fresh one
back from resolve_seed() and thread it through themselves.
"""

import math
from typing import Optional

import numpy as np

from ..config import ConfigurationError

# Upper bound for freshly drawn seeds
SEED_RANGE = 10000.0


def new_seed() -> float:
    """Draw a fresh, non-reproducible seed in [0, SEED_RANGE)."""
    return float(np.random.default_rng().uniform(0.0, SEED_RANGE))


def resolve_seed(seed: Optional[float] = None) -> float:
    """
    Return the seed to use for a generation run.

    Args:
        seed: Explicit seed, or None to draw a fresh one

    Returns:
        A finite float seed

    Raises:
        ConfigurationError: if the explicit seed is not a finite number
    """
    if seed is None:
        return new_seed()
    try:
        value = float(seed)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"seed must be a number, got {seed!r}") from exc
    if not math.isfinite(value):
        raise ConfigurationError(f"seed must be finite, got {seed!r}")
    return value
