"""Derived values computed from raw readings."""

import math

from ..models.readings import Sleep

# Sleep composite
SLEEP_TARGET_HOURS = 8.0
REM_TARGET_FRACTION = 0.20
DEEP_TARGET_FRACTION = 0.15
SLEEP_WEIGHTS = {
    "duration": 0.4,
    "efficiency": 0.3,
    "rem": 0.15,
    "deep": 0.15,
}


def estimate_one_rep_max(weight: float, reps: int) -> float:
    """Estimate 1RM from a sub-maximal set using the Epley formula.

    A single rep is already a max, so reps == 1 returns the weight itself.
    The estimate is rounded to one decimal place but never below the weight.
    """
    if reps == 1:
        return weight
    return max(weight, round(weight * (1 + reps / 30), 1))


def sleep_score(sleep: Sleep) -> float:
    """Composite 0-100 sleep score.

    Each component is a partial score in [0, 1]:

    - duration: 1 at the target, falling linearly to 0 at 0h or 16h
    - efficiency: the efficiency fraction itself
    - rem / deep: stage fraction relative to its target, capped at 1

    The score is the weighted sum of the components that were supplied,
    with the weights renormalized over those components.
    """
    parts = {
        "duration": max(0.0, 1 - abs(sleep.duration - SLEEP_TARGET_HOURS) / SLEEP_TARGET_HOURS),
    }
    if sleep.efficiency is not None:
        parts["efficiency"] = sleep.efficiency
    if sleep.rem is not None:
        parts["rem"] = min(1.0, sleep.rem / REM_TARGET_FRACTION)
    if sleep.deep is not None:
        parts["deep"] = min(1.0, sleep.deep / DEEP_TARGET_FRACTION)

    total_weight = sum(SLEEP_WEIGHTS[name] for name in parts)
    weighted = sum(SLEEP_WEIGHTS[name] * value for name, value in parts.items())
    return round(100 * weighted / total_weight, 1)


def normal_cdf(z: float) -> float:
    """Standard normal cumulative distribution function."""
    return 0.5 * (1 + math.erf(z / math.sqrt(2)))
