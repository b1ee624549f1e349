"""
One-rep-max estimation.

Formulas:
- Epley:   1RM = weight * (1 + reps / 30)
- Brzycki: 1RM = weight * (36 / (37 - reps))
"""
from typing import Optional

DEFAULT_FORMULA = "brzycki"


def calculate_1rm_epley(weight: float, reps: int) -> float:
    """
    Calculate estimated 1RM using Epley formula.

    Works well across all rep ranges but may overestimate at high reps.
    """
    if reps <= 0:
        return 0.0
    if reps == 1:
        return float(weight)

    return weight * (1.0 + reps / 30.0)


def calculate_1rm_brzycki(weight: float, reps: int) -> float:
    """
    Calculate estimated 1RM using Brzycki formula.

    Most accurate for rep ranges 1-10. Less reliable above 10 reps.
    """
    if reps <= 0:
        return 0.0
    if reps == 1:
        return float(weight)
    if reps >= 37:
        # Formula breaks down at 37+ reps
        return float(weight) * 2.5

    return weight * (36.0 / (37.0 - reps))


def estimate_1rm(
    weight: Optional[float],
    reps: Optional[int],
    formula: str = DEFAULT_FORMULA,
) -> Optional[float]:
    """
    Estimate a 1RM from a recorded set.

    Args:
        weight: Weight lifted, or None if not recorded
        reps: Repetitions completed, or None if not recorded
        formula: "brzycki" (default) or "epley"

    Returns:
        Estimated 1RM rounded to 1 decimal place, or None when weight or
        reps is missing.
    """
    if weight is None or reps is None:
        return None
    if formula == "epley":
        result = calculate_1rm_epley(weight, reps)
    else:
        result = calculate_1rm_brzycki(weight, reps)
    return round(result, 1)
