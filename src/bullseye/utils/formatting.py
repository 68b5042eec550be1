"""
Display formatting helpers.
"""


def percent(value: float) -> int:
    """Fraction in [0, 1] as a whole percentage, rounding halves up."""
    return int(value * 100 + 0.5)
