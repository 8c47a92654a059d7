"""Floating point helpers shared by the calculator components.

Python raises ZeroDivisionError on float division by zero and rounds halves
to even. The profile calculations expect IEEE-754 results (x/0 -> inf,
0/0 -> nan) and half-up rounding instead, so both live here.
"""

import math

import numpy as np


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide two floats with IEEE-754 semantics.

    Args:
        numerator: Dividend.
        denominator: Divisor, may be zero.

    Returns:
        The quotient; +/-inf for a non-zero dividend over zero, nan for 0/0.

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ndigits decimals, with halves going towards +inf.

    Non-finite values are returned unchanged.

    Args:
        value: Value to round.
        ndigits: Number of decimal places to keep.

    Returns:
        Rounded value.

    Examples:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(-2.5)
        -2.0
        >>> round_half_up(12.34, 1)
        12.3
    """
    if not math.isfinite(value):
        return value

    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor
