"""
Concise number formatting for HTML attribute values such as percentage widths
and pixel dimensions.

.. autofunction:: format_number
"""

import math

from typing import Union

from fractions import Fraction


__all__ = [
    "format_number",
]


def format_number(number: Union[float, int, Fraction], decimal_places: int = 3) -> str:
    """
    Format a number in a concise way.

    Up to ``decimal_places`` digits are shown after the decimal point. Trailing
    zeros after the decimal point are dropped, along with the trailing decimal
    point, so whole numbers are always shown as integers (e.g. ``200.0``
    becomes ``"200"``).

    Scientific notation is never used.
    """
    number = float(number)
    if math.isclose(number, round(number), abs_tol=0.5 * 10**-decimal_places):
        return str(round(number))

    return f"{number:.{decimal_places}f}".rstrip("0").rstrip(".")
