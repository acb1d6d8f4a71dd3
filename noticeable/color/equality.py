"""
Equality of colors.

Conversion into CIELAB goes through two matrix multiplications and a chromatic
adaptation, so the same color reached along different routes rarely has
bit-identical coordinates. Comparing with an epsilon would make hashing
impossible, since equal colors must have equal hashes. Instead, this module
maps coordinates to a canonical representation that serves both ``__hash__()``
and ``__eq__()``:

 1. Not-a-numbers, which do not equal themselves, become ``None``.
 2. The hue of CIELCh is reduced modulo 360.
 3. Everything else is rounded to a fixed number of decimals.
"""
import math


PRECISION = 10
"""
The default precision for rounding coordinates during normalization.
"""


def normalize(
    coordinates: tuple[float, ...],
    *,
    angular_index: int = -1,
    integral: bool = False,
    precision: int = PRECISION,
) -> tuple[None | float, ...]:
    """
    Normalize the coordinates.

    Args:
        coordinates: are the color's components.
        angular_index: is the index of the hue coordinate, if there is one.
        integral: indicates that the color has integral components.
        precision: is the number of decimals to round to.
    Returns:
        The normalized coordinates.

    Angles are rounded to two decimals less than ``precision`` because they
    accumulate more error when computed with ``atan2``.
    """
    result: list[None | float] = []

    for index, value in enumerate(coordinates):
        if math.isnan(value):
            result.append(None)
        elif integral:
            result.append(int(value))
        elif index == angular_index:
            result.append(round(value, precision - 2) % 360)
        else:
            result.append(round(value, precision))

    return tuple(result)
