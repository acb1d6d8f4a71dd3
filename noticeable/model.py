"""
Discriminability thresholds as a function of size.

This module implements the engineering model by Maureen Stone, Danielle Albers
Szafir, and Vidya Setlur, `"An Engineering Model for Color Difference as a
Function of Size"
<https://research.tableau.com/sites/default/files/2014CIC_48_Stone_v3.pdf>`_,
presented at the Color Imaging Conference 2014. It predicts, separately for
each CIELAB channel, how far apart two colors must be so that a given fraction
``p`` of observers see them as different. The size ``s`` is the visual angle,
in degrees, subtended by the smallest dimension of the colored mark.

For arbitrary marks, the generalized formula treats both ``p`` and ``s`` as
free variables::

    ND(p, s) = p * (A + B / s)

For glyphs drawn as symbols, the paper fits separate regressions per shape and
fill at ``p = 50%`` only::

    ND(50, s) = C + K / s

The experiments covered sizes from 6 down to 1/3 degree. Results outside that
range are extrapolations.
"""
import dataclasses
import enum
from collections.abc import Iterator
from typing import Self


@dataclasses.dataclass(frozen=True, slots=True)
class LabInterval:
    """
    A per-channel interval in CIELAB.

    Attributes:
        l: the interval along the lightness axis L*
        a: the interval along the green-red axis a*
        b: the interval along the blue-yellow axis b*

    The same type describes regression coefficients and computed thresholds.
    Instances of this class are immutable.
    """
    l: float
    a: float
    b: float

    def __iter__(self) -> Iterator[float]:
        yield self.l
        yield self.a
        yield self.b

    def scale(self, factor: float) -> Self:
        """Multiply every channel by the given factor."""
        return type(self)(self.l * factor, self.a * factor, self.b * factor)

    def is_exceeded_by(self, dl: float, da: float, db: float) -> bool:
        """
        Determine whether the given channel differences meet or exceed this
        interval on at least one channel. Only the magnitude of each difference
        matters.
        """
        return abs(dl) >= self.l or abs(da) >= self.a or abs(db) >= self.b


class Shape(enum.Enum):
    """
    The glyph used to draw a mark. ``NONE`` stands for marks that are not
    symbols, such as bars or areas.
    """
    NONE = 'none'
    CIRCLE = 'circle'
    CROSS = 'cross'
    DIAMOND = 'diamond'
    SQUARE = 'square'
    STAR = 'star'
    TRIANGLE = 'triangle'
    WYE = 'wye'

    @property
    def fillable(self) -> bool:
        """Flag for shapes whose thresholds differ between filled and outlined."""
        return self not in (Shape.NONE, Shape.CROSS, Shape.WYE)


class Fill(enum.Enum):
    """Whether a glyph is drawn filled or as an outline only."""
    FILLED = 'filled'
    UNFILLED = 'unfilled'


# Generalized coefficients for arbitrary p and s
A = LabInterval(10.16, 10.68, 10.70)
B = LabInterval(1.50, 3.08, 5.74)

# Per-glyph coefficients (C, K) at p = 50%. Cross and wye have no fill variants.
_GLYPH_COEFFICIENTS: dict[tuple[Shape, None | Fill], tuple[LabInterval, LabInterval]] = {
    (Shape.CIRCLE, Fill.FILLED): (
        LabInterval(5.53, 5.53, 5.07), LabInterval(0.99, 1.81, 4.16),
    ),
    (Shape.CIRCLE, Fill.UNFILLED): (
        LabInterval(4.98, 7.20, 3.18), LabInterval(1.62, 3.45, 8.82),
    ),
    (Shape.CROSS, None): (
        LabInterval(6.01, 9.74, 11.02), LabInterval(0.79, 1.39, 1.87),
    ),
    (Shape.DIAMOND, Fill.FILLED): (
        LabInterval(4.67, 6.54, 5.81), LabInterval(1.16, 2.47, 4.22),
    ),
    (Shape.DIAMOND, Fill.UNFILLED): (
        LabInterval(5.85, 6.69, 10.45), LabInterval(1.23, 3.87, 5.26),
    ),
    (Shape.SQUARE, Fill.FILLED): (
        LabInterval(5.11, 5.55, 5.03), LabInterval(1.02, 2.00, 3.41),
    ),
    (Shape.SQUARE, Fill.UNFILLED): (
        LabInterval(5.07, 6.26, 6.08), LabInterval(2.21, 3.96, 5.63),
    ),
    (Shape.STAR, Fill.FILLED): (
        LabInterval(4.64, 6.59, 7.54), LabInterval(2.05, 2.81, 3.38),
    ),
    (Shape.STAR, Fill.UNFILLED): (
        LabInterval(5.02, 7.32, 6.66), LabInterval(1.56, 2.69, 6.51),
    ),
    (Shape.TRIANGLE, Fill.FILLED): (
        LabInterval(5.75, 6.59, 5.70), LabInterval(0.90, 1.61, 4.03),
    ),
    (Shape.TRIANGLE, Fill.UNFILLED): (
        LabInterval(6.20, 7.45, 9.66), LabInterval(1.94, 3.13, 3.73),
    ),
    (Shape.WYE, None): (
        LabInterval(7.05, 11.07, 12.15), LabInterval(1.91, 1.35, 3.45),
    ),
}


def coefficients(
    shape: Shape, fill: Fill = Fill.UNFILLED
) -> None | tuple[LabInterval, LabInterval]:
    """
    Look up the regression coefficients for the given glyph.

    Returns:
        the ``(C, K)`` pair for a glyph with per-glyph coefficients and ``None``
        otherwise, notably for ``Shape.NONE``. The fill is ignored for glyphs
        without fill variants. Any fill other than ``Fill.FILLED`` counts as
        unfilled.
    """
    if not isinstance(shape, Shape):
        return None
    if not shape.fillable:
        return _GLYPH_COEFFICIENTS.get((shape, None))
    return _GLYPH_COEFFICIENTS[
        shape, Fill.FILLED if fill is Fill.FILLED else Fill.UNFILLED
    ]


def compute_threshold(
    p: float, size: float, shape: Shape = Shape.NONE, fill: Fill = Fill.UNFILLED
) -> LabInterval:
    """
    Compute the noticeable difference along each CIELAB channel.

    Args:
        p: the fraction of observers who perceive the difference, between 0
            and 1; only used for ``Shape.NONE``
        size: the visual angle in degrees, which must be positive
        shape: the glyph
        fill: the glyph's fill style
    Returns:
        the per-channel threshold

    For concrete glyphs, the thresholds always are those for 50% of observers,
    independent of ``p``. Anything that does not resolve to per-glyph
    coefficients falls back onto the generalized formula.
    """
    pair = coefficients(shape, fill)
    if pair is None:
        return LabInterval(
            p * (A.l + B.l / size),
            p * (A.a + B.a / size),
            p * (A.b + B.b / size),
        )

    C, K = pair
    return LabInterval(C.l + K.l / size, C.a + K.a / size, C.b + K.b / size)
