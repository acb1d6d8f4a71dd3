"""Support for deciding whether two colors are noticeably different"""
import logging
from typing import cast

from .color import as_color
from .model import Shape
from .normalize import (
    DEFAULT_PERCENTILE,
    FillLike,
    jnd_lab_interval,
    normalize_fill,
    normalize_shape,
    PercentileLike,
    ShapeLike,
    SizeLike,
)


logger = logging.getLogger(__name__)


def to_lab(color: object) -> tuple[float, float, float]:
    """
    Convert the color to CIELAB coordinates.

    The color may be a :class:`.Color` or :class:`.ColorSpec` in any supported
    color format or space or a string, i.e., a hashed hexadecimal color, a CSS
    ``rgb()``, ``lab()``, ``lch()``, or ``color()`` function, a tag function such
    as ``srgb(1, 0, 0)``, or a CSS color name. Other types raise a
    ``TypeError`` and malformed strings a ``SyntaxError``.
    """
    return cast(
        tuple[float, float, float], as_color(color).to('lab').coordinates
    )


def noticeably_different(
    c1: object,
    c2: object,
    size: SizeLike = 0.1,
    p: PercentileLike = 0.5,
    shape: ShapeLike = 'none',
    fill_type: FillLike = 'unfilled',
) -> bool:
    """
    Determine whether two colors are noticeably different.

    Args:
        c1: the first color
        c2: the second color
        size: the visual angle of the marks in degrees or a preset
        p: the fraction of observers who must see the difference
        shape: the glyph name or ``"none"``
        fill_type: ``"filled"`` or ``"unfilled"``
    Returns:
        ``True`` if the colors differ by at least the just noticeable
        difference on at least one CIELAB channel

    The per-glyph thresholds only exist for 50% of observers. Hence, with any
    shape other than ``"none"``, ``p`` is silently reset to 0.5.
    """
    fill = normalize_fill(fill_type)
    glyph = normalize_shape(shape)

    if glyph is not Shape.NONE and p != DEFAULT_PERCENTILE:
        logger.debug(
            'shape %s only supports p = %s, ignoring p = %r',
            glyph.value, DEFAULT_PERCENTILE, p,
        )
        p = DEFAULT_PERCENTILE

    interval = jnd_lab_interval(p, size, glyph, fill)
    L1, a1, b1 = to_lab(c1)
    L2, a2, b2 = to_lab(c2)
    return interval.is_exceeded_by(L1 - L2, a1 - a2, b1 - b2)
