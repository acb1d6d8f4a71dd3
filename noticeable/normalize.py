"""
Lenient input handling for the threshold model.

The public entry points accept convenience values, such as ``"thin"`` for the
size or ``"square"`` for the shape, in addition to numbers and enumeration
members. This module resolves them to the strict inputs of
:func:`noticeable.model.compute_threshold`. Unrecognized categorical values
fall back onto defaults instead of failing, whereas numbers that would make
the model meaningless raise a ``ValueError``.
"""
import enum
import logging
from typing import TypeAlias

from .model import compute_threshold, Fill, LabInterval, Shape


logger = logging.getLogger(__name__)


class SizePreset(enum.Enum):
    """Typical visual angles, in degrees, for thin, medium, and wide marks."""
    THIN = 0.1
    MEDIUM = 0.5
    WIDE = 1.0


class PercentilePreset(enum.Enum):
    """
    Named fractions of observers. ``CONSERVATIVE`` demands that 80% of
    observers see a difference.
    """
    CONSERVATIVE = 0.8


DEFAULT_SIZE = SizePreset.THIN.value
DEFAULT_PERCENTILE = 0.5

SizeLike: TypeAlias = float | SizePreset | str
PercentileLike: TypeAlias = float | PercentilePreset | str | None
ShapeLike: TypeAlias = Shape | str
FillLike: TypeAlias = Fill | str

_SIZE_PRESETS = { preset.name.lower(): preset.value for preset in SizePreset }
_PERCENTILE_PRESETS = {
    preset.name.lower(): preset.value for preset in PercentilePreset
}


def normalize_size(size: object) -> float:
    """
    Resolve the size to a visual angle in degrees.

    Preset names that are not ``"thin"``, ``"medium"``, or ``"wide"`` resolve
    to the thin size. Values of any other type than number, string, or preset
    raise a ``TypeError``, and sizes that are not positive raise a
    ``ValueError``, since the model divides by the size.
    """
    if isinstance(size, SizePreset):
        value = size.value
    elif isinstance(size, str):
        value = _SIZE_PRESETS.get(size)
        if value is None:
            logger.debug('unknown size preset "%s", using %s', size, DEFAULT_SIZE)
            value = DEFAULT_SIZE
    elif isinstance(size, (int, float)) and not isinstance(size, bool):
        value = float(size)
    else:
        raise TypeError(f'{size!r} is not a valid size')

    if not value > 0:
        raise ValueError(f'size {value} is not a positive visual angle')
    return value


def normalize_percentile(p: object) -> float:
    """
    Resolve the percentile to a fraction of observers.

    The string ``"conservative"`` resolves to 0.8. Any other value that is not
    a number resolves to 0.5. Numbers must be greater than 0 and at most 1,
    otherwise they raise a ``ValueError``. With a zero percentile, every pair
    of colors, even identical ones, would count as different.
    """
    if isinstance(p, PercentilePreset):
        return p.value
    if isinstance(p, (int, float)) and not isinstance(p, bool):
        if not 0.0 < p <= 1.0:
            raise ValueError(f'percentile {p} is not in the range (0, 1]')
        return float(p)

    value = _PERCENTILE_PRESETS.get(p) if isinstance(p, str) else None
    if value is None:
        logger.debug('unknown percentile %r, using %s', p, DEFAULT_PERCENTILE)
        return DEFAULT_PERCENTILE
    return value


def normalize_shape(shape: object) -> Shape:
    """
    Resolve the shape to a glyph. Strings match case-insensitively. Anything
    unrecognized resolves to ``Shape.NONE``.
    """
    if isinstance(shape, Shape):
        return shape
    if isinstance(shape, str):
        try:
            return Shape(shape.strip().lower())
        except ValueError:
            pass

    logger.debug('unknown shape %r, using "none"', shape)
    return Shape.NONE


def normalize_fill(fill_type: object) -> Fill:
    """
    Resolve the fill type. Only ``"filled"`` and ``"unfilled"`` are recognized;
    anything else resolves to ``Fill.UNFILLED``.
    """
    if isinstance(fill_type, Fill):
        return fill_type
    if fill_type in ('filled', 'unfilled'):
        return Fill(fill_type)

    logger.debug('unknown fill type %r, using "unfilled"', fill_type)
    return Fill.UNFILLED


def jnd_lab_interval(
    p: PercentileLike,
    size: SizeLike,
    shape: ShapeLike = 'none',
    fill_type: FillLike = 'unfilled',
) -> LabInterval:
    """
    Compute the just noticeable difference along each CIELAB channel.

    Args:
        p: the fraction of observers who see the difference; only used when
            the shape is ``"none"``
        size: the visual angle of the marks in degrees or a preset
        shape: the glyph name or ``"none"``
        fill_type: ``"filled"`` or ``"unfilled"``
    Returns:
        the per-channel thresholds
    """
    return compute_threshold(
        normalize_percentile(p),
        normalize_size(size),
        normalize_shape(shape),
        normalize_fill(fill_type),
    )
