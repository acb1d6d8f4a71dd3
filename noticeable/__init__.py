__all__ = (
    # Decide whether two colors are noticeably different
    'noticeably_different',
    'to_lab',
    # Compute just noticeable differences
    'jnd_lab_interval',
    'compute_threshold',
    'LabInterval',
    # Glyphs and presets
    'Shape',
    'Fill',
    'SizePreset',
    'PercentilePreset',
    # Colors
    'Color',
    'ColorSpec',
)

from .color import Color, ColorSpec
from .difference import noticeably_different, to_lab
from .model import compute_threshold, Fill, LabInterval, Shape
from .normalize import jnd_lab_interval, PercentilePreset, SizePreset
