__all__ = (
    # Color specifications and objects
    'ColorSpec',
    'Color',
    'as_color',
    # Conversion between color formats and spaces
    'get_converter',
)

from .conversion import get_converter
from .object import Color, as_color
from .spec import ColorSpec
