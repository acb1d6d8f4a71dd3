"""The high-level color API."""
from typing import overload, Self, TYPE_CHECKING

from .conversion import get_converter
from .serde import parse, parse_format_spec, stringify
from .space import EPSILON, Space
from .spec import ColorSpec, CoordinateSpec

if TYPE_CHECKING:
    from ..model import LabInterval


class Color(ColorSpec):
    """
    A color object.

    This class implements the high-level, object-oriented API for colors.

    Attributes:
        tag: identifies the color format or space
        coordinates: are the numerical components of the color

    Color's constructor supports a number of options for specifying the color
    and its coordinates:

        * From an existing :class:`.ColorSpec` or ``Color`` object
        * From the textual representation of a color, i.e., a hashed
          hexadecimal color, a CSS or tag function, or a CSS color name
        * From three integers for a 24-bit RGB color
        * From a tag and tuple with coordinates
        * From a tag and three coordinates

    As for the parent class :class:`.ColorSpec`, instances of this class are
    immutable.

    This class implements ``__hash__()`` and ``__eq__()`` so that colors *in the
    same color format or space* with sufficiently close coordinates are treated
    as equal. For 24-bit RGB, that means equal coordinates. For color spaces, it
    means equality after rounding to 10 decimal digits.
    """
    __slots__ = ()

    @property
    def space(self) -> Space:
        """Get the color space for this color."""
        return Space.resolve(self.tag)

    def __getattr__(self, name: str) -> float:
        """Provide access to color space coordinates by single-letter name."""
        if len(name) == 1:
            for coordinate, value in zip(self.space.coordinates, self.coordinates):
                if coordinate.name == name:
                    return value

        raise AttributeError(f'color {self} has no attribute named "{name}"')

    # ----------------------------------------------------------------------------------

    @overload
    def __init__(self, color: str | ColorSpec | Self, /) -> None:
        ...
    @overload
    def __init__(self, c1: int, c2: int, c3: int, /) -> None:
        ...
    @overload
    def __init__(self, tag: str, coordinates: CoordinateSpec, /) -> None:
        ...
    @overload
    def __init__(self, tag: str, c1: float, c2: float, c3: float, /) -> None:
        ...
    def __init__(
        self,
        tag: int | str | ColorSpec | Self,
        coordinates: None | float | CoordinateSpec = None,
        c2: None | float = None,
        c3: None | float = None,
    ) -> None:
        if isinstance(tag, ColorSpec):
            tag, coordinates = tag.tag, tag.coordinates
        elif isinstance(tag, str) and coordinates is None:
            tag, coordinates = parse(tag)
        else:
            spec = ColorSpec.of(tag, coordinates, c2, c3)
            tag, coordinates = spec.tag, spec.coordinates

        object.__setattr__(self, 'tag', tag)
        object.__setattr__(self, 'coordinates', coordinates)
        # Validate tag and number of coordinates and coerce to int/float
        self.__post_init__()

    @classmethod
    def lab(cls, L: float, a: float, b: float) -> Self:
        """Create a new CIELAB color."""
        return cls('lab', (L, a, b))

    # ----------------------------------------------------------------------------------
    # Hash and Equality

    def __hash__(self) -> int:
        return hash((self.tag, self.space.normalize(*self.coordinates)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorSpec) or self.tag != other.tag:
            return NotImplemented
        space = self.space
        return space.normalize(*self.coordinates) == space.normalize(*other.coordinates)

    # ----------------------------------------------------------------------------------
    # Gamut and Clipping

    def in_gamut(self, epsilon: float = EPSILON) -> bool:
        """Determine whether this color is within gamut for its color space."""
        return self.space.in_gamut(*self.coordinates, epsilon=epsilon)

    def clip(self) -> Self:
        """Clip this color to its color space's gamut."""
        if self.in_gamut(0):
            return self
        return type(self)(self.tag, self.space.clip(*self.coordinates))

    # ----------------------------------------------------------------------------------
    # Conversion to Other Formats and Color Spaces

    def to(self, target: str) -> Self:
        """Convert this color to the specified color format or space."""
        if self.tag == target:
            return self
        return type(self)(target, get_converter(self.tag, target)(*self.coordinates))

    # ----------------------------------------------------------------------------------
    # Perceptual Difference

    def difference(self, other: ColorSpec | str) -> tuple[float, float, float]:
        """
        Determine the absolute per-channel difference between this color and
        the given color in CIELAB.
        """
        L1, a1, b1 = self.to('lab').coordinates
        L2, a2, b2 = Color(other).to('lab').coordinates
        return abs(L1 - L2), abs(a1 - a2), abs(b1 - b2)

    def noticeably_different(
        self,
        other: ColorSpec | str,
        size: object = 0.1,
        p: object = 0.5,
        shape: object = 'none',
        fill_type: object = 'unfilled',
    ) -> bool:
        """
        Determine whether this color and the given color are noticeably
        different for marks of the given size, shape, and fill. See
        :func:`noticeable.difference.noticeably_different`.
        """
        from ..difference import noticeably_different
        return noticeably_different(self, other, size, p, shape, fill_type)

    def jnd_interval(
        self,
        size: object = 0.1,
        p: object = 0.5,
        shape: object = 'none',
        fill_type: object = 'unfilled',
    ) -> 'LabInterval':
        """
        Determine the just noticeable difference around this color. The model
        does not depend on the color itself, so this is a convenience for
        :func:`noticeable.normalize.jnd_lab_interval`.
        """
        from ..normalize import jnd_lab_interval
        return jnd_lab_interval(p, size, shape, fill_type)

    # ----------------------------------------------------------------------------------
    # Serialization to Text

    def __format__(self, format_spec: str) -> str:
        fmt, precision = parse_format_spec(format_spec)
        return stringify(self.tag, self.coordinates, fmt, precision)

    def __str__(self) -> str:
        return stringify(self.tag, self.coordinates)


def as_color(color: object) -> Color:
    """Coerce a color specification or its textual representation to a color."""
    if isinstance(color, Color):
        return color
    if isinstance(color, (ColorSpec, str)):
        return Color(color)
    raise TypeError(f'{color!r} is not a color')
