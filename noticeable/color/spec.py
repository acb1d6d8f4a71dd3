"""
Basic type declarations for coordinates, colors, and conversions:

  * ``IntCoordinateSpec`` and ``FloatCoordinateSpec`` are triples of integers
    and floating point values, respectively
  * ``CoordinateSpec`` combines the two types
  * ``ConverterSpec`` describes a function that converts from one color format
    or space into another
  * ``ColorSpec`` is a dataclass that associates a color's components with
    the tag identifying the color format or space.

All container types are immutable.
"""
import dataclasses
from typing import overload, Protocol, Self, TypeAlias

IntCoordinateSpec: TypeAlias = tuple[int, int, int]
FloatCoordinateSpec: TypeAlias = tuple[float, float, float]
CoordinateSpec: TypeAlias = tuple[int, int, int] | tuple[float, float, float]


class ConverterSpec(Protocol):
    @overload
    def __call__(
        self, __c1: int, __c2: int, __c3: int
    ) -> tuple[int, int, int]: ...
    @overload
    def __call__(
        self, __c1: float, __c2: float, __c3: float
    ) -> tuple[float, float, float]: ...

    def __call__(
        self,
        __c1: int | float,
        __c2: int | float,
        __c3: int | float,
    ) -> CoordinateSpec:
        ...


# Coordinate type per tag: 'i' for integral, 'f' for floating point
_TAGS = {
    'lab': 'f',
    'lch': 'f',
    'linear_srgb': 'f',
    'rgb256': 'i',
    'srgb': 'f',
    'xyz': 'f',
    'xyz_d50': 'f',
}


@dataclasses.dataclass(frozen=True, slots=True)
class ColorSpec:
    """
    A color specification.

    Attributes:
        tag: identifies the coordinates' color format or space
        coordinates: are the numeric components of the color

    All supported color formats and spaces have three components. The
    ``rgb256`` format has integer components, whereas the color spaces all have
    floating point components.

    This class does validate the tag and number of coordinates upon creation.

    Instance of this class are immutable.
    """
    tag: str
    coordinates: CoordinateSpec

    def __post_init__(self) -> None:
        code = _TAGS.get(self.tag)
        if code is None:
            raise ValueError(f'{self.tag} is not a valid color format or space')

        if (l := len(self.coordinates)) != 3:
            raise ValueError(f'{self.tag} should have 3 coordinates, not {l}')

        kind = int if code == 'i' else float
        if not all(type(c) is kind for c in self.coordinates):
            # Integral coordinates round like srgb_to_rgb256 does
            coerce = round if kind is int else float
            coordinates = tuple(coerce(c) for c in self.coordinates)
            object.__setattr__(self, 'coordinates', coordinates)

    @classmethod
    def of(
        cls,
        tag: int | str | Self,
        c1: None | float | CoordinateSpec = None,
        c2: None | float = None,
        c3: None | float = None,
    ) -> Self:
        """
        Coerce the arguments into a color specification. The four accepted
        forms are:

         1. A color specification, which is returned as is.
         2. Three integers, which become a color specification tagged
            ``rgb256``.
         3. A string tag and a tuple of three coordinates.
         4. A string tag and three coordinates.
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, int):
            if not (isinstance(c1, int) and isinstance(c2, int) and c3 is None):
                raise ValueError('24-bit RGB color requires three integer coordinates')
            return cls('rgb256', (tag, c1, c2))

        if not isinstance(tag, str):
            raise TypeError(f'{tag!r} is not a valid color tag')
        if isinstance(c1, tuple):
            if c2 is not None or c3 is not None:
                raise ValueError('coordinates given as tuple and as arguments')
            return cls(tag, c1)
        if c1 is None or c2 is None or c3 is None:
            raise ValueError(f'{tag} color requires three coordinates')
        return cls(tag, (c1, c2, c3))
