"""
The color formats and spaces known to this package, with their coordinate
names, gamut bounds, and CSS serialization.
"""
import dataclasses
import math
from typing import cast, Literal

from .equality import normalize
from .spec import CoordinateSpec


EPSILON = 0.000075


@dataclasses.dataclass(frozen=True, slots=True)
class Coordinate:
    """
    A color space coordinate.

    Attributes:
        name: the single-letter name of the coordinate
        min: the optional minimum value for the coordinate
        max: the optional maximum value for the coordinate
        type: ``'angle'`` for a hue in degrees, ``'int'`` for integral values

    Angles are never out of range, they wrap around.
    """
    name: str
    min: None | float = None
    max: None | float = None
    type: None | Literal['angle', 'int'] = None

    def in_range(self, value: float, *, epsilon: float = EPSILON) -> bool:
        """Determine whether the value lies within bounds, give or take epsilon."""
        if self.type == 'angle' or math.isnan(value):
            return True
        return (
            (self.min is None or self.min - epsilon <= value)
            and (self.max is None or value <= self.max + epsilon)
        )

    def clip(self, value: float) -> float:
        if self.type == 'angle' or math.isnan(value):
            return value
        if self.min is not None and value < self.min:
            return self.min
        if self.max is not None and value > self.max:
            return self.max
        return value


@dataclasses.dataclass(frozen=True, slots=True)
class Space:
    """
    A color format or space.

    Attributes:
        tag: is a lower-case Python identifier
        coordinates: are the coordinates
        css_format: is the CSS function with a ``{}`` placeholder for the
            space-separated coordinates
    """
    tag: str
    coordinates: tuple[Coordinate, Coordinate, Coordinate]
    css_format: str

    @property
    def angular_index(self) -> int:
        """The index of the angular coordinate or -1 if there is none."""
        for index, coordinate in enumerate(self.coordinates):
            if coordinate.type == 'angle':
                return index
        return -1

    @property
    def integral(self) -> bool:
        return self.coordinates[0].type == 'int'

    def in_gamut(self, *coordinates: float, epsilon: float = EPSILON) -> bool:
        return all(
            coordinate.in_range(value, epsilon=epsilon)
            for coordinate, value in zip(self.coordinates, coordinates, strict=True)
        )

    def clip(self, *coordinates: float) -> CoordinateSpec:
        return cast(
            CoordinateSpec,
            tuple(c.clip(v) for c, v in zip(self.coordinates, coordinates)),
        )

    def normalize(self, *coordinates: float) -> tuple[None | float, ...]:
        """
        Normalize coordinates for hashing and equality. See :func:`.normalize`.
        """
        return normalize(
            coordinates,
            angular_index=self.angular_index,
            integral=self.integral,
        )

    @staticmethod
    def is_tag(tag: str) -> bool:
        return tag in _TAG_TO_SPACE

    @staticmethod
    def resolve(tag: str) -> 'Space':
        """Resolve the tag to the corresponding color format or space."""
        try:
            return _TAG_TO_SPACE[tag]
        except KeyError:
            raise ValueError(f'{tag} is not a valid color format or space') from None


_XYZ = (Coordinate('X'), Coordinate('Y'), Coordinate('Z'))
_RGB = (Coordinate('r', 0, 1), Coordinate('g', 0, 1), Coordinate('b', 0, 1))

_TAG_TO_SPACE = { space.tag: space for space in (
    Space('xyz', _XYZ, 'color(xyz {})'),
    Space('xyz_d50', _XYZ, 'color(xyz-d50 {})'),
    Space('linear_srgb', _RGB, 'color(srgb-linear {})'),
    Space('srgb', _RGB, 'color(srgb {})'),
    Space(
        'rgb256',
        (
            Coordinate('r', 0, 255, 'int'),
            Coordinate('g', 0, 255, 'int'),
            Coordinate('b', 0, 255, 'int'),
        ),
        'rgb({})',
    ),
    Space('lab', (Coordinate('L', 0, 100), Coordinate('a'), Coordinate('b')), 'lab({})'),
    Space(
        'lch',
        (Coordinate('L', 0, 100), Coordinate('C', 0), Coordinate('h', 0, 360, 'angle')),
        'lch({})',
    ),
)}
