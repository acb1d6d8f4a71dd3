"""Conversion between color formats and spaces"""
import itertools
import math
from typing import cast, TypeAlias

from .spec import ConverterSpec, CoordinateSpec


# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/srgb-linear.js

_XYZ_TO_LINEAR_SRGB = (
	(  3.2409699419045226,  -1.537383177570094,   -0.4986107602930034  ),
	( -0.9692436362808796,   1.8759675015077202,   0.04155505740717559 ),
	(  0.05563007969699366, -0.20397695888897652,  1.0569715142428786  ),
)

_LINEAR_SRGB_TO_XYZ = (
	( 0.41239079926595934, 0.357584339383878,   0.1804807884018343  ),
	( 0.21263900587151027, 0.715168678767756,   0.07219231536073371 ),
	( 0.01933081871559182, 0.11919477979462598, 0.9505321522496607  ),
)

# Bradford chromatic adaptation.
# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/adapt.js

_XYZ_D65_TO_D50 = (
	(  1.0479297925449969,   0.022946870601609652, -0.05019226628920524  ),
	(  0.02962780877005599,  0.9904344267538799,   -0.017073799063418826 ),
	( -0.009243040646204504, 0.015055191490298152,  0.7518742814281371   ),
)

_XYZ_D50_TO_D65 = (
	(  0.955473421488075,    -0.02309845494876471,   0.06325924320057072  ),
	( -0.0283697093338637,    1.0099953980813041,    0.021041441191917323 ),
	(  0.012314014864481998, -0.020507649298898964,  1.330365926242124    ),
)

# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/lab.js

_D50_WHITE = (0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585)
_LAB_EPSILON = 216 / 24389
_LAB_KAPPA = 24389 / 27

# Below this chroma, CIELCh hue is undefined
_ACHROMATIC_CHROMA = 0.02


# --------------------------------------------------------------------------------------


_Vector: TypeAlias = tuple[float, float, float]
_Matrix: TypeAlias = tuple[_Vector, _Vector, _Vector]

def _multiply(matrix: _Matrix, vector: _Vector) -> _Vector:
    return cast(
        _Vector,
        tuple(sum(r * c for r, c in zip(row, vector)) for row in matrix)
    )


# --------------------------------------------------------------------------------------
# 24-bit RGB


def rgb256_to_srgb(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert the given color from 24-bit RGB to sRGB."""
    return r / 255.0, g / 255.0, b / 255.0


def srgb_to_rgb256(r: float, g: float, b: float) -> tuple[int, int, int]:
    """Lossy conversion of the given color from sRGB to 24-bit RGB."""
    return cast(
        tuple[int, int, int],
        tuple(max(0, min(255, round(c * 255))) for c in (r, g, b)),
    )


# --------------------------------------------------------------------------------------
# sRGB and Linear sRGB
# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/srgb.js


def srgb_to_linear_srgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from sRGB to linear sRGB."""
    def convert(value: float) -> float:
        magnitude = math.fabs(value)

        if magnitude <= 0.04045:
            return value / 12.92

        return math.copysign(math.pow((magnitude + 0.055) / 1.055, 2.4), value)

    return convert(r), convert(g), convert(b)


def linear_srgb_to_srgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from linear sRGB to sRGB."""
    def convert(value: float) -> float:
        magnitude = math.fabs(value)

        if magnitude <= 0.0031308:
            return value * 12.92

        return math.copysign(math.pow(magnitude, 1/2.4) * 1.055 - 0.055, value)

    return convert(r), convert(g), convert(b)


def linear_srgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from linear sRGB to XYZ."""
    return _multiply(_LINEAR_SRGB_TO_XYZ, (r, g, b))


# --------------------------------------------------------------------------------------
# XYZ D65 and D50


def xyz_to_linear_srgb(X: float, Y: float, Z: float) -> tuple[float, float, float]:
    """Convert the given color from XYZ to linear sRGB."""
    return _multiply(_XYZ_TO_LINEAR_SRGB, (X, Y, Z))


def xyz_to_xyz_d50(X: float, Y: float, Z: float) -> tuple[float, float, float]:
    """Adapt the given color from the D65 to the D50 white point."""
    return _multiply(_XYZ_D65_TO_D50, (X, Y, Z))


def xyz_d50_to_xyz(X: float, Y: float, Z: float) -> tuple[float, float, float]:
    """Adapt the given color from the D50 to the D65 white point."""
    return _multiply(_XYZ_D50_TO_D65, (X, Y, Z))


# --------------------------------------------------------------------------------------
# CIELAB and CIELCh


def xyz_d50_to_lab(X: float, Y: float, Z: float) -> tuple[float, float, float]:
    """Convert the given color from XYZ D50 to CIELAB."""
    def f(value: float) -> float:
        if value > _LAB_EPSILON:
            return math.cbrt(value)
        return (_LAB_KAPPA * value + 16) / 116

    fx, fy, fz = (f(c / w) for c, w in zip((X, Y, Z), _D50_WHITE))
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_xyz_d50(L: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from CIELAB to XYZ D50."""
    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    def finv(value: float) -> float:
        cube = math.pow(value, 3)
        if cube > _LAB_EPSILON:
            return cube
        return (116 * value - 16) / _LAB_KAPPA

    y = math.pow(fy, 3) if L > _LAB_KAPPA * _LAB_EPSILON else L / _LAB_KAPPA
    wx, wy, wz = _D50_WHITE
    return finv(fx) * wx, y * wy, finv(fz) * wz


def lab_to_lch(L: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from CIELAB to CIELCh."""
    C = math.hypot(a, b)
    if C < _ACHROMATIC_CHROMA:
        h = math.nan
    else:
        h = math.fmod(math.degrees(math.atan2(b, a)) + 360, 360)

    return L, C, h


def lch_to_lab(L: float, C: float, h: float) -> tuple[float, float, float]:
    """Convert the given color from CIELCh to CIELAB."""
    if math.isnan(h):
        return L, 0.0, 0.0

    return L, C * math.cos(math.radians(h)), C * math.sin(math.radians(h))


# --------------------------------------------------------------------------------------
# Arbitrary Conversions


def _collect_conversions(
    mod: dict[str, object],
    conversions: dict[str, dict[str, ConverterSpec]]
) -> None:
    for name, value in mod.items():
        if not name.startswith('_') and '_to_' in name and callable(value):
            source, _, target = name.partition('_to_')
            targets = conversions.setdefault(source, {})
            if target in targets:
                raise ValueError(f'duplicate conversion from {source} to {target}')
            targets[target] = cast(ConverterSpec, value)


_BASE_TREE = {
    'rgb256': ('srgb', 3),
    'srgb': ('linear_srgb', 2),
    'linear_srgb': ('xyz', 1),
    'lch': ('lab', 3),
    'lab': ('xyz_d50', 2),
    'xyz_d50': ('xyz', 1),
    'xyz': (None, 0),
}

def _elaborate_route(source: str, target: str) -> tuple[str, ...]:
    """Elaborate the route from the source to the target color format or space."""
    if source not in _BASE_TREE:
        raise ValueError(f'{source} is not a valid color format or space')
    if target not in _BASE_TREE:
        raise ValueError(f'{target} is not a valid color format or space')

    # Trace paths from source and target towards root of base tree
    source_path: list[str] = [source]
    target_path: list[str] = [target]

    def step(path: list[str]) -> None:
        tag, _ = _BASE_TREE[path[-1]]
        assert tag is not None
        path.append(tag)

    # Sync up traces, so that both have same distance from root
    _, source_dist = _BASE_TREE[source]
    _, target_dist = _BASE_TREE[target]

    path = source_path if source_dist >= target_dist else target_path
    for _ in range(abs(source_dist - target_dist)):
        step(path)

    # Keep tracing in lock step until paths share last node
    while source_path[-1] != target_path[-1]:
        step(source_path)
        step(target_path)

    # Assemble complete path
    target_path.pop()
    target_path.reverse()
    return tuple(itertools.chain(source_path, target_path))


def _pass_through(*coordinates: float) -> CoordinateSpec:
    """Pass through the coordinates."""
    return cast(CoordinateSpec, tuple(coordinates))


def _create_converter(conversions: tuple[ConverterSpec, ...]) -> ConverterSpec:
    """
    Instantiate a closure that applies the given conversions. Doing so in a
    dedicated top-level function keeps the closure environment minimal.
    """
    def converter(*coordinates: float) -> CoordinateSpec:
        value = cast(CoordinateSpec, coordinates)
        for fn in conversions:
            value = fn(*value)
        return value
    return cast(ConverterSpec, converter)


_CONVERSIONS: dict[str, dict[str, ConverterSpec]] = {}
_converter_cache: dict[str, dict[str, ConverterSpec]] = {}

def get_converter(source: str, target: str) -> ConverterSpec:
    """
    Instantiate a function that converts coordinates from the source color
    format or space to the target color format or space.

    This function factory caches converters to avoid re-instantiating the same
    converter over and over again. Each converter's name is computed as
    ``f"{source}_to_{target}"`` and its ``route`` attribute lists the color
    formats and spaces it passes through.
    """
    # Handle trivial case
    if source == target:
        if source not in _BASE_TREE:
            raise ValueError(f'{source} is not a valid color format or space')
        return cast(ConverterSpec, _pass_through)

    # Check whether converter already exists
    maybe_converter = _CONVERSIONS.get(source, {}).get(target)
    if maybe_converter is not None:
        return maybe_converter
    maybe_converter = _converter_cache.get(source, {}).get(target)
    if maybe_converter is not None:
        return maybe_converter

    route = _elaborate_route(source, target)
    conversions = tuple(
        _CONVERSIONS[t1][t2] for t1, t2 in itertools.pairwise(route)
    )

    # Annotate converter for easy debugability
    converter = _create_converter(conversions)
    name = f'{source}_to_{target}'
    setattr(converter, '__name__', name)
    setattr(converter, '__qualname__', name)
    setattr(converter, 'route', route)
    setattr(converter, 'conversions', conversions)

    _converter_cache.setdefault(source, {})[target] = converter
    return converter


# Filled once at import and read-only afterwards
_collect_conversions(globals(), _CONVERSIONS)
