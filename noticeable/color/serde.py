"""Support for serializing and deserializing color values"""
import enum
from typing import cast, Literal, NoReturn, overload

from .names import NAMED_COLORS
from .space import Space
from .spec import CoordinateSpec


@overload
def _check(
    is_valid: Literal[False], entity: str, value: object, deficiency: str = ...
) -> NoReturn:
    ...
@overload
def _check(
    is_valid: bool, entity: str, value: object, deficiency: str = ...
) -> None | NoReturn:
    ...
def _check(
    is_valid: bool, entity: str, value: object, deficiency: str = 'is malformed'
) -> None | NoReturn:
    if not is_valid:
        raise SyntaxError(f'{entity} "{value}" {deficiency}')
    return


def parse_hex(color: str) -> tuple[str, tuple[int, int, int]]:
    """Parse the string specifying a color in hashed hexadecimal format."""
    entity = 'hex web color'

    _check(color.startswith('#'), entity, color, 'does not start with "#"')
    digits = color[1:]
    _check(
        len(digits) in (3, 4, 6, 8),
        entity, color, 'does not have 3, 4, 6, or 8 digits',
    )
    # The alpha digits are validated but ignored
    if len(digits) <= 4:
        digits = ''.join(f'{d}{d}' for d in digits)

    try:
        return 'rgb256', cast(
            tuple[int, int, int],
            tuple(int(digits[n:n+2], base=16) for n in range(0, len(digits), 2))[:3],
        )
    except ValueError:
        _check(False, entity, color, 'contains non-hexadecimal digits')


def parse_name(color: str) -> tuple[str, tuple[int, int, int]]:
    """Parse the string naming a CSS color."""
    rgb = NAMED_COLORS.get(color.strip().lower())
    _check(rgb is not None, 'color name', color, 'is not a CSS named color')
    return 'rgb256', cast(tuple[int, int, int], rgb)


_CSS_SPACES = {
    'srgb': 'srgb',
    'srgb-linear': 'linear_srgb',
    'xyz': 'xyz',
    'xyz-d65': 'xyz',
    'xyz-d50': 'xyz_d50',
}


def _parse_number(text: str, scale: float = 1.0) -> float:
    if text.endswith('%'):
        return float(text[:-1]) * scale / 100
    return float(text)


def _hsl_to_srgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    # See https://www.w3.org/TR/css-color-4/#hsl-to-rgb
    a = s * min(l, 1 - l)

    def channel(n: int) -> float:
        k = (n + h / 30) % 12
        return l - a * max(-1, min(k - 3, 9 - k, 1))

    return channel(0), channel(8), channel(4)


def parse_fn(color: str) -> tuple[str, CoordinateSpec]:
    """
    Parse the string specifying a color in function notation. That includes the
    CSS ``rgb()``, ``hsl()``, ``lab()``, ``lch()``, and ``color()`` functions as
    well as tag functions such as ``srgb(1.0, 0.5, 0.0)``. Coordinates may be
    separated by commas or whitespace. Alpha values are ignored.
    """
    entity = 'color function'

    color = color.strip()
    name, paren, args = color.partition('(')
    _check(bool(paren) and args.endswith(')'), entity, color, 'lacks parentheses')
    name = name.strip().lower()
    args, _, _ = args[:-1].partition('/')
    tokens = args.replace(',', ' ').split()

    try:
        if name == 'color':
            _check(len(tokens) == 4, entity, color, 'does not have four arguments')
            tag = _CSS_SPACES.get(tokens[0].lower())
            _check(tag is not None, entity, color, 'has unknown color space')
            return cast(str, tag), cast(
                CoordinateSpec, tuple(_parse_number(t) for t in tokens[1:])
            )

        if name in ('rgb', 'rgba', 'hsl', 'hsla') and len(tokens) == 4:
            # Legacy comma syntax with alpha
            tokens = tokens[:3]
        _check(len(tokens) == 3, entity, color, 'does not have three arguments')

        if name in ('rgb', 'rgba'):
            if any(t.endswith('%') for t in tokens):
                return 'srgb', cast(
                    CoordinateSpec, tuple(_parse_number(t) for t in tokens)
                )
            values = tuple(float(t) for t in tokens)
            if all(v.is_integer() for v in values):
                return 'rgb256', cast(CoordinateSpec, tuple(int(v) for v in values))
            return 'srgb', cast(CoordinateSpec, tuple(v / 255 for v in values))

        if name in ('hsl', 'hsla'):
            h, s, l = tokens
            _check(
                s.endswith('%') and l.endswith('%'),
                entity, color, 'lacks percentages for saturation and lightness'
            )
            return 'srgb', _hsl_to_srgb(
                float(h.removesuffix('deg')), _parse_number(s), _parse_number(l)
            )

        if name in ('lab', 'lch'):
            # A percentage lightness maps 100% to 100
            lightness = _parse_number(tokens[0], 100.0)
            return name, cast(
                CoordinateSpec,
                (lightness, *(float(t) for t in tokens[1:])),
            )

        _check(Space.is_tag(name), entity, color, 'has unknown color space')
        return name, cast(CoordinateSpec, tuple(float(t) for t in tokens))
    except ValueError:
        _check(False, entity, color, 'has non-numeric arguments')


def parse(color: str) -> tuple[str, CoordinateSpec]:
    """
    Parse the textual representation of a color, trying hashed hexadecimal,
    function, and named color notation in that order.
    """
    color = color.strip()
    if color.startswith('#'):
        return parse_hex(color)
    if '(' in color:
        return parse_fn(color)
    return parse_name(color)


class Format(enum.Enum):
    """
    The color format

    Attributes:
        FUNCTION: for ``<tag>(<coordinates>)`` notation
        HEX: for ``#<hex>`` notation
        CSS: for ``color()``, ``lab()``, ``lch()``, and ``rgb()`` notation
    """
    FUNCTION = 'f'
    HEX = 'h'
    CSS = 's'


def parse_format_spec(spec: str) -> tuple[Format, int]:
    """
    Parse the color format specifier into the format and precision.

    Args:
        spec: selects the desired output format and precision
    Returns:
        the format and maximum precision for floating point numbers, which
        default to `Format.FUNCTION` and 5, respectively

    A valid format specifier comprises two parts, both of which are optional:

     1. The first part, if present specifies the precision and is written as a
        period followed by one or two decimal digits, e.g., ``.3``.
     2. The second part, if present, specifies the format:

          * ``f`` for function notation, which uses the tag as function name
            and the comma-separated coordinates as arguments
          * ``h`` for hexadecimal notation prefixed with a hash ``#``
          * ``s`` for CSS notation, which uses CSS function and color space
            names and space-separated coordinates

    Note that ``h`` only works for RGB256 colors.
    """
    format = Format.FUNCTION
    precision = 5

    s = spec
    if s:
        f = s[-1]
        if f in ('f', 'h', 's'):
            format = Format(f)
            s = s[:-1]
    if s.startswith('.') and s[1:].isdigit():
        precision = int(s[1:])
        s = ''
    if s:
        raise ValueError(f'malformed color format "{spec}"')

    return format, precision


def stringify(
    tag: str,
    coordinates: CoordinateSpec,
    format: Format = Format.FUNCTION,
    precision: int = 5
) -> str:
    """
    Format the tagged coordinates in the specified format and with the specified
    precision.
    """
    if format is Format.HEX:
        if tag != 'rgb256':
            raise ValueError(f'{tag} has no hexadecimal serialization')
        return '#' + ''.join(f'{c:02x}' for c in coordinates)

    separator = ' ' if format is Format.CSS else ', '
    coordinate_text = separator.join(
        f'{c}' if isinstance(c, int) else f'{c:.{precision}}'
        for c in coordinates
    )

    if format is Format.FUNCTION:
        return f'{tag}({coordinate_text})'

    return Space.resolve(tag).css_format.format(coordinate_text)
