import math
import unittest

from noticeable.color import Color, ColorSpec, get_converter
from noticeable.color.serde import Format, parse_format_spec


class ColorValues:

    def __init__(
        self,
        spec: str,
        name: str,
        parsed: tuple[int, int, int],
        srgb: tuple[float, float, float],
        lab: tuple[float, float, float],
    ) -> None:
        self.spec = spec
        self.name = name
        self.parsed = Color('rgb256', parsed)
        self.srgb = Color('srgb', srgb)
        self.lab = lab


class TestColor(unittest.TestCase):

    BLACK = ColorValues(
        spec = '#000000',
        name = 'black',
        parsed = (0, 0, 0),
        srgb = (0.0, 0.0, 0.0),
        lab = (0.0, 0.0, 0.0),
    )

    WHITE = ColorValues(
        spec = '#ffffff',
        name = 'white',
        parsed = (255, 255, 255),
        srgb = (1.0, 1.0, 1.0),
        lab = (100.0, 0.0, 0.0),
    )

    RED = ColorValues(
        spec = '#ff0000',
        name = 'red',
        parsed = (255, 0, 0),
        srgb = (1.0, 0.0, 0.0),
        lab = (54.29, 80.80, 69.89),
    )

    def assertCoordinatesAlmostEqual(
        self,
        actual: tuple[float, ...],
        expected: tuple[float, ...],
        delta: float,
    ) -> None:
        self.assertEqual(len(actual), len(expected))
        for a, e in zip(actual, expected):
            self.assertAlmostEqual(a, e, delta=delta)

    def test_parsing(self) -> None:
        for color_name in ('BLACK', 'WHITE', 'RED'):
            values = getattr(self, color_name)

            with self.subTest('hex-string to 24-bit RGB', color=values.name):
                self.assertEqual(Color(values.spec), values.parsed)

            with self.subTest('color name to 24-bit RGB', color=values.name):
                self.assertEqual(Color(values.name), values.parsed)
                self.assertEqual(Color(values.name.upper()), values.parsed)

            with self.subTest('24-bit RGB back to hex-string', color=values.name):
                self.assertEqual(f'{values.parsed:h}', values.spec)

            with self.subTest('CSS rgb() to 24-bit RGB', color=values.name):
                r, g, b = values.parsed.coordinates
                self.assertEqual(Color(f'rgb({r}, {g}, {b})'), values.parsed)
                self.assertEqual(Color(f'rgb({r} {g} {b} / 0.5)'), values.parsed)

    def test_conversions(self) -> None:
        for color_name in ('BLACK', 'WHITE', 'RED'):
            values = getattr(self, color_name)

            with self.subTest('24-bit RGB to sRGB', color=values.name):
                srgb = values.parsed.to('srgb')
                self.assertEqual(srgb, values.srgb)

            with self.subTest('sRGB back to 24-bit RGB', color=values.name):
                self.assertEqual(srgb.to('rgb256'), values.parsed)

            with self.subTest('sRGB to CIELAB', color=values.name):
                lab = srgb.to('lab')
                self.assertCoordinatesAlmostEqual(lab.coordinates, values.lab, 0.01)

            with self.subTest('CIELAB back to sRGB', color=values.name):
                self.assertCoordinatesAlmostEqual(
                    lab.to('srgb').coordinates, values.srgb.coordinates, 1e-9
                )

    def test_white_point(self) -> None:
        L, a, b = Color('white').to('lab').coordinates
        self.assertAlmostEqual(L, 100.0, places=4)
        self.assertAlmostEqual(a, 0.0, places=4)
        self.assertAlmostEqual(b, 0.0, places=4)

        X, Y, Z = Color('white').to('xyz_d50').coordinates
        self.assertAlmostEqual(X, 0.3457 / 0.3585, places=6)
        self.assertAlmostEqual(Y, 1.0, places=6)
        self.assertAlmostEqual(Z, (1.0 - 0.3457 - 0.3585) / 0.3585, places=6)

    def test_lab_round_trip(self) -> None:
        for coordinates in ((50.0, 20.0, -30.0), (5.0, -3.0, 2.0), (90.0, -10.0, 60.0)):
            with self.subTest(lab=coordinates):
                lab = Color('lab', coordinates)
                self.assertCoordinatesAlmostEqual(
                    lab.to('xyz').to('lab').coordinates, coordinates, 1e-9
                )

    def test_lch(self) -> None:
        lch = Color.lab(50, 0, 10).to('lch')
        self.assertCoordinatesAlmostEqual(lch.coordinates, (50.0, 10.0, 90.0), 1e-9)
        self.assertCoordinatesAlmostEqual(
            lch.to('lab').coordinates, (50.0, 0.0, 10.0), 1e-9
        )

        gray = Color.lab(50, 0, 0).to('lch')
        self.assertTrue(math.isnan(gray.h))
        self.assertEqual(gray.to('lab'), Color.lab(50, 0, 0))
        self.assertEqual(gray, Color('lch', 50, 0, math.nan))

    def test_css_functions(self) -> None:
        self.assertEqual(Color('lab(50% 10 -20)'), Color.lab(50, 10, -20))
        self.assertEqual(Color('LCH(50 10 90)'), Color('lch', 50, 10, 90))
        self.assertEqual(Color('color(srgb 1 0.5 0)'), Color('srgb', 1, 0.5, 0))
        self.assertEqual(Color('color(srgb-linear 1 0 0)').tag, 'linear_srgb')
        self.assertEqual(Color('color(xyz-d65 0.5 0.5 0.5)').tag, 'xyz')
        self.assertEqual(Color('color(xyz-d50 0.5 0.5 0.5)').tag, 'xyz_d50')
        self.assertEqual(Color('rgb(100% 0% 50%)'), Color('srgb', 1, 0, 0.5))
        self.assertEqual(Color('srgb(1, 0, 0)'), Color('srgb', 1, 0, 0))
        self.assertEqual(Color('hsl(120 100% 25%)'), Color('srgb', 0, 0.5, 0))
        self.assertEqual(Color('hsla(0, 100%, 50%, 0.5)'), Color('srgb', 1, 0, 0))
        self.assertEqual(Color('hsl(240deg 100% 50% / 0.2)'), Color('srgb', 0, 0, 1))
        self.assertEqual(Color('#f008'), Color(255, 0, 0))
        self.assertEqual(Color('#ff000080'), Color(255, 0, 0))
        self.assertEqual(Color('rgba(255, 128, 0, 0.5)'), Color(255, 128, 0))

    def test_malformed(self) -> None:
        for text in (
            '#ff',
            '#gggggg',
            '#fffff',
            '#ggg8',
            'hsl(120 1 0.5)',
            'rgb(1 2)',
            'rgb(a b c)',
            'hsl(1 2 3)',
            'color(display-p3 1 0 0)',
            'lab(1 2 3',
            'chartreuse-ish',
        ):
            with self.subTest(text=text):
                with self.assertRaises(SyntaxError):
                    Color(text)

        with self.assertRaises(ValueError):
            ColorSpec('p3', (1.0, 0.0, 0.0))
        with self.assertRaises(ValueError):
            ColorSpec('lab', (1.0, 0.0))

    def test_coordinate_access(self) -> None:
        lab = Color.lab(50, 10, -20)
        self.assertEqual(lab.L, 50.0)
        self.assertEqual(lab.a, 10.0)
        self.assertEqual(lab.b, -20.0)
        with self.assertRaises(AttributeError):
            lab.C

    def test_gamut(self) -> None:
        self.assertTrue(Color('srgb', 1, 0.5, 0).in_gamut())
        self.assertFalse(Color('srgb', 1.2, 0.5, -0.1).in_gamut())
        self.assertEqual(Color('srgb', 1.2, 0.5, -0.1).clip(), Color('srgb', 1, 0.5, 0))
        self.assertFalse(Color.lab(50, 0, -120).to('srgb').in_gamut())
        self.assertTrue(Color.lab(50, 0, 0).to('srgb').in_gamut())

    def test_difference(self) -> None:
        self.assertEqual(
            Color.lab(50, 10, -20).difference(Color.lab(40, 15, -20)),
            (10.0, 5.0, 0.0),
        )
        self.assertEqual(Color('navy').difference('navy'), (0.0, 0.0, 0.0))

    def test_converter(self) -> None:
        converter = get_converter('rgb256', 'lab')
        self.assertEqual(converter.__name__, 'rgb256_to_lab')
        self.assertEqual(
            getattr(converter, 'route'),
            ('rgb256', 'srgb', 'linear_srgb', 'xyz', 'xyz_d50', 'lab'),
        )
        self.assertIs(get_converter('rgb256', 'lab'), converter)
        self.assertEqual(
            getattr(get_converter('lch', 'srgb'), 'route'),
            ('lch', 'lab', 'xyz_d50', 'xyz', 'linear_srgb', 'srgb'),
        )
        with self.assertRaises(ValueError):
            get_converter('lab', 'oklab')

    def test_formatting(self) -> None:
        lab = Color.lab(50, 10, -20)
        self.assertEqual(str(lab), 'lab(50.0, 10.0, -20.0)')
        self.assertEqual(f'{lab:s}', 'lab(50.0 10.0 -20.0)')
        self.assertEqual(f'{Color("#ff8000"):s}', 'rgb(255 128 0)')
        self.assertEqual(f'{Color.lab(1/3, 0, 0):.3f}', 'lab(0.333, 0.0, 0.0)')
        self.assertEqual(parse_format_spec('.3s'), (Format.CSS, 3))
        with self.assertRaises(ValueError):
            parse_format_spec('q')
        with self.assertRaises(ValueError):
            format(lab, 'h')

    def test_equality_and_hashing(self) -> None:
        white = Color('white').to('lab')
        round_trip = Color.lab(100, 0, 0).to('xyz').to('lab')
        self.assertEqual(white, round_trip)
        self.assertEqual(len({white, round_trip, Color.lab(100, 0, 0)}), 1)

        colors = { Color.lab(50, 20, -30).to('xyz_d50').to('lab'): 'violet' }
        self.assertEqual(colors[Color.lab(50, 20, -30)], 'violet')

        for h1, h2 in ((0, 360), (90, 450), (-90, 270)):
            with self.subTest(h1=h1, h2=h2):
                c1, c2 = Color('lch', 50, 10, h1), Color('lch', 50, 10, h2)
                self.assertEqual(c1, c2)
                self.assertEqual(hash(c1), hash(c2))

        gray = Color('lch', 50, 0, math.nan)
        self.assertEqual(gray, Color('lch', 50, 0, math.nan))
        self.assertEqual(hash(gray), hash(Color('lch', 50, 0, math.nan)))
        self.assertNotEqual(gray, Color('lch', 50, 0, 0))

        self.assertNotEqual(Color.lab(50, 0, 0), Color.lab(50.001, 0, 0))
        self.assertNotEqual(Color.lab(50, 0, 0), Color('lch', 50, 0, 0))

    def test_rgb256_coordinates_round(self) -> None:
        self.assertEqual(ColorSpec('rgb256', (254.7, 0.2, 127.5)).coordinates, (255, 0, 128))
        self.assertEqual(
            ColorSpec('rgb256', (254.7, 0.2, 127.4)).coordinates,
            get_converter('srgb', 'rgb256')(254.7 / 255, 0.2 / 255, 127.4 / 255),
        )
