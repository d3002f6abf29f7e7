"""
Tests for the color model and parser.
"""

import math
import unittest

from text_contrast.models.color import (
    Color, CompositeColor, NAMED_COLORS, BLACK, WHITE,
    parse_color, blend_colors, perceived_luminance
)


class TestColor(unittest.TestCase):
    """Tests for the Color value type."""

    def test_luminance_computed_when_omitted(self):
        color = Color(255, 255, 255)
        self.assertAlmostEqual(color.l, 1.0)
        self.assertEqual(color.a, 1)

    def test_explicit_luminance_kept(self):
        color = Color(255, 0, 0, 1, 0.2126)
        self.assertEqual(color.l, 0.2126)

    def test_immutable(self):
        color = Color(1, 2, 3)
        with self.assertRaises(AttributeError):
            color.r = 10
        with self.assertRaises(AttributeError):
            color.extra = 1

    def test_structural_equality(self):
        self.assertEqual(Color(1, 2, 3, 0.5), Color(1, 2, 3, 0.5))
        self.assertNotEqual(Color(1, 2, 3, 0.5), Color(1, 2, 3, 1))
        self.assertEqual(len({Color(1, 2, 3), Color(1, 2, 3)}), 1)
        self.assertNotEqual(Color(0, 0, 0), (0, 0, 0))

    def test_views(self):
        color = Color(10, 20, 30, 0.25)
        self.assertEqual(color.rgb, (10, 20, 30))
        self.assertEqual(color.rgba, (10, 20, 30, 0.25))
        self.assertEqual(color.hex, "#0a141e")
        self.assertTrue(color.is_translucent)
        self.assertFalse(Color(0, 0, 0, math.nan).is_translucent)


class TestNamedColors(unittest.TestCase):
    """Tests for the fixed named-color table."""

    def test_table_size(self):
        self.assertEqual(len(NAMED_COLORS), 20)

    def test_table_values(self):
        expected = {
            "black": (0, 0, 0, 1, 0),
            "white": (255, 255, 255, 1, 1),
            "red": (255, 0, 0, 1, 0.2126),
            "green": (0, 128, 0, 1, 0.7152),
            "blue": (0, 0, 255, 1, 0.0722),
            "yellow": (255, 255, 0, 1, 0.9278),
            "orange": (255, 165, 0, 1, 0.3932),
            "purple": (128, 0, 128, 1, 0.2126),
            "pink": (255, 182, 193, 1, 0.5647),
            "brown": (165, 42, 42, 1, 0.1686),
            "gray": (128, 128, 128, 1, 0.5),
            "lightgray": (211, 211, 211, 1, 0.8275),
            "darkgray": (169, 169, 169, 1, 0.3333),
            "silver": (192, 192, 192, 1, 0.5019),
            "gold": (255, 215, 0, 1, 0.6372),
            "navy": (0, 0, 128, 1, 0.0352),
            "olive": (128, 128, 0, 1, 0.2159),
            "teal": (0, 128, 128, 1, 0.139),
            "maroon": (128, 0, 0, 1, 0.0722),
            "lime": (0, 255, 0, 1, 0.7152),
        }
        for name, (r, g, b, a, l) in expected.items():
            with self.subTest(name=name):
                color = NAMED_COLORS[name]
                self.assertEqual(color.rgba, (r, g, b, a))
                self.assertEqual(color.l, l)

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            NAMED_COLORS["cyan"] = Color(0, 255, 255)


class TestParseColor(unittest.TestCase):
    """Tests for parse_color."""

    def test_six_digit_hex(self):
        self.assertEqual(parse_color("#aabbcc").rgb, (170, 187, 204))
        self.assertEqual(parse_color("#00FF00").rgb, (0, 255, 0))
        self.assertEqual(parse_color("#12ab3F").hex, "#12ab3f")

    def test_three_digit_hex_is_doubled(self):
        # "#abc" is read as "#abcabc", not "#aabbcc"
        self.assertEqual(parse_color("#abc").rgb, (0xab, 0xca, 0xbc))
        self.assertEqual(parse_color("#0f0").rgb, (15, 0, 240))
        self.assertEqual(parse_color("#fff").rgb, (255, 255, 255))

    def test_hex_is_opaque_with_computed_luminance(self):
        color = parse_color("#000080")
        self.assertEqual(color.a, 1)
        self.assertAlmostEqual(color.l, perceived_luminance(0, 0, 128))

    def test_malformed_hex_falls_back_to_black(self):
        for value in ("#abcd", "#ggg", "abc", "#abc\n", " #abc", "#"):
            with self.subTest(value=value):
                self.assertEqual(parse_color(value), BLACK)

    def test_rgb(self):
        color = parse_color("rgb(10, 20,30)")
        self.assertEqual(color.rgba, (10, 20, 30, 1))
        self.assertAlmostEqual(color.l, (0.299 * 10 + 0.587 * 20 + 0.114 * 30) / 255)

    def test_rgb_not_clamped(self):
        self.assertEqual(parse_color("rgb(999,0,0)").r, 999)

    def test_rgb_whitespace_only_after_commas(self):
        for value in ("rgb( 1,2,3)", "rgb(1 ,2,3)", "rgb(1,2,3 )", "RGB(1,2,3)", "rgb(1,2)"):
            with self.subTest(value=value):
                self.assertEqual(parse_color(value), BLACK)

    def test_rgba(self):
        color = parse_color("rgba(255, 255, 255, 0.25)")
        self.assertEqual(color.rgba, (255, 255, 255, 0.25))
        self.assertEqual(parse_color("rgba(0,0,0,.5)").a, 0.5)
        self.assertEqual(parse_color("rgba(0,0,0,1.)").a, 1.0)

    def test_rgba_malformed_alpha_is_nan(self):
        color = parse_color("rgba(0,0,0,1.2.3)")
        self.assertEqual(color.rgb, (0, 0, 0))
        self.assertTrue(math.isnan(color.a))

    def test_rgba_requires_alpha(self):
        self.assertEqual(parse_color("rgba(10,20,30)"), BLACK)

    def test_named(self):
        self.assertIs(parse_color("white"), WHITE)
        self.assertEqual(parse_color("gold").rgb, (255, 215, 0))

    def test_named_is_case_sensitive(self):
        self.assertEqual(parse_color("White"), BLACK)

    def test_unknown_falls_back_to_black(self):
        for value in ("notacolor", "", "cyan", None, 42):
            with self.subTest(value=value):
                self.assertEqual(parse_color(value), Color(0, 0, 0, 1, 0))


class TestBlendColors(unittest.TestCase):
    """Tests for blend_colors."""

    def test_black_over_white_half(self):
        result = blend_colors(BLACK, Color(255, 255, 255, 0.5), 0.5)
        self.assertEqual(result, CompositeColor(128, 128, 128, 0.5))

    def test_rounds_half_up(self):
        result = blend_colors(BLACK, Color(1, 3, 5), 0.5)
        self.assertEqual(result, (1, 2, 3, 0.5))

    def test_white_over_black_quarter(self):
        result = blend_colors(WHITE, Color(0, 0, 0, 0.25), 0.25)
        self.assertEqual((result.r, result.g, result.b), (64, 64, 64))

    def test_alpha_passed_through(self):
        self.assertEqual(blend_colors(WHITE, BLACK, 0.3).a, 0.3)

    def test_extremes(self):
        self.assertEqual(blend_colors(WHITE, BLACK, 0)[:3], (0, 0, 0))
        self.assertEqual(blend_colors(WHITE, BLACK, 1)[:3], (255, 255, 255))


if __name__ == "__main__":
    unittest.main()
