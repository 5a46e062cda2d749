"""
Unit tests for the ramp accessor and the compiled-in ramp table.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from colorbrewer.palettes import Family, Palette, palettes_in, resolve  # noqa: E402
from colorbrewer.ramps import (  # noqa: E402
    RGB,
    get_color_ramp,
    get_ramp,
    max_count,
    min_count,
    ramp_as_array,
    ramp_to_hex,
    supported_counts,
)

# Curated counts per palette, as published by ColorBrewer
EXPECTED_MAX = {
    **{p: 9 for p in palettes_in(Family.SEQUENTIAL)},
    **{p: 11 for p in palettes_in(Family.DIVERGING)},
    Palette.Accent: 8,
    Palette.Dark2: 8,
    Palette.Pastel2: 8,
    Palette.Set2: 8,
    Palette.Pastel1: 9,
    Palette.Set1: 9,
    Palette.Paired: 12,
    Palette.Set3: 12,
}


class TestRampTable(unittest.TestCase):

    def test_supported_counts_table(self):
        self.assertEqual(set(EXPECTED_MAX), set(Palette))
        for p, top in EXPECTED_MAX.items():
            self.assertEqual(supported_counts(p), tuple(range(3, top + 1)), p)
            self.assertEqual(min_count(p), 3)
            self.assertEqual(max_count(p), top)

    def test_every_supported_ramp_has_exact_length_and_valid_channels(self):
        for p in Palette:
            for n in supported_counts(p):
                ramp = get_ramp(p, n)
                self.assertIsNotNone(ramp)
                self.assertEqual(len(ramp), n)
                for c in ramp:
                    self.assertIsInstance(c, RGB)
                    self.assertTrue(all(0 <= v <= 255 for v in c), (p, n, c))

    def test_unsupported_counts_are_absent(self):
        for p in Palette:
            for n in (-5, -1, 0, 1, 2, max_count(p) + 1, 20, 50):
                self.assertIsNone(get_ramp(p, n), (p, n))

    def test_later_counts_are_not_supersets(self):
        # Curated per count: Blues 3 and Blues 4 start with different colors
        self.assertNotEqual(get_ramp(Palette.Blues, 3)[0], get_ramp(Palette.Blues, 4)[0])


class TestGetRamp(unittest.TestCase):

    def test_oranges_3(self):
        self.assertEqual(
            get_ramp(Palette.Oranges, 3),
            [(254, 230, 206), (253, 174, 107), (230, 85, 13)],
        )

    def test_pastel2_3(self):
        self.assertEqual(
            get_ramp(Palette.Pastel2, 3),
            [RGB(179, 226, 205), RGB(253, 205, 172), RGB(203, 213, 232)],
        )

    def test_pastel2_caps_at_8(self):
        self.assertEqual(len(get_ramp(Palette.Pastel2, 8)), 8)
        self.assertIsNone(get_ramp(Palette.Pastel2, 9))

    def test_resolved_blues_3(self):
        ramp = get_ramp(resolve("Blues"), 3)
        self.assertIsNotNone(ramp)
        self.assertEqual(len(ramp), 3)

    def test_puor_extends_to_11(self):
        ramp = get_ramp(Palette.PuOr, 11)
        self.assertEqual(len(ramp), 11)
        self.assertEqual(ramp[0], (127, 59, 8))
        self.assertEqual(ramp[-1], (45, 0, 75))
        self.assertIsNone(get_ramp(Palette.PuOr, 12))

    def test_set3_and_paired_reach_12(self):
        self.assertEqual(len(get_ramp(Palette.Set3, 12)), 12)
        self.assertEqual(len(get_ramp(Palette.Paired, 12)), 12)
        self.assertIsNone(get_ramp(Palette.Set3, 13))

    def test_repeated_calls_equal_and_independent(self):
        first = get_ramp(Palette.Spectral, 7)
        second = get_ramp(Palette.Spectral, 7)
        self.assertEqual(first, second)
        self.assertIsNot(first, second)
        first.clear()
        self.assertEqual(get_ramp(Palette.Spectral, 7), second)

    def test_non_int_count_is_absent(self):
        self.assertEqual(len(get_ramp(Palette.Blues, 3)), 3)
        for bad in (3.0, "3", None, True):
            self.assertIsNone(get_ramp(Palette.Blues, bad), bad)

    def test_paired_12(self):
        self.assertEqual(
            get_ramp(Palette.Paired, 12),
            [
                (166, 206, 227), (31, 120, 180), (178, 223, 138), (51, 160, 44),
                (251, 154, 153), (227, 26, 28), (253, 191, 111), (255, 127, 0),
                (202, 178, 214), (106, 61, 154), (255, 255, 153), (177, 89, 40),
            ],
        )

    def test_rdylbu_5_and_6_curated_separately(self):
        five = get_ramp(Palette.RdYlBu, 5)
        six = get_ramp(Palette.RdYlBu, 6)
        self.assertEqual(
            five,
            [(215, 25, 28), (253, 174, 97), (255, 255, 191), (171, 217, 233), (44, 123, 182)],
        )
        self.assertEqual(
            six,
            [(215, 48, 39), (252, 141, 89), (254, 224, 144), (224, 243, 248), (145, 191, 219), (69, 117, 180)],
        )
        # No shared endpoints between adjacent counts
        self.assertNotEqual(five[0], six[0])
        self.assertNotEqual(five[-1], six[-1])

    def test_set3_12_last_color(self):
        self.assertEqual(get_ramp(Palette.Set3, 12)[-1], (255, 237, 111))

    def test_alias(self):
        self.assertEqual(get_color_ramp(Palette.Greys, 5), get_ramp(Palette.Greys, 5))

    def test_non_palette_rejected(self):
        with self.assertRaises(TypeError):
            get_ramp("Blues", 3)
        with self.assertRaises(TypeError):
            supported_counts("Blues")

    def test_absence_logged_at_debug(self):
        with self.assertLogs("colorbrewer.ramps", level="DEBUG") as logs:
            self.assertIsNone(get_ramp(Palette.Reds, 2))
        self.assertIn("Reds", logs.output[0])


class TestHexAndArray(unittest.TestCase):

    def test_hex(self):
        self.assertEqual(RGB(254, 230, 206).hex, "#fee6ce")
        self.assertEqual(RGB(0, 0, 0).hex, "#000000")
        self.assertEqual(
            ramp_to_hex(get_ramp(Palette.Oranges, 3)),
            ["#fee6ce", "#fdae6b", "#e6550d"],
        )

    def test_from_hex(self):
        self.assertEqual(RGB.from_hex("#e6550d"), (230, 85, 13))
        self.assertEqual(RGB.from_hex("E6550D"), RGB(230, 85, 13))
        for bad in ("#e6550", "#gg0000", "", "-1-1-1", "+f+f+f", "# 1 2 3"):
            with self.assertRaises(ValueError):
                RGB.from_hex(bad)

    def test_hex_rejects_out_of_range_channels(self):
        for bad in (RGB(300, 0, 0), RGB(-1, 0, 0), RGB(0, 0, 256)):
            with self.assertRaises(ValueError):
                bad.hex
        with self.assertRaises(ValueError):
            ramp_to_hex([(0, 0, 0), (300, 0, 0)])

    def test_ramp_as_array(self):
        import numpy as np

        arr = ramp_as_array(get_ramp(Palette.Oranges, 3))
        self.assertEqual(arr.shape, (3, 3))
        self.assertEqual(arr.dtype, np.uint8)
        self.assertEqual(arr[2].tolist(), [230, 85, 13])

    def test_ramp_as_array_rejects_absent_ramp(self):
        with self.assertRaises(ValueError):
            ramp_as_array(get_ramp(Palette.Oranges, 20))
        with self.assertRaises(ValueError):
            ramp_as_array([])
