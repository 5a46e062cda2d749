"""
Unit tests for palette name resolution.
Run from project root: python -m pytest tests/ -v
Or: python -m unittest discover -s tests -p "test_*.py" -v
"""
import sys
import unittest
from pathlib import Path

# Project root on path so "from colorbrewer. ..." works
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from colorbrewer.palettes import (  # noqa: E402
    Family,
    InvalidNameError,
    Palette,
    PALETTE_NAMES,
    palettes_in,
    resolve,
)


class TestResolve(unittest.TestCase):

    def test_every_canonical_name_resolves(self):
        self.assertEqual(len(PALETTE_NAMES), 35)
        for name in PALETTE_NAMES:
            p = resolve(name)
            self.assertIsInstance(p, Palette)
            self.assertEqual(p.value, name)

    def test_blues_and_pastel2(self):
        self.assertIs(resolve("Blues"), Palette.Blues)
        self.assertIs(resolve("Pastel2"), Palette.Pastel2)
        self.assertIs(Palette.from_name("Spectral"), Palette.Spectral)

    def test_case_variants_rejected(self):
        for bad in ("blues", "BLUES", "pastel2", "spectral", "ylgn"):
            with self.assertRaises(InvalidNameError):
                resolve(bad)

    def test_no_trimming_or_partial_match(self):
        for bad in (" Blues", "Blues ", "Blue", "Set", "Set10", "", "Pastel"):
            with self.assertRaises(InvalidNameError):
                resolve(bad)

    def test_non_string_rejected(self):
        for bad in (None, 3, Palette.Blues):
            with self.assertRaises(InvalidNameError):
                resolve(bad)

    def test_error_message_and_type(self):
        with self.assertRaises(ValueError) as ctx:
            resolve("Viridis")
        self.assertIsInstance(ctx.exception, InvalidNameError)
        self.assertEqual(str(ctx.exception), "not a valid value")

    def test_str_round_trips(self):
        for p in Palette:
            self.assertIs(resolve(str(p)), p)


class TestFamilies(unittest.TestCase):

    def test_family_sizes(self):
        self.assertEqual(len(palettes_in(Family.SEQUENTIAL)), 18)
        self.assertEqual(len(palettes_in(Family.DIVERGING)), 9)
        self.assertEqual(len(palettes_in(Family.QUALITATIVE)), 8)

    def test_family_of_known_palettes(self):
        self.assertIs(Palette.Oranges.family, Family.SEQUENTIAL)
        self.assertIs(Palette.PuOr.family, Family.DIVERGING)
        self.assertIs(Palette.Spectral.family, Family.DIVERGING)
        self.assertIs(Palette.Set3.family, Family.QUALITATIVE)

    def test_palettes_in_keeps_declaration_order(self):
        self.assertEqual(palettes_in(Family.QUALITATIVE)[:2], [Palette.Accent, Palette.Dark2])
