"""
Unit tests for config-driven palette selection (YAML config -> ramp).
Run from project root: python -m pytest tests/ -v
"""
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TestConfig(unittest.TestCase):

    def _write(self, text: str) -> Path:
        tmp = tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False, encoding="utf-8")
        with tmp:
            tmp.write(text)
        self.addCleanup(Path(tmp.name).unlink)
        return Path(tmp.name)

    def test_missing_file_returns_defaults(self):
        from colorbrewer.config import load_config

        config = load_config(ROOT / "no_such_dir" / "missing.yaml")
        self.assertEqual(config["palette"], {"name": "Blues", "count": 5})

    def test_shipped_default_config(self):
        from colorbrewer.config import load_config, ramp_from_config

        config = load_config()
        ramp = ramp_from_config(config)
        self.assertIsNotNone(ramp)
        self.assertEqual(len(ramp), config["palette"]["count"])

    def test_yaml_selects_palette(self):
        from colorbrewer.config import load_config, palette_from_config, ramp_from_config
        from colorbrewer.palettes import Palette

        path = self._write("palette:\n  name: Oranges\n  count: 3\n")
        config = load_config(path)
        self.assertIs(palette_from_config(config), Palette.Oranges)
        self.assertEqual(
            ramp_from_config(config),
            [(254, 230, 206), (253, 174, 107), (230, 85, 13)],
        )

    def test_empty_yaml_uses_defaults(self):
        from colorbrewer.config import load_config

        config = load_config(self._write(""))
        self.assertEqual(config["palette"]["name"], "Blues")

    def test_unknown_name_raises(self):
        from colorbrewer.config import ramp_from_config
        from colorbrewer.palettes import InvalidNameError

        with self.assertRaises(InvalidNameError):
            ramp_from_config({"palette": {"name": "blues", "count": 3}})

    def test_scalar_palette_section_raises(self):
        from colorbrewer.config import palette_from_config, ramp_from_config

        with self.assertRaises(ValueError) as ctx:
            ramp_from_config({"palette": "Reds"})
        self.assertIn("mapping", str(ctx.exception))
        with self.assertRaises(ValueError):
            palette_from_config({"palette": ["Reds", 3]})

    def test_yaml_scalar_palette_raises(self):
        from colorbrewer.config import load_config, ramp_from_config

        config = load_config(self._write("palette: Reds\n"))
        with self.assertRaises(ValueError):
            ramp_from_config(config)

    def test_unsupported_count_warns_and_returns_none(self):
        from colorbrewer.config import ramp_from_config

        with self.assertLogs("colorbrewer.config", level="WARNING") as logs:
            ramp = ramp_from_config({"palette": {"name": "Pastel2", "count": 9}})
        self.assertIsNone(ramp)
        self.assertIn("Pastel2", logs.output[0])
