"""
Load config (YAML) and pick a ramp from it. Lets host programs choose a palette
by name in config/default.yaml instead of in code.
"""
import logging
from pathlib import Path
from typing import Any

import yaml

from .palettes import Palette, resolve
from .ramps import RGB, get_ramp, supported_counts

logger = logging.getLogger(__name__)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return {**_defaults(), **data}


def _defaults() -> dict[str, Any]:
    return {
        "palette": {"name": "Blues", "count": 5},
    }


def _palette_section(config: dict[str, Any]) -> dict[str, Any]:
    pal = config.get("palette") or {}
    if not isinstance(pal, dict):
        raise ValueError(
            f"config \"palette\" must be a mapping with name and count, got {type(pal).__name__}"
        )
    return pal


def palette_from_config(config: dict[str, Any]) -> Palette:
    """Palette named in config["palette"]["name"]. Unknown names raise InvalidNameError."""
    pal = _palette_section(config)
    return resolve(pal.get("name", _defaults()["palette"]["name"]))


def ramp_from_config(config: dict[str, Any]) -> list[RGB] | None:
    """Ramp for the configured palette and count; None if that count is not curated."""
    palette = palette_from_config(config)
    count = _palette_section(config).get("count", _defaults()["palette"]["count"])
    ramp = get_ramp(palette, count)
    if ramp is None:
        logger.warning(
            "Config asks for %s colors from %s; supported counts are %s",
            count, palette, list(supported_counts(palette)),
        )
    return ramp
