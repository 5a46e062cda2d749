# ColorBrewer palettes: fixed, curated RGB ramps by palette name and color count

from .palettes import Family, InvalidNameError, Palette, PALETTE_NAMES, palettes_in, resolve
from .ramps import (
    RGB,
    get_ramp,
    get_color_ramp,
    supported_counts,
    min_count,
    max_count,
    ramp_to_hex,
    ramp_as_array,
)
from .config import load_config, palette_from_config, ramp_from_config

__all__ = [
    "Family",
    "InvalidNameError",
    "Palette",
    "PALETTE_NAMES",
    "palettes_in",
    "resolve",
    "RGB",
    "get_ramp",
    "get_color_ramp",
    "supported_counts",
    "min_count",
    "max_count",
    "ramp_to_hex",
    "ramp_as_array",
    "load_config",
    "palette_from_config",
    "ramp_from_config",
]
