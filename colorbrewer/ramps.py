"""
Ramp accessor: (palette, number of colors) -> curated list of RGB, or None.
Exact-match lookup only. A count with no curated ramp is a normal None result;
there is no interpolation, nearest-count fallback or clamping.
"""
import logging
import string
from typing import TYPE_CHECKING, NamedTuple, Sequence

from .data.ramps import RAMPS
from .palettes import Palette

if TYPE_CHECKING:
    import numpy as np

logger = logging.getLogger(__name__)


class RGB(NamedTuple):
    """One color, channels 0–255. Equal to the plain (r, g, b) tuple."""
    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        if not all(0 <= v <= 255 for v in self):
            raise ValueError(f"Channels must be 0-255, got {tuple(self)}")
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_hex(cls, code: str) -> "RGB":
        """Parse "#rrggbb" (leading # optional)."""
        s = code[1:] if code.startswith("#") else code
        if len(s) != 6 or not all(ch in string.hexdigits for ch in s):
            raise ValueError(f"Expected #rrggbb, got {code!r}")
        return cls(int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))


def _ramps_for(palette: Palette) -> dict[int, tuple[tuple[int, int, int], ...]]:
    if not isinstance(palette, Palette):
        raise TypeError(f"Expected Palette, got {type(palette).__name__}")
    return RAMPS[palette]


def get_ramp(palette: Palette, count: int) -> list[RGB] | None:
    """
    Curated ramp of exactly `count` colors for `palette`.
    Returns None when no ramp is defined for that count (e.g. 0, 2, 50)
    or when count is not an int (3.0 included).
    The list is a fresh copy on every call.
    """
    ramps = _ramps_for(palette)
    colors = ramps.get(count) if isinstance(count, int) else None
    if colors is None:
        logger.debug("No %s ramp with %s colors", palette, count)
        return None
    return [RGB(*c) for c in colors]


# Longer name, for callers that spell it out
get_color_ramp = get_ramp


def supported_counts(palette: Palette) -> tuple[int, ...]:
    """Counts with a curated ramp, ascending."""
    return tuple(sorted(_ramps_for(palette)))


def min_count(palette: Palette) -> int:
    return min(_ramps_for(palette))


def max_count(palette: Palette) -> int:
    return max(_ramps_for(palette))


def ramp_to_hex(ramp: Sequence[tuple[int, int, int]]) -> list[str]:
    return [RGB(*c).hex for c in ramp]


def ramp_as_array(ramp: Sequence[tuple[int, int, int]] | None) -> "np.ndarray":
    """Ramp as a (n, 3) uint8 array for numpy-based rendering."""
    import numpy as np

    if not ramp:
        raise ValueError("ramp_as_array: ramp cannot be empty")
    return np.asarray(ramp, dtype=np.uint8).reshape(len(ramp), 3)
