"""
Palette identifiers: the closed set of ColorBrewer scheme names.
Names resolve by exact, case-sensitive match only (no aliases, no trimming).
"""
from enum import Enum


class InvalidNameError(ValueError):
    """Name does not match any canonical palette name."""
    def __init__(self, message: str = "not a valid value"):
        super().__init__(message)


class Family(Enum):
    SEQUENTIAL = "sequential"
    DIVERGING = "diverging"
    QUALITATIVE = "qualitative"


class Palette(Enum):
    """Available color palettes. Member value is the canonical name."""

    # Sequential
    YlGn = "YlGn"
    YlGnBu = "YlGnBu"
    GnBu = "GnBu"
    BuGn = "BuGn"
    PuBuGn = "PuBuGn"
    PuBu = "PuBu"
    BuPu = "BuPu"
    RdPu = "RdPu"
    PuRd = "PuRd"
    OrRd = "OrRd"
    YlOrRd = "YlOrRd"
    YlOrBr = "YlOrBr"
    Purples = "Purples"
    Blues = "Blues"
    Greens = "Greens"
    Oranges = "Oranges"
    Reds = "Reds"
    Greys = "Greys"
    # Diverging
    PuOr = "PuOr"
    BrBG = "BrBG"
    PRGn = "PRGn"
    PiYG = "PiYG"
    RdBu = "RdBu"
    RdGy = "RdGy"
    RdYlBu = "RdYlBu"
    Spectral = "Spectral"
    RdYlGn = "RdYlGn"
    # Qualitative
    Accent = "Accent"
    Dark2 = "Dark2"
    Paired = "Paired"
    Pastel1 = "Pastel1"
    Pastel2 = "Pastel2"
    Set1 = "Set1"
    Set2 = "Set2"
    Set3 = "Set3"

    def __str__(self) -> str:
        return self.value

    @property
    def family(self) -> Family:
        return _FAMILIES[self]

    @classmethod
    def from_name(cls, name: str) -> "Palette":
        return resolve(name)


_DIVERGING = frozenset((
    Palette.PuOr, Palette.BrBG, Palette.PRGn, Palette.PiYG, Palette.RdBu,
    Palette.RdGy, Palette.RdYlBu, Palette.Spectral, Palette.RdYlGn,
))
_QUALITATIVE = frozenset((
    Palette.Accent, Palette.Dark2, Palette.Paired, Palette.Pastel1,
    Palette.Pastel2, Palette.Set1, Palette.Set2, Palette.Set3,
))

_FAMILIES: dict[Palette, Family] = {
    p: (
        Family.DIVERGING if p in _DIVERGING
        else Family.QUALITATIVE if p in _QUALITATIVE
        else Family.SEQUENTIAL
    )
    for p in Palette
}

PALETTE_NAMES: tuple[str, ...] = tuple(p.value for p in Palette)

_BY_NAME: dict[str, Palette] = {p.value: p for p in Palette}


def resolve(name: str) -> Palette:
    """
    Palette for a canonical name, e.g. "Blues" -> Palette.Blues.
    Raises InvalidNameError for anything else, including case variants ("blues").
    """
    if not isinstance(name, str):
        raise InvalidNameError()
    try:
        return _BY_NAME[name]
    except KeyError:
        raise InvalidNameError() from None


def palettes_in(family: Family) -> list[Palette]:
    """Palettes of one family, in declaration order."""
    return [p for p in Palette if _FAMILIES[p] is family]
