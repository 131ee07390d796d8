"""
Palette registry for the MIDI configurator.

Each product ships one palette per editable category. Palettes are fixed for
the session: the configurator only ever reads them.

Usage:
    from midi_configurator.configurator.palette import STUDIO_PALETTE, Category

    rosa = STUDIO_PALETTE.color(Category.KNOB, "Rosa")
    print(rosa.hex)  # "#FF007F"
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Tuple


class Category(str, Enum):
    """Class of parts sharing selection and coloring rules."""
    CHASSIS = "chassis"
    BUTTON = "button"
    RING = "ring"
    KNOB = "knob"
    FADER = "fader"


class View(str, Enum):
    """Active editing mode of a configurator."""
    NORMAL = "normal"
    CHASSIS = "chassis"
    BUTTONS = "buttons"
    KNOBS = "knobs"
    FADERS = "faders"

    @property
    def bucket(self) -> str:
        """Name of the part bucket edited in this view (empty for normal)."""
        return "" if self is View.NORMAL else self.value

    @property
    def category(self) -> Category:
        """Primary category edited in this view."""
        return {
            View.CHASSIS: Category.CHASSIS,
            View.BUTTONS: Category.BUTTON,
            View.KNOBS: Category.KNOB,
            View.FADERS: Category.FADER,
        }[self]


# Bucket each category's parts are grouped under (rings sit with buttons)
CATEGORY_BUCKETS: Dict[Category, str] = {
    Category.CHASSIS: "chassis",
    Category.BUTTON: "buttons",
    Category.RING: "buttons",
    Category.KNOB: "knobs",
    Category.FADER: "faders",
}


class UnknownColorError(KeyError):
    """Raised when a color name is not part of a category's palette."""


@dataclass(frozen=True)
class Color:
    """A named palette entry."""
    name: str
    hex: str

    @property
    def rgb(self) -> Tuple[float, float, float]:
        """Color as an (r, g, b) triple in the 0..1 range."""
        value = self.hex.lstrip("#")
        return tuple(int(value[i:i + 2], 16) / 255 for i in (0, 2, 4))

    @property
    def value_int(self) -> int:
        """Color as a 0xRRGGBB integer."""
        return int(self.hex.lstrip("#"), 16)


class Palette:
    """Ordered color swatches per bucket."""

    def __init__(self, swatches: Mapping[str, List[Tuple[str, str]]]):
        self._swatches: Dict[str, Dict[str, Color]] = {
            bucket: {name: Color(name, hex_value) for name, hex_value in entries}
            for bucket, entries in swatches.items()
        }

    @property
    def buckets(self) -> List[str]:
        return list(self._swatches)

    def colors(self, bucket: str) -> List[Color]:
        """Swatches of a bucket in display order (empty if none)."""
        return list(self._swatches.get(bucket, {}).values())

    def color(self, category: Category, name: str) -> Color:
        """Look up a color by category and name."""
        return self.lookup(CATEGORY_BUCKETS[category], name)

    def lookup(self, bucket: str, name: str) -> Color:
        """Look up a color by bucket and name."""
        try:
            return self._swatches[bucket][name]
        except KeyError:
            raise UnknownColorError(f"Color '{name}' is not available for {bucket}") from None

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Convert to dictionary for serialization."""
        return {
            bucket: {color.name: color.hex for color in colors.values()}
            for bucket, colors in self._swatches.items()
        }


# Base colors of the first controller line
CLASSIC_COLORS: List[Tuple[str, str]] = [
    ("Verde", "#1F7A1F"),
    ("Amarillo", "#FFD700"),
    ("Azul", "#0077FF"),
    ("Blanco", "#F5F5F5"),
    ("Naranja", "#FF7300"),
    ("Morado", "#6A0DAD"),
    ("Rojo", "#D00000"),
    ("Negro", "#1C1C1C"),
    ("Rosa", "#FF007F"),
    ("Gris", "#808080"),
]

# Brand-matched colors used by the newer controllers
STUDIO_COLORS: List[Tuple[str, str]] = [
    ("Verde", "#7CBA40"),
    ("Amarillo", "#F3E600"),
    ("Azul", "#325EB7"),
    ("Blanco", "#F5F5F5"),
    ("Naranja", "#F47119"),
    ("Morado", "#7B217E"),
    ("Rojo", "#E52421"),
    ("Negro", "#1C1C1C"),
    ("Rosa", "#FF007F"),
    ("Gris", "#808080"),
]

CLASSIC_PALETTE = Palette({
    "chassis": CLASSIC_COLORS,
    "buttons": CLASSIC_COLORS,
    "knobs": CLASSIC_COLORS,
})

STUDIO_PALETTE = Palette({
    "chassis": STUDIO_COLORS,
    "buttons": STUDIO_COLORS,
    "knobs": STUDIO_COLORS,
    "faders": STUDIO_COLORS,
})
