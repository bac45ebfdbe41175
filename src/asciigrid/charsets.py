from collections.abc import Sequence
from dataclasses import dataclass

# All palettes run from darkest (index 0) to brightest (last index)
DEFAULT_PALETTE = ".,:;+*?%S#@"

# The fixed 11-step ramp of the first revision's glyph switch
CLASSIC_PALETTE = ".'\":;!*#$%@"

# Block elements: space, light/medium/dark shade, full block
BLOCKS = " ░▒▓█"

# Paul Bourke's 70-level ramp, reversed so ink density grows with brightness
DENSE = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

PALETTES = {
    "default": DEFAULT_PALETTE,
    "classic": CLASSIC_PALETTE,
    "blocks": BLOCKS,
    "dense": DENSE,
}


@dataclass
class PaletteConfig:
    default_palette: str | Sequence[str] = DEFAULT_PALETTE
    custom_palette: str | Sequence[str] | None = None

    def resolve(self) -> str | Sequence[str]:
        """Return the custom palette when one was given, else the default."""
        if self.custom_palette:
            return self.custom_palette
        return self.default_palette
