import logging
from collections.abc import Iterable, Sequence

import numpy as np

from asciigrid.charsets import DEFAULT_PALETTE

logger = logging.getLogger(__name__)

MAX_INTENSITY = 255
SEPARATOR = " "
LINE_BREAK = "\n"


class QuantizerError(ValueError):
    """Raised when a conversion is rejected before any pixel is processed."""


class InvalidDimension(QuantizerError):
    pass


class InvalidPalette(QuantizerError):
    pass


def _check_row_width(row_width) -> int:
    if isinstance(row_width, bool) or not isinstance(row_width, (int, np.integer)):
        raise InvalidDimension(f"Row width must be an integer, got {row_width!r}")
    if row_width < 1:
        raise InvalidDimension(f"Row width must be at least 1, got {row_width}")
    return int(row_width)


def _check_palette(palette: str | Sequence[str] | None) -> list[str]:
    glyphs = list(palette) if palette is not None else []
    if not glyphs:
        raise InvalidPalette("Palette must contain at least one glyph")
    for glyph in glyphs:
        if not isinstance(glyph, str) or not glyph:
            raise InvalidPalette(f"Palette entries must be non-empty strings, got {glyph!r}")
    return glyphs


def _coerce(value) -> float:
    """Clamp one loose value to 0-255; anything non-numeric counts as black."""
    try:
        if isinstance(value, (str, bytes)):
            value = float(value)
        return float(min(max(value, 0), MAX_INTENSITY))
    except (TypeError, ValueError):
        return 0.0


def _as_intensities(intensities: bytes | Iterable | np.ndarray) -> np.ndarray:
    """Flatten intensities to a 1-D int64 array clamped to 0-255.

    Fractional values are rounded half to even and NaN or non-numeric entries
    are treated as black, matching an 8-bit clamped pixel buffer.
    """
    if isinstance(intensities, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(intensities), dtype=np.uint8).astype(np.int64)

    arr = np.asarray(intensities).ravel()
    if arr.dtype.kind in "OUS":
        # Python ints beyond float range or stray strings
        arr = np.array([_coerce(value) for value in arr], dtype=np.float64)
    if arr.dtype.kind == "u":
        arr = np.minimum(arr, MAX_INTENSITY)
    elif arr.dtype.kind not in "ib":
        arr = np.nan_to_num(arr.astype(np.float64), nan=0.0, posinf=MAX_INTENSITY, neginf=0.0)
        arr = np.clip(np.rint(arr), 0, MAX_INTENSITY)
    return np.clip(arr.astype(np.int64), 0, MAX_INTENSITY)


def palette_indices(intensities: bytes | Iterable | np.ndarray, palette_size: int) -> np.ndarray:
    """Quantize intensities linearly onto ``palette_size`` buckets.

    Computes ``round(v / 255 * (palette_size - 1))`` with ties rounding up,
    in integer arithmetic so the result never depends on float rounding.
    """
    if palette_size < 1:
        raise InvalidPalette(f"Palette size must be at least 1, got {palette_size}")
    values = _as_intensities(intensities)
    steps = palette_size - 1
    return (2 * values * steps + MAX_INTENSITY) // (2 * MAX_INTENSITY)


def render_rows(
    intensities: bytes | Iterable | np.ndarray,
    row_width: int,
    palette: str | Sequence[str] = DEFAULT_PALETTE,
) -> list[str]:
    """Return the grid lines, each holding up to ``row_width`` glyph/space pairs, without line breaks."""
    row_width = _check_row_width(row_width)
    glyphs = _check_palette(palette)

    cells = np.array([glyph + SEPARATOR for glyph in glyphs], dtype=object)
    chosen = cells[palette_indices(intensities, len(glyphs))]
    return ["".join(chosen[start : start + row_width]) for start in range(0, len(chosen), row_width)]


def render(
    intensities: bytes | Iterable | np.ndarray,
    row_width: int,
    palette: str | Sequence[str] = DEFAULT_PALETTE,
) -> str:
    """Convert row-major grayscale intensities to a character grid.

    Every intensity becomes one palette glyph followed by a space, and a line
    break follows every ``row_width``-th glyph. A partial last row is
    terminated too, so the grid always has ``ceil(len / row_width)`` lines.

    Raises:
        InvalidDimension: ``row_width`` is not a positive integer.
        InvalidPalette: ``palette`` is empty or holds an empty entry.
    """
    rows = render_rows(intensities, row_width, palette)
    logger.debug("Rendered %d rows of width %d", len(rows), row_width)
    return "".join(row + LINE_BREAK for row in rows)
