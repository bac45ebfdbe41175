from collections.abc import Sequence
from pathlib import Path

from PIL import Image

from asciigrid.charsets import DEFAULT_PALETTE
from asciigrid.quantizer import render
from asciigrid.source import DEFAULT_GAMMA, load_grayscale


def image_to_ascii(
    image: Image.Image | str | Path,
    width: int | None = None,
    height: int | None = None,
    palette: str | Sequence[str] | None = None,
    gamma: float | None = DEFAULT_GAMMA,
) -> str:
    gray = load_grayscale(image, width=width, height=height, gamma=gamma)
    if gray.width == 0 or gray.height == 0:
        return ""
    return render(gray.data, gray.width, palette if palette is not None else DEFAULT_PALETTE)
