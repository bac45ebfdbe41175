import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_GAMMA = 2.2


@dataclass(frozen=True)
class GrayImage:
    data: bytes  # one byte per pixel, row-major
    width: int
    height: int


def _target_size(size: tuple[int, int], width: int | None, height: int | None) -> tuple[int, int]:
    src_w, src_h = size
    if width is not None and height is not None:
        return width, height
    # One glyph plus its trailing space spans two terminal cells, which is close to square
    if width is not None:
        return width, max(1, round(src_h * width / src_w))
    if height is not None:
        return max(1, round(src_w * height / src_h)), height
    return src_w, src_h


def _resize(gray: Image.Image, size: tuple[int, int], gamma: float | None) -> Image.Image:
    """Resize an 8-bit grayscale image, blending in linear light when gamma is set."""
    if gamma is None or gamma == 1.0:
        return gray.resize(size, Image.LANCZOS)

    linear = (np.asarray(gray, dtype=np.float32) / 255.0) ** gamma
    resized = np.asarray(Image.fromarray(linear).resize(size, Image.LANCZOS), dtype=np.float32)
    # Lanczos overshoots slightly around edges
    encoded = np.clip(resized, 0.0, 1.0) ** (1.0 / gamma)
    return Image.fromarray(np.rint(encoded * 255.0).astype(np.uint8))


def load_grayscale(
    image: Image.Image | str | Path,
    width: int | None = None,
    height: int | None = None,
    gamma: float | None = DEFAULT_GAMMA,
) -> GrayImage:
    """Decode, resize and flatten an image to 8-bit grayscale intensities.

    ``width`` and ``height`` are in glyphs; when only one is given the other
    follows the source aspect ratio. ``gamma`` controls the linear-light
    resize; ``None`` or 1.0 resizes the encoded values directly.
    """
    if gamma is not None and not gamma > 0:
        raise ValueError(f"Gamma must be positive, got {gamma}")
    if (width is not None and width < 0) or (height is not None and height < 0):
        raise ValueError(f"Output size must not be negative, got {width}x{height}")

    if not isinstance(image, Image.Image):
        with Image.open(image) as opened:
            opened.load()
            image = opened.copy()
    logger.debug("Decoded %s image of %dx%d", image.mode, image.width, image.height)

    gray = image.convert("L")
    size = _target_size(gray.size, width, height)
    if 0 in size:
        return GrayImage(data=b"", width=size[0], height=size[1])
    if size != gray.size:
        gray = _resize(gray, size, gamma)
        logger.debug("Resized to %dx%d (gamma=%s)", gray.width, gray.height, gamma)

    return GrayImage(data=gray.tobytes(), width=gray.width, height=gray.height)
