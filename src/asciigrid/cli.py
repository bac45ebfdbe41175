import argparse
import logging
import sys
from pathlib import Path

from PIL import Image

from asciigrid.charsets import PALETTES, PaletteConfig
from asciigrid.converter import image_to_ascii
from asciigrid.sink import write_output
from asciigrid.source import DEFAULT_GAMMA
from asciigrid.terminal import default_glyph_width

logger = logging.getLogger("asciigrid")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciigrid", description="Render an image as a grid of ASCII glyphs")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-W", "--width", type=int, default=None, help="Output width in glyphs (default: half the terminal width)"
    )
    parser.add_argument(
        "-H", "--height", type=int, default=None, help="Output height in lines (default: keep aspect ratio)"
    )
    parser.add_argument(
        "-c",
        "--charset",
        default="default",
        choices=sorted(PALETTES),
        help="Named palette, darkest glyph first (default: default)",
    )
    parser.add_argument(
        "-p", "--palette", default=None, help="Custom palette string, darkest glyph first; overrides --charset"
    )
    parser.add_argument(
        "-g",
        "--gamma",
        type=float,
        default=DEFAULT_GAMMA,
        help=f"Gamma used while resizing (default: {DEFAULT_GAMMA}). Use 1 to resize encoded values directly.",
    )
    parser.add_argument("-o", "--output", default=None, help="Write the result to this file instead of stdout")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s: %(message)s", stream=sys.stderr)
    logger.setLevel(args.log_level)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    palette = PaletteConfig(default_palette=PALETTES[args.charset], custom_palette=args.palette).resolve()
    width = args.width
    if width is None and args.height is None:
        width = default_glyph_width()
    logger.info("Converting %s at width=%s height=%s", image_path, width, args.height)

    try:
        text = image_to_ascii(image_path, width=width, height=args.height, palette=palette, gamma=args.gamma)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Cannot convert {image_path}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        write_output(text, args.output)
    except OSError as e:
        print(f"Cannot write output: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
