import os
import sys


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def default_glyph_width() -> int:
    """Glyphs that fit on one terminal line; each glyph is followed by a space."""
    return max(1, get_terminal_size()[0] // 2)
