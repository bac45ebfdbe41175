import sys
from pathlib import Path


def write_output(text: str, path: str | Path | None = None) -> None:
    """Print the grid to stdout, or write it to ``path`` as UTF-8."""
    if path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    Path(path).write_text(text, encoding="utf-8")
