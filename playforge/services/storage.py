"""Flat-directory store for generated pages: one ``<slug>.html`` per page."""

from pathlib import Path
from typing import Optional


def _resolve(filename: str, content_dir: Path) -> Path:
    """Return the absolute path of *filename* inside *content_dir*."""
    if not filename or Path(filename).name != filename or filename in {".", ".."}:
        raise ValueError(f"Invalid page filename: {filename!r}")
    return (content_dir / filename).resolve()


def save_html(html: str, filename: str, content_dir: Path) -> Path:
    """Write *html* to ``content_dir/filename`` and return the absolute path.

    The directory is created when missing and an existing file of the same
    name is overwritten.

    Raises:
        ValueError: if *filename* is not a bare filename.
        OSError: on any filesystem failure.
    """
    path = _resolve(filename, content_dir)
    content_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    return path


def read_html(filename: str, content_dir: Path) -> Optional[str]:
    """Return the stored page, or *None* when no such file exists."""
    path = _resolve(filename, content_dir)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
