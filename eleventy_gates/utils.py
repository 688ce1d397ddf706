"""Utility helpers for eleventy-gates."""

import logging
from importlib.util import find_spec
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

console = Console()
"""Shared console for user-facing progress output."""

logger = logging.getLogger("eleventy_gates")


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed eleventy-gates package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("eleventy_gates")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    return Path(__file__).resolve().parent.joinpath(*parts)


def get_template_dir() -> Path:
    """Get the directory containing the bundled templates.

    Returns:
        Path to the templates directory.
    """
    return get_package_path("templates")


def read_text_file(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a text file with consistent encoding.

    Args:
        path: File path to read.
        encoding: Text encoding.

    Returns:
        File contents.
    """
    return path.read_text(encoding=encoding)


def configure_logging(verbose: bool = False) -> None:
    """Route the package logger through rich.

    Args:
        verbose: Emit debug records (commands executed, files rendered).
    """
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False, show_time=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
