"""Metadata for the Project."""

import importlib.metadata

__all__ = ["__project__", "__version__"]

__version__ = importlib.metadata.version("eleventy-gates")
"""Version of the project."""
__project__ = importlib.metadata.metadata("eleventy-gates")["Name"]
"""Name of the project."""
