"""Commit reference annotation tool."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitrefs")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
