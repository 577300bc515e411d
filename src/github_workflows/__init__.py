"""
Generate GitHub workflow and jazzy documentation boilerplate for Swift packages.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("github-workflows")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
