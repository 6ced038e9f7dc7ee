"""Interactive Conventional Commits message builder."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gitcz")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
