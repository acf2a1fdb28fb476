"""Git prepare-commit-msg hook that writes commit messages with Claude."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commithook")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
