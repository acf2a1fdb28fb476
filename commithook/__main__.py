"""Allow running the hook as ``python -m commithook``."""

from commithook.cli import app

if __name__ == "__main__":
    app()
