"""Entry point for running statcodec as a module.

Usage:
    python -m statcodec [command] [options]

Example:
    python -m statcodec convert stats.json --output yaml
    python -m statcodec formats
"""

from statcodec.cli import app

if __name__ == "__main__":
    app()
