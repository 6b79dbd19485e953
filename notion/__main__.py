"""Entry point for running Notion as a module.

Usage:
    python -m notion activate ~/.notion/bin
    python -m notion --help
"""

from notion.cli import app

if __name__ == "__main__":
    app()
