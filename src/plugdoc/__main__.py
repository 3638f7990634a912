"""Entry point for running plugdoc as a module.

Usage:
    python -m plugdoc [command] [options]

Example:
    python -m plugdoc render --mode stereo --output docs/referencer_stereo.html
    python -m plugdoc validate
"""

from plugdoc.cli import app

if __name__ == "__main__":
    app()
