"""Entry point for ``python -m pms``."""

from pms.cli.app import app

if __name__ == "__main__":
    app()
