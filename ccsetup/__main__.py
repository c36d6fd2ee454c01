"""Entry point for running ccsetup as a module.

This allows running the application with:
    python -m ccsetup
"""

from ccsetup.cli import app

if __name__ == "__main__":
    app()
