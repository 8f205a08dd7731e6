"""
Package entry point.

Allows running the application via:

    python -m courseboard

This simply forwards execution to courseboard.cli.main().
"""

from courseboard.cli import main

if __name__ == "__main__":
    main()
