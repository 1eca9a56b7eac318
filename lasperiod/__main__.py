"""
Package entry point.

Allows running the application via:

    python -m lasperiod

This simply forwards execution to lasperiod.cli.main().
"""

from lasperiod.cli import main

if __name__ == "__main__":
    main()
