"""
Package entry point.

Allows running the application via:

    python -m calview

This simply forwards execution to calview.cli.main().
"""

from calview.cli import main

if __name__ == "__main__":
    main()
