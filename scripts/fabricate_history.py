#!/usr/bin/env python
"""
Thin CLI wrapper for history fabrication.
Use the console script entry point (see pyproject.toml) where possible.
"""

from history_fabricator.cli import main

if __name__ == "__main__":
    main()
