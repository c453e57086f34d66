#!/usr/bin/env python3
#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/__main__.py
"""Entry point for running md2html as a module.

This allows the package to be executed with: python -m md2html
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
