#!/usr/bin/env python3
"""
LabelKu - Entry point for python -m labelku

This module allows the package to be run as a module:
    python -m labelku
"""

import sys

from labelku import main

if __name__ == "__main__":
    sys.exit(main())
