#!/usr/bin/env python3
"""
USA Number Formatter
Main entry point for the interactive formatter.
"""

import sys
from pathlib import Path

# Add numformat package to path
sys.path.insert(0, str(Path(__file__).parent))

from numformat.cli import main

if __name__ == "__main__":
    main()
