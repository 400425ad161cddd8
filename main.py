#!/usr/bin/env python
"""Main entry point for the research exporter"""

import sys

# Add src to path
sys.path.insert(0, "src")

from research_export.cli import main


if __name__ == "__main__":
    main()
