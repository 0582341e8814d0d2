#!/usr/bin/env python3
"""
OOP Showcase Entry Point

Runs the banking, e-commerce, game and vehicle demos in sequence.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from oop_showcase.demo import main


if __name__ == "__main__":
    sys.exit(main())
