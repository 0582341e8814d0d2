"""Run the showcase demos: python -m oop_showcase"""

import sys

from .demo import main

if __name__ == "__main__":
    sys.exit(main())
