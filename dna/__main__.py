"""
Entry point for running dna as a module: python -m dna
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
