"""
Entry point for module execution (``python -m strconv_census``).

This module delegates execution to the CLI handler in ``strconv_census.cli.__main__``.
"""

import sys
from strconv_census.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
