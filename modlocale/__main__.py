"""Entry point for ``python -m modlocale``."""

import sys

from modlocale.cli import main

if __name__ == "__main__":
    sys.exit(main())
