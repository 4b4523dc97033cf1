"""Allow ``python -m splix``."""

import sys

from splix.cli import main

if __name__ == "__main__":
    sys.exit(main())
